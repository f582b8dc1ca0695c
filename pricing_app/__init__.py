"""
Pricing App - SaaS Pricing Model Projection Engine

A pricing-model configurator core. Models are composed of modules priced flat,
per unit or by slabs, driven by unit types with growth curves, and projected
into deterministic multi-period revenue schedules.
"""

__version__ = "0.1.0"
__author__ = "Pricing App Team"
