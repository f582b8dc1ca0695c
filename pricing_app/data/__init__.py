"""
Pricing model data module.

Immutable model aggregates (models, unit types, modules, pricing tiers),
manual unit overrides and parsing of JSON-shaped model documents.
"""
