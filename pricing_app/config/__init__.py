"""
Configuration module.

Default parameters, YAML-backed per-model overrides and parameter validation.
"""
