"""
Configuration module.

Default parameters, YAML overrides and validation for the controller and
logging sections.
"""
