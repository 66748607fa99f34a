"""Configuration resolution engine for a bespoke-tailoring storefront."""

__version__ = "0.1.0"
