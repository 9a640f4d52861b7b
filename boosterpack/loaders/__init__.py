"""Loaders for plugin parameter configuration."""

from .plugin_loader import (
    CatalogLoad,
    load_catalog_from_json,
    parse_plugin_parameters,
    validate_catalog_file,
    validate_parameters,
)

__all__ = [
    "CatalogLoad",
    "load_catalog_from_json",
    "parse_plugin_parameters",
    "validate_catalog_file",
    "validate_parameters",
]
