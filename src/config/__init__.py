"""Configuration management."""

from .settings import Settings, settings, configure_logging
from .graph_fields import FieldSpec, GRAPH_FIELDS, get_field_spec, list_field_names

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "FieldSpec",
    "GRAPH_FIELDS",
    "get_field_spec",
    "list_field_names",
]
