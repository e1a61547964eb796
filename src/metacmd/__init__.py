"""Sectioned, column-aligned help listings for meta commands."""

from .errors import ConfigError, MetacmdError, RegistryError, SinkWriteError
from .listing import build_rows, render_listing, write_listing
from .models import Desc, MetaCommand, Registry, build_registry
from .sections import SECTION_ORDER, Section

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "Desc",
    "MetaCommand",
    "MetacmdError",
    "Registry",
    "RegistryError",
    "SECTION_ORDER",
    "Section",
    "SinkWriteError",
    "build_registry",
    "build_rows",
    "render_listing",
    "write_listing",
]
