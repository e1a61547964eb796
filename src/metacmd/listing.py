"""Sectioned, column-aligned meta command listing.

Rendering runs in two phases: every row of every section is built first
while tracking the widest label, then all sections are written padded to
that single width so columns line up across the whole listing.
"""

from __future__ import annotations

import io
from typing import Optional, TextIO

from .constants import COLUMN_SEPARATOR, DIRECTIVE_PREFIX, PAD_CHAR
from .errors import SinkWriteError
from .logging_utils import log_event
from .models import Desc, Registry
from .sections import Section

Row = tuple[str, str]


def make_label(name: str, desc: Desc) -> str:
    """Return the marker-prefixed label, with params appended when present."""
    if desc.params:
        return f"{DIRECTIVE_PREFIX}{name} {desc.params}"
    return f"{DIRECTIVE_PREFIX}{name}"


def rpad(text: str, width: int) -> str:
    return text + PAD_CHAR * (width - len(text))


def format_row(label: str, description: str, pad_width: int) -> str:
    return f"{rpad(label, pad_width)}{COLUMN_SEPARATOR}{description}"


def build_rows(registry: Registry) -> tuple[dict[Section, list[Row]], int]:
    """Build display rows for every section and the global pad width.

    Returns:
        Tuple of (rows keyed by section in display order, pad width)
    """
    rows_by_section: dict[Section, list[Row]] = {}
    pad_width = 0

    for section in registry.section_order:
        rows: list[Row] = []
        for cmd in registry.commands_in(section):
            label = make_label(cmd.name, cmd.desc)
            rows.append((label, cmd.desc.desc))
            pad_width = max(pad_width, len(label))

            for alias in cmd.listed_aliases():
                alias_desc = cmd.aliases[alias]
                label = make_label(alias.strip(), alias_desc)
                rows.append((label, alias_desc.desc))
                pad_width = max(pad_width, len(label))
        rows_by_section[section] = rows

    return rows_by_section, pad_width


def _write_line(sink: TextIO, line: str = "") -> None:
    try:
        sink.write(line + "\n")
    except (OSError, ValueError) as e:
        raise SinkWriteError(f"Could not write listing: {e}") from e


def write_listing(sink: TextIO, registry: Optional[Registry] = None) -> None:
    """Write the formatted command listing to ``sink``.

    Args:
        sink: Writable text stream
        registry: Command table; the built-in catalog when omitted

    Raises:
        SinkWriteError: If the sink rejects a write. Nothing further is written.
    """
    if registry is None:
        from .catalog import default_registry

        registry = default_registry()

    rows_by_section, pad_width = build_rows(registry)

    for section in registry.section_order:
        _write_line(sink, str(section))
        for label, description in rows_by_section[section]:
            _write_line(sink, format_row(label, description, pad_width))
        _write_line(sink)

    log_event(
        "listing_rendered",
        sections=len(rows_by_section),
        rows=sum(len(rows) for rows in rows_by_section.values()),
        pad_width=pad_width,
    )


def render_listing(registry: Optional[Registry] = None) -> str:
    """Render the listing to a string."""
    buffer = io.StringIO()
    write_listing(buffer, registry)
    return buffer.getvalue()
