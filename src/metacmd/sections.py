"""Meta command sections and their display order."""

from __future__ import annotations

from enum import Enum

from .errors import RegistryError


class Section(str, Enum):
    """Meta command section; the value is the display name."""

    GENERAL = "General"
    QUERY_EXECUTE = "Query Execute"
    QUERY_BUFFER = "Query Buffer"
    HELP = "Help"
    TRANSACTION = "Transaction"
    INPUT_OUTPUT = "Input/Output"
    INFORMATIONAL = "Informational"
    FORMATTING = "Formatting"
    CONNECTION = "Connection"
    OPERATING_SYSTEM = "Operating System"
    VARIABLES = "Variables"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "Section | str") -> "Section":
        """Return the section for a member or its display name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            known = ", ".join(section.value for section in SECTION_ORDER)
            raise RegistryError(f"Unknown section {value!r} (expected one of: {known})") from None


# Transaction is listed after Formatting, not in declaration order.
SECTION_ORDER: tuple[Section, ...] = (
    Section.GENERAL,
    Section.QUERY_EXECUTE,
    Section.QUERY_BUFFER,
    Section.HELP,
    Section.INPUT_OUTPUT,
    Section.INFORMATIONAL,
    Section.FORMATTING,
    Section.TRANSACTION,
    Section.CONNECTION,
    Section.OPERATING_SYSTEM,
    Section.VARIABLES,
)
