"""Typed models for meta command metadata and the registry that holds it."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional

from .errors import RegistryError
from .sections import SECTION_ORDER, Section


@dataclass(frozen=True, slots=True)
class Desc:
    """Description and parameter usage text of a command or alias."""

    desc: str = ""
    params: str = ""

    @property
    def silent(self) -> bool:
        """True when there is nothing to advertise."""
        return not self.desc and not self.params


@dataclass(frozen=True, slots=True)
class MetaCommand:
    """One meta command with its aliases.

    ``aliases`` keeps insertion order; it is stored as a read-only mapping.
    """

    name: str
    desc: Desc = Desc()
    aliases: Mapping[str, Desc] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

    def listed_aliases(self) -> list[str]:
        """Return non-silent alias keys sorted case-insensitively.

        ``sorted`` is stable, so keys that compare equal keep insertion order.
        """
        keys = [alias for alias, desc in self.aliases.items() if not desc.silent]
        return sorted(keys, key=str.lower)


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable section -> command table consumed by the listing renderer."""

    section_order: tuple[Section, ...]
    sections: Mapping[Section, tuple[str, ...]]
    commands: Mapping[str, MetaCommand]

    def commands_in(self, section: Section) -> tuple[MetaCommand, ...]:
        return tuple(self.commands[name] for name in self.sections.get(section, ()))

    def command(self, name: str) -> Optional[MetaCommand]:
        return self.commands.get(name)

    def resolve(self, token: str) -> Optional[MetaCommand]:
        """Resolve a command name or alias key to its owning command."""
        token = token.strip()
        if token in self.commands:
            return self.commands[token]
        for cmd in self.commands.values():
            for alias in cmd.aliases:
                if alias.strip() == token:
                    return cmd
        return None

    def names(self) -> set[str]:
        """Return all command names and alias keys, silent ones included."""
        names: set[str] = set()
        for cmd in self.commands.values():
            names.add(cmd.name)
            names.update(alias.strip() for alias in cmd.aliases)
        return names


def build_registry(
    entries: Iterable[tuple[Section | str, MetaCommand]],
    section_order: tuple[Section, ...] = SECTION_ORDER,
) -> Registry:
    """Build a frozen registry from ``(section, command)`` pairs.

    Commands keep registration order within their section.

    Raises:
        RegistryError: On duplicate command names or unknown sections
    """
    grouped: dict[Section, list[str]] = {section: [] for section in section_order}
    commands: dict[str, MetaCommand] = {}

    for raw_section, cmd in entries:
        section = Section.parse(raw_section)
        if section not in grouped:
            raise RegistryError(f"Section {section} is not part of the display order")
        if not cmd.name:
            raise RegistryError("Command name must be a non-empty string")
        if cmd.name in commands:
            raise RegistryError(f"Duplicate command name: {cmd.name}")
        commands[cmd.name] = cmd
        grouped[section].append(cmd.name)

    return Registry(
        section_order=tuple(section_order),
        sections=MappingProxyType({section: tuple(names) for section, names in grouped.items()}),
        commands=MappingProxyType(commands),
    )
