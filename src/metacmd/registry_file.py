"""JSON registry file loading."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError, RegistryError
from .models import Desc, MetaCommand, Registry, build_registry
from .sections import Section


class DescModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    desc: str = ""
    params: str = ""


class CommandModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    section: Section
    desc: str = ""
    params: str = ""
    aliases: dict[str, DescModel] = Field(default_factory=dict)

    def to_command(self) -> MetaCommand:
        return MetaCommand(
            name=self.name,
            desc=Desc(self.desc, self.params),
            aliases={key: Desc(alias.desc, alias.params) for key, alias in self.aliases.items()},
        )


class RegistryFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    commands: list[CommandModel] = Field(default_factory=list)


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(parts)


def parse_registry(data: object) -> Registry:
    """Validate decoded JSON data and build a registry from it.

    Raises:
        ConfigError: If the data does not match the registry file schema
    """
    try:
        document = RegistryFile.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid registry file: {_format_validation_error(e)}") from e

    try:
        return build_registry((cmd.section, cmd.to_command()) for cmd in document.commands)
    except RegistryError as e:
        raise ConfigError(f"Invalid registry file: {e}") from e


def load_registry(path: Path | str) -> Registry:
    """Load a registry from a UTF-8 JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid
    """
    registry_path = Path(path).expanduser()
    try:
        text = registry_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Registry file not found: {registry_path}") from None
    except OSError as e:
        raise ConfigError(f"Could not read registry file {registry_path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Registry file is not valid JSON: {e}") from e

    return parse_registry(data)
