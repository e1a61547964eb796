"""Tests for the built-in meta command catalog."""

from metacmd.catalog import BUILTIN_COMMANDS, default_registry
from metacmd.constants import HELP_COMMAND, QUIT_COMMAND
from metacmd.listing import render_listing
from metacmd.sections import SECTION_ORDER


def test_default_registry_is_cached():
    assert default_registry() is default_registry()


def test_catalog_registers_every_builtin_command():
    registry = default_registry()

    assert set(registry.commands) == {cmd.name for _, cmd in BUILTIN_COMMANDS}


def test_catalog_has_commands_in_every_section():
    registry = default_registry()

    for section in SECTION_ORDER:
        assert registry.commands_in(section), f"{section} has no commands"


def test_help_and_quit_commands_are_present():
    registry = default_registry()

    assert registry.resolve(HELP_COMMAND).name == HELP_COMMAND
    assert registry.resolve("quit").name == QUIT_COMMAND


def test_catalog_alias_keys_do_not_shadow_other_commands():
    registry = default_registry()

    for cmd in registry.commands.values():
        for alias in cmd.aliases:
            owner = registry.resolve(alias)
            assert owner is not None
            assert owner.name == cmd.name


def test_catalog_listing_includes_known_rows():
    output = render_listing(default_registry())

    assert output.startswith("General\n  \\q ")
    assert "\\quit" not in output
    assert "\\? options" in output
    assert "\\c DRIVER PARAMS..." in output
    assert "\\gset [PREFIX]" in output
