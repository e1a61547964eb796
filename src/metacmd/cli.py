"""CLI bootstrap entry point for metacmd."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional

from .catalog import default_registry
from .constants import CLI_COMMAND_LIST, CLI_COMMAND_REPL, CLI_COMMANDS
from .errors import ConfigError, SinkWriteError
from .listing import write_listing
from .logging_utils import log_event, setup_logging
from .models import Registry
from .registry_file import load_registry
from .repl import run_repl

__all__ = ["main", "build_parser"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metacmd",
        description="metacmd - sectioned meta command help listing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-r",
        "--registry",
        help="Path to a JSON registry file (optional; built-in catalog if omitted)",
    )
    parser.add_argument(
        "-l", "--log", help="Path to log file for structured logging (optional)"
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=CLI_COMMAND_LIST,
        choices=CLI_COMMANDS,
        help="Command to run (default: list)",
    )
    return parser


def _load(registry_path: Optional[str]) -> Registry:
    if registry_path is None:
        registry = default_registry()
        log_event("registry_loaded", source="builtin", commands=len(registry.commands))
        return registry

    registry = load_registry(registry_path)
    log_event(
        "registry_loaded",
        source="file",
        registry_file=registry_path,
        commands=len(registry.commands),
    )
    return registry


def _stop(started: float, reason: str, error: Optional[Exception] = None) -> None:
    uptime_ms = int((time.perf_counter() - started) * 1000)
    if error is None:
        log_event("app_stop", reason=reason, uptime_ms=uptime_ms)
    else:
        log_event(
            "app_stop",
            reason=reason,
            uptime_ms=uptime_ms,
            error_type=type(error).__name__,
            error=str(error),
        )


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the metacmd CLI."""
    args = build_parser().parse_args(argv)
    started = time.perf_counter()

    setup_logging(args.log)
    log_event("app_start", command=args.command, registry_file=args.registry, log_file=args.log)

    try:
        registry = _load(args.registry)
        if args.command == CLI_COMMAND_REPL:
            run_repl(registry)
        else:
            write_listing(sys.stdout, registry)
    except ConfigError as e:
        log_event("command_error", command=args.command, error_type=type(e).__name__, error=str(e))
        _stop(started, "config_error", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except SinkWriteError as e:
        _stop(started, "sink_error", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        _stop(started, "interrupted")
        print()
        sys.exit(130)
    except Exception as e:  # noqa: BLE001
        _stop(started, "unexpected_error", e)
        print(f"Error: Unexpected: {e}", file=sys.stderr)
        sys.exit(1)

    _stop(started, "completed")
    sys.exit(0)
