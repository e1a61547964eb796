"""Interactive shell that answers meta commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .constants import DIRECTIVE_MARKER, HELP_COMMAND, PROMPT, QUIT_COMMAND, REPL_HISTORY_FILE
from .listing import write_listing
from .logging_utils import log_event
from .models import Registry


class PromptLike(Protocol):
    def prompt(self, message: str) -> str: ...


def ensure_history_file() -> Path:
    """Ensure the REPL history file path exists and return it."""
    history_file = Path(REPL_HISTORY_FILE).expanduser()
    history_file.parent.mkdir(parents=True, exist_ok=True)
    return history_file


def create_prompt_session() -> PromptSession:
    """Create prompt-toolkit session for shell input."""
    return PromptSession(history=FileHistory(str(ensure_history_file())))


def handle_line(line: str, registry: Registry, out: TextIO) -> bool:
    """Handle one input line.

    Returns:
        False when the shell should exit, True otherwise

    Raises:
        SinkWriteError: If the listing cannot be written to ``out``
    """
    text = line.strip()
    if not text:
        return True

    if not text.startswith(DIRECTIVE_MARKER):
        print("Only meta commands are accepted here. Try \\? for help.", file=out)
        return True

    token = text[len(DIRECTIVE_MARKER):]
    cmd = registry.resolve(token)
    log_event("repl_command", command=token, resolved=cmd.name if cmd else None)

    if cmd is None:
        print(f"Invalid command \\{token}. Try \\? for help.", file=out)
        return True
    if cmd.name == QUIT_COMMAND:
        return False
    if cmd.name == HELP_COMMAND:
        write_listing(out, registry)
        return True

    print(f"\\{cmd.name} is not available in this shell", file=out)
    return True


def run_repl(
    registry: Registry,
    session: Optional[PromptLike] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Run the shell loop until \\q or end of input."""
    out = out or sys.stdout
    session = session or create_prompt_session()

    print("Type \\? for help, \\q to quit.", file=out)
    while True:
        try:
            line = session.prompt(PROMPT)
        except KeyboardInterrupt:
            continue
        except EOFError:
            break

        if not handle_line(line, registry, out):
            break
