"""Application-level constants for metacmd."""

# ============================================================================
# Application identity
# ============================================================================

APP_NAME = "metacmd"

# ============================================================================
# Listing layout
# ============================================================================

# Every label starts with this literal: two spaces and the directive marker.
DIRECTIVE_PREFIX = "  \\"
DIRECTIVE_MARKER = "\\"
COLUMN_SEPARATOR = " "
PAD_CHAR = " "

# ============================================================================
# Shell
# ============================================================================

PROMPT = f"{APP_NAME}=> "
USER_DATA_DIR = f"~/.{APP_NAME}"
REPL_HISTORY_FILE = f"{USER_DATA_DIR}/history"

HELP_COMMAND = "?"
QUIT_COMMAND = "q"

# ============================================================================
# CLI
# ============================================================================

CLI_COMMAND_LIST = "list"
CLI_COMMAND_REPL = "repl"
CLI_COMMANDS = (CLI_COMMAND_LIST, CLI_COMMAND_REPL)
