"""Built-in meta command catalog of a SQL command-line client."""

from __future__ import annotations

from functools import lru_cache

from .models import Desc, MetaCommand, Registry, build_registry
from .sections import Section

# Aliases with an empty Desc() are accepted by the shell but not listed.
BUILTIN_COMMANDS: tuple[tuple[Section, MetaCommand], ...] = (
    # General
    (
        Section.GENERAL,
        MetaCommand("q", Desc("quit"), {"quit": Desc()}),
    ),
    (
        Section.GENERAL,
        MetaCommand("copyright", Desc("show usage and distribution terms")),
    ),
    (
        Section.GENERAL,
        MetaCommand("drivers", Desc("display information about available database drivers")),
    ),
    # Query Execute
    (
        Section.QUERY_EXECUTE,
        MetaCommand(
            "g",
            Desc("execute query (and send results to file or |pipe)", "[(OPTIONS)] [FILE]"),
            {
                "go": Desc(),
                "G": Desc("as \\g, but forces vertical output mode", "[(OPTIONS)] [FILE]"),
                "gx": Desc("as \\g, but forces expanded output mode", "[(OPTIONS)] [FILE]"),
                "gexec": Desc("execute query and execute each value of the result"),
                "gset": Desc("execute query and store results in variables", "[PREFIX]"),
                "crosstabview": Desc("execute query and display results in crosstab", "[(OPTIONS)] [COLUMNS]"),
                "watch": Desc("execute query every specified interval", "[(OPTIONS)] [DURATION]"),
            },
        ),
    ),
    (
        Section.QUERY_EXECUTE,
        MetaCommand("bind", Desc("set query parameters", "[PARAM]...")),
    ),
    # Query Buffer
    (
        Section.QUERY_BUFFER,
        MetaCommand(
            "e",
            Desc("edit the query buffer (or file) with external editor", "[FILE] [LINE]"),
            {"edit": Desc()},
        ),
    ),
    (
        Section.QUERY_BUFFER,
        MetaCommand(
            "p",
            Desc("show the contents of the query buffer"),
            {
                "print": Desc(),
                "raw": Desc("show the raw (non-interpolated) contents of the query buffer"),
            },
        ),
    ),
    (
        Section.QUERY_BUFFER,
        MetaCommand("r", Desc("reset (clear) the query buffer"), {"reset": Desc()}),
    ),
    (
        Section.QUERY_BUFFER,
        MetaCommand("w", Desc("write query buffer to file", "FILE"), {"write": Desc()}),
    ),
    # Help
    (
        Section.HELP,
        MetaCommand(
            "?",
            Desc("show help on backslash commands", "[commands]"),
            {
                "? options": Desc("show help on command-line options"),
                "? variables": Desc("show help on special variables"),
            },
        ),
    ),
    # Input/Output
    (
        Section.INPUT_OUTPUT,
        MetaCommand(
            "echo",
            Desc("write string to standard output (-n for no newline)", "[-n] [STRING]"),
            {
                "qecho": Desc("write string to the query output stream (-n for no newline)", "[-n] [STRING]"),
                "warn": Desc("write string to standard error (-n for no newline)", "[-n] [STRING]"),
            },
        ),
    ),
    (
        Section.INPUT_OUTPUT,
        MetaCommand("o", Desc("send all query results to file or |pipe", "[FILE]"), {"out": Desc()}),
    ),
    (
        Section.INPUT_OUTPUT,
        MetaCommand(
            "i",
            Desc("execute commands from file", "FILE"),
            {
                "include": Desc(),
                "ir": Desc("as \\i, but relative to location of current script", "FILE"),
                "include_relative": Desc(),
            },
        ),
    ),
    # Informational
    (
        Section.INFORMATIONAL,
        MetaCommand(
            "d[S+]",
            Desc("list tables, views, and sequences or describe table, view, sequence, or index", "[NAME]"),
            {
                "da[S+]": Desc("list aggregates", "[PATTERN]"),
                "df[S+]": Desc("list functions", "[PATTERN]"),
                "di[S+]": Desc("list indexes", "[PATTERN]"),
                "dm[S+]": Desc("list materialized views", "[PATTERN]"),
                "dn[S+]": Desc("list schemas", "[PATTERN]"),
                "dp[S]": Desc("list table, view, and sequence access privileges", "[PATTERN]"),
                "ds[S+]": Desc("list sequences", "[PATTERN]"),
                "dt[S+]": Desc("list tables", "[PATTERN]"),
                "dv[S+]": Desc("list views", "[PATTERN]"),
                "l[+]": Desc("list databases"),
            },
        ),
    ),
    (
        Section.INFORMATIONAL,
        MetaCommand("ss[+]", Desc("show stats for a table or a query", "[TABLE|QUERY] [k]")),
    ),
    # Formatting
    (
        Section.FORMATTING,
        MetaCommand(
            "pset",
            Desc("set table output option", "[NAME [VALUE]]"),
            {
                "a": Desc("toggle between unaligned and aligned output mode"),
                "C": Desc("set table title, or unset if none", "[STRING]"),
                "f": Desc("show or set field separator for unaligned query output", "[STRING]"),
                "H": Desc("toggle HTML output mode"),
                "T": Desc("set HTML <table> tag attributes, or unset if none", "[STRING]"),
                "t": Desc("show only rows", "[on|off]"),
                "x": Desc("toggle expanded output", "[on|off|auto]"),
            },
        ),
    ),
    # Transaction
    (
        Section.TRANSACTION,
        MetaCommand(
            "begin",
            Desc("begin a transaction", "[-read-only [ISOLATION]]"),
            {
                "commit": Desc("commit current transaction"),
                "rollback": Desc("rollback (abort) current transaction"),
                "abort": Desc(),
            },
        ),
    ),
    # Connection
    (
        Section.CONNECTION,
        MetaCommand(
            "c",
            Desc("connect to database url", "DSN"),
            {
                "connect": Desc(),
                "c ": Desc("connect to database with driver and parameters", "DRIVER PARAMS..."),
            },
        ),
    ),
    (
        Section.CONNECTION,
        MetaCommand("Z", Desc("close database connection"), {"disconnect": Desc()}),
    ),
    (
        Section.CONNECTION,
        MetaCommand("password", Desc("change the password for a user", "[USERNAME]"), {"passwd": Desc()}),
    ),
    (
        Section.CONNECTION,
        MetaCommand("conninfo", Desc("display information about the current database connection")),
    ),
    # Operating System
    (
        Section.OPERATING_SYSTEM,
        MetaCommand("cd", Desc("change the current working directory", "[DIR]")),
    ),
    (
        Section.OPERATING_SYSTEM,
        MetaCommand("setenv", Desc("set or unset environment variable", "NAME [VALUE]")),
    ),
    (
        Section.OPERATING_SYSTEM,
        MetaCommand("!", Desc("execute command in shell or start interactive shell", "[COMMAND]")),
    ),
    (
        Section.OPERATING_SYSTEM,
        MetaCommand("timing", Desc("toggle timing of commands", "[on|off]")),
    ),
    # Variables
    (
        Section.VARIABLES,
        MetaCommand("set", Desc("set internal variable, or list all if no parameters", "[NAME [VALUE]]")),
    ),
    (
        Section.VARIABLES,
        MetaCommand("unset", Desc("unset (delete) internal variable", "NAME")),
    ),
    (
        Section.VARIABLES,
        MetaCommand("prompt", Desc("prompt user to set internal variable", "[-TYPE] <VAR> [PROMPT]")),
    ),
    (
        Section.VARIABLES,
        MetaCommand("cset", Desc("set named connection, or list all if no parameters", "[NAME [DSN]]")),
    ),
)


@lru_cache(maxsize=1)
def default_registry() -> Registry:
    """Return the built-in registry (built once)."""
    return build_registry(BUILTIN_COMMANDS)
