"""
Shared grammar constants for the renscript parser and emitter.

Both directions of the round trip read from this module.

Exports:
    - NODE_KINDS: every statement kind, in parser matcher priority order
    - SET_OPERATORS, AUDIO_CHANNELS, NVL_ACTIONS
    - BLOCK_MARKER, COMMENT_MARKER, PLACEHOLDER_STATEMENT
    - RESERVED_WORDS: leading words owned by a non-dialogue matcher
"""

# Matcher priority order. `set` precedes `python` and `dialogue` is last.
PARSER_ORDER: tuple[str, ...] = (
    "label",
    "jump",
    "call",
    "return",
    "menu",
    "if",
    "scene",
    "show",
    "hide",
    "with",
    "play",
    "stop",
    "voice",
    "pause",
    "nvl",
    "define",
    "default",
    "set",
    "python",
    "dialogue",
)

# `voice` statements parse into play nodes; `raw` is the fallback.
NODE_KINDS: tuple[str, ...] = tuple(k for k in PARSER_ORDER if k != "voice") + (
    "raw",
)

SET_OPERATORS: tuple[str, ...] = ("=", "+=", "-=", "*=", "/=")
AUDIO_CHANNELS: tuple[str, ...] = ("music", "sound", "voice")
NVL_ACTIONS: tuple[str, ...] = ("show", "hide", "clear")

BLOCK_MARKER = ":"
COMMENT_MARKER = "#"
PLACEHOLDER_STATEMENT = "pass"
DEFAULT_INDENT_SIZE = 4

# `$ var op value`. Shared so the emitter can tell when a one-line python
# statement would be read back as an assignment.
SET_STATEMENT_PATTERN = r"^\$\s*(\w+)\s*(\+=|-=|\*=|/=|=)(?!=)\s*(.*\S)\s*$"
SCRIPT_VERSION = "1.0.0"

RESERVED_WORDS: frozenset[str] = frozenset(
    {
        "label",
        "jump",
        "call",
        "return",
        "menu",
        "if",
        "elif",
        "else",
        "scene",
        "show",
        "hide",
        "with",
        "play",
        "queue",
        "stop",
        "voice",
        "pause",
        "nvl",
        "define",
        "default",
        "python",
        "init",
        "set",
        "pass",
    }
)

__all__ = [
    "AUDIO_CHANNELS",
    "BLOCK_MARKER",
    "COMMENT_MARKER",
    "DEFAULT_INDENT_SIZE",
    "NODE_KINDS",
    "NVL_ACTIONS",
    "PARSER_ORDER",
    "PLACEHOLDER_STATEMENT",
    "RESERVED_WORDS",
    "SCRIPT_VERSION",
    "SET_OPERATORS",
    "SET_STATEMENT_PATTERN",
]
