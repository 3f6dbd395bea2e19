"""
Provides the `Generator` class and its options for turning renscript ASTs into text.

Classes and Features:
    - Emitter (Protocol): Interface for backend emitters. Requires `lines`, `_visit` and `get_output`.
    - GeneratorOptions: Indent width, blank-line layout and comment handling.
    - OptionsError: Raised for invalid option values or unreadable option files.
    - Generator: Emits a whole script with `RpyEmitter`, adding blank lines between
      top-level statements according to the layout policy.

Usage:
    `generate(tree)` accepts a `Script`, a list of statements or a single node and
    returns canonically formatted script text without a trailing newline.

Example:
    >>> text = generate(parse(source).ast, GeneratorOptions(indent_size=2))

Raises:
    OptionsError: If options are invalid.
    NotImplementedError: If a node kind has no emitter.
"""

import json
from dataclasses import dataclass, fields
from typing import Any, Protocol

from renscript.emitters.rpy_emitter import RpyEmitter
from renscript.renscript_ast import ASTNode, DefaultNode, DefineNode, LabelNode, RawNode, Script
from renscript.renscript_constants import DEFAULT_INDENT_SIZE


class Emitter(Protocol):  # pragma: no cover
    """Protocol for renscript emitters.

    Methods:
        _visit(node): Emits one node at the current indentation.
        get_output(): Returns the complete emitted text as a string.
    """

    lines: list[str]

    def _visit(self, node: ASTNode) -> None: ...  # pragma: no cover

    def get_output(self) -> str: ...  # pragma: no cover


class OptionsError(Exception):
    """Raised when generator options are invalid.

    Attributes:
        problems (list[str]): One description per rejected key or value.

    Example:
        raise OptionsError("Invalid generator options", ["indent_size: must be positive"])
    """

    def __init__(self, message: str, problems: list[str] | None = None):
        super().__init__(message)
        self.problems = problems or []


_ALIASES = {
    "indentSize": "indent_size",
    "insertBlankLines": "insert_blank_lines",
    "preserveComments": "preserve_comments",
}


@dataclass
class GeneratorOptions:
    """Formatting options for the generator.

    Attributes:
        indent_size (int): Spaces per nesting level.
        insert_blank_lines (bool): Separate top-level statements with blank lines.
        preserve_comments (bool): Accepted for compatibility. Comments never reach
            the tree, so this has no effect on output.
    """

    indent_size: int = DEFAULT_INDENT_SIZE
    insert_blank_lines: bool = True
    preserve_comments: bool = True

    @classmethod
    def from_dict(cls, cfg: dict[str, Any]) -> "GeneratorOptions":
        """Builds options from a mapping, accepting snake_case or camelCase keys.

        Args:
            cfg: Option names mapped to values. Missing keys keep their defaults.

        Returns:
            The validated options.

        Raises:
            OptionsError: If a key is unknown or a value has the wrong type.
        """
        if not isinstance(cfg, dict):
            raise OptionsError("Generator options must be an object")

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        problems: list[str] = []
        for key, value in cfg.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                problems.append(f"{key}: unknown option")
                continue
            values[name] = value

        indent_size = values.get("indent_size", DEFAULT_INDENT_SIZE)
        # bool is a subclass of int
        if isinstance(indent_size, bool) or not isinstance(indent_size, int) or indent_size < 1:
            problems.append(f"indent_size: expected a positive integer, got {indent_size!r}")
        for flag in ("insert_blank_lines", "preserve_comments"):
            if flag in values and not isinstance(values[flag], bool):
                problems.append(f"{flag}: expected true or false, got {values[flag]!r}")

        if problems:
            raise OptionsError("Invalid generator options", problems)
        return cls(**values)


def load_options(path: str) -> GeneratorOptions:
    """
    Loads generator options from a JSON file.

    Example JSON structure:
        {
            "indentSize": 2,
            "insertBlankLines": false
        }

    Args:
        path: Path to the JSON file.

    Returns:
        The validated options.

    Raises:
        OptionsError: If the file cannot be read or holds invalid options.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw_cfg = json.load(f)
    except (OSError, ValueError) as e:
        raise OptionsError(f"Failed to load options file: {e}") from e
    return GeneratorOptions.from_dict(raw_cfg)


def is_block_raw(node: ASTNode) -> bool:
    return isinstance(node, RawNode) and node.is_block


def needs_blank_line(prev: ASTNode, current: ASTNode) -> bool:
    """Decides whether a blank line separates two consecutive top-level statements."""
    if isinstance(prev, LabelNode) or isinstance(current, LabelNode):
        return True
    data_kinds = (DefineNode, DefaultNode)
    if isinstance(prev, data_kinds) and not isinstance(current, data_kinds):
        return True
    return is_block_raw(prev) or is_block_raw(current)


class Generator:
    """Serializes renscript trees to canonically formatted text.

    Attributes:
        options (GeneratorOptions): Formatting options in effect.
    """

    def __init__(self, options: GeneratorOptions | None = None) -> None:
        self.options = options or GeneratorOptions()

    def new_emitter(self, indent: int = 0) -> RpyEmitter:
        return RpyEmitter(indent_size=self.options.indent_size, indent=indent)

    def generate(self, statements: list[ASTNode]) -> str:
        """Emits top-level statements, inserting blank lines where the policy asks.

        Args:
            statements: Top-level statements in order.

        Returns:
            The script text, without a trailing newline.

        Raises:
            TypeError: If an element is not an ASTNode.
        """
        if not all(isinstance(node, ASTNode) for node in statements):
            raise TypeError("All statements must be ASTNode instances.")

        emitter: Emitter = self.new_emitter()
        prev: ASTNode | None = None
        for node in statements:
            if prev is not None and self.options.insert_blank_lines and needs_blank_line(prev, node):
                emitter.lines.append("")
            emitter._visit(node)
            prev = node
        return emitter.get_output()

    def generate_node(self, node: ASTNode, indent: int = 0) -> str:
        """Emits one node and its descendants starting at nesting level `indent`."""
        emitter = self.new_emitter(indent)
        emitter._visit(node)
        return emitter.get_output()


def generate(
    tree: Script | list[ASTNode] | ASTNode, options: GeneratorOptions | None = None
) -> str:
    """Generates script text for a script, a statement list or a single node."""
    generator = Generator(options)
    if isinstance(tree, Script):
        return generator.generate(tree.statements)
    if isinstance(tree, ASTNode):
        return generator.generate_node(tree)
    return generator.generate(tree)


def generate_node(
    node: ASTNode, indent: int = 0, options: GeneratorOptions | None = None
) -> str:
    return Generator(options).generate_node(node, indent)


__all__ = [
    "Emitter",
    "Generator",
    "GeneratorOptions",
    "OptionsError",
    "generate",
    "generate_node",
    "load_options",
    "needs_blank_line",
]
