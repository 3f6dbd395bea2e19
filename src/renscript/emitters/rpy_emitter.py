"""
Translates renscript AST nodes back into canonically formatted script text.

This module defines the `RpyEmitter` class, the backend of the code generator.
Each statement kind has an `emit_<kind>` method that appends finished lines to
the emitter's buffer; bodies are emitted one indentation level deeper.

Formatting rules:
    - Indentation is `indent_size` spaces per level (4 by default).
    - Empty label, if-branch and menu-choice bodies get a `pass` line.
    - Show clauses: `[attrs] [as] [at] [behind] [onlayer] [zorder] [with]`.
      Scene and hide: `[onlayer] [with]`. The parser strips clauses in the
      reverse of this order, so the two must change together.
    - Play options: `fadein`, `fadeout`, `loop`/`noloop`, `volume`,
      `if_changed`.
    - Quoted text is escaped with `escape_string`.
    - Raw nodes are written back byte for byte, whatever the depth.

Raises:
    - `NotImplementedError`: If a node kind has no emitter.
"""

import re
from decimal import Decimal

from renscript.renscript_ast import (
    ASTNode,
    CallNode,
    DefaultNode,
    DefineNode,
    DialogueNode,
    HideNode,
    IfNode,
    JumpNode,
    LabelNode,
    MenuNode,
    NVLNode,
    PauseNode,
    PlayNode,
    PythonNode,
    RawNode,
    ReturnNode,
    SceneNode,
    SetNode,
    ShowNode,
    StopNode,
    WithNode,
)
from renscript.renscript_constants import (
    DEFAULT_INDENT_SIZE,
    PLACEHOLDER_STATEMENT,
    SET_STATEMENT_PATTERN,
)

_SET_STATEMENT = re.compile(SET_STATEMENT_PATTERN)


def escape_string(text: str) -> str:
    """Escapes text for a double-quoted string: backslash, quote, newline, tab."""
    return (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )


def format_number(value: float) -> str:
    """Formats a number without exponent notation so the parser can read it back."""
    if isinstance(value, int):
        return str(value)
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


class RpyEmitter:
    """Emits script text from renscript AST nodes.

    Attributes:
        lines (list[str]): Accumulated output lines.
        indent (int): Current indentation level.
        indent_size (int): Spaces per indentation level.

    Methods:
        get_output(): Returns the emitted text.
        emit_body(body): Emits a nested statement list one level deeper.
        _visit(node): Dispatches to the `emit_<kind>` method for a node.
    """

    def __init__(self, indent_size: int = DEFAULT_INDENT_SIZE, indent: int = 0) -> None:
        self.lines: list[str] = []
        self.indent = indent
        self.indent_size = indent_size

    def indent_str(self, level: int | None = None) -> str:
        return " " * (self.indent_size * (self.indent if level is None else level))

    def get_output(self) -> str:
        """
        Returns the emitted text as a single string.

        Returns
        -------
        str
            The joined lines, without a trailing newline.
        """
        return "\n".join(self.lines)

    def write(self, text: str) -> None:
        self.lines.append(f"{self.indent_str()}{text}")

    def emit_body(self, body: list[ASTNode]) -> None:
        """
        Emits `body` one level deeper, or a `pass` placeholder when it is empty.

        Parameters
        ----------
        body : list[ASTNode]
            The nested statements of a label, branch or choice.
        """
        self.indent += 1
        if not body:
            self.write(PLACEHOLDER_STATEMENT)
        for stmt in body:
            self._visit(stmt)
        self.indent -= 1

    def _visit(self, node: ASTNode) -> None:
        """
        Dispatches an AST node to its `emit_<kind>` method.

        Raises
        ------
        NotImplementedError
            If no emitter is defined for the node kind.
        """
        meth = getattr(self, f"emit_{node.kind}", None)
        if not meth:
            raise NotImplementedError(f"RpyEmitter: no emitter for {node.kind}")
        meth(node)

    # Flow control

    def emit_label(self, node: LabelNode) -> None:
        header = f"label {node.name}"
        if node.parameters:
            header += f"({', '.join(node.parameters)})"
        self.write(f"{header}:")
        self.emit_body(node.body)

    def emit_jump(self, node: JumpNode) -> None:
        if node.expression:
            self.write(f"jump expression {node.target}")
        else:
            self.write(f"jump {node.target}")

    def emit_call(self, node: CallNode) -> None:
        """
        Emits `call target(args)` or, for dynamic targets,
        `call expression target pass (args)`. A `from` clause comes last.
        """
        line = f"call {node.target}"
        if node.expression:
            line = f"call expression {node.target}"
            if node.arguments:
                line += f" pass ({', '.join(node.arguments)})"
        elif node.arguments:
            line += f"({', '.join(node.arguments)})"
        if node.from_label:
            line += f" from {node.from_label}"
        self.write(line)

    def emit_return(self, node: ReturnNode) -> None:
        if node.value:
            self.write(f"return {node.value}")
        else:
            self.write("return")

    def emit_menu(self, node: MenuNode) -> None:
        """
        Emits a menu header with its optional name and clauses, then the
        prompt line and every choice with its body.

        Parameters
        ----------
        node : MenuNode
            The menu to emit.
        """
        header = "menu"
        if node.name:
            header += f" {node.name}"
        if node.set_var:
            header += f" (set {node.set_var})"
        if node.screen:
            header += f" (screen {node.screen})"
        self.write(f"{header}:")

        self.indent += 1
        if node.prompt is not None:
            quoted = f'"{escape_string(node.prompt)}"'
            if node.prompt_speaker:
                self.write(f"{node.prompt_speaker} {quoted}")
            else:
                self.write(quoted)
        for choice in node.choices:
            line = f'"{escape_string(choice.text)}"'
            if choice.condition:
                line += f" if {choice.condition}"
            self.write(f"{line}:")
            self.emit_body(choice.body)
        self.indent -= 1

    def emit_if(self, node: IfNode) -> None:
        """
        Emits `if`, `elif` and `else` branches. The first branch is always `if`;
        later branches without a condition become `else`.
        """
        for i, branch in enumerate(node.branches):
            if i == 0:
                self.write(f"if {branch.condition}:")
            elif branch.condition is None:
                self.write("else:")
            else:
                self.write(f"elif {branch.condition}:")
            self.emit_body(branch.body)

    # Display

    def emit_scene(self, node: SceneNode) -> None:
        line = f"scene {node.image}"
        if node.on_layer:
            line += f" onlayer {node.on_layer}"
        if node.with_transition:
            line += f" with {node.with_transition}"
        self.write(line)

    def emit_show(self, node: ShowNode) -> None:
        """
        Emits a show statement with its clauses in canonical order:
        `show image [attrs] [as tag] [at pos] [behind tag] [onlayer layer]
        [zorder n] [with transition]`.
        """
        line = f"show {node.image}"
        if node.attributes:
            line += " " + " ".join(node.attributes)
        if node.as_tag:
            line += f" as {node.as_tag}"
        if node.at_position:
            line += f" at {node.at_position}"
        if node.behind_tag:
            line += f" behind {node.behind_tag}"
        if node.on_layer:
            line += f" onlayer {node.on_layer}"
        if node.zorder is not None:
            line += f" zorder {node.zorder}"
        if node.with_transition:
            line += f" with {node.with_transition}"
        self.write(line)

    def emit_hide(self, node: HideNode) -> None:
        line = f"hide {node.image}"
        if node.on_layer:
            line += f" onlayer {node.on_layer}"
        if node.with_transition:
            line += f" with {node.with_transition}"
        self.write(line)

    def emit_with(self, node: WithNode) -> None:
        self.write(f"with {node.transition}")

    def emit_pause(self, node: PauseNode) -> None:
        if node.duration is not None:
            self.write(f"pause {format_number(node.duration)}")
        else:
            self.write("pause")

    def emit_nvl(self, node: NVLNode) -> None:
        self.write(f"nvl {node.action}")

    # Text

    def emit_dialogue(self, node: DialogueNode) -> None:
        """Emits narration, or speaker dialogue with optional attributes."""
        quoted = f'"{escape_string(node.text)}"'
        if node.speaker is None:
            line = quoted
        else:
            parts = [node.speaker, *(node.attributes or []), quoted]
            line = " ".join(parts)
        if node.with_transition:
            line += f" with {node.with_transition}"
        self.write(line)

    # Audio

    def play_options(self, node: PlayNode) -> str:
        options: list[str] = []
        if node.fade_in is not None:
            options.append(f"fadein {format_number(node.fade_in)}")
        if node.fade_out is not None:
            options.append(f"fadeout {format_number(node.fade_out)}")
        if node.loop is True:
            options.append("loop")
        elif node.loop is False:
            options.append("noloop")
        if node.volume is not None:
            options.append(f"volume {format_number(node.volume)}")
        if node.if_changed:
            options.append("if_changed")
        return "".join(f" {opt}" for opt in options)

    def emit_play(self, node: PlayNode) -> None:
        """
        Emits `play`, `queue` or `voice`. A voice node with options or the
        queue flag uses the long `play voice` / `queue voice` form.
        """
        options = self.play_options(node)
        file = escape_string(node.file)
        if node.channel == "voice" and not options and not node.queue:
            self.write(f'voice "{file}"')
            return
        statement = "queue" if node.queue else "play"
        self.write(f'{statement} {node.channel} "{file}"{options}')

    def emit_stop(self, node: StopNode) -> None:
        line = f"stop {node.channel}"
        if node.fade_out is not None:
            line += f" fadeout {format_number(node.fade_out)}"
        self.write(line)

    # Data and code

    def emit_set(self, node: SetNode) -> None:
        self.write(f"$ {node.variable} {node.operator} {node.value}")

    def emit_python(self, node: PythonNode) -> None:
        """
        Emits one-line python as `$ code` and everything else as a block.

        One-line code that would read back as an assignment, and code with any
        of the init/early/hide flags, always gets the block form. Blank lines
        before the first and after the last code line are not written.
        """
        code_lines = node.code.split("\n")
        while code_lines and not code_lines[-1].strip():
            code_lines.pop()
        while code_lines and not code_lines[0].strip():
            code_lines.pop(0)

        flagged = node.init or node.early or node.hide
        if len(code_lines) == 1 and not flagged:
            inline = f"$ {code_lines[0]}"
            if not _SET_STATEMENT.match(inline):
                self.write(inline)
                return

        header = "python"
        if node.init:
            header = f"init {header}"
        if node.early:
            header += " early"
        if node.hide:
            header += " hide"
        self.write(f"{header}:")

        self.indent += 1
        if not code_lines:
            self.write(PLACEHOLDER_STATEMENT)
        for code_line in code_lines:
            # Blank lines keep the block indent so the output never has an empty line.
            self.write(code_line if code_line.strip() else "")
        self.indent -= 1

    def emit_define(self, node: DefineNode) -> None:
        name = f"{node.store}.{node.name}" if node.store else node.name
        self.write(f"define {name} = {node.value}")

    def emit_default(self, node: DefaultNode) -> None:
        self.write(f"default {node.name} = {node.value}")

    def emit_raw(self, node: RawNode) -> None:
        # Stored text already carries its own indentation.
        self.lines.append(node.content)


__all__ = ["RpyEmitter", "escape_string", "format_number"]
