"""
renscript Statement Parser

Parses preprocessed script lines into a typed abstract syntax tree.

The parser walks the `LineStream` produced by `renscript_lexer` strictly
left to right and uses indentation to delimit nested bodies. Every statement
kind has its own matcher; matchers are tried in a fixed priority order and
the first success wins.

Supported Constructs
--------------------
- Flow: `label`, `jump`, `call`, `return`, `menu`, `if`/`elif`/`else`
- Display: `scene`, `show`, `hide`, `with`, `nvl`, `pause`
- Audio: `play`, `queue`, `stop`, `voice`
- Data: `define`, `default`, `$ var op value`, `$ code`, `python:` blocks
- Text: narration and speaker dialogue

Parser Behavior
---------------
- Never raises on malformed input. A line no matcher accepts becomes a Raw
  node holding its original text; a line ending in `:` takes every deeper
  indented line after it into the same Raw node.
- Show/Scene/Hide clauses are stripped right to left in the reverse of the
  emitter's clause order. Play/Stop options are found by independent
  substring search, so their order in the source does not matter.
- A body consisting of a lone `pass` line parses as an empty body, which is
  how the emitter writes one.
- `errors` is reserved and stays empty. `warnings` records orphaned indented
  lines and duplicate label names; neither stops the parse.

Entry Points
------------
- `parse(source, file_path)`: Parse a full script into a `ParseResult`.
- `Parser.parse_statements(min_indent)`: Parse one indentation level.
- `Parser.parse_statement(line)`: Parse a single statement.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field

from renscript import renscript_factory as factory
from renscript.renscript_ast import ASTNode, IfBranch, MenuChoice, RawNode, Script
from renscript.renscript_constants import (
    AUDIO_CHANNELS,
    BLOCK_MARKER,
    NVL_ACTIONS,
    PARSER_ORDER,
    PLACEHOLDER_STATEMENT,
    SET_STATEMENT_PATTERN,
)
from renscript.renscript_lexer import LineInfo, LineStream, preprocess_lines, split_lines

logger = logging.getLogger(__name__)

_QUOTED = r'"((?:[^"\\]|\\.)*)"'
_NUMBER = r"(\d+(?:\.\d*)?|\.\d+)"

LABEL_RE = re.compile(r"^label\s+([\w.]+)(?:\s*\((.*?)\))?\s*:?\s*$")
JUMP_RE = re.compile(r"^jump\s+(expression\s+)?(.+?)\s*$")
CALL_RE = re.compile(
    r"^call\s+(expression\s+)?([\w.]+)(?:\s+pass)?(?:\s*\((.*?)\))?"
    r"(?:\s+from\s+(\w+))?\s*$"
)
RETURN_RE = re.compile(r"^return(?:\s+(.+?))?\s*$")

MENU_RE = re.compile(
    r"^menu(?:\s+(\w+))?"
    r"(?:\s*\(\s*set\s+(\w+)\s*\))?"
    r"(?:\s*\(\s*screen\s*=?\s*(\w+)\s*\))?\s*:\s*$"
)
MENU_PROMPT_RE = re.compile(rf"^{_QUOTED}\s*$")
MENU_SPEAKER_PROMPT_RE = re.compile(rf"^(\w+)\s+{_QUOTED}\s*$")
MENU_SET_RE = re.compile(r"^set\s+(\w+)\s*$")
MENU_CHOICE_RE = re.compile(rf"^{_QUOTED}\s*(?:if\s+(.+?))?\s*:\s*$")

IF_RE = re.compile(r"^if\s+(.+?)\s*:\s*$")
ELIF_RE = re.compile(r"^elif\s+(.+?)\s*:\s*$")
ELSE_RE = re.compile(r"^else\s*:\s*$")

SCENE_RE = re.compile(r"^scene\s+(.+?)\s*$")
SHOW_RE = re.compile(r"^show\s+(.+?)\s*$")
HIDE_RE = re.compile(r"^hide\s+(.+?)\s*$")
WITH_RE = re.compile(r"^with\s+(.+?)\s*$")

# Trailing clauses, stripped in this order (right to left).
WITH_CLAUSE_RE = re.compile(r"^(.+?)\s+with\s+(\S+)\s*$")
ZORDER_CLAUSE_RE = re.compile(r"^(.+?)\s+zorder\s+(-?\d+)\s*$")
ONLAYER_CLAUSE_RE = re.compile(r"^(.+?)\s+onlayer\s+(\w+)\s*$")
BEHIND_CLAUSE_RE = re.compile(r"^(.+?)\s+behind\s+(\w+)\s*$")
AT_CLAUSE_RE = re.compile(r"^(.+?)\s+at\s+(.+)$")
AS_CLAUSE_RE = re.compile(r"^(.+?)\s+as\s+(\w+)\s*$")

PLAY_RE = re.compile(rf"^(play|queue)\s+({'|'.join(AUDIO_CHANNELS)})\s+{_QUOTED}(.*)$")
VOICE_RE = re.compile(rf"^voice\s+{_QUOTED}\s*$")
STOP_RE = re.compile(rf"^stop\s+({'|'.join(AUDIO_CHANNELS)})(?=\s|$)(.*)$")
FADEIN_OPTION_RE = re.compile(rf"fadein\s+{_NUMBER}")
FADEOUT_OPTION_RE = re.compile(rf"fadeout\s+{_NUMBER}")
VOLUME_OPTION_RE = re.compile(rf"volume\s+{_NUMBER}")

PAUSE_RE = re.compile(rf"^pause(?:\s+{_NUMBER})?\s*$")
NVL_RE = re.compile(rf"^nvl\s+({'|'.join(NVL_ACTIONS)})\s*$")

DEFINE_RE = re.compile(r"^define\s+(?:(\w+)\.)?(\w+)\s*=\s*(.+)$")
DEFAULT_RE = re.compile(r"^default\s+(\w+)\s*=\s*(.+)$")
SET_RE = re.compile(SET_STATEMENT_PATTERN)
PYTHON_LINE_RE = re.compile(r"^\$\s*(.+)$")
PYTHON_BLOCK_RE = re.compile(r"^(init\s+)?python(\s+early)?(\s+hide)?\s*:\s*$")

NARRATION_RE = re.compile(rf"^{_QUOTED}(?:\s+with\s+(\S+))?\s*$")
DIALOGUE_RE = re.compile(
    rf"^(\w+)(?:\s+([^\"]+?))?\s+{_QUOTED}(?:\s+with\s+(\S+))?\s*$"
)

_ESCAPE_SEQUENCE = re.compile(r"\\(.)", re.DOTALL)
_UNESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t"}


def unescape_string(text: str) -> str:
    """Reverses `escape_string`: ``\\\\``, ``\\"``, ``\\n`` and ``\\t``.

    A single left-to-right pass, so an escaped backslash followed by ``n`` is
    never read as a newline. Unknown escapes are left as written.
    """
    return _ESCAPE_SEQUENCE.sub(
        lambda m: _UNESCAPES.get(m.group(1), m.group(0)), text
    )


@dataclass
class ParseError:
    line: int
    column: int
    message: str


@dataclass
class ParseWarning:
    line: int
    column: int
    message: str


@dataclass
class ParseResult:
    """Outcome of a parse. `ast` is always populated."""

    ast: Script
    errors: list[ParseError] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)


def _split_list(text: str | None) -> list[str] | None:
    if not text:
        return None
    items = [part.strip() for part in text.split(",") if part.strip()]
    return items or None


class Parser:
    """
    renscript Parser Class

    Turns script source into a `Script` tree. One instance parses one
    document; call `parse()` once.

    Attributes
    ----------
    source : str
        The script text.
    file_path : str
        Identifier recorded in the script metadata.
    physical_lines : list[str]
        Every source line, including the blank and comment lines the
        preprocessor drops.
    stream : LineStream
        Cursor over the preprocessed lines.
    errors : list[ParseError]
        Reserved for future diagnostics.
    warnings : list[ParseWarning]
        Advisory notes about preserved but suspicious input.
    """

    def __init__(self, source: str, file_path: str = "") -> None:
        self.source = source
        self.file_path = file_path
        self.physical_lines = split_lines(source)
        self.stream = LineStream(preprocess_lines(source))
        self.errors: list[ParseError] = []
        self.warnings: list[ParseWarning] = []
        self._label_lines: dict[str, int] = {}
        self.matchers: list[Callable[[LineInfo], ASTNode | None]] = [
            getattr(self, f"parse_{kind}") for kind in PARSER_ORDER
        ]

    def parse(self) -> ParseResult:
        """Parse the whole document and return the tree with diagnostics."""
        statements = self.parse_statements(0)
        script = factory.create_script(statements, file_path=self.file_path)
        return ParseResult(ast=script, errors=self.errors, warnings=self.warnings)

    def warn(self, line: LineInfo, message: str) -> None:
        logger.debug("line %d: %s", line.line_number, message)
        self.warnings.append(ParseWarning(line.line_number, line.indent + 1, message))

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def parse_statements(self, min_indent: int) -> list[ASTNode]:
        """Parse sibling statements until the stream dedents below `min_indent`."""
        statements: list[ASTNode] = []
        while not self.stream.end_of_stream():
            line = self.stream.current()
            assert line is not None  # for mypy
            if line.indent < min_indent:
                break
            if line.indent > min_indent:
                # Deeper than any open body: keep the text, never drop it.
                self.warn(line, "Unexpected indentation, line preserved as raw")
                statements.append(factory.create_raw(line.raw, line=line.line_number))
                self.stream.advance()
                continue
            statements.append(self.parse_statement(line))
        return statements

    def parse_statement(self, line: LineInfo) -> ASTNode:
        """Parse the statement starting at `line`, falling back to a Raw node."""
        for matcher in self.matchers:
            node = matcher(line)
            if node is not None:
                return node

        if line.content.endswith(BLOCK_MARKER):
            return self.parse_raw_block(line)

        logger.debug("line %d: unrecognized statement kept as raw", line.line_number)
        self.stream.advance()
        return factory.create_raw(line.raw, line=line.line_number)

    def parse_raw_block(self, line: LineInfo) -> ASTNode:
        """Collect an unsupported block header and everything indented under it."""
        raw_lines = [line.raw]
        self.stream.advance()
        while True:
            current = self.stream.current()
            if current is None or current.indent <= line.indent:
                break
            raw_lines.append(current.raw)
            self.stream.advance()
        logger.debug(
            "line %d: unsupported block of %d line(s) kept as raw",
            line.line_number,
            len(raw_lines),
        )
        return factory.create_raw("\n".join(raw_lines), line=line.line_number)

    def parse_body(self, header: LineInfo) -> list[ASTNode]:
        """
        Parse the block under `header`.

        Returns [] when nothing is indented under it, or when the block is a lone
        `pass` placeholder.
        """
        current = self.stream.current()
        if current is None or current.indent <= header.indent:
            return []
        body = self.parse_statements(current.indent)
        if (
            len(body) == 1
            and isinstance(body[0], RawNode)
            and body[0].content.strip() == PLACEHOLDER_STATEMENT
        ):
            return []
        return body

    # ------------------------------------------------------------------
    # Flow control
    # ------------------------------------------------------------------

    def parse_label(self, line: LineInfo) -> ASTNode | None:
        """Parse `label name(params):` and its body."""
        match = LABEL_RE.match(line.content)
        if not match:
            return None

        name = match.group(1)
        if name in self._label_lines:
            self.warn(
                line,
                f"Duplicate label '{name}' "
                f"(first defined on line {self._label_lines[name]})",
            )
        else:
            self._label_lines[name] = line.line_number

        self.stream.advance()
        body = self.parse_body(line)
        return factory.create_label(
            name, body, parameters=_split_list(match.group(2)), line=line.line_number
        )

    def parse_jump(self, line: LineInfo) -> ASTNode | None:
        match = JUMP_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_jump(
            match.group(2).strip(),
            expression=True if match.group(1) else None,
            line=line.line_number,
        )

    def parse_call(self, line: LineInfo) -> ASTNode | None:
        match = CALL_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_call(
            match.group(2),
            arguments=_split_list(match.group(3)),
            expression=True if match.group(1) else None,
            from_label=match.group(4),
            line=line.line_number,
        )

    def parse_return(self, line: LineInfo) -> ASTNode | None:
        match = RETURN_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_return(value=match.group(1), line=line.line_number)

    def parse_menu(self, line: LineInfo) -> ASTNode | None:
        """
        Parse a menu header and its block.

        Lines at the choice indent are read as a prompt (quoted text, optionally
        with a speaker), a `set VAR` binding, or a choice `"text" [if guard]:`.
        Any other line ends the menu and is left for the enclosing body.
        """
        match = MENU_RE.match(line.content)
        if not match:
            return None

        name, set_var, screen = match.group(1), match.group(2), match.group(3)
        prompt: str | None = None
        prompt_speaker: str | None = None
        choices: list[MenuChoice] = []
        self.stream.advance()

        first = self.stream.current()
        if first is None or first.indent <= line.indent:
            return factory.create_menu(
                choices, name=name, set_var=set_var, screen=screen, line=line.line_number
            )

        choice_indent = first.indent
        while True:
            current = self.stream.current()
            if current is None or current.indent != choice_indent:
                break

            content = current.content
            if not content.endswith(BLOCK_MARKER):
                prompt_match = MENU_PROMPT_RE.match(content)
                if prompt_match:
                    prompt = unescape_string(prompt_match.group(1))
                    prompt_speaker = None
                    self.stream.advance()
                    continue
                speaker_match = MENU_SPEAKER_PROMPT_RE.match(content)
                if speaker_match:
                    prompt_speaker = speaker_match.group(1)
                    prompt = unescape_string(speaker_match.group(2))
                    self.stream.advance()
                    continue
                set_match = MENU_SET_RE.match(content)
                if set_match:
                    set_var = set_match.group(1)
                    self.stream.advance()
                    continue

            choice = self.parse_menu_choice(current)
            if choice is None:
                break
            choices.append(choice)

        return factory.create_menu(
            choices,
            name=name,
            prompt=prompt,
            prompt_speaker=prompt_speaker,
            set_var=set_var,
            screen=screen,
            line=line.line_number,
        )

    def parse_menu_choice(self, line: LineInfo) -> MenuChoice | None:
        match = MENU_CHOICE_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        body = self.parse_body(line)
        return factory.create_menu_choice(
            unescape_string(match.group(1)), body, condition=match.group(2)
        )

    def parse_if(self, line: LineInfo) -> ASTNode | None:
        """Parse `if`, then sibling `elif` branches and at most one `else`."""
        match = IF_RE.match(line.content)
        if not match:
            return None

        self.stream.advance()
        branches: list[IfBranch] = [
            factory.create_if_branch(match.group(1), self.parse_body(line))
        ]

        while True:
            current = self.stream.current()
            if current is None or current.indent != line.indent:
                break

            elif_match = ELIF_RE.match(current.content)
            if elif_match:
                self.stream.advance()
                branches.append(
                    factory.create_if_branch(
                        elif_match.group(1), self.parse_body(current)
                    )
                )
                continue

            if ELSE_RE.match(current.content):
                self.stream.advance()
                branches.append(factory.create_if_branch(None, self.parse_body(current)))
            break

        return factory.create_if(branches, line=line.line_number)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    @staticmethod
    def strip_clause(rest: str, pattern: re.Pattern[str]) -> tuple[str, str | None]:
        """Remove one trailing clause. Returns the remainder and the clause value."""
        match = pattern.match(rest)
        if not match:
            return rest, None
        return match.group(1).strip(), match.group(2).strip()

    def parse_scene(self, line: LineInfo) -> ASTNode | None:
        """Parse `scene image [onlayer layer] [with transition]`."""
        match = SCENE_RE.match(line.content)
        if not match:
            return None

        rest = match.group(1).strip()
        rest, with_transition = self.strip_clause(rest, WITH_CLAUSE_RE)
        rest, on_layer = self.strip_clause(rest, ONLAYER_CLAUSE_RE)

        self.stream.advance()
        return factory.create_scene(
            rest,
            on_layer=on_layer,
            with_transition=with_transition,
            line=line.line_number,
        )

    def parse_show(self, line: LineInfo) -> ASTNode | None:
        """
        Parse `show image [attrs] [as tag] [at pos] [behind tag] [onlayer layer]
        [zorder n] [with transition]`.

        Clauses are optional, so they are removed from the right in the reverse
        of that order; what remains is the image name and its attributes.
        """
        match = SHOW_RE.match(line.content)
        if not match:
            return None

        rest = match.group(1).strip()
        rest, with_transition = self.strip_clause(rest, WITH_CLAUSE_RE)
        rest, zorder = self.strip_clause(rest, ZORDER_CLAUSE_RE)
        rest, on_layer = self.strip_clause(rest, ONLAYER_CLAUSE_RE)
        rest, behind_tag = self.strip_clause(rest, BEHIND_CLAUSE_RE)
        rest, at_position = self.strip_clause(rest, AT_CLAUSE_RE)
        rest, as_tag = self.strip_clause(rest, AS_CLAUSE_RE)

        words = rest.split()
        if not words:
            return None
        image, *attributes = words

        self.stream.advance()
        return factory.create_show(
            image,
            attributes=attributes or None,
            as_tag=as_tag,
            at_position=at_position,
            behind_tag=behind_tag,
            on_layer=on_layer,
            zorder=int(zorder) if zorder is not None else None,
            with_transition=with_transition,
            line=line.line_number,
        )

    def parse_hide(self, line: LineInfo) -> ASTNode | None:
        """Parse `hide image [onlayer layer] [with transition]`."""
        match = HIDE_RE.match(line.content)
        if not match:
            return None

        rest = match.group(1).strip()
        rest, with_transition = self.strip_clause(rest, WITH_CLAUSE_RE)
        rest, on_layer = self.strip_clause(rest, ONLAYER_CLAUSE_RE)

        self.stream.advance()
        return factory.create_hide(
            rest,
            on_layer=on_layer,
            with_transition=with_transition,
            line=line.line_number,
        )

    def parse_with(self, line: LineInfo) -> ASTNode | None:
        match = WITH_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_with(match.group(1).strip(), line=line.line_number)

    def parse_pause(self, line: LineInfo) -> ASTNode | None:
        match = PAUSE_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        duration = float(match.group(1)) if match.group(1) else None
        return factory.create_pause(duration=duration, line=line.line_number)

    def parse_nvl(self, line: LineInfo) -> ASTNode | None:
        match = NVL_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_nvl(match.group(1), line=line.line_number)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # Audio
    # ------------------------------------------------------------------

    @staticmethod
    def find_number(pattern: re.Pattern[str], options: str) -> float | None:
        match = pattern.search(options)
        return float(match.group(1)) if match else None

    def parse_play(self, line: LineInfo) -> ASTNode | None:
        """
        Parse `play|queue channel "file" [options]`.

        Options are located anywhere in the tail by substring search, not by
        position: `fadein N`, `fadeout N`, `loop`/`noloop`, `volume N`,
        `if_changed`.
        """
        match = PLAY_RE.match(line.content)
        if not match:
            return None

        statement, channel, file, options = match.groups()
        options = options.strip()

        loop: bool | None = None
        if "loop" in options:
            loop = True
        if "noloop" in options:
            loop = False

        self.stream.advance()
        return factory.create_play(
            channel,  # type: ignore[arg-type]
            unescape_string(file),
            fade_in=self.find_number(FADEIN_OPTION_RE, options),
            fade_out=self.find_number(FADEOUT_OPTION_RE, options),
            loop=loop,
            volume=self.find_number(VOLUME_OPTION_RE, options),
            if_changed=True if "if_changed" in options else None,
            queue=True if statement == "queue" else None,
            line=line.line_number,
        )

    def parse_stop(self, line: LineInfo) -> ASTNode | None:
        match = STOP_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_stop(
            match.group(1),  # type: ignore[arg-type]
            fade_out=self.find_number(FADEOUT_OPTION_RE, match.group(2)),
            line=line.line_number,
        )

    def parse_voice(self, line: LineInfo) -> ASTNode | None:
        match = VOICE_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_play(
            "voice", unescape_string(match.group(1)), line=line.line_number
        )

    # ------------------------------------------------------------------
    # Data and code
    # ------------------------------------------------------------------

    def parse_define(self, line: LineInfo) -> ASTNode | None:
        match = DEFINE_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_define(
            match.group(2),
            match.group(3).strip(),
            store=match.group(1),
            line=line.line_number,
        )

    def parse_default(self, line: LineInfo) -> ASTNode | None:
        match = DEFAULT_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_default(
            match.group(1), match.group(2).strip(), line=line.line_number
        )

    def parse_set(self, line: LineInfo) -> ASTNode | None:
        """Parse `$ var op value` where op is one of =, +=, -=, *=, /=."""
        match = SET_RE.match(line.content)
        if not match:
            return None
        self.stream.advance()
        return factory.create_set(
            match.group(1),
            match.group(3).strip(),
            operator=match.group(2),  # type: ignore[arg-type]
            line=line.line_number,
        )

    @staticmethod
    def dedent_code(raw: str, code_indent: int) -> str:
        content = raw.lstrip()
        if not content:
            return ""
        return " " * max(0, len(raw) - len(content) - code_indent) + content

    def parse_python(self, line: LineInfo) -> ASTNode | None:
        """
        Parse `$ code` or an `[init] python [early] [hide]:` block.

        Block code lines keep their indentation relative to the first code line.
        Blank and comment lines between code lines are part of the code and
        are recovered from the physical source.
        """
        single = PYTHON_LINE_RE.match(line.content)
        if single:
            self.stream.advance()
            return factory.create_python(single.group(1), line=line.line_number)

        block = PYTHON_BLOCK_RE.match(line.content)
        if not block:
            return None

        self.stream.advance()
        code_lines: list[str] = []
        first = self.stream.current()
        if first is not None and first.indent > line.indent:
            code_indent = first.indent
            previous = line.line_number
            while True:
                current = self.stream.current()
                if current is None or current.indent < code_indent:
                    break
                for skipped in self.physical_lines[previous : current.line_number - 1]:
                    code_lines.append(self.dedent_code(skipped, code_indent))
                code_lines.append(" " * (current.indent - code_indent) + current.content)
                previous = current.line_number
                self.stream.advance()

        while code_lines and not code_lines[0]:
            code_lines.pop(0)
        code = "\n".join(code_lines)
        if code == PLACEHOLDER_STATEMENT:
            code = ""
        return factory.create_python(
            code,
            init=True if block.group(1) else None,
            early=True if block.group(2) else None,
            hide=True if block.group(3) else None,
            line=line.line_number,
        )

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def parse_dialogue(self, line: LineInfo) -> ASTNode | None:
        """
        Parse narration (`"text"`) or dialogue (`speaker [attrs] "text"`),
        either optionally followed by `with transition`.
        """
        narration = NARRATION_RE.match(line.content)
        if narration:
            self.stream.advance()
            return factory.create_dialogue(
                unescape_string(narration.group(1)),
                None,
                with_transition=narration.group(2),
                line=line.line_number,
            )

        dialogue = DIALOGUE_RE.match(line.content)
        if dialogue:
            speaker, attrs, text, with_transition = dialogue.groups()
            self.stream.advance()
            return factory.create_dialogue(
                unescape_string(text),
                speaker,
                attributes=attrs.split() if attrs else None,
                with_transition=with_transition,
                line=line.line_number,
            )

        return None


def parse(source: str, file_path: str = "") -> ParseResult:
    """Parse script source into a `ParseResult`. Never raises on bad syntax."""
    return Parser(source, file_path).parse()


__all__ = [
    "ParseError",
    "ParseResult",
    "ParseWarning",
    "Parser",
    "parse",
    "unescape_string",
]
