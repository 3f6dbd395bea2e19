"""
Defines the abstract syntax tree (AST) node structure for renscript.

The tree is a closed set of statement variants. Every variant is a dataclass
subclassing `ASTNode` and carries a fixed `kind` tag that the parser sets and
the emitter dispatches on.

Classes:
    ASTNode:
        Base of every statement node. Holds the stable `id` and the optional
        originating source `line`.

    LabelNode, DialogueNode, MenuNode, SceneNode, ShowNode, HideNode, WithNode,
    JumpNode, CallNode, ReturnNode, IfNode, SetNode, PythonNode, DefineNode,
    DefaultNode, PlayNode, StopNode, PauseNode, NVLNode, RawNode:
        The statement variants.

    MenuChoice, IfBranch:
        Body-owning parts of menus and conditionals. They are not statements
        and carry no id.

    Script, ScriptMetadata:
        Root of a parsed file.

    ASTDict:
        TypedDict describing the common keys of `to_dict()` output.

Optional fields default to None ("absent"), which the emitter keeps distinct
from an empty string, zero or False.

Example:
    node = LabelNode(id="node_1", name="start", body=[])
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, ClassVar, Literal, TypedDict

from renscript.renscript_constants import SCRIPT_VERSION

SetOperator = Literal["=", "+=", "-=", "*=", "/="]
AudioChannel = Literal["music", "sound", "voice"]
NVLAction = Literal["show", "hide", "clear"]


class ASTDict(TypedDict, total=False):
    """
    Dictionary form of a node as produced by `ASTNode.to_dict()`.

    Only the keys shared by every variant are listed; variant fields are added
    alongside them under their attribute names.

    Fields:
        kind (str): The statement kind (e.g. "label", "show", "raw").
        id (str): The node's stable identifier.
        line (int | None): Source line the node was parsed from.
    """

    kind: str
    id: str
    line: int | None


def _to_plain(value: Any) -> Any:
    if isinstance(value, (ASTNode, MenuChoice, IfBranch)):
        return value.to_dict()
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return value


@dataclass(kw_only=True)
class ASTNode:
    """
    Base class of every statement node.

    Args:
        id (str): Identifier allocated by the node factory. Never reused.
        line (int | None): 1-based source line, for diagnostics only.

    Attributes:
        kind (ClassVar[str]): Variant tag, fixed per subclass.
    """

    kind: ClassVar[str] = "node"

    id: str
    line: int | None = None

    def to_dict(self) -> ASTDict:
        """Converts the node and all of its descendants into plain dictionaries."""
        out: dict[str, Any] = {"kind": self.kind}
        for f in fields(self):
            out[f.name] = _to_plain(getattr(self, f.name))
        return out  # type: ignore[return-value]

    def child_bodies(self) -> list[list[ASTNode]]:
        """Returns every statement list directly owned by this node."""
        return []


@dataclass(kw_only=True)
class MenuChoice:
    """One selectable entry of a menu, with an optional guard expression."""

    text: str
    condition: str | None = None
    body: list[ASTNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "condition": self.condition,
            "body": _to_plain(self.body),
        }


@dataclass(kw_only=True)
class IfBranch:
    """A conditional branch. `condition=None` marks the trailing else branch."""

    condition: str | None
    body: list[ASTNode] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"condition": self.condition, "body": _to_plain(self.body)}


@dataclass(kw_only=True)
class LabelNode(ASTNode):
    kind: ClassVar[str] = "label"

    name: str
    parameters: list[str] | None = None
    body: list[ASTNode] = field(default_factory=list)

    def child_bodies(self) -> list[list[ASTNode]]:
        return [self.body]


@dataclass(kw_only=True)
class DialogueNode(ASTNode):
    """A line of displayed text. `speaker=None` is narration."""

    kind: ClassVar[str] = "dialogue"

    speaker: str | None
    text: str
    attributes: list[str] | None = None
    with_transition: str | None = None


@dataclass(kw_only=True)
class MenuNode(ASTNode):
    """
    A branch point presenting choices.

    Attributes:
        name (str | None): Optional menu label name (`menu NAME:`).
        prompt (str | None): Caption shown with the choices.
        prompt_speaker (str | None): Speaker of the caption, when it is dialogue.
        set_var (str | None): Variable bound by the `(set VAR)` clause.
        screen (str | None): Screen named by the `(screen NAME)` clause.
        choices (list[MenuChoice]): Ordered choices.
    """

    kind: ClassVar[str] = "menu"

    choices: list[MenuChoice] = field(default_factory=list)
    name: str | None = None
    prompt: str | None = None
    prompt_speaker: str | None = None
    set_var: str | None = None
    screen: str | None = None

    def child_bodies(self) -> list[list[ASTNode]]:
        return [choice.body for choice in self.choices]


@dataclass(kw_only=True)
class SceneNode(ASTNode):
    kind: ClassVar[str] = "scene"

    image: str
    on_layer: str | None = None
    with_transition: str | None = None


@dataclass(kw_only=True)
class ShowNode(ASTNode):
    kind: ClassVar[str] = "show"

    image: str
    attributes: list[str] | None = None
    as_tag: str | None = None
    at_position: str | None = None
    behind_tag: str | None = None
    on_layer: str | None = None
    zorder: int | None = None
    with_transition: str | None = None


@dataclass(kw_only=True)
class HideNode(ASTNode):
    kind: ClassVar[str] = "hide"

    image: str
    on_layer: str | None = None
    with_transition: str | None = None


@dataclass(kw_only=True)
class WithNode(ASTNode):
    kind: ClassVar[str] = "with"

    transition: str


@dataclass(kw_only=True)
class JumpNode(ASTNode):
    kind: ClassVar[str] = "jump"

    target: str
    expression: bool | None = None


@dataclass(kw_only=True)
class CallNode(ASTNode):
    kind: ClassVar[str] = "call"

    target: str
    arguments: list[str] | None = None
    expression: bool | None = None
    from_label: str | None = None


@dataclass(kw_only=True)
class ReturnNode(ASTNode):
    kind: ClassVar[str] = "return"

    value: str | None = None


@dataclass(kw_only=True)
class IfNode(ASTNode):
    kind: ClassVar[str] = "if"

    branches: list[IfBranch] = field(default_factory=list)

    def child_bodies(self) -> list[list[ASTNode]]:
        return [branch.body for branch in self.branches]


@dataclass(kw_only=True)
class SetNode(ASTNode):
    kind: ClassVar[str] = "set"

    variable: str
    value: str
    operator: SetOperator = "="


@dataclass(kw_only=True)
class PythonNode(ASTNode):
    """Inline `$ code` or a `python:` block. Block code keeps relative indentation."""

    kind: ClassVar[str] = "python"

    code: str
    early: bool | None = None
    hide: bool | None = None
    init: bool | None = None


@dataclass(kw_only=True)
class DefineNode(ASTNode):
    kind: ClassVar[str] = "define"

    name: str
    value: str
    store: str | None = None


@dataclass(kw_only=True)
class DefaultNode(ASTNode):
    kind: ClassVar[str] = "default"

    name: str
    value: str


@dataclass(kw_only=True)
class PlayNode(ASTNode):
    kind: ClassVar[str] = "play"

    channel: AudioChannel
    file: str
    fade_in: float | None = None
    fade_out: float | None = None
    loop: bool | None = None
    volume: float | None = None
    if_changed: bool | None = None
    queue: bool | None = None


@dataclass(kw_only=True)
class StopNode(ASTNode):
    kind: ClassVar[str] = "stop"

    channel: AudioChannel
    fade_out: float | None = None


@dataclass(kw_only=True)
class PauseNode(ASTNode):
    kind: ClassVar[str] = "pause"

    duration: float | None = None


@dataclass(kw_only=True)
class NVLNode(ASTNode):
    kind: ClassVar[str] = "nvl"

    action: NVLAction


@dataclass(kw_only=True)
class RawNode(ASTNode):
    """Verbatim source text the grammar does not recognize, indentation included."""

    kind: ClassVar[str] = "raw"

    content: str

    @property
    def is_block(self) -> bool:
        return "\n" in self.content


NODE_TYPES: dict[str, type[ASTNode]] = {
    cls.kind: cls
    for cls in (
        LabelNode,
        DialogueNode,
        MenuNode,
        SceneNode,
        ShowNode,
        HideNode,
        WithNode,
        JumpNode,
        CallNode,
        ReturnNode,
        IfNode,
        SetNode,
        PythonNode,
        DefineNode,
        DefaultNode,
        PlayNode,
        StopNode,
        PauseNode,
        NVLNode,
        RawNode,
    )
}


@dataclass(kw_only=True)
class ScriptMetadata:
    file_path: str = ""
    parse_time: datetime = field(default_factory=datetime.now)
    version: str = SCRIPT_VERSION


@dataclass(kw_only=True)
class Script:
    """
    Root of a script: the ordered top-level statements plus file metadata.

    Statement order is execution order and is preserved by every operation.
    """

    statements: list[ASTNode] = field(default_factory=list)
    metadata: ScriptMetadata = field(default_factory=ScriptMetadata)

    def labels(self) -> list[LabelNode]:
        """Returns the top-level labels in source order."""
        return [s for s in self.statements if isinstance(s, LabelNode)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": "script",
            "statements": _to_plain(self.statements),
            "metadata": {
                "file_path": self.metadata.file_path,
                "parse_time": self.metadata.parse_time.isoformat(),
                "version": self.metadata.version,
            },
        }


__all__ = [
    "ASTDict",
    "ASTNode",
    "AudioChannel",
    "CallNode",
    "DefaultNode",
    "DefineNode",
    "DialogueNode",
    "HideNode",
    "IfBranch",
    "IfNode",
    "JumpNode",
    "LabelNode",
    "MenuChoice",
    "MenuNode",
    "NODE_TYPES",
    "NVLAction",
    "NVLNode",
    "PauseNode",
    "PlayNode",
    "PythonNode",
    "RawNode",
    "ReturnNode",
    "SceneNode",
    "Script",
    "ScriptMetadata",
    "SetNode",
    "SetOperator",
    "ShowNode",
    "StopNode",
    "WithNode",
]
