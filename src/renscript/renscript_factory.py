"""
Node factory for renscript ASTs.

One `create_*` function per statement variant. Each call allocates the next
identifier from the process-wide `IdAllocator` and fills unset optional
fields with None so the emitter can tell "not specified" apart from
"specified as empty".

The parser and the tree synchronizer both build nodes through this module;
nothing else allocates ids.

Functions:
    next_id() -> str
    reset_node_id_counter() -> None   (tests only)
    create_label, create_dialogue, create_menu, create_menu_choice,
    create_scene, create_show, create_hide, create_with, create_jump,
    create_call, create_return, create_if, create_if_branch, create_set,
    create_python, create_define, create_default, create_play, create_stop,
    create_pause, create_nvl, create_raw, create_script
"""

from __future__ import annotations

import itertools
from datetime import datetime

from renscript.renscript_ast import (
    ASTNode,
    AudioChannel,
    CallNode,
    DefaultNode,
    DefineNode,
    DialogueNode,
    HideNode,
    IfBranch,
    IfNode,
    JumpNode,
    LabelNode,
    MenuChoice,
    MenuNode,
    NVLAction,
    NVLNode,
    PauseNode,
    PlayNode,
    PythonNode,
    RawNode,
    ReturnNode,
    SceneNode,
    Script,
    ScriptMetadata,
    SetNode,
    SetOperator,
    ShowNode,
    StopNode,
    WithNode,
)
from renscript.renscript_constants import SCRIPT_VERSION


class IdAllocator:
    """
    Monotonic node id source.

    Ids have the form ``node_<n>`` and are never handed out twice unless
    `reset()` is called, which only test harnesses may do.
    """

    def __init__(self, prefix: str = "node") -> None:
        self.prefix = prefix
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        return f"{self.prefix}_{next(self._counter)}"

    def reset(self) -> None:
        self._counter = itertools.count(1)


_allocator = IdAllocator()


def next_id() -> str:
    """Returns the next node identifier from the shared allocator."""
    return _allocator.next_id()


def reset_node_id_counter() -> None:
    """Restarts id allocation at ``node_1``. For deterministic tests only."""
    _allocator.reset()


def create_label(
    name: str,
    body: list[ASTNode] | None = None,
    *,
    parameters: list[str] | None = None,
    line: int | None = None,
) -> LabelNode:
    return LabelNode(
        id=next_id(),
        name=name,
        parameters=parameters,
        body=body if body is not None else [],
        line=line,
    )


def create_dialogue(
    text: str,
    speaker: str | None = None,
    *,
    attributes: list[str] | None = None,
    with_transition: str | None = None,
    line: int | None = None,
) -> DialogueNode:
    return DialogueNode(
        id=next_id(),
        speaker=speaker,
        text=text,
        attributes=attributes,
        with_transition=with_transition,
        line=line,
    )


def create_menu(
    choices: list[MenuChoice] | None = None,
    *,
    name: str | None = None,
    prompt: str | None = None,
    prompt_speaker: str | None = None,
    set_var: str | None = None,
    screen: str | None = None,
    line: int | None = None,
) -> MenuNode:
    return MenuNode(
        id=next_id(),
        choices=choices if choices is not None else [],
        name=name,
        prompt=prompt,
        prompt_speaker=prompt_speaker,
        set_var=set_var,
        screen=screen,
        line=line,
    )


def create_menu_choice(
    text: str, body: list[ASTNode] | None = None, condition: str | None = None
) -> MenuChoice:
    return MenuChoice(
        text=text, condition=condition, body=body if body is not None else []
    )


def create_scene(
    image: str,
    *,
    on_layer: str | None = None,
    with_transition: str | None = None,
    line: int | None = None,
) -> SceneNode:
    return SceneNode(
        id=next_id(),
        image=image,
        on_layer=on_layer,
        with_transition=with_transition,
        line=line,
    )


def create_show(
    image: str,
    *,
    attributes: list[str] | None = None,
    as_tag: str | None = None,
    at_position: str | None = None,
    behind_tag: str | None = None,
    on_layer: str | None = None,
    zorder: int | None = None,
    with_transition: str | None = None,
    line: int | None = None,
) -> ShowNode:
    return ShowNode(
        id=next_id(),
        image=image,
        attributes=attributes,
        as_tag=as_tag,
        at_position=at_position,
        behind_tag=behind_tag,
        on_layer=on_layer,
        zorder=zorder,
        with_transition=with_transition,
        line=line,
    )


def create_hide(
    image: str,
    *,
    on_layer: str | None = None,
    with_transition: str | None = None,
    line: int | None = None,
) -> HideNode:
    return HideNode(
        id=next_id(),
        image=image,
        on_layer=on_layer,
        with_transition=with_transition,
        line=line,
    )


def create_with(transition: str, *, line: int | None = None) -> WithNode:
    return WithNode(id=next_id(), transition=transition, line=line)


def create_jump(
    target: str, *, expression: bool | None = None, line: int | None = None
) -> JumpNode:
    return JumpNode(id=next_id(), target=target, expression=expression, line=line)


def create_call(
    target: str,
    *,
    arguments: list[str] | None = None,
    expression: bool | None = None,
    from_label: str | None = None,
    line: int | None = None,
) -> CallNode:
    return CallNode(
        id=next_id(),
        target=target,
        arguments=arguments,
        expression=expression,
        from_label=from_label,
        line=line,
    )


def create_return(*, value: str | None = None, line: int | None = None) -> ReturnNode:
    return ReturnNode(id=next_id(), value=value, line=line)


def create_if(
    branches: list[IfBranch] | None = None, *, line: int | None = None
) -> IfNode:
    return IfNode(
        id=next_id(), branches=branches if branches is not None else [], line=line
    )


def create_if_branch(
    condition: str | None, body: list[ASTNode] | None = None
) -> IfBranch:
    return IfBranch(condition=condition, body=body if body is not None else [])


def create_set(
    variable: str,
    value: str,
    *,
    operator: SetOperator = "=",
    line: int | None = None,
) -> SetNode:
    return SetNode(
        id=next_id(), variable=variable, value=value, operator=operator, line=line
    )


def create_python(
    code: str,
    *,
    early: bool | None = None,
    hide: bool | None = None,
    init: bool | None = None,
    line: int | None = None,
) -> PythonNode:
    return PythonNode(
        id=next_id(), code=code, early=early, hide=hide, init=init, line=line
    )


def create_define(
    name: str, value: str, *, store: str | None = None, line: int | None = None
) -> DefineNode:
    return DefineNode(id=next_id(), name=name, value=value, store=store, line=line)


def create_default(name: str, value: str, *, line: int | None = None) -> DefaultNode:
    return DefaultNode(id=next_id(), name=name, value=value, line=line)


def create_play(
    channel: AudioChannel,
    file: str,
    *,
    fade_in: float | None = None,
    fade_out: float | None = None,
    loop: bool | None = None,
    volume: float | None = None,
    if_changed: bool | None = None,
    queue: bool | None = None,
    line: int | None = None,
) -> PlayNode:
    return PlayNode(
        id=next_id(),
        channel=channel,
        file=file,
        fade_in=fade_in,
        fade_out=fade_out,
        loop=loop,
        volume=volume,
        if_changed=if_changed,
        queue=queue,
        line=line,
    )


def create_stop(
    channel: AudioChannel, *, fade_out: float | None = None, line: int | None = None
) -> StopNode:
    return StopNode(id=next_id(), channel=channel, fade_out=fade_out, line=line)


def create_pause(
    *, duration: float | None = None, line: int | None = None
) -> PauseNode:
    return PauseNode(id=next_id(), duration=duration, line=line)


def create_nvl(action: NVLAction, *, line: int | None = None) -> NVLNode:
    return NVLNode(id=next_id(), action=action, line=line)


def create_raw(content: str, *, line: int | None = None) -> RawNode:
    return RawNode(id=next_id(), content=content, line=line)


def create_script(
    statements: list[ASTNode] | None = None,
    *,
    file_path: str = "",
    parse_time: datetime | None = None,
    version: str = SCRIPT_VERSION,
) -> Script:
    metadata = ScriptMetadata(file_path=file_path, version=version)
    if parse_time is not None:
        metadata.parse_time = parse_time
    return Script(
        statements=statements if statements is not None else [], metadata=metadata
    )


__all__ = [
    "IdAllocator",
    "create_call",
    "create_default",
    "create_define",
    "create_dialogue",
    "create_hide",
    "create_if",
    "create_if_branch",
    "create_jump",
    "create_label",
    "create_menu",
    "create_menu_choice",
    "create_nvl",
    "create_pause",
    "create_play",
    "create_python",
    "create_raw",
    "create_return",
    "create_scene",
    "create_script",
    "create_set",
    "create_show",
    "create_stop",
    "create_with",
    "next_id",
    "reset_node_id_counter",
]
