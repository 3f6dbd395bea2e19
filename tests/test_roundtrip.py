from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from renscript import renscript_factory as f
from renscript.renscript_ast import ASTNode, Script
from renscript.renscript_constants import AUDIO_CHANNELS, NVL_ACTIONS, RESERVED_WORDS, SET_OPERATORS
from renscript.renscript_generate import GeneratorOptions, generate
from renscript.renscript_parser import parse, unescape_string
from renscript.emitters.rpy_emitter import escape_string

# Words a generated identifier must not collide with: statement keywords and
# clause keywords the parser looks for inside a line.
KEYWORDS = RESERVED_WORDS | {
    "as",
    "at",
    "behind",
    "onlayer",
    "zorder",
    "expression",
    "from",
    "fadein",
    "fadeout",
    "volume",
    "loop",
    "noloop",
    "if_changed",
    "music",
    "sound",
    "clear",
}

idents = st.from_regex(r"[a-z][a-z0-9_]{0,6}", fullmatch=True).filter(
    lambda s: s not in KEYWORDS
)
maybe_ident = st.none() | idents
flag = st.none() | st.just(True)
texts = st.text(alphabet=st.sampled_from(list("abXY 09.,!?':#\"\\\n\t")), max_size=16)
seconds = st.none() | st.integers(0, 100).map(lambda n: n / 10)
files = st.from_regex(r"[a-z0-9_/]{1,8}\.ogg", fullmatch=True) | texts
PYTHON_CODE = [
    "",
    "x = 1",
    "renpy.pause(1)",
    "del seen[0]",
    "def f():\n    return 1",
    "if x:\n    y = 2\nelse:\n    y = 3",
    "a = 1\n\nb = 2",
    "def f():\n    x = 1\n\n    return x",
    "# setup\nx = 1\n# done\ny = 2",
]


@st.composite  # type: ignore[misc]
def dialogues(draw: Any) -> ASTNode:
    speaker = draw(maybe_ident)
    attributes = draw(st.lists(idents, max_size=2)) if speaker else None
    return f.create_dialogue(
        draw(texts),
        speaker,
        attributes=attributes or None,
        with_transition=draw(maybe_ident),
    )


@st.composite  # type: ignore[misc]
def shows(draw: Any) -> ASTNode:
    return f.create_show(
        draw(idents),
        attributes=draw(st.lists(idents, max_size=2)) or None,
        as_tag=draw(maybe_ident),
        at_position=draw(maybe_ident),
        behind_tag=draw(maybe_ident),
        on_layer=draw(maybe_ident),
        zorder=draw(st.none() | st.integers(-5, 5)),
        with_transition=draw(maybe_ident),
    )


@st.composite  # type: ignore[misc]
def plays(draw: Any) -> ASTNode:
    return f.create_play(
        draw(st.sampled_from(AUDIO_CHANNELS)),
        draw(files),
        fade_in=draw(seconds),
        fade_out=draw(seconds),
        loop=draw(st.none() | st.booleans()),
        volume=draw(seconds),
        if_changed=draw(flag),
        queue=draw(flag),
    )


@st.composite  # type: ignore[misc]
def calls(draw: Any) -> ASTNode:
    return f.create_call(
        draw(idents),
        arguments=draw(st.lists(idents, max_size=3)) or None,
        expression=draw(flag),
        from_label=draw(maybe_ident),
    )


simple_statements = st.one_of(
    dialogues(),
    shows(),
    plays(),
    calls(),
    st.builds(
        lambda image, layer, w: f.create_scene(image, on_layer=layer, with_transition=w),
        st.lists(idents, min_size=1, max_size=2).map(" ".join),
        maybe_ident,
        maybe_ident,
    ),
    st.builds(
        lambda image, layer, w: f.create_hide(image, on_layer=layer, with_transition=w),
        idents,
        maybe_ident,
        maybe_ident,
    ),
    st.builds(f.create_with, idents),
    st.builds(lambda t, e: f.create_jump(t, expression=e), idents, flag),
    st.builds(lambda v: f.create_return(value=v), maybe_ident),
    st.builds(
        lambda var, op, val: f.create_set(var, val, operator=op),
        idents,
        st.sampled_from(SET_OPERATORS),
        idents | st.integers(0, 99).map(str),
    ),
    st.builds(
        lambda code, i, e, h: f.create_python(code, init=i, early=e, hide=h),
        st.sampled_from(PYTHON_CODE),
        flag,
        flag,
        flag,
    ),
    st.builds(
        lambda n, v, s: f.create_define(n, v, store=s),
        idents,
        idents | st.integers(0, 99).map(str),
        maybe_ident,
    ),
    st.builds(f.create_default, idents, idents),
    st.builds(
        lambda ch, fo: f.create_stop(ch, fade_out=fo),
        st.sampled_from(AUDIO_CHANNELS),
        seconds,
    ),
    st.builds(lambda d: f.create_pause(duration=d), seconds),
    st.builds(f.create_nvl, st.sampled_from(NVL_ACTIONS)),
)


def bodies(children: Any) -> Any:
    return st.lists(children, max_size=3)


@st.composite  # type: ignore[misc]
def ifs(draw: Any, children: Any) -> ASTNode:
    branches = [f.create_if_branch(draw(idents), draw(bodies(children)))]
    for _ in range(draw(st.integers(0, 2))):
        branches.append(f.create_if_branch(draw(idents), draw(bodies(children))))
    if draw(st.booleans()):
        branches.append(f.create_if_branch(None, draw(bodies(children))))
    return f.create_if(branches)


@st.composite  # type: ignore[misc]
def menus(draw: Any, children: Any) -> ASTNode:
    prompt = draw(st.none() | texts)
    choices = [
        f.create_menu_choice(draw(texts), draw(bodies(children)), draw(maybe_ident))
        for _ in range(draw(st.integers(0, 3)))
    ]
    return f.create_menu(
        choices,
        name=draw(maybe_ident),
        prompt=prompt,
        prompt_speaker=draw(maybe_ident) if prompt is not None else None,
        set_var=draw(maybe_ident),
        screen=draw(maybe_ident),
    )


nested_statements = st.recursive(
    simple_statements,
    lambda children: ifs(children) | menus(children),
    max_leaves=8,
)


@st.composite  # type: ignore[misc]
def labels(draw: Any) -> ASTNode:
    return f.create_label(
        draw(idents),
        draw(st.lists(nested_statements, max_size=4)),
        parameters=draw(st.lists(idents, max_size=2)) or None,
    )


scripts = st.lists(labels() | nested_statements, max_size=5).map(
    lambda statements: f.create_script(statements)
)

options = st.builds(
    GeneratorOptions,
    indent_size=st.integers(1, 8),
    insert_blank_lines=st.booleans(),
)


def prune(node: Any) -> Any:
    """Drop ids, line numbers and absent or empty optional fields."""
    if isinstance(node, list):
        return [prune(n) for n in node]
    if isinstance(node, dict):
        return {
            k: prune(v)
            for k, v in node.items()
            if k not in ("id", "line") and v is not None and v is not False and v != [] and v != ""
        }
    return node


def shape(script: Script) -> Any:
    return prune([s.to_dict() for s in script.statements])


@settings(max_examples=200)  # type: ignore[misc]
@given(scripts, options)  # type: ignore[misc]
def test_round_trip(script: Script, opts: GeneratorOptions) -> None:
    result = parse(generate(script, opts))
    assert result.warnings == []
    assert shape(result.ast) == shape(script)


@given(scripts, options)  # type: ignore[misc]
def test_formatting_is_idempotent(script: Script, opts: GeneratorOptions) -> None:
    text = generate(script, opts)
    assert generate(parse(text).ast, opts) == text


@given(st.text())  # type: ignore[misc]
def test_escape_inverse(s: str) -> None:
    assert unescape_string(escape_string(s)) == s


@given(scripts, st.sampled_from([2, 4]))  # type: ignore[misc]
def test_indentation_is_a_multiple_of_indent_size(script: Script, size: int) -> None:
    text = generate(script, GeneratorOptions(indent_size=size))
    for line in text.split("\n"):
        if line:
            leading = len(line) - len(line.lstrip(" "))
            assert leading % size == 0, line


@given(st.lists(labels(), min_size=1, max_size=3), st.integers(1, 8))  # type: ignore[misc]
def test_top_level_lines_at_column_zero(statements: list[ASTNode], size: int) -> None:
    script = f.create_script(statements)
    text = generate(script, GeneratorOptions(indent_size=size, insert_blank_lines=False))
    headers = [line for line in text.split("\n") if line.startswith("label ")]
    assert len(headers) == len(statements)
    for line in text.split("\n"):
        if not line.startswith("label "):
            assert line.startswith(" " * size)
