import json
from pathlib import Path

import pytest

from renscript import renscript_factory as f
from renscript.renscript_generate import (
    Generator,
    GeneratorOptions,
    OptionsError,
    generate,
    generate_node,
    load_options,
    needs_blank_line,
)
from renscript.renscript_parser import parse


def test_defaults() -> None:
    options = GeneratorOptions()
    assert (options.indent_size, options.insert_blank_lines, options.preserve_comments) == (
        4,
        True,
        True,
    )


def test_from_dict_accepts_camel_case() -> None:
    options = GeneratorOptions.from_dict({"indentSize": 2, "insertBlankLines": False})
    assert options == GeneratorOptions(indent_size=2, insert_blank_lines=False)


def test_from_dict_collects_every_problem() -> None:
    with pytest.raises(OptionsError) as e:
        GeneratorOptions.from_dict(
            {"indent_size": 0, "insert_blank_lines": "yes", "tabs": True}
        )
    problems = e.value.problems
    assert len(problems) == 3
    assert any(p.startswith("tabs") for p in problems)
    assert any(p.startswith("indent_size") for p in problems)
    assert any(p.startswith("insert_blank_lines") for p in problems)


@pytest.mark.parametrize("bad", [True, 2.5, "4", -1])  # type: ignore[misc]
def test_from_dict_rejects_bad_indent(bad: object) -> None:
    with pytest.raises(OptionsError):
        GeneratorOptions.from_dict({"indent_size": bad})


def test_from_dict_requires_object() -> None:
    with pytest.raises(OptionsError):
        GeneratorOptions.from_dict([4])  # type: ignore[arg-type]


def test_load_options(tmp_path: Path) -> None:
    path = tmp_path / "opts.json"
    path.write_text(json.dumps({"indentSize": 3}), encoding="utf-8")
    assert load_options(str(path)).indent_size == 3


def test_load_options_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OptionsError, match="Failed to load options file"):
        load_options(str(tmp_path / "missing.json"))


def test_load_options_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "opts.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(OptionsError) as e:
        load_options(str(path))
    assert e.value.__cause__ is not None


def test_blank_line_policy() -> None:
    label = f.create_label("a")
    define = f.create_define("x", "1")
    default = f.create_default("y", "2")
    ret = f.create_return()
    block = f.create_raw("screen s():\n    null")
    line = f.create_raw("odd")

    assert needs_blank_line(label, ret)
    assert needs_blank_line(ret, label)
    assert not needs_blank_line(define, default)
    assert needs_blank_line(default, ret)
    assert not needs_blank_line(ret, define)
    assert needs_blank_line(ret, block)
    assert needs_blank_line(block, ret)
    assert not needs_blank_line(ret, line)


def test_generate_layout() -> None:
    script = f.create_script(
        [
            f.create_define("e", 'Character("Eileen")'),
            f.create_default("points", "0"),
            f.create_label("start", [f.create_dialogue("Hi", "e")]),
            f.create_label("empty"),
        ]
    )
    assert generate(script) == (
        'define e = Character("Eileen")\n'
        "default points = 0\n"
        "\n"
        "label start:\n"
        '    e "Hi"\n'
        "\n"
        "label empty:\n"
        "    pass"
    )


def test_generate_without_blank_lines() -> None:
    script = f.create_script(
        [
            f.create_define("x", "1"),
            f.create_label("a", [f.create_return()]),
            f.create_raw("screen s():\n    null"),
            f.create_label("b"),
        ]
    )
    text = generate(script, GeneratorOptions(insert_blank_lines=False))
    assert "\n\n" not in text
    assert text.count("\n") == 6


def test_generate_accepts_list_and_node() -> None:
    ret = f.create_return()
    assert generate([ret, f.create_jump("a")]) == "return\njump a"
    assert generate(f.create_label("a", [ret])) == "label a:\n    return"
    assert generate([]) == ""


def test_generate_rejects_non_nodes() -> None:
    with pytest.raises(TypeError):
        Generator().generate(["return"])  # type: ignore[list-item]


def test_generate_node_at_depth() -> None:
    node = f.create_if([f.create_if_branch("x", [f.create_return()])])
    assert generate_node(node, indent=1) == "    if x:\n        return"
    options = GeneratorOptions(indent_size=2)
    assert generate_node(node, indent=2, options=options) == "    if x:\n      return"


def test_generate_parse_fixed_point() -> None:
    source = (
        "define e = Character('Eileen')\n"
        "\n"
        "label start:\n"
        "    scene bg room with fade\n"
        '    e happy "Welcome!"\n'
        "    menu:\n"
        '        "Stay":\n'
        "            $ stayed = True\n"
        '        "Leave" if can_leave:\n'
        "            jump outside\n"
        "    if stayed:\n"
        '        "You stay."\n'
        "    else:\n"
        "        pass\n"
        "\n"
        "label outside:\n"
        "    return"
    )
    assert generate(parse(source).ast) == source


def test_python_blank_line_survives_reformatting() -> None:
    script = f.create_script(
        [f.create_label("start", [f.create_python("a = 1\n\nb = 2"), f.create_return()])]
    )
    for options in (GeneratorOptions(), GeneratorOptions(insert_blank_lines=False)):
        text = generate(script, options)
        assert "\n\n" not in text
        reparsed = parse(text).ast
        python = reparsed.statements[0].body[0]  # type: ignore[attr-defined]
        assert python.code == "a = 1\n\nb = 2"
        assert generate(reparsed, options) == text
