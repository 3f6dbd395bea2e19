"""
renscript CLI Entrypoint.

This module provides the command-line interface for formatting scripts.

Features:
    - Read source from `.rpy` files or inline strings.
    - Parse and regenerate the script in canonical form.
    - Output to console or file, or dump the tree as JSON.
    - Check mode for CI: exit status 1 when formatting would change the input.

Example usage:
    renscript script.rpy
    renscript -s "return"
    renscript script.rpy --indent 2 -o formatted.rpy
    renscript script.rpy --check

Functions:
    run_renscript(source: str, is_string: bool = False, out: str | None = None,
                  options: GeneratorOptions | None = None, as_json: bool = False,
                  check: bool = False) -> bool:
        Runs the pipeline (read → parse → generate → output).

    main() -> None:
        Parses CLI arguments and invokes `run_renscript`.
"""

import argparse
import json
import logging
import sys

from renscript.renscript_generate import GeneratorOptions, OptionsError, generate, load_options
from renscript.renscript_parser import parse

logger = logging.getLogger(__name__)

SCRIPT_EXTENSION = ".rpy"


def run_renscript(
    source: str,
    is_string: bool = False,
    out: str | None = None,
    options: GeneratorOptions | None = None,
    as_json: bool = False,
    check: bool = False,
) -> bool:
    """
    Run the renscript pipeline: parse, regenerate, then print or write the result.

    Args:
        source (str): Script text or path to a `.rpy` file.
        is_string (bool): If True, treats `source` as script text instead of a file path.
        out (str | None): Optional path to write the output. If None, prints to stdout.
        options (GeneratorOptions | None): Formatting options. Defaults are used if None.
        as_json (bool): If True, outputs the parsed tree as JSON instead of script text.
        check (bool): If True, nothing is printed or written; only the return value matters.

    Returns:
        bool: True if the formatted text differs from the input.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.rpy'.
    """
    if not is_string and not source.endswith(SCRIPT_EXTENSION):
        raise ValueError(f"Only {SCRIPT_EXTENSION} files are supported.")
    file_path = ""
    if not is_string:
        file_path = source
        with open(source, encoding="utf-8") as f:
            source = f.read()

    result = parse(source, file_path)
    for warning in result.warnings:
        logger.warning(
            "%s:%d:%d: %s",
            file_path or "<string>",
            warning.line,
            warning.column,
            warning.message,
        )

    formatted = generate(result.ast, options)
    changed = source.rstrip("\n") != formatted
    if check:
        return changed

    if as_json:
        text = json.dumps(result.ast.to_dict(), indent=2)
    else:
        text = formatted

    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        logger.info("wrote %s", out)
    else:
        print(text)
    return changed


def main() -> None:
    """
    Entry point for the renscript CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as script text instead of a file path.
        - `-o`, `--out`: Write output to a file.
        - `--indent`: Spaces per indentation level.
        - `--no-blank-lines`: Do not separate top-level statements with blank lines.
        - `--config`: JSON file with generator options. Flags given on the
          command line override it.
        - `--json`: Dump the parsed tree as JSON.
        - `--check`: Exit with status 1 if the input is not canonically formatted.
        - `--verbose`: Enable debug logging.
    """
    parser = argparse.ArgumentParser(
        prog="renscript",
        epilog=(
            "Lines renscript does not recognize are written back exactly as read, "
            "indentation included. Reformatting a file that contains them with a "
            "different --indent can leave the statements after them misindented; "
            "re-run with --check to confirm the result is stable."
        ),
    )
    parser.add_argument("source", help="Filename or script text (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--indent", type=int, metavar="N", help="Spaces per indentation level"
    )
    parser.add_argument(
        "--no-blank-lines",
        action="store_true",
        help="Do not insert blank lines between top-level statements",
    )
    parser.add_argument("--config", metavar="JSON", help="Generator options file")
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Dump the tree as JSON"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if formatting would change the input",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(args.config) if args.config else GeneratorOptions()
        overrides: dict[str, object] = {
            "indent_size": options.indent_size if args.indent is None else args.indent,
            "insert_blank_lines": options.insert_blank_lines and not args.no_blank_lines,
            "preserve_comments": options.preserve_comments,
        }
        options = GeneratorOptions.from_dict(overrides)
    except OptionsError as e:
        details = "".join(f"\n  {problem}" for problem in e.problems)
        parser.error(f"{e}{details}")

    changed = run_renscript(
        source=args.source,
        is_string=args.string,
        out=args.out,
        options=options,
        as_json=args.as_json,
        check=args.check,
    )
    if args.check and changed:
        print(f"{args.source}: would reformat", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
