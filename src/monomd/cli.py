#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the monomd renderer.

Renders MonoMD files (or stdin) to HTML. By default the output is the
fragment preceded by the bundled stylesheet in a ``<style>`` block.

Examples
--------
Render to stdout:
    $ monomd article.md

Specify output file:
    $ monomd article.md --out article.html

Fragment only, without the stylesheet:
    $ monomd article.md --no-css

Render several files into a directory:
    $ monomd notes/*.md --output-dir ./html

Read from stdin:
    $ cat article.md | monomd -

Print the stylesheet alone:
    $ monomd --css-only > monomd.css

Use environment variables for defaults:
    $ export MONOMD_NO_CSS=true
    $ export MONOMD_OUTPUT_DIR=./html
    $ monomd *.md  # Will skip the stylesheet and save to ./html/

Exit codes: 0 on success, 1 for input or usage errors, 2 when rendering fails.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

from monomd import __version__
from monomd.api import render
from monomd.exceptions import MonoMdError, ValidationError
from monomd.logging_utils import configure_logging
from monomd.options import MonoMdOptions, options_from_mapping
from monomd.styles import get_css

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_INPUT_ERROR = 1
EXIT_RENDER_ERROR = 2

ENV_PREFIX = "MONOMD_"
INPUT_EXTENSIONS = [".md", ".mmd", ".monomd", ".markdown", ".txt"]
OUTPUT_EXTENSION = ".html"

_TRUTHY = ("true", "1", "yes", "on")


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with MONOMD_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'no_css', 'output_dir')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set

    """
    return os.environ.get(f"{ENV_PREFIX}{key.upper().replace('-', '_')}")


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Use ``MONOMD_*`` environment variables as argument defaults.

    Command line arguments still take precedence. Values that fail the
    argument's type conversion are logged and ignored.
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue
        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        env_name = f"{ENV_PREFIX}{action.dest.upper()}"
        kind = action.__class__.__name__
        if kind == "_StoreTrueAction":
            action.default = env_value.lower() in _TRUTHY
        elif kind == "_StoreFalseAction":
            action.default = env_value.lower() not in _TRUTHY
        elif action.choices and env_value not in action.choices:
            logger.warning("Invalid choice for %s: %s. Choices: %s", env_name, env_value, list(action.choices))
        elif callable(action.type):
            try:
                action.default = action.type(env_value)
            except (ValueError, argparse.ArgumentTypeError):
                logger.warning("Invalid value for %s: %s", env_name, env_value)
        else:
            action.default = env_value


def positive_int(value: str) -> int:
    """Argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}") from e
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="monomd",
        description="Render MonoMD markup to an HTML fragment with its stylesheet.",
        epilog="Environment variables named MONOMD_<OPTION> (e.g. MONOMD_NO_CSS=true) set defaults.",
    )
    parser.add_argument("input", nargs="*", help="Input files or directories; use '-' to read from stdin")
    parser.add_argument("--version", action="version", version=f"monomd {__version__}")

    output = parser.add_argument_group("output")
    output.add_argument("--out", "-o", type=str, help="Output file (single input only)")
    output.add_argument("--output-dir", type=str, help="Directory to save rendered files (for multi-file processing)")
    output.add_argument("--recursive", "-r", action="store_true", help="Process directories recursively")
    output.add_argument("--no-css", action="store_true", help="Do not include the bundled stylesheet")
    output.add_argument("--fragment", action="store_true", help="Write only the wrapped HTML fragment")
    output.add_argument("--css-only", action="store_true", help="Print the bundled stylesheet and exit")

    rendering = parser.add_argument_group("rendering options")
    rendering.add_argument("--options-json", type=str, help="JSON file with MonoMdOptions field values")
    rendering.add_argument("--wrapper-class", type=str, help="CSS class of the wrapping <div>")
    rendering.add_argument("--link-target", type=str, help="target attribute for links; empty string omits it")
    rendering.add_argument("--checkbox-id-prefix", type=str, help="Prefix for checklist checkbox ids")
    rendering.add_argument("--max-input-chars", type=positive_int, help="Reject inputs longer than this")

    runtime = parser.add_argument_group("logging and display")
    runtime.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    runtime.add_argument("--log-file", type=str, help="Also write log records to this file")
    runtime.add_argument("--trace", action="store_true", help="Timestamped DEBUG logging with stage timings")
    runtime.add_argument("--rich", action="store_true", help="Enable rich terminal output with formatting")
    runtime.add_argument(
        "--progress",
        action="store_true",
        help="Show progress bar for file conversions",
    )
    runtime.add_argument("--skip-errors", action="store_true", help="Continue processing remaining files if one fails")
    runtime.add_argument("--no-summary", action="store_true", help="Disable summary output after processing multiple files")

    apply_env_vars_to_parser(parser)
    return parser


def load_options_from_json(json_file_path: str) -> dict[str, Any]:
    """Load options from a JSON file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the JSON file cannot be read or parsed, or is not an object

    """
    json_path = Path(json_file_path)
    if not json_path.exists():
        raise argparse.ArgumentTypeError(f"Options JSON file does not exist: {json_file_path}")

    try:
        with open(json_path, "r", encoding="utf-8") as f:
            options = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in options file {json_file_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading options file {json_file_path}: {e}") from e

    if not isinstance(options, dict):
        raise argparse.ArgumentTypeError(f"Options JSON file must contain a JSON object, got {type(options).__name__}")
    return options


def build_options(args: argparse.Namespace, json_options: Optional[dict[str, Any]] = None) -> MonoMdOptions:
    """Merge JSON options and command line flags into one options object.

    Flags that were given (or set from the environment) win over the JSON file.

    Raises
    ------
    ValidationError
        If a value is invalid or the JSON names an unknown option

    """
    options = options_from_mapping(json_options or {})

    overrides: dict[str, Any] = {}
    if args.no_css:
        overrides["include_css"] = False
    for name in ("wrapper_class", "checkbox_id_prefix", "max_input_chars"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    if args.link_target is not None:
        overrides["link_target"] = args.link_target or None

    return options_from_mapping(overrides, base=options) if overrides else options


def collect_input_files(input_paths: list[str], recursive: bool = False) -> list[Path]:
    """Collect input files from file and directory paths.

    Directories contribute files with one of the known markup extensions;
    files named explicitly are taken whatever their extension.
    """
    files: list[Path] = []
    for input_path_str in input_paths:
        input_path = Path(input_path_str)
        if input_path.is_file():
            files.append(input_path)
        elif input_path.is_dir():
            for ext in INPUT_EXTENSIONS:
                files.extend(input_path.rglob(f"*{ext}") if recursive else input_path.glob(f"*{ext}"))
        else:
            logger.warning("Path does not exist: %s", input_path)

    return sorted(set(files))


def generate_output_path(input_file: Path, output_dir: Optional[Path] = None) -> Path:
    """Return the ``.html`` path for ``input_file``, next to it unless ``output_dir`` is given."""
    output_name = input_file.stem + OUTPUT_EXTENSION
    if output_dir is None:
        return input_file.parent / output_name
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir / output_name


def render_text(markdown: str, options: MonoMdOptions, fragment: bool = False) -> str:
    """Render markup and pick the document or the bare fragment."""
    result = render(markdown, options)
    return result.html if fragment else result.full_html


def convert_single_file(
    input_path: Path,
    output_path: Optional[Path],
    options: MonoMdOptions,
    fragment: bool = False,
) -> tuple[int, Optional[str]]:
    """Render one file.

    Parameters
    ----------
    input_path : Path
        Input file path
    output_path : Path, optional
        Output file path (None for stdout)
    options : MonoMdOptions
        Rendering options
    fragment : bool
        Write only the fragment, without the ``<style>`` block

    Returns
    -------
    tuple[int, Optional[str]]
        Exit code and error message if failed

    """
    try:
        markdown = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return EXIT_INPUT_ERROR, f"Cannot read {input_path}: {e}"

    try:
        html = render_text(markdown, options, fragment)
    except MonoMdError as e:
        return EXIT_RENDER_ERROR, str(e)

    if output_path is None:
        print(html)
        return EXIT_SUCCESS, None

    try:
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        return EXIT_INPUT_ERROR, f"Cannot write {output_path}: {e}"
    return EXIT_SUCCESS, None


def process_stdin(args: argparse.Namespace, options: MonoMdOptions) -> int:
    """Render markup read from stdin to ``--out`` or stdout."""
    try:
        markdown = sys.stdin.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading from stdin: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    try:
        html = render_text(markdown, options, args.fragment)
    except MonoMdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RENDER_ERROR

    if not args.out:
        print(html)
        return EXIT_SUCCESS

    output_path = Path(args.out)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        print(f"Error: Cannot write {output_path}: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    print(f"Rendered stdin -> {output_path}", file=sys.stderr)
    return EXIT_SUCCESS


def _planned_outputs(files: list[Path], args: argparse.Namespace) -> list[tuple[Path, Optional[Path]]]:
    output_dir = Path(args.output_dir) if args.output_dir else None
    if len(files) == 1:
        if args.out:
            out = Path(args.out)
            out.parent.mkdir(parents=True, exist_ok=True)
            return [(files[0], out)]
        return [(files[0], generate_output_path(files[0], output_dir) if output_dir else None)]
    return [(file, generate_output_path(file, output_dir)) for file in files]


def process_files_simple(
    plan: list[tuple[Path, Optional[Path]]], args: argparse.Namespace, options: MonoMdOptions
) -> int:
    """Render files one after another with plain status lines on stderr."""
    failures: list[tuple[Path, int, str]] = []
    for file, output_path in plan:
        code, error = convert_single_file(file, output_path, options, args.fragment)
        if code == EXIT_SUCCESS:
            if output_path is not None:
                print(f"Rendered {file} -> {output_path}", file=sys.stderr)
            continue
        print(f"Error: Failed to render {file}: {error}", file=sys.stderr)
        failures.append((file, code, error or ""))
        if not args.skip_errors:
            break

    if len(plan) > 1 and not args.no_summary:
        print(f"\nRendering complete: {len(plan) - len(failures)}/{len(plan)} files successful", file=sys.stderr)
    return _exit_code(failures)


def process_with_progress_bar(
    plan: list[tuple[Path, Optional[Path]]], args: argparse.Namespace, options: MonoMdOptions
) -> int:
    """Render files with a tqdm progress bar."""
    try:
        from tqdm import tqdm
    except ImportError:
        print("Warning: tqdm not installed. Install with: pip install monomd[progress]", file=sys.stderr)
        return process_files_simple(plan, args, options)

    failures: list[tuple[Path, int, str]] = []
    with tqdm(plan, desc="Rendering files", unit="file") as pbar:
        for file, output_path in pbar:
            pbar.set_postfix_str(f"Processing {file.name}")
            code, error = convert_single_file(file, output_path, options, args.fragment)
            if code != EXIT_SUCCESS:
                tqdm.write(f"Error: Failed to render {file}: {error}", file=sys.stderr)
                failures.append((file, code, error or ""))
                if not args.skip_errors:
                    break

    if not args.no_summary:
        print(f"\nRendering complete: {len(plan) - len(failures)}/{len(plan)} files successful", file=sys.stderr)
    return _exit_code(failures)


def process_with_rich_output(
    plan: list[tuple[Path, Optional[Path]]], args: argparse.Namespace, options: MonoMdOptions
) -> int:
    """Render files with rich terminal output.

    Returns
    -------
    int
        Exit code (0 for success, 1 or 2 for failure)

    """
    try:
        from rich.console import Console
        from rich.panel import Panel
        from rich.table import Table
        from rich.text import Text
    except ImportError:
        print("Error: Rich library not installed. Install with: pip install monomd[rich]", file=sys.stderr)
        return EXIT_INPUT_ERROR

    console = Console(stderr=True)
    console.print(Panel.fit(Text("MonoMD Renderer", style="bold cyan"), subtitle=f"Processing {len(plan)} file(s)"))

    failures: list[tuple[Path, int, str]] = []
    for file, output_path in plan:
        code, error = convert_single_file(file, output_path, options, args.fragment)
        if code == EXIT_SUCCESS:
            console.print(f"[green]✓[/green] {file} → {output_path or 'stdout'}")
            continue
        console.print(f"[red]✗[/red] {file}: {error}")
        failures.append((file, code, error or ""))
        if not args.skip_errors:
            break

    if not args.no_summary:
        table = Table(title="Rendering Summary")
        table.add_column("Status", style="cyan", no_wrap=True)
        table.add_column("Count", style="magenta")
        table.add_row("✓ Successful", str(len(plan) - len(failures)))
        table.add_row("✗ Failed", str(len(failures)))
        table.add_row("Total", str(len(plan)))
        console.print()
        console.print(table)

    return _exit_code(failures)


def _exit_code(failures: list[tuple[Path, int, str]]) -> int:
    # Rendering failures outrank input failures
    if not failures:
        return EXIT_SUCCESS
    return max(code for _, code, _ in failures)


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(
        "DEBUG" if parsed_args.trace else parsed_args.log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
    )

    if parsed_args.css_only:
        print(get_css())
        return EXIT_SUCCESS

    if not parsed_args.input:
        print("Error: Input file is required", file=sys.stderr)
        return EXIT_INPUT_ERROR

    json_options = None
    if parsed_args.options_json:
        try:
            json_options = load_options_from_json(parsed_args.options_json)
        except argparse.ArgumentTypeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR

    try:
        options = build_options(parsed_args, json_options)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if parsed_args.input == ["-"]:
        return process_stdin(parsed_args, options)

    if parsed_args.output_dir:
        output_dir_path = Path(parsed_args.output_dir)
        if output_dir_path.exists() and not output_dir_path.is_dir():
            print(f"Error: --output-dir must be a directory, not a file: {parsed_args.output_dir}", file=sys.stderr)
            return EXIT_INPUT_ERROR

    files = collect_input_files(parsed_args.input, parsed_args.recursive)
    if not files:
        print("Error: No valid input files found", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if len(files) > 1 and parsed_args.out:
        print("Warning: --out is ignored for multiple files. Use --output-dir instead.", file=sys.stderr)

    plan = _planned_outputs(files, parsed_args)
    logger.debug("Rendering %d file(s)", len(plan))

    if parsed_args.rich:
        return process_with_rich_output(plan, parsed_args, options)
    if parsed_args.progress:
        return process_with_progress_bar(plan, parsed_args, options)
    return process_files_simple(plan, parsed_args, options)


if __name__ == "__main__":
    sys.exit(main())
