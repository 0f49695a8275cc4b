"""CLI entry-point for code_presenter.

Usage:
    python -m code_presenter render <file> [--language ID] [--style NAME]
        [--style-config JSON | --style-config-b64 B64] [--output FILE] [--lines]
    python -m code_presenter presets list [--preset-dir DIR] [--json]
    python -m code_presenter presets show <name> [--preset-dir DIR]
    python -m code_presenter presets save <name> (--style-config JSON | --style-config-b64 B64) --dir DIR
    python -m code_presenter presets validate <file>
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import jsonschema
import yaml

from code_presenter import __version__
from code_presenter.api import SourceTooLargeError, language_for_path, render_source
from code_presenter.contracts.load import validate_file
from code_presenter.core.config import RenderConfig
from code_presenter.styles import (
    PresetError,
    PresetRegistry,
    decode_style_config,
    resolve_style_profile,
)
from code_presenter.utils.exit_codes import ExitCode
from code_presenter.utils.json_norm import stable_json_dumps

logger = logging.getLogger(__name__)


def _add_style_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--style-config",
        dest="style_config",
        metavar="JSON",
        default=None,
        help="Inline JSON style overrides.",
    )
    p.add_argument(
        "--style-config-b64",
        dest="style_config_b64",
        metavar="B64",
        default=None,
        help="Base64-encoded JSON style overrides.",
    )


def _add_preset_dir_arg(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--preset-dir",
        dest="preset_dir",
        type=Path,
        default=None,
        help="Directory of extra preset files (.json / .yaml).",
    )


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="code-presenter",
        description="Render source files as styled, reflowed HTML.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Debug logging.",
    )
    sub = p.add_subparsers(dest="command")

    # ── render ──────────────────────────────────────────────────────
    render_p = sub.add_parser("render", help="Render one source file to HTML.")
    render_p.add_argument("source", type=Path, help="Source file to render.")
    render_p.add_argument(
        "--language",
        default=None,
        help="Language id (default: from the file extension).",
    )
    render_p.add_argument(
        "--style",
        default=None,
        help="Preset name, inline JSON or base64 JSON.",
    )
    _add_style_args(render_p)
    _add_preset_dir_arg(render_p)
    render_p.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the HTML page here instead of stdout.",
    )
    render_p.add_argument(
        "--lines",
        action="store_true",
        default=False,
        help="Print the rendered line fragments as JSON instead of the page.",
    )

    # ── presets ─────────────────────────────────────────────────────
    presets_p = sub.add_parser("presets", help="Inspect and manage style presets.")
    presets_sub = presets_p.add_subparsers(dest="presets_command")

    list_p = presets_sub.add_parser("list", help="List known presets.")
    _add_preset_dir_arg(list_p)
    list_p.add_argument("--json", dest="json_out", action="store_true", default=False)

    show_p = presets_sub.add_parser("show", help="Print a resolved preset profile.")
    show_p.add_argument("name")
    _add_preset_dir_arg(show_p)

    save_p = presets_sub.add_parser("save", help="Save style overrides as a preset file.")
    save_p.add_argument("name")
    _add_style_args(save_p)
    save_p.add_argument("--dir", dest="save_dir", type=Path, required=True)

    validate_p = presets_sub.add_parser("validate", help="Check a preset file.")
    validate_p.add_argument("preset_file", type=Path)

    return p


def _load_registry(preset_dir: Optional[Path], config: RenderConfig) -> PresetRegistry:
    registry = PresetRegistry.with_builtins()
    directory = preset_dir or config.preset_dir
    if directory is not None:
        registry.load_directory(directory)
    return registry


def _style_overrides(args: argparse.Namespace) -> Optional[dict]:
    raw = args.style_config or args.style_config_b64
    if not raw:
        return None
    decoded = decode_style_config(raw)
    if decoded is None:
        logger.warning("Ignoring undecodable style config")
        return None
    return dict(decoded)


def _handle_render(args: argparse.Namespace, config: RenderConfig) -> int:
    """Dispatch ``code-presenter render <file>``."""
    source: Path = args.source
    if not source.is_file():
        print(f"error: file does not exist: {source}", file=sys.stderr)
        return ExitCode.ERROR
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {source}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    language = args.language or language_for_path(source) or config.default_language
    registry = _load_registry(args.preset_dir, config)
    profile = resolve_style_profile(
        args.style or config.default_style,
        overrides=_style_overrides(args),
        registry=registry,
    )

    try:
        doc = render_source(
            text, language, profile, label=source.name, config=config, registry=registry
        )
    except SourceTooLargeError as e:
        print(f"error: {source}: {e}", file=sys.stderr)
        return ExitCode.ERROR

    output = stable_json_dumps(list(doc.lines)) if args.lines else doc.standalone_html
    if args.output:
        out: Path = args.output
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(output, encoding="utf-8")
        print(f"Rendered {doc.line_count} lines to {out}", file=sys.stderr)
    else:
        sys.stdout.write(output)
    return ExitCode.SUCCESS


def _handle_presets(args: argparse.Namespace, config: RenderConfig) -> int:
    """Dispatch ``code-presenter presets …``."""
    cmd = args.presets_command

    if cmd == "validate":
        path: Path = args.preset_file
        try:
            validate_file(path)
        except jsonschema.ValidationError as e:
            print(f"FAIL: {path}: {e.message}", file=sys.stderr)
            return ExitCode.VIOLATION
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            print(f"error: {path}: {e}", file=sys.stderr)
            return ExitCode.ERROR
        print("OK")
        return ExitCode.SUCCESS

    if cmd == "save":
        overrides = _style_overrides(args) or {}
        registry = PresetRegistry.with_builtins()
        try:
            out = registry.save_custom(args.name, overrides, args.save_dir)
        except PresetError as e:
            print(f"error: {e}", file=sys.stderr)
            return ExitCode.ERROR
        except OSError as e:
            print(f"error: cannot write preset to {args.save_dir}: {e}", file=sys.stderr)
            return ExitCode.ERROR
        print(f"Preset written to {out}", file=sys.stderr)
        return ExitCode.SUCCESS

    registry = _load_registry(getattr(args, "preset_dir", None), config)

    if cmd == "show":
        preset = registry.lookup(args.name)
        if preset is None:
            print(f"error: unknown preset: {args.name}", file=sys.stderr)
            return ExitCode.ERROR
        sys.stdout.write(stable_json_dumps(preset.profile))
        return ExitCode.SUCCESS

    if cmd == "list":
        presets = list(registry)
        if args.json_out:
            sys.stdout.write(
                stable_json_dumps(
                    [
                        {"key": p.key, "displayName": p.display_name, "source": p.source}
                        for p in presets
                    ]
                )
            )
        else:
            for p in presets:
                print(f"{p.key:<24} {p.display_name:<24} [{p.source}]")
        return ExitCode.SUCCESS

    print("error: missing presets subcommand (list|show|save|validate)", file=sys.stderr)
    return ExitCode.ERROR


def main(argv: list[str] | None = None) -> int:
    """Entry-point; returns an :class:`ExitCode`."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = RenderConfig.from_env()

    if args.command == "render":
        return _handle_render(args, config)
    if args.command == "presets":
        return _handle_presets(args, config)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
