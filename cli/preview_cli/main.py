"""Main entry point for the Code Preview CLI."""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import watchfiles

from engine.preview import PreviewConfig, SourceDocument, extension_of, is_previewable, render_preview
from preview_cli import __version__

logger = logging.getLogger(__name__)

# Milliseconds watchfiles waits to group the writes of one save
DEBOUNCE_MS = 200


def print_help():
    """Print help message."""
    print(f"""
Code Preview CLI v{__version__}

Usage:
  code-preview [options] <command> FILE

Commands:
  render FILE       Write the preview page for FILE
  watch FILE        Re-render the preview page whenever FILE changes
  supports FILE     Print whether FILE can be previewed (exit 1 if not)

Options:
  -o, --output PATH       Output file (default: FILE.preview.html)
  --react-version V       React version loaded from the CDN
  --react-dom-version V   ReactDOM version loaded from the CDN
  --babel-version V       Babel standalone version loaded from the CDN
  --cdn URL               CDN base URL
  --verbose               Log each render
  -h, --help              Show this help
  -v, --version           Show version

Examples:
  code-preview render src/App.tsx
  code-preview watch src/App.tsx -o /tmp/app.html
""")


# Options that take a value, mapped to their key in the parsed result
_VALUE_OPTIONS = {
    "-o": "output",
    "--output": "output",
    "--react-version": "react_version",
    "--react-dom-version": "react_dom_version",
    "--babel-version": "babel_version",
    "--cdn": "cdn",
}


def parse_args(args: list[str]) -> dict:
    """
    Parse command line arguments.

    Returns dict with:
        command: str | None (render, watch, supports)
        file: str | None
        output: str | None
        react_version, react_dom_version, babel_version, cdn: str | None
        verbose: bool
        show_help: bool
        show_version: bool
    """
    result = {
        "command": None,
        "file": None,
        "output": None,
        "react_version": None,
        "react_dom_version": None,
        "babel_version": None,
        "cdn": None,
        "verbose": False,
        "show_help": False,
        "show_version": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]

        if arg in ("render", "watch", "supports") and result["command"] is None:
            result["command"] = arg
        elif arg in _VALUE_OPTIONS:
            if i + 1 >= len(args):
                print(f"Error: {arg} requires a value")
                sys.exit(1)
            result[_VALUE_OPTIONS[arg]] = args[i + 1]
            i += 1
        elif arg == "--verbose":
            result["verbose"] = True
        elif arg in ("--help", "-h"):
            result["show_help"] = True
        elif arg in ("--version", "-v"):
            result["show_version"] = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}")
            print("Run 'code-preview --help' for usage.")
            sys.exit(1)
        elif result["command"] is not None and result["file"] is None:
            result["file"] = arg
        else:
            print(f"Unknown command: {arg}")
            print("Run 'code-preview --help' for usage.")
            sys.exit(1)

        i += 1

    return result


def build_config(args: dict) -> PreviewConfig:
    """PreviewConfig from the version flags; unset flags keep the defaults."""
    overrides = {
        "ui_library_version": args["react_version"],
        "dom_binding_version": args["react_dom_version"],
        "transpiler_version": args["babel_version"],
        "cdn_base_url": args["cdn"],
    }
    return PreviewConfig(**{k: v for k, v in overrides.items() if v is not None})


def default_output(path: Path) -> Path:
    return path.with_name(path.name + ".preview.html")


def render_file(path: Path, output: Path, config: PreviewConfig) -> Path:
    """Read path, render it and write the page to output."""
    text = path.read_text(encoding="utf-8")
    html = render_preview(SourceDocument.from_path(path, text), config=config, title=path.name)
    output.write_text(html, encoding="utf-8")
    logger.info("rendered %s -> %s (%d bytes)", path, output, len(html))
    return output


def watch_file(
    path: Path,
    output: Path,
    config: PreviewConfig,
    changes_iter: Iterable[set[tuple[Any, str]]] | None = None,
) -> int:
    """
    Render path now and again every time it changes.

    Consumes change batches from watchfiles.watch() on the file's directory,
    so editors that save by writing a new file and renaming it are still
    seen. Batches that do not touch path, or only delete it, are skipped.
    Runs until the iterator ends or the user interrupts. Returns the number
    of renders written.
    """
    render_file(path, output, config)
    renders = 1
    target = path.resolve()

    if changes_iter is None:
        changes_iter = watchfiles.watch(target.parent, debounce=DEBOUNCE_MS)

    for raw_changes in changes_iter:
        touched = {Path(p).resolve() for change, p in raw_changes if change != watchfiles.Change.deleted}
        if target not in touched:
            continue
        try:
            render_file(path, output, config)
        except OSError as e:
            logger.warning("watch: failed to render %s: %s", path, e)
            continue
        renders += 1
        print(f"  Updated {output}")

    return renders


def main(argv: list[str] | None = None):
    """Main entry point."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    # Handle help and version first
    if args["show_help"]:
        print_help()
        return

    if args["show_version"]:
        print(f"code-preview {__version__}")
        return

    if args["command"] is None or args["file"] is None:
        print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args["verbose"] else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    path = Path(args["file"])

    if args["command"] == "supports":
        ok = is_previewable(extension_of(path))
        print("yes" if ok else "no")
        sys.exit(0 if ok else 1)

    if not path.is_file():
        print(f"Error: {path} not found", file=sys.stderr)
        sys.exit(2)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    output = Path(args["output"]) if args["output"] else default_output(path)

    if not is_previewable(extension_of(path)):
        print(f"Warning: {path.name} cannot be previewed; writing the unsupported-file page.")

    try:
        if args["command"] == "render":
            render_file(path, output, config)
            print(str(output))
        else:
            print(f"Watching {path} -> {output} (Ctrl+C to stop)")
            try:
                watch_file(path, output, config)
            except KeyboardInterrupt:
                print("\nStopped.")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
