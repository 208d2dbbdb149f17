"""Command-line front door for lazycommits.

Parses CLI options, resolves the repository, and loads history metadata.
Then either prints one rendered frame or dispatches into the interactive loop.
"""

from __future__ import annotations

import argparse
import shutil
import sys
from pathlib import Path

from .commit_list import CommitListViewport
from .input import Keymap
from .log_model import GitLogSource, is_git_repository
from .runtime import config
from .runtime.loop import open_terminal_session, populate_viewport, render_screen, run_commit_list
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

DEFAULT_TITLE = "Commit"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse git commit history in a terminal list.")
    parser.add_argument("path", nargs="?", default=None, help="Repository path. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--render", action="store_true", help="Print one rendered frame and exit.")
    parser.add_argument("--width", type=_positive_int, default=None, help="Frame width for --render.")
    parser.add_argument("--height", type=_positive_int, default=None, help="Frame height for --render.")
    parser.add_argument(
        "--select",
        type=_nonnegative_int,
        default=0,
        help="Initially selected commit (0 = newest).",
    )
    return parser


def render_once(viewport: CommitListViewport, width: int, height: int) -> str:
    """Render one plain frame with newline-separated rows."""
    canvas = render_screen(viewport, width, height)
    return "\n".join(row.rstrip() for row in canvas.rows()) + "\n"


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazycommits on a repository.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not is_git_repository(path):
        raise SystemExit(f"Not a git repository: {path}")

    if args.theme is not None:
        theme_name = args.theme
        if normalize_theme_name(theme_name) == theme_name.strip().lower():
            config.save_theme_name(normalize_theme_name(theme_name))
    else:
        theme_name = config.load_theme_name()
    theme = resolve_theme(theme_name, no_color=args.no_color)
    viewport = CommitListViewport(DEFAULT_TITLE, theme=theme)
    source = GitLogSource(path)
    populate_viewport(viewport, source, selection=args.select)

    if args.render or not sys.stdin.isatty():
        term = shutil.get_terminal_size((80, 24))
        width = args.width if args.width is not None else term.columns
        height = args.height if args.height is not None else term.lines
        sys.stdout.write(render_once(viewport, width, height))
        return

    keymap = Keymap(config.load_key_bindings())
    terminal, stdin_fd = open_terminal_session()
    run_commit_list(viewport, source, terminal, stdin_fd, keymap)


if __name__ == "__main__":
    main()
