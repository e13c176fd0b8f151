"""Command-line front door for treemarquee.

Parses CLI options, loads the tree, and either prints a static view or
launches the interactive selection UI.
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .geometry import Point, Rect
from .highlight import DEFAULT_STYLE, dump_json
from .layout import TreeLayout
from .render import render_selected_panel, render_tree_pane
from .runtime import config, run_app
from .selection import SelectionEngine, node_flags
from .tree_model import Tree, TreeModelError, load_tree, sample_tree
from .ui_theme import UITheme, available_theme_names, resolve_theme

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _marquee(value: str) -> Rect:
    """argparse type for ``LEFT,TOP,RIGHT,BOTTOM`` canvas rectangles."""
    parts = value.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError("expected LEFT,TOP,RIGHT,BOTTOM")
    try:
        x1, y1, x2, y2 = (float(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid marquee: {value!r}") from exc
    return Rect.from_points(Point(x1, y1), Point(x2, y2))


def apply_marquee(engine: SelectionEngine, rect: Rect) -> None:
    """Run one full press/move/release gesture spanning ``rect``."""
    engine.begin_drag(Point(rect.left, rect.top))
    engine.update_drag(Point(rect.right, rect.bottom))
    engine.end_drag()


def render_static_view(tree: Tree, layout: TreeLayout, engine: SelectionEngine, theme: UITheme, width: int) -> str:
    """Render the whole tree plus the selected-items list without a TUI."""
    rows = layout.rows()
    tree_lines = render_tree_pane(
        rows,
        lambda node_id: node_flags(node_id, engine),
        width=width,
        height=layout.canvas_height(),
        scroll=0,
        row_height=layout.row_height,
        theme=theme,
    )
    selected = tree.ordered(engine.committed_selection)
    panel_lines = render_selected_panel(
        tree,
        selected,
        width=width,
        height=len(selected) + 3,
        theme=theme,
    )
    out = [line.rstrip() for line in tree_lines]
    out.append("")
    out.extend(line.rstrip() for line in panel_lines)
    return "\n".join(out).rstrip("\n") + "\n"


def _resolve_tree(path_arg: str | None) -> tuple[Tree, Path | None]:
    path = Path(path_arg) if path_arg else config.load_last_tree_path()
    if path is None:
        return sample_tree(), None
    if not path.exists():
        if path_arg:
            raise SystemExit(f"Path not found: {path}")
        logger.info("last tree %s is gone; using the sample tree", path)
        return sample_tree(), None
    try:
        return load_tree(path), path
    except TreeModelError as exc:
        raise SystemExit(f"Invalid tree file {path}: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Cannot read {path}: {exc}") from exc


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run treemarquee.

    Without ``--render``/``--json``/``--marquee`` and with a TTY on both ends,
    the interactive UI starts. A positional tree path and ``--theme`` are
    remembered in the config file for the next run.
    """
    parser = argparse.ArgumentParser(description="Select tree nodes by dragging a marquee in the terminal.")
    parser.add_argument("tree", nargs="?", default=None, help="JSON tree file. Defaults to the last one used.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--render", action="store_true", help="Print the tree and selection, then exit.")
    parser.add_argument("--json", action="store_true", help="Print the committed selection as JSON, then exit.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style for --json output.")
    parser.add_argument(
        "--marquee",
        type=_marquee,
        metavar="L,T,R,B",
        help="Apply one marquee drag over this canvas rectangle before printing.",
    )
    parser.add_argument("--row-height", type=_positive_int, default=None, help="Rows per node (1-4).")
    parser.add_argument("--indent", type=_positive_int, default=None, help="Columns per depth level.")
    parser.add_argument("--log-file", metavar="PATH", help="Write debug logs to PATH.")
    args = parser.parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    tree, tree_path = _resolve_tree(args.tree)
    if args.tree and tree_path is not None:
        config.save_last_tree_path(tree_path.resolve())
    if args.theme:
        config.save_theme_name(args.theme)

    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)
    row_height = min(args.row_height or config.load_row_height(), config.ROW_HEIGHT_RANGE[1])
    indent_width = min(args.indent or config.load_indent_width(), config.INDENT_WIDTH_RANGE[1])
    layout = TreeLayout(tree, row_height=row_height, indent_width=indent_width)

    headless = args.render or args.json or args.marquee is not None
    if not headless and not (sys.stdin.isatty() and sys.stdout.isatty()):
        headless = True
    if not headless:
        run_app(tree, theme, row_height=row_height, indent_width=indent_width)
        return

    engine = SelectionEngine(layout)
    if args.marquee is not None:
        apply_marquee(engine, args.marquee)
    if args.json:
        data = {"selected": tree.ordered(engine.committed_selection)}
        sys.stdout.write(dump_json(data, style=args.style, no_color=args.no_color))
        return
    width = max(1, shutil.get_terminal_size((80, 24)).columns)
    sys.stdout.write(render_static_view(tree, layout, engine, theme, width))


if __name__ == "__main__":
    main()
