"""Tree-pane row rendering with selection flags and the marquee overlay."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from ..ansi import char_display_width
from ..geometry import Rect
from ..layout import GROUP_MARKER, ITEM_MARKER, LayoutRow
from ..screen import TREE_GUTTER_WIDTH
from ..selection import BELOW, NodeFlags
from ..tree_model import Group
from ..ui_theme import UITheme

SELECTED_MARK = "●"
ABOVE_MARK = "▲"
BELOW_MARK = "▼"
PLAIN_MARQUEE_FILL = "░"

Cell = tuple[str, str]


def _label_cells(row: LayoutRow, flags: NodeFlags, theme: UITheme) -> list[Cell]:
    marker_len = len(GROUP_MARKER if isinstance(row.node, Group) else ITEM_MARKER)
    name_style = theme.tree_group if isinstance(row.node, Group) else theme.tree_item
    if flags.in_marquee:
        override = theme.in_marquee
    elif flags.selected:
        override = theme.selected
    else:
        override = ""

    cells: list[Cell] = []
    col = 0
    for idx, ch in enumerate(row.label):
        style = override or (theme.tree_marker if idx < marker_len else name_style)
        width = char_display_width(ch, col)
        if width <= 0:
            continue
        cells.append((ch, style))
        # Wide characters own a second, empty cell.
        cells.extend(("", style) for _ in range(width - 1))
        col += width
    return cells


def _gutter_cells(flags: NodeFlags, theme: UITheme) -> list[Cell]:
    mark = SELECTED_MARK if flags.selected else " "
    if flags.drag_indicator is None:
        indicator = " "
    else:
        indicator = BELOW_MARK if flags.drag_indicator == BELOW else ABOVE_MARK
    return [
        (mark, theme.tree_marker if flags.selected else ""),
        (indicator, theme.drag_indicator if flags.drag_indicator else ""),
    ]


def _serialize(cells: Sequence[Cell], reset: str) -> str:
    out: list[str] = []
    active = ""
    for ch, style in cells:
        if style != active:
            if active and reset:
                out.append(reset)
            if style:
                out.append(style)
            active = style
        out.append(ch)
    if active and reset:
        out.append(reset)
    return "".join(out)


def render_tree_pane(
    rows: Sequence[LayoutRow],
    flags_for: Callable[[str], NodeFlags],
    *,
    width: int,
    height: int,
    scroll: int,
    row_height: int,
    theme: UITheme,
    marquee: Rect | None = None,
) -> list[str]:
    """Return ``height`` styled lines, each exactly ``width`` columns wide.

    ``marquee`` is in pane-local coordinates: canvas x, canvas y minus
    ``scroll``.
    """
    canvas_width = max(0, width - TREE_GUTTER_WIDTH)
    row_height = max(1, row_height)
    lines: list[str] = []
    for screen_row in range(height):
        canvas_y = scroll + screen_row
        index, offset = divmod(canvas_y, row_height)
        gutter: list[Cell] = [(" ", ""), (" ", "")]
        canvas: list[Cell] = [(" ", "")] * canvas_width
        if 0 <= index < len(rows):
            row = rows[index]
            flags = flags_for(row.node_id)
            if offset == 0:
                gutter = _gutter_cells(flags, theme)
                left = int(row.box.left)
                label = _label_cells(row, flags, theme)
                canvas = list(canvas)
                for idx, cell in enumerate(label):
                    col = left + idx
                    if 0 <= col < canvas_width:
                        canvas[col] = cell
        if marquee is not None and marquee.top < screen_row + 1 and marquee.bottom > screen_row:
            canvas = list(canvas)
            for col in range(canvas_width):
                if not (marquee.left < col + 1 and marquee.right > col):
                    continue
                ch, style = canvas[col]
                if style:
                    continue
                if theme.marquee:
                    canvas[col] = (ch, theme.marquee)
                elif ch == " ":
                    canvas[col] = (PLAIN_MARQUEE_FILL, "")
        lines.append(_serialize(gutter[: max(0, width)] + canvas, theme.reset))
    return lines
