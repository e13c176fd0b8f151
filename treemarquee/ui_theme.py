"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the tree pane, the selected-items pane, and the
help overlay. JSON highlighting for ``--json`` output uses a separate Pygments
style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    divider: str
    reverse: str
    reset: str
    tree_marker: str
    tree_group: str
    tree_item: str
    selected: str
    in_marquee: str
    marquee: str
    drag_indicator: str
    panel_heading: str
    panel_id: str
    panel_button: str
    status: str
    help_heading: str
    help_key: str
    help_dim: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;44m",
    tree_group="\033[1;34m",
    tree_item="\033[38;5;252m",
    selected="\033[1;30;48;5;81m",
    in_marquee="\033[1;30;48;5;159m",
    marquee="\033[48;5;238m",
    drag_indicator="\033[1;38;5;214m",
    panel_heading="\033[1;38;5;81m",
    panel_id="\033[38;5;229m",
    panel_button="\033[7;38;5;81m",
    status="\033[2;38;5;250m",
    help_heading="\033[1;38;5;81m",
    help_key="\033[38;5;229m",
    help_dim="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    tree_marker="\033[38;5;39m",
    tree_group="\033[1;38;5;45m",
    tree_item="\033[38;5;153m",
    selected="\033[1;30;48;5;45m",
    in_marquee="\033[1;30;48;5;117m",
    marquee="\033[48;5;24m",
    drag_indicator="\033[1;38;5;215m",
    panel_heading="\033[1;38;5;45m",
    panel_id="\033[38;5;153m",
    panel_button="\033[7;38;5;45m",
    status="\033[2;38;5;110m",
    help_heading="\033[1;38;5;45m",
    help_key="\033[38;5;153m",
    help_dim="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    tree_marker="",
    tree_group="",
    tree_item="",
    selected="",
    in_marquee="",
    marquee="",
    drag_indicator="",
    panel_heading="",
    panel_id="",
    panel_button="",
    status="",
    help_heading="",
    help_key="",
    help_dim="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
