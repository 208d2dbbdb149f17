"""UI theme definitions and selection helpers.

Themes are ANSI palettes keyed by semantic role (hash, author, tags, chrome).
A selected row keeps each role's foreground and adds the selection background.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    commit_hash: str
    commit_time: str
    commit_author: str
    tags: str
    text: str
    title: str
    block: str
    selected_bg: str
    status: str

    def style(self, role: str, selected: bool) -> str:
        """Return the SGR prefix for ``role``, adding selection background when asked."""
        base = getattr(self, role)
        if selected and self.selected_bg:
            return base + self.selected_bg
        return base


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    commit_hash="\033[38;5;179m",
    commit_time="\033[38;5;110m",
    commit_author="\033[38;5;114m",
    tags="\033[1;38;5;81m",
    text="\033[38;5;252m",
    title="\033[1;38;5;81m",
    block="\033[2;38;5;250m",
    selected_bg="\033[48;5;238m",
    status="\033[7m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    commit_hash="\033[38;5;215m",
    commit_time="\033[38;5;117m",
    commit_author="\033[38;5;84m",
    tags="\033[1;38;5;45m",
    text="\033[38;5;153m",
    title="\033[1;38;5;39m",
    block="\033[38;5;31m",
    selected_bg="\033[48;5;24m",
    status="\033[7m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    commit_hash="",
    commit_time="",
    commit_author="",
    tags="",
    text="",
    title="",
    block="",
    selected_bg="\033[7m",
    status="\033[7m",
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
