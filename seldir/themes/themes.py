from textual.color import Color, ColorParseError
from textual.theme import Theme

from seldir.core.errors import wrap_error

DEFAULT_ACCENT = "red"
THEME_NAME = "seldir"


def parse_accent_color(value: str) -> Color:
    try:
        return Color.parse(value.strip())
    except ColorParseError as exc:
        raise wrap_error(
            exc,
            code="invalid_accent_color",
            message=f"Unrecognised accent color {value!r}",
        ) from exc


def build_theme(accent: str = DEFAULT_ACCENT) -> Theme:
    """Terminal-default theme with directories and the cursor in ``accent``."""
    color = parse_accent_color(accent).hex
    return Theme(
        name=THEME_NAME,
        primary=color,
        secondary=color,
        accent=color,
        foreground="#D8D8D8",
        background="#000000",
        surface="#000000",
        panel="#111111",
        dark=True,
        variables={
            "footer-key-foreground": color,
            "input-selection-background": f"{color} 35%",
            "block-cursor-text-style": "none",
        },
    )
