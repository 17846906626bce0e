"""Genre row colours and readable text colour for the PDF table."""
import re
from typing import Any, Optional, Tuple

RGB = Tuple[int, int, int]

GENRE_COLORS = {
    "Rock": "#FF6B6B",
    "Pop": "#4ECDC4",
    "Jazz": "#FFD166",
    "Classical": "#06D6A0",
    "Hip Hop": "#118AB2",
    "Electronic": "#EF476F",
    "Country": "#073B4C",
    "R&B": "#7209B7",
    "Metal": "#3A0CA3",
    "Folk": "#F72585",
    "Blues": "#480CA8",
    "Reggae": "#560BAD",
}
FALLBACK_COLOR = "#CCCCCC"

BLACK: RGB = (0, 0, 0)
WHITE: RGB = (255, 255, 255)

_HEX_REGEX = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)


def genre_color(genre: Any) -> str:
    if not isinstance(genre, str):
        return FALLBACK_COLOR
    return GENRE_COLORS.get(genre, FALLBACK_COLOR)


def hex_to_rgb(value: str) -> Optional[RGB]:
    """'#FF6B6B' -> (255, 107, 107), or None if not a 6-digit hex colour."""
    match = _HEX_REGEX.match(value)
    if not match:
        return None
    return tuple(int(part, 16) for part in match.groups())


def relative_luminance(rgb: RGB) -> float:
    r, g, b = rgb
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def contrast_color(rgb: RGB) -> RGB:
    """Black text on light rows, white on dark ones."""
    return BLACK if relative_luminance(rgb) > 0.5 else WHITE
