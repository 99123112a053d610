# path_planner/domain/mechanics/mechanics_highlights.py
import re
from collections.abc import Iterable, Sequence

from path_planner.domain.entities.geography import NEUTRAL, Color, Way
from path_planner.errors import HighlightPatternError

Highlight = tuple[re.Pattern, Color]


def compile_highlights(highlights: Iterable[tuple[str, Color]]) -> list[Highlight]:
    """Compile every pattern or raise on the first bad one; nothing partial is returned."""
    out: list[Highlight] = []
    for pattern, color in highlights:
        try:
            out.append((re.compile(pattern), color))
        except re.error as exc:
            raise HighlightPatternError(pattern, str(exc)) from exc
    return out


def way_color(way: Way, highlights: Sequence[Highlight]) -> Color:
    # First pattern (in list order) matching any tag wins
    for regex, color in highlights:
        for tag in way.tags:
            if regex.search(tag):
                return color
    return NEUTRAL


def way_colors(ways: Sequence[Way], highlights: Sequence[Highlight]) -> list[Color]:
    return [way_color(w, highlights) for w in ways]
