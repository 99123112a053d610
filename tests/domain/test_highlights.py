# tests/domain/test_highlights.py
import pytest

from path_planner.domain.entities.geography import NEUTRAL, Color, Way
from path_planner.domain.mechanics.mechanics_highlights import compile_highlights, way_color, way_colors
from path_planner.errors import HighlightPatternError, PathPlannerError

RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


def test_first_matching_pattern_wins():
    hl = compile_highlights([("footway", RED), ("highway/.*", BLUE)])
    assert way_color(Way(tags=("highway/footway",), nodes=(0, 1)), hl) == RED
    assert way_color(Way(tags=("highway/primary",), nodes=(0, 1)), hl) == BLUE


def test_pattern_matches_anywhere_in_any_tag():
    hl = compile_highlights([("^surface/gravel$", RED)])
    way = Way(tags=("highway/track", "surface/gravel"), nodes=(0, 1))
    assert way_color(way, hl) == RED


def test_unmatched_and_empty_list_are_neutral():
    way = Way(tags=("highway/primary",), nodes=(0, 1))
    assert way_color(way, compile_highlights([("cycleway", RED)])) == NEUTRAL
    assert way_color(way, []) == NEUTRAL
    assert NEUTRAL.as_tuple() == (1.0, 1.0, 1.0)


def test_way_colors_keeps_way_order():
    ways = [Way(tags=("a/x",), nodes=()), Way(tags=("b/y",), nodes=())]
    assert way_colors(ways, compile_highlights([("b/", BLUE)])) == [NEUTRAL, BLUE]


def test_bad_pattern_raises_with_details():
    with pytest.raises(HighlightPatternError) as ei:
        compile_highlights([("ok", RED), ("highway/(", BLUE)])
    assert ei.value.pattern == "highway/("
    assert ei.value.reason
    assert isinstance(ei.value, PathPlannerError)
