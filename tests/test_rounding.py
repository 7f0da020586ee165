import pytest
from hypothesis import given
from hypothesis import strategies as st

from tf2price.library.constants import ONE_REF
from tf2price.library.helpers import refined, scrap, weapon
from tf2price.library.rounding import Rounding, round_metal

metal_values = st.integers(min_value=-10**9, max_value=10**9)


@given(rounding=st.sampled_from(Rounding))
def test_zero_is_fixed_point(rounding):
    assert round_metal(0, rounding) == 0


@given(metal=metal_values, rounding=st.sampled_from(Rounding))
def test_rounding_is_idempotent(metal, rounding):
    once = round_metal(metal, rounding)
    assert round_metal(once, rounding) == once


@given(metal=metal_values)
def test_none_leaves_value_alone(metal):
    assert round_metal(metal, Rounding.NONE) == metal


@given(metal=metal_values)
def test_scrap_rounding(metal):
    if metal % 2 != 0:
        assert round_metal(metal, Rounding.UP_SCRAP) == metal + 1
        assert round_metal(metal, Rounding.DOWN_SCRAP) == metal - 1
    else:
        assert round_metal(metal, Rounding.UP_SCRAP) == metal
        assert round_metal(metal, Rounding.DOWN_SCRAP) == metal


@given(metal=metal_values)
def test_refined_lands_on_boundary(metal):
    rounded = round_metal(metal, Rounding.REFINED)
    assert rounded % ONE_REF == 0
    assert abs(rounded - metal) <= ONE_REF // 2


@given(metal=metal_values)
def test_up_and_down_refined_bracket_value(metal):
    up = round_metal(metal, Rounding.UP_REFINED)
    down = round_metal(metal, Rounding.DOWN_REFINED)
    assert up % ONE_REF == 0
    assert down % ONE_REF == 0
    assert down <= metal <= up
    assert up - down in (0, ONE_REF)


@pytest.mark.parametrize(
    "metal, rounding, expected",
    [
        (weapon(1), Rounding.UP_SCRAP, scrap(1)),
        (weapon(3), Rounding.DOWN_SCRAP, scrap(1)),
        (-weapon(3), Rounding.UP_SCRAP, -scrap(1)),
        (-weapon(3), Rounding.DOWN_SCRAP, -scrap(2)),
        (refined(1) + scrap(4), Rounding.REFINED, refined(1)),
        (refined(1) + ONE_REF // 2, Rounding.REFINED, refined(2)),
        (-refined(1) - ONE_REF // 2, Rounding.REFINED, -refined(1)),
        (-refined(2) - scrap(1), Rounding.REFINED, -refined(2)),
        (refined(1) + scrap(1), Rounding.UP_REFINED, refined(2)),
        (-refined(1) - scrap(1), Rounding.UP_REFINED, -refined(1)),
        (refined(1) + scrap(8), Rounding.DOWN_REFINED, refined(1)),
        (-refined(1) - scrap(1), Rounding.DOWN_REFINED, -refined(2)),
        (refined(3), Rounding.UP_REFINED, refined(3)),
        (-refined(3), Rounding.DOWN_REFINED, -refined(3)),
    ],
)
def test_rounds_metal(metal, rounding, expected):
    assert round_metal(metal, rounding) == expected


def test_rejects_unknown_rounding():
    with pytest.raises(TypeError):
        round_metal(5, "up")
