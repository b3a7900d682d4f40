"""Tests for sector resolution and the elliptical radius formula."""

import math

import pytest

from stat_plotter.engine.geometry import (
    SECTORS,
    ellipse_radius,
    governing_axes,
    landmark_angle,
    normalize_angle,
    sector_containing,
    sector_for_pair,
    sector_midpoint,
    sector_of,
)
from stat_plotter.models.constants import TAU, Axis


def _deg(d: float) -> float:
    return math.radians(d)


# --- ellipse_radius ---

@pytest.mark.parametrize("v", [1.0, 10.0, 40.0, 55.5, 100.0])
@pytest.mark.parametrize("t", [0.0, 0.1, 0.25, 0.5, 0.9, 1.0])
def test_equal_values_trace_a_circle(v, t):
    assert ellipse_radius(v, v, t) == pytest.approx(v)


@pytest.mark.parametrize("v1,v2", [(100.0, 10.0), (10.0, 100.0), (40.0, 75.0), (3.0, 0.5)])
def test_endpoints_match_governing_values(v1, v2):
    assert ellipse_radius(v1, v2, 0.0) == pytest.approx(v1)
    assert ellipse_radius(v1, v2, 1.0) == pytest.approx(v2)


@pytest.mark.parametrize("t", [0.0, 0.3, 0.5, 1.0])
def test_zero_values_give_zero(t):
    assert ellipse_radius(0.0, 0.0, t) == 0.0


def test_both_below_one_is_degenerate():
    assert ellipse_radius(0.9, 0.5, 0.5) == 0.0


def test_one_value_at_one_is_not_degenerate():
    assert ellipse_radius(1.0, 0.5, 0.0) == pytest.approx(1.0)


def test_interpolation_is_monotone_between_endpoints():
    samples = [ellipse_radius(100.0, 10.0, i / 50) for i in range(51)]
    for a, b in zip(samples, samples[1:]):
        assert b <= a + 1e-9
    assert all(10.0 - 1e-9 <= r <= 100.0 + 1e-9 for r in samples)


def test_interpolation_is_elliptical_not_linear():
    # Quarter-ellipse with semi-axes 100 and 10 stays close to the short
    # semi-axis at the midpoint, well below the 55 a linear blend gives.
    mid = ellipse_radius(100.0, 10.0, 0.5)
    assert mid == pytest.approx(1000.0 / math.sqrt(5050.0))
    assert mid < 55.0


def test_radius_grows_with_either_value():
    base = ellipse_radius(30.0, 50.0, 0.4)
    assert ellipse_radius(35.0, 50.0, 0.4) > base
    assert ellipse_radius(30.0, 55.0, 0.4) > base


# --- sector_of ---

def test_sector_widths_are_90_135_135():
    widths = [round(math.degrees(s.width), 9) for s in SECTORS]
    assert widths == [90.0, 135.0, 135.0]
    assert sum(s.width for s in SECTORS) == pytest.approx(TAU)


def test_sector_pairs_and_order():
    assert [(s.v1, s.v2) for s in SECTORS] == [
        (Axis.DEXTERITY, Axis.STRENGTH),
        (Axis.STRENGTH, Axis.INTELLIGENCE),
        (Axis.INTELLIGENCE, Axis.DEXTERITY),
    ]


def test_every_angle_belongs_to_exactly_one_sector():
    for i in range(3600):
        angle = _deg(i / 10)
        owners = [s for s in SECTORS if s.contains(angle)]
        assert len(owners) == 1, f"{i / 10} deg owned by {owners}"
        assert sector_containing(angle) is owners[0]


@pytest.mark.parametrize("deg,expected", [
    (45.0, (Axis.DEXTERITY, Axis.STRENGTH, 0.0)),
    (90.0, (Axis.DEXTERITY, Axis.STRENGTH, 0.5)),
    (135.0, (Axis.STRENGTH, Axis.INTELLIGENCE, 0.0)),
    (202.5, (Axis.STRENGTH, Axis.INTELLIGENCE, 0.5)),
    (270.0, (Axis.INTELLIGENCE, Axis.DEXTERITY, 0.0)),
    (337.5, (Axis.INTELLIGENCE, Axis.DEXTERITY, 0.5)),
    (0.0, (Axis.INTELLIGENCE, Axis.DEXTERITY, 90.0 / 135.0)),
])
def test_sector_of_known_angles(deg, expected):
    v1, v2, t = sector_of(_deg(deg))
    assert (v1, v2) == expected[:2]
    assert t == pytest.approx(expected[2], abs=1e-12)


def test_landmark_boundaries_belong_to_the_low_edge_sector():
    for axis in Axis:
        v1, _, t = sector_of(landmark_angle(axis))
        assert v1 == axis
        assert t == pytest.approx(0.0, abs=1e-12)


def test_t_stays_in_unit_interval():
    for i in range(720):
        _, _, t = sector_of(_deg(i / 2))
        assert 0.0 <= t < 1.0


@pytest.mark.parametrize("offset", [-TAU, TAU, 2 * TAU, -3 * TAU])
def test_sector_of_normalizes_angles(offset):
    base = sector_of(_deg(100.0))
    shifted = sector_of(_deg(100.0) + offset)
    assert shifted[:2] == base[:2]
    assert shifted[2] == pytest.approx(base[2])


def test_normalize_angle_range():
    assert normalize_angle(-1e-18) == pytest.approx(0.0, abs=1e-15)
    assert 0.0 <= normalize_angle(-1e-18) < TAU
    assert normalize_angle(TAU) == 0.0
    assert normalize_angle(-_deg(90.0)) == pytest.approx(_deg(270.0))


# --- helpers ---

def test_sector_midpoints():
    mids = sorted(math.degrees(sector_midpoint(s)) for s in SECTORS)
    assert mids == pytest.approx([90.0, 202.5, 337.5])


def test_sector_for_pair_is_order_independent():
    assert sector_for_pair(Axis.STRENGTH, Axis.DEXTERITY) is SECTORS[0]
    assert sector_for_pair(Axis.DEXTERITY, Axis.STRENGTH) is SECTORS[0]
    assert sector_for_pair(Axis.DEXTERITY, Axis.INTELLIGENCE) is SECTORS[2]


def test_sector_for_pair_rejects_same_axis():
    with pytest.raises(ValueError, match="No sector"):
        sector_for_pair(Axis.STRENGTH, Axis.STRENGTH)


def test_governing_axes_near_landmark():
    assert governing_axes(_deg(133.0)) == (Axis.STRENGTH,)
    assert governing_axes(_deg(47.0)) == (Axis.DEXTERITY,)
    assert governing_axes(_deg(273.0)) == (Axis.INTELLIGENCE,)


def test_governing_axes_between_landmarks():
    assert governing_axes(_deg(90.0)) == (Axis.DEXTERITY, Axis.STRENGTH)
    assert governing_axes(_deg(200.0)) == (Axis.STRENGTH, Axis.INTELLIGENCE)
    assert governing_axes(_deg(10.0)) == (Axis.INTELLIGENCE, Axis.DEXTERITY)
