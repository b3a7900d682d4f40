import sys

import pytest

from scripts.dump_catalog import envelope_headroom, format_perk
from scripts.explore_build import (
    _parse_adjustment,
    _parse_assignment,
    apply_adjustments,
    apply_assignments,
    main,
)
from stat_plotter.catalog.generator import generate_perk_catalog, landmark_perks
from stat_plotter.engine.build_engine import BuildEngine
from stat_plotter.models.constants import Axis


def test_parse_adjustment_with_and_without_magnitude():
    assert _parse_adjustment("str+5") == (Axis.STRENGTH, 1.0, 5.0)
    assert _parse_adjustment(" dex - 2.5 ") == (Axis.DEXTERITY, -1.0, 2.5)
    assert _parse_adjustment("intelligence+") == (Axis.INTELLIGENCE, 1.0, None)


@pytest.mark.parametrize("text", ["str", "str*5", "+5", "luck+5"])
def test_parse_adjustment_rejects_garbage(text):
    with pytest.raises(ValueError):
        _parse_adjustment(text)


def test_parse_assignment():
    assert _parse_assignment("Strength=40") == (Axis.STRENGTH, 40.0)
    with pytest.raises(ValueError, match="Assignment"):
        _parse_assignment("strength:40")
    with pytest.raises(ValueError, match="Invalid value"):
        _parse_assignment("strength=lots")


def test_apply_adjustments_reports_noops():
    engine = BuildEngine()
    applied = apply_adjustments(engine, ["str+", "str+20", "str-", "dex-"])
    assert applied == [True, True, True, False]
    assert engine.value(Axis.STRENGTH) == 30.0


def test_apply_assignments_fills_floor():
    engine = BuildEngine()
    apply_assignments(engine, ["int=70"])
    assert engine.state.values == {
        Axis.STRENGTH: 10.0,
        Axis.DEXTERITY: 10.0,
        Axis.INTELLIGENCE: 70.0,
    }
    with pytest.raises(ValueError, match="budget"):
        apply_assignments(engine, ["int=90", "str=30"])
    with pytest.raises(ValueError, match="out of range"):
        apply_assignments(engine, ["str=nan"])


def test_format_perk_names_sector_pair():
    warrior = landmark_perks()[0]
    line = format_perk(warrior)
    assert line.startswith("Warrior")
    assert "135.0 deg" in line
    assert "STR->INT" in line


def test_envelope_headroom_is_never_negative():
    for perk in generate_perk_catalog(seed=8):
        if perk.tier != "supernova":
            assert envelope_headroom(perk) >= -1e-9


def test_main_rejects_zero_samples(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["explore_build.py", "--seed", "1", "--samples", "0"])
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1
    assert "Error: --samples must be at least 1" in capsys.readouterr().out
