"""
Tests for the HRC scenario importer.
"""

import json
import logging

import pytest
from pokerrange.core.errors import HrcFormatError
from pokerrange.importers.hrc import (
    build_ranges, parse_action, parse_hrc_json, parse_villain, validate_hrc_file,
)
from pokerrange.importers.schemas import HrcSpot


def spot_by_name(result, name):
    return next(spot for spot in result.spots if spot.name == name)


class TestSpotNames:
    """Tests for villain and action extraction."""

    @pytest.mark.parametrize("name,villain", [
        ("EP vs BB 3Bet", "BB"),
        ("CO vs UTG RFI", "UTG"),
        ("EP RFI", "Unknown"),
        ("", "Unknown"),
    ])
    def test_parse_villain(self, name, villain):
        """Test the villain position."""
        assert parse_villain(name) == villain

    @pytest.mark.parametrize("name,action", [
        ("CO vs BB 3Bet", "3Bet"),
        ("EP RFI", "RFI"),
        ("BTN vs SB 4Bet", "4Bet"),
        ("SB limp", "RFI"),
    ])
    def test_parse_action(self, name, action):
        """Test the primary action."""
        assert parse_action(name) == action


class TestParseHrcJson:
    """Tests for parse_hrc_json."""

    def test_summary(self, hrc_data):
        """Test spot counts and messages."""
        result = parse_hrc_json(hrc_data)
        assert result.summary.total == 3
        assert result.summary.imported == 2
        assert result.summary.skipped == 1
        assert result.summary.errors == ['Spot "Broken": missing position']

    def test_rfi_spot(self, hrc_data):
        """Test ranges for each action of a spot."""
        spot = spot_by_name(parse_hrc_json(hrc_data), "EP RFI")
        assert spot.position == "EP"
        assert spot.villain == "Unknown"
        assert spot.action == "RFI"
        assert [r.condition for r in spot.ranges] == ["Fold", "Raise"]

        fold, raise_ = spot.ranges
        assert fold.notation == "AKs:0.25,72o"
        assert raise_.notation == "AA-KK,AKs:0.75"

    def test_hand_frequencies(self, hrc_data):
        """Test per-hand frequency, weight and EV."""
        spot = spot_by_name(parse_hrc_json(hrc_data), "EP RFI")
        raise_ = spot.ranges[1]
        assert set(raise_.range_data) == {"AA", "KK", "AKs"}
        assert raise_.range_data["AA"].frequency == 1.0
        assert raise_.range_data["AA"].ev == 2.5
        assert raise_.range_data["AKs"].frequency == 0.75
        assert raise_.range_data["AKs"].ev is None
        assert raise_.range_data["KK"].weight == 1.0

    def test_range_stats(self, hrc_data):
        """Test stats of an action range."""
        spot = spot_by_name(parse_hrc_json(hrc_data), "EP RFI")
        stats = spot.ranges[1].stats
        assert stats["selected_hands"] == 3
        assert stats["selected_combos"] == 15

    def test_spot_name_and_villain(self, hrc_data):
        """Test spot_name overrides the key."""
        spot = spot_by_name(parse_hrc_json(hrc_data), "CO facing BB 3-bet")
        assert spot.villain == "BB"
        assert spot.action == "3Bet"
        assert [(r.condition, r.notation) for r in spot.ranges] == [
            ("Call", "QQ,AKo:0.5"),
            ("4-Bet", "AKo:0.5"),
        ]

    def test_unknown_action_code_kept(self, hrc_data):
        """Test action codes without a label."""
        hrc_data["spots"]["CO vs BB 3Bet"]["actions"][0]["type"] = "L"
        spot = spot_by_name(parse_hrc_json(hrc_data), "CO facing BB 3-bet")
        assert spot.ranges[0].condition == "L"

    def test_hand_keys_canonicalized(self, hrc_data):
        """Test hand keys in any rank order."""
        hrc_data["spots"]["EP RFI"]["hands"] = {"KAs": {"played": [0, 1]}}
        spot = spot_by_name(parse_hrc_json(hrc_data), "EP RFI")
        assert list(spot.ranges[0].range_data) == ["AKs"]
        assert [r.condition for r in spot.ranges] == ["Raise"]

    @pytest.mark.parametrize("hands,reason", [
        ({"XYZ": {"played": [1, 0]}}, "Invalid rank"),
        ({"AK": {"played": [1, 0]}}, "qualifier"),
        ({"AA": {"played": [1.5, 0]}}, "1.5"),
    ])
    def test_bad_hand_skips_spot(self, hrc_data, hands, reason):
        """Test a bad hand skips only its spot."""
        hrc_data["spots"]["EP RFI"]["hands"] = hands
        result = parse_hrc_json(hrc_data)
        assert result.summary.imported == 1
        assert result.summary.skipped == 2
        assert any(e.startswith('Spot "EP RFI"') and reason in e for e in result.summary.errors)

    def test_invalid_hand_weight(self, hrc_data):
        """Test schema errors name the field."""
        hrc_data["spots"]["EP RFI"]["hands"]["AA"]["weight"] = 2
        result = parse_hrc_json(hrc_data)
        assert any(
            e.startswith('Spot "EP RFI": invalid hands.AA.weight') for e in result.summary.errors
        )

    def test_skipped_spot_logged(self, hrc_data, caplog):
        """Test skipped spots are logged."""
        with caplog.at_level(logging.WARNING, logger="pokerrange.importers.hrc"):
            parse_hrc_json(hrc_data)
        assert 'Skipping HRC spot: Spot "Broken"' in caplog.text

    def test_no_spots(self):
        """Test an export without spots."""
        result = parse_hrc_json({"metadata": {"format": "6max"}, "spots": {}})
        assert result.spots == []
        assert result.summary.total == 0

    @pytest.mark.parametrize("data", [
        {"metadata": {"format": "9max"}, "spots": {}},
        {"spots": {}},
        {"metadata": {"format": "6max"}},
        {"metadata": {"format": "6max"}, "spots": []},
    ])
    def test_bad_document(self, data):
        """Test malformed documents."""
        with pytest.raises(HrcFormatError):
            parse_hrc_json(data)


class TestBuildRanges:
    """Tests for build_ranges."""

    def test_action_without_hands_omitted(self):
        """Test actions no hand takes."""
        spot = HrcSpot.model_validate({
            "position": "BTN",
            "actions": [{"type": "F"}, {"type": "R"}, {"type": "A"}],
            "hands": {"AA": {"played": [0, 1, 0]}, "T9s": {"played": [0.5, 0.5]}},
        })
        ranges = build_ranges(spot)
        assert [r.condition for r in ranges] == ["Fold", "Raise"]
        assert ranges[0].notation == "T9s:0.5"
        assert ranges[1].notation == "AA,T9s:0.5"

    def test_solver_frequency_kept_exactly(self):
        """Test many-digit frequencies reach the notation unrounded."""
        spot = HrcSpot.model_validate({
            "position": "CO",
            "actions": [{"type": "R"}],
            "hands": {"A5s": {"played": [0.4567891]}},
        })
        assert build_ranges(spot)[0].notation == "A5s:0.4567891"

    def test_hand_without_frequencies_ignored(self):
        """Test hands without played data."""
        spot = HrcSpot.model_validate({
            "position": "SB",
            "actions": [{"type": "X"}],
            "hands": {"22": {}},
        })
        assert build_ranges(spot) == []


class TestValidateHrcFile:
    """Tests for upload validation."""

    def test_valid(self, hrc_data):
        """Test a well-formed upload."""
        data = validate_hrc_file(json.dumps(hrc_data).encode())
        assert data == hrc_data

    def test_too_large(self):
        """Test the size limit."""
        with pytest.raises(HrcFormatError, match="too large"):
            validate_hrc_file(b" " * (10 * 1024 * 1024 + 1))

    @pytest.mark.parametrize("raw", [b"{not json", b"\xff\xfe\x00", b"[]", b'"6max"'])
    def test_not_a_json_object(self, raw):
        """Test payloads that are not a JSON object."""
        with pytest.raises(HrcFormatError):
            validate_hrc_file(raw)

    def test_wrong_format(self):
        """Test exports that are not 6max."""
        raw = json.dumps({"metadata": {"format": "headsup"}, "spots": {}}).encode()
        with pytest.raises(HrcFormatError, match="6max"):
            validate_hrc_file(raw)

    def test_missing_spots(self):
        """Test exports without spots."""
        raw = json.dumps({"metadata": {"format": "6max"}}).encode()
        with pytest.raises(HrcFormatError, match="spots"):
            validate_hrc_file(raw)

    def test_too_many_spots(self):
        """Test the spot limit."""
        spots = {f"spot {i}": {} for i in range(5001)}
        raw = json.dumps({"metadata": {"format": "6max"}, "spots": spots}).encode()
        with pytest.raises(HrcFormatError, match="Too many spots"):
            validate_hrc_file(raw)
