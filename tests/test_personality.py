"""Tests for teammate/personality.py — score bands and role parsing."""

import pytest

from teammate.errors import DataError
from teammate.personality import (
    GAME_ROLES,
    PERSONALITY_BANDS,
    PERSONALITY_DISPLAY_NAMES,
    PERSONALITY_TYPES,
    ROLE_DISPLAY_NAMES,
    classify,
    parse_game_role,
)


class TestClassify:
    def test_thinker_band(self):
        assert classify(50) == "thinker"
        assert classify(69) == "thinker"

    def test_balanced_band(self):
        assert classify(70) == "balanced"
        assert classify(89) == "balanced"

    def test_leader_band(self):
        assert classify(90) == "leader"
        assert classify(100) == "leader"

    def test_deterministic(self):
        for score in range(50, 101):
            assert classify(score) == classify(score)

    def test_total_over_domain(self):
        for score in range(50, 101):
            assert classify(score) in PERSONALITY_TYPES

    @pytest.mark.parametrize("score", [49, 101, 0, -5])
    def test_out_of_range_raises(self, score):
        with pytest.raises(DataError, match="between 50-100"):
            classify(score)


class TestBands:
    def test_bands_cover_domain_without_overlap(self):
        covered: list[int] = []
        for low, high in PERSONALITY_BANDS.values():
            covered.extend(range(low, high + 1))
        assert sorted(covered) == list(range(50, 101))

    def test_bands_agree_with_classify(self):
        for ptype, (low, high) in PERSONALITY_BANDS.items():
            assert classify(low) == ptype
            assert classify(high) == ptype

    def test_every_type_has_display_name(self):
        assert set(PERSONALITY_DISPLAY_NAMES) == set(PERSONALITY_TYPES)


class TestParseGameRole:
    def test_enum_style(self):
        assert parse_game_role("ALL_ROUNDER") == "all_rounder"
        assert parse_game_role("STRATEGIST") == "strategist"

    def test_display_style(self):
        assert parse_game_role("All-Rounder") == "all_rounder"
        assert parse_game_role(" Defender ") == "defender"

    def test_space_separated(self):
        assert parse_game_role("all rounder") == "all_rounder"

    def test_unknown_role_raises(self):
        with pytest.raises(DataError, match="Invalid role"):
            parse_game_role("Goalkeeper")

    def test_every_role_has_display_name(self):
        assert set(ROLE_DISPLAY_NAMES) == set(GAME_ROLES)
        assert len(GAME_ROLES) == 5
