"""
Tests for the quadrant model and the placement classifier.
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from knowmap_core.domain.enums import Quadrant
from knowmap_core.domain.quadrants import (
    QUADRANTS, all_descriptors, classify_point, get_descriptor, validate_partition,
)


class TestDescriptors:
    """The four descriptors partition the plane."""

    def test_one_descriptor_per_sign_pair(self):
        """Verify the four sign pairs are distinct and exhaustive."""
        signs = sorted((d.x_dir, d.y_dir) for d in all_descriptors())
        assert signs == [(-1, -1), (-1, 1), (1, -1), (1, 1)]

    def test_validate_partition_passes(self):
        """Verify the import-time partition check accepts the table."""
        validate_partition()

    def test_display_order(self):
        """Verify descriptors come in grid order."""
        order = [d.quadrant for d in all_descriptors()]
        assert order == [Quadrant.Q2, Quadrant.Q1, Quadrant.Q4, Quadrant.Q3]

    def test_labels_and_colors(self):
        """Verify display labels and colors."""
        assert get_descriptor(Quadrant.Q1).label == "Common Knowledge"
        assert get_descriptor(Quadrant.Q2).label == "Learning Zone"
        assert get_descriptor(Quadrant.Q3).label == "My Insights"
        assert get_descriptor(Quadrant.Q4).label == "The Unknown"
        assert get_descriptor(Quadrant.Q2).color == "#3b82f6"
        assert get_descriptor(Quadrant.Q3).background == "#fffbeb"

    def test_lookup_by_string_id(self):
        """Verify lookup accepts a plain string id."""
        assert get_descriptor("q4") is QUADRANTS[Quadrant.Q4]

    def test_center_follows_directions(self):
        """Verify centering targets follow the sign pair."""
        assert get_descriptor(Quadrant.Q2).center(250) == (-250, -250)
        assert get_descriptor(Quadrant.Q3).center(250) == (250, 250)


class TestClassifyPoint:
    """Every world point maps to exactly one quadrant."""

    @pytest.mark.parametrize("x, y, expected", [
        (-5, -5, Quadrant.Q2),
        (5, -5, Quadrant.Q1),
        (-5, 5, Quadrant.Q4),
        (5, 5, Quadrant.Q3),
    ])
    def test_open_quadrants(self, x, y, expected):
        """Verify points off the axes land in their sign quadrant."""
        assert classify_point(x, y) == expected

    def test_origin_is_non_negative(self):
        """Verify the origin counts as non-negative on both axes."""
        assert classify_point(0, 0) == Quadrant.Q3

    def test_axes_go_to_non_negative_side(self):
        """Verify points on an axis resolve to the non-negative side."""
        assert classify_point(0, -10) == Quadrant.Q1
        assert classify_point(-10, 0) == Quadrant.Q4
        assert classify_point(10, 0) == Quadrant.Q3
        assert classify_point(0, 10) == Quadrant.Q3

    def test_classify_matches_descriptor_signs(self):
        """Verify the classifier agrees with every descriptor."""
        for d in all_descriptors():
            assert classify_point(d.x_dir * 0.5, d.y_dir * 0.5) == d.quadrant


class TestQuadrantParse:
    """Quadrant.parse tolerates case, whitespace and enum members."""

    def test_parse_string(self):
        """Verify case and whitespace are ignored."""
        assert Quadrant.parse(" Q1 ") == Quadrant.Q1

    def test_parse_member(self):
        """Verify members pass through unchanged."""
        assert Quadrant.parse(Quadrant.Q3) is Quadrant.Q3

    def test_parse_unknown(self):
        """Verify unknown ids raise ValueError."""
        with pytest.raises(ValueError):
            Quadrant.parse("q5")
