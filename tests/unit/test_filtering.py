"""
Tests for visible-set filtering.
"""

from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from knowmap_core.domain.enums import Quadrant
from knowmap_core.domain.models import FilterState, KnowledgeLink, KnowledgeNode, seed_dataset
from knowmap_core.services.filtering import compute_visible_set


def _nodes():
    return [
        KnowledgeNode("a", "React Hooks", Quadrant.Q1, tags=["dev", "frontend"]),
        KnowledgeNode("b", "Rust Ownership", Quadrant.Q2, tags=["dev"]),
        KnowledgeNode("c", "Sourdough", Quadrant.Q3, tags=["cooking"]),
        KnowledgeNode("d", "Dark Matter", Quadrant.Q4, tags=[]),
    ]


def _links():
    return [
        KnowledgeLink("ab", "a", "b"),
        KnowledgeLink("bc", "b", "c"),
        KnowledgeLink("dx", "d", "missing"),
    ]


def _ids(visible):
    return [n.node_id for n in visible.nodes]


class TestComputeVisibleSet:
    """Quadrant, tag and search predicates are a conjunction."""

    def test_no_filter_keeps_everything_but_dangling_links(self):
        """Verify an empty filter drops only links with a missing endpoint."""
        visible = compute_visible_set(_nodes(), _links(), FilterState())
        assert _ids(visible) == ["a", "b", "c", "d"]
        assert [l.link_id for l in visible.links] == ["ab", "bc"]

    def test_hidden_quadrant(self):
        """Verify hiding a quadrant removes its nodes and their links."""
        state = FilterState()
        state.visible_quadrants[Quadrant.Q2] = False
        visible = compute_visible_set(_nodes(), _links(), state)
        assert _ids(visible) == ["a", "c", "d"]
        # Both links touch b
        assert visible.links == []

    def test_tag_filter_matches_any_selected_tag(self):
        """Verify a node needs just one of the selected tags."""
        state = FilterState(tags={"frontend", "cooking"})
        visible = compute_visible_set(_nodes(), _links(), state)
        assert _ids(visible) == ["a", "c"]

    def test_search_is_case_insensitive_substring(self):
        """Verify search matches label substrings ignoring case."""
        state = FilterState(search="rEaCt")
        visible = compute_visible_set(_nodes(), _links(), state)
        assert _ids(visible) == ["a"]

    def test_search_text_is_not_trimmed(self):
        """Verify trailing spaces in the search text are part of the match."""
        seed = seed_dataset()
        visible = compute_visible_set(seed.nodes, seed.links, FilterState(search="Life "))
        assert _ids(visible) == []
        visible = compute_visible_set(seed.nodes, seed.links, FilterState(search="of Life"))
        assert _ids(visible) == ["4"]

    def test_whitespace_search_still_filters(self):
        """Verify a search of one space keeps only labels containing a space."""
        visible = compute_visible_set(_nodes(), _links(), FilterState(search=" "))
        # Only multi-word labels contain a space
        assert _ids(visible) == ["a", "b", "d"]

    def test_conjunction(self):
        """Verify quadrant, tag and search predicates must all hold."""
        state = FilterState(tags={"dev"}, search="r")
        state.visible_quadrants[Quadrant.Q1] = False
        visible = compute_visible_set(_nodes(), _links(), state)
        assert _ids(visible) == ["b"]

    def test_untagged_node_hidden_by_tag_filter(self):
        """Verify untagged nodes drop out once a tag is selected."""
        visible = compute_visible_set(_nodes(), _links(), FilterState(tags={"dev"}))
        assert "d" not in visible.node_ids

    def test_empty_dataset(self):
        """Verify an empty dataset yields an empty visible set."""
        visible = compute_visible_set([], [], FilterState())
        assert len(visible) == 0
        assert visible.links == []
