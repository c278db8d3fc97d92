"""
Visible-set filtering.

Pure function from (dataset, filter state) to the subset that is laid out
and drawn. Recomputed from scratch on every change.
"""

from typing import List

from ..domain.models import KnowledgeNode, KnowledgeLink, FilterState, VisibleSet


def node_matches(node: KnowledgeNode, state: FilterState) -> bool:
    """Check the quadrant, tag and search predicates (all must hold)."""
    if not state.is_quadrant_visible(node.quadrant):
        return False
    if state.tags and not node.has_any_tag(state.tags):
        return False
    query = state.search.lower()
    if query and query not in node.label.lower():
        return False
    return True


def compute_visible_set(
    nodes: List[KnowledgeNode],
    links: List[KnowledgeLink],
    filter_state: FilterState,
) -> VisibleSet:
    """
    Compute the visible set.

    Args:
        nodes: All nodes in the dataset
        links: All links in the dataset
        filter_state: Current filter predicates

    Returns:
        VisibleSet with matching nodes and links whose endpoints are both visible
    """
    visible_nodes = [n for n in nodes if node_matches(n, filter_state)]
    ids = {n.node_id for n in visible_nodes}
    # Dangling links (missing endpoints) drop out here too
    visible_links = [l for l in links if l.source in ids and l.target in ids]
    return VisibleSet(nodes=visible_nodes, links=visible_links)
