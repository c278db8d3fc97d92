"""
Domain models (DTOs) for KnowMap.

These are pure data classes with no storage or UI dependencies.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Iterable, Set

from .enums import Quadrant


class DatasetFormatError(ValueError):
    """Persisted state could not be decoded into a Dataset."""


def unique_tags(tags: Iterable[str]) -> List[str]:
    """Strip, drop empties and de-duplicate while keeping first-seen order."""
    seen: List[str] = []
    for tag in tags:
        tag = str(tag).strip()
        if tag and tag not in seen:
            seen.append(tag)
    return seen


@dataclass
class KnowledgeNode:
    """An item on the knowledge map (authoritative record)."""
    node_id: str
    label: str
    quadrant: Quadrant
    description: str = ""
    tags: List[str] = field(default_factory=list)

    @property
    def initial(self) -> str:
        """Upper-case first letter of the label, used as the node glyph."""
        return self.label[:1].upper()

    def has_any_tag(self, tags: Set[str]) -> bool:
        return any(t in tags for t in self.tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.node_id,
            "label": self.label,
            "description": self.description,
            "quadrant": self.quadrant.value,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeNode":
        try:
            return cls(
                node_id=str(data["id"]),
                label=str(data["label"]),
                quadrant=Quadrant.parse(data["quadrant"]),
                description=str(data.get("description") or ""),
                tags=unique_tags(data.get("tags") or []),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DatasetFormatError(f"Invalid node record: {data!r}") from e


@dataclass
class KnowledgeLink:
    """An undirected relationship between two nodes."""
    link_id: str
    source: str     # node_id
    target: str     # node_id

    def touches(self, node_id: str) -> bool:
        return self.source == node_id or self.target == node_id

    def connects(self, a: str, b: str) -> bool:
        return {self.source, self.target} == {a, b}

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.link_id, "source": self.source, "target": self.target}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KnowledgeLink":
        try:
            return cls(
                link_id=str(data["id"]),
                source=str(data["source"]),
                target=str(data["target"]),
            )
        except (KeyError, TypeError) as e:
            raise DatasetFormatError(f"Invalid link record: {data!r}") from e


class TagRegistry:
    """
    Ordered set of every tag ever used.

    Grows monotonically; tags are never removed when the last node using
    them is deleted.
    """

    def __init__(self, tags: Optional[Iterable[str]] = None):
        self._tags: List[str] = unique_tags(tags or [])

    def merge(self, tags: Iterable[str]) -> List[str]:
        """Add unseen tags. Returns the tags that were actually new."""
        added = []
        for tag in unique_tags(tags):
            if tag not in self._tags:
                self._tags.append(tag)
                added.append(tag)
        return added

    def __contains__(self, tag: str) -> bool:
        return tag in self._tags

    def __iter__(self):
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def as_list(self) -> List[str]:
        return list(self._tags)


@dataclass
class Dataset:
    """The full knowledge base: nodes, links and the tag registry."""
    nodes: List[KnowledgeNode] = field(default_factory=list)
    links: List[KnowledgeLink] = field(default_factory=list)
    tags: TagRegistry = field(default_factory=TagRegistry)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "links": [l.to_dict() for l in self.links],
            "tags": self.tags.as_list(),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Dataset":
        if not isinstance(data, dict):
            raise DatasetFormatError(f"Expected an object, got {type(data).__name__}")

        raw_nodes = data.get("nodes")
        raw_links = data.get("links", [])
        raw_tags = data.get("tags", [])
        if not isinstance(raw_nodes, list) or not isinstance(raw_links, list) \
                or not isinstance(raw_tags, list):
            raise DatasetFormatError("'nodes', 'links' and 'tags' must be lists")

        nodes = [KnowledgeNode.from_dict(n) for n in raw_nodes]
        links = [KnowledgeLink.from_dict(l) for l in raw_links]

        # Registry always covers tags in use, even if the stored list lagged
        registry = TagRegistry(raw_tags)
        for node in nodes:
            registry.merge(node.tags)

        return cls(nodes=nodes, links=links, tags=registry)


@dataclass
class FilterState:
    """Filter predicates for the visible set."""
    visible_quadrants: Dict[Quadrant, bool] = field(
        default_factory=lambda: {q: True for q in Quadrant}
    )
    tags: Set[str] = field(default_factory=set)   # Empty = no tag filtering
    search: str = ""                               # "" = no search filtering; matched verbatim

    def is_active(self) -> bool:
        """Check if any predicate restricts the visible set."""
        return (
            not all(self.visible_quadrants.get(q, True) for q in Quadrant)
            or bool(self.tags)
            or bool(self.search)
        )

    def is_quadrant_visible(self, quadrant: Quadrant) -> bool:
        return self.visible_quadrants.get(quadrant, True)

    def copy(self) -> "FilterState":
        return FilterState(
            visible_quadrants=dict(self.visible_quadrants),
            tags=set(self.tags),
            search=self.search,
        )


@dataclass
class VisibleSet:
    """Filtered subset of the dataset eligible for layout and rendering."""
    nodes: List[KnowledgeNode] = field(default_factory=list)
    links: List[KnowledgeLink] = field(default_factory=list)

    @property
    def node_ids(self) -> Set[str]:
        return {n.node_id for n in self.nodes}

    def __len__(self) -> int:
        return len(self.nodes)


def seed_dataset() -> Dataset:
    """Built-in dataset used on first run and when stored state is unreadable."""
    nodes = [
        KnowledgeNode("1", "React Basics", Quadrant.Q1,
                      "Component lifecycle, hooks", ["dev", "frontend"]),
        KnowledgeNode("2", "Quantum Physics", Quadrant.Q2,
                      "General understanding of entanglement", ["science"]),
        KnowledgeNode("3", "Grandma's Cookie Recipe", Quadrant.Q3,
                      "The secret ingredient is nutmeg", ["personal", "cooking"]),
        KnowledgeNode("4", "Meaning of Life", Quadrant.Q4,
                      "Still figuring this one out", ["philosophy"]),
    ]
    tags = TagRegistry(["dev", "frontend", "science", "personal", "cooking", "philosophy"])
    return Dataset(nodes=nodes, links=[], tags=tags)
