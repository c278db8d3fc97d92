"""
Dataset Service - Single writer over the knowledge base.

Owns the authoritative nodes, links and tag registry. Every mutation is
followed by a whole-record save through the storage port.
"""

import json
import logging
import uuid
from typing import List, Optional, Iterable, Tuple

from ..ports.store_port import StorePort
from ..domain.models import (
    Dataset, DatasetFormatError, KnowledgeNode, KnowledgeLink,
    seed_dataset, unique_tags,
)
from ..domain.enums import Quadrant
from ..config import STORAGE_KEY

logger = logging.getLogger(__name__)


class DatasetService:
    """
    Service for reading and mutating the knowledge base.

    Commands with unknown ids return False/None rather than raising.
    Persistence failures are logged and dropped.
    """

    def __init__(self, store: StorePort, key: str = STORAGE_KEY):
        """
        Initialize the dataset service.

        Args:
            store: Key-value storage adapter
            key: Key the dataset is saved under
        """
        self.store = store
        self.key = key
        self._data = Dataset()

    # ----------------------------------------------------------------
    # Loading / saving
    # ----------------------------------------------------------------

    def load(self) -> Dataset:
        """
        Load the dataset from storage.

        Falls back to the seed dataset when nothing is stored or the stored
        record cannot be decoded. Never raises.
        """
        try:
            raw = self.store.load(self.key)
        except Exception as e:
            logger.warning("Could not read stored dataset, using seed data: %s", e)
            raw = None

        if raw is None:
            logger.info("No stored dataset under %r, using seed data", self.key)
            self._data = seed_dataset()
            return self._data

        try:
            self._data = Dataset.from_dict(json.loads(raw))
        except (ValueError, DatasetFormatError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("Stored dataset is malformed, using seed data: %s", e)
            self._data = seed_dataset()
            return self._data

        logger.info(
            "Loaded dataset: %d nodes, %d links, %d tags",
            len(self._data.nodes), len(self._data.links), len(self._data.tags)
        )
        return self._data

    def _persist(self) -> None:
        try:
            self.store.save(self.key, json.dumps(self._data.to_dict()))
        except Exception as e:
            logger.warning("Failed to save dataset: %s", e)

    # ----------------------------------------------------------------
    # Read API
    # ----------------------------------------------------------------

    @property
    def nodes(self) -> List[KnowledgeNode]:
        return list(self._data.nodes)

    @property
    def links(self) -> List[KnowledgeLink]:
        return list(self._data.links)

    @property
    def tags(self) -> List[str]:
        return self._data.tags.as_list()

    def get_node(self, node_id: str) -> Optional[KnowledgeNode]:
        for node in self._data.nodes:
            if node.node_id == node_id:
                return node
        return None

    def links_for(self, node_id: str) -> List[KnowledgeLink]:
        """Get all links touching a node."""
        return [l for l in self._data.links if l.touches(node_id)]

    def neighbors(self, node_id: str) -> List[Tuple[KnowledgeLink, KnowledgeNode]]:
        """Get (link, other node) pairs for a node, in link order."""
        result = []
        for link in self.links_for(node_id):
            other_id = link.target if link.source == node_id else link.source
            other = self.get_node(other_id)
            if other is not None:
                result.append((link, other))
        return result

    # ----------------------------------------------------------------
    # Node commands
    # ----------------------------------------------------------------

    def add_node(
        self,
        label: str,
        description: str = "",
        quadrant: Quadrant = Quadrant.Q1,
        tags: Optional[Iterable[str]] = None,
    ) -> KnowledgeNode:
        """
        Add a node and merge its tags into the registry.

        Args:
            label: Node title (callers validate non-empty)
            description: Free text
            quadrant: Quadrant the node belongs to
            tags: Tags; stripped and de-duplicated

        Returns:
            The new node
        """
        node = KnowledgeNode(
            node_id=uuid.uuid4().hex,
            label=label.strip(),
            quadrant=Quadrant.parse(quadrant),
            description=description.strip(),
            tags=unique_tags(tags or []),
        )
        self._data.nodes.append(node)
        added = self._data.tags.merge(node.tags)
        if added:
            logger.debug("New tags registered: %s", added)

        logger.info("Added node %s (%s) in %s", node.node_id, node.label, node.quadrant.value)
        self._persist()
        return node

    def delete_node(self, node_id: str) -> bool:
        """
        Delete a node and every link touching it.

        Returns:
            True if the node existed
        """
        node = self.get_node(node_id)
        if node is None:
            return False

        before = len(self._data.links)
        self._data.nodes = [n for n in self._data.nodes if n.node_id != node_id]
        self._data.links = [l for l in self._data.links if not l.touches(node_id)]

        logger.info(
            "Deleted node %s (%s) and %d links",
            node_id, node.label, before - len(self._data.links)
        )
        self._persist()
        return True

    def edit_node(
        self,
        node_id: str,
        *,
        label: Optional[str] = None,
        description: Optional[str] = None,
        quadrant: Optional[Quadrant] = None,
        tags: Optional[Iterable[str]] = None,
    ) -> Optional[KnowledgeNode]:
        """
        Edit fields of an existing node. None leaves a field unchanged.

        Returns:
            The updated node, or None if it doesn't exist or the new label is empty
        """
        node = self.get_node(node_id)
        if node is None:
            return None
        if label is not None and not label.strip():
            return None

        if label is not None:
            node.label = label.strip()
        if description is not None:
            node.description = description.strip()
        if quadrant is not None:
            node.quadrant = Quadrant.parse(quadrant)
        if tags is not None:
            node.tags = unique_tags(tags)
            self._data.tags.merge(node.tags)

        logger.info("Edited node %s", node_id)
        self._persist()
        return node

    # ----------------------------------------------------------------
    # Link commands
    # ----------------------------------------------------------------

    def add_link(self, source: str, target: str) -> Optional[KnowledgeLink]:
        """
        Link two existing nodes.

        Returns:
            The new link, or None for self-links, unknown endpoints and
            duplicates (in either direction)
        """
        if source == target:
            return None
        if self.get_node(source) is None or self.get_node(target) is None:
            return None
        if any(l.connects(source, target) for l in self._data.links):
            return None

        link = KnowledgeLink(link_id=uuid.uuid4().hex, source=source, target=target)
        self._data.links.append(link)
        logger.info("Linked %s -> %s", source, target)
        self._persist()
        return link

    def remove_link(self, link_id: str) -> bool:
        before = len(self._data.links)
        self._data.links = [l for l in self._data.links if l.link_id != link_id]
        if len(self._data.links) == before:
            return False

        logger.info("Removed link %s", link_id)
        self._persist()
        return True
