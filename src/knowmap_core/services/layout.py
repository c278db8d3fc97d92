"""
Force Simulation - Incremental quadrant-clustered layout.

One simulation run per visible set. The caller drives it one tick at a time
with step() (the app does this from a QTimer), so layout never blocks input.

Forces per tick:
1. Link springs between linked nodes
2. Many-body repulsion between every pair of nodes
3. Collision so node circles don't overlap
4. Quadrant centering, pulling each node toward its quadrant's target
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..config import LayoutSettings
from ..domain.enums import PinState, Quadrant
from ..domain.models import VisibleSet
from ..domain.quadrants import get_descriptor

logger = logging.getLogger(__name__)

# Golden-angle increment for the phyllotaxis seed spiral
_INITIAL_ANGLE = math.pi * (3 - math.sqrt(5))


@dataclass
class SimNode:
    """Working copy of a node inside one simulation run."""
    node_id: str
    quadrant: Quadrant
    index: int
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    fx: Optional[float] = None   # Pin target (set while dragged)
    fy: Optional[float] = None
    state: PinState = PinState.FREE

    @property
    def is_pinned(self) -> bool:
        return self.fx is not None


class ForceSimulation:
    """
    Cooperative force-directed layout over a visible set.

    Alpha ("temperature") moves toward alpha_target by alpha_decay each tick
    and scales every force. The run settles once alpha drops below
    alpha_min; a drag reheats it. stop() is terminal.
    """

    def __init__(self, visible: VisibleSet, settings: Optional[LayoutSettings] = None):
        """
        Initialize a run and seed positions on a phyllotaxis spiral.

        Args:
            visible: Nodes and links to lay out
            settings: Force constants (defaults if None)
        """
        self.settings = settings or LayoutSettings()
        self._rng = random.Random(self.settings.seed)

        self._nodes: List[SimNode] = []
        self._by_id: Dict[str, SimNode] = {}
        for i, node in enumerate(visible.nodes):
            radius = self.settings.initial_radius * math.sqrt(0.5 + i)
            angle = i * _INITIAL_ANGLE
            sim = SimNode(
                node_id=node.node_id,
                quadrant=node.quadrant,
                index=i,
                x=radius * math.cos(angle),
                y=radius * math.sin(angle),
            )
            self._nodes.append(sim)
            self._by_id[sim.node_id] = sim

        # Link endpoints resolved to working copies, plus per-link strength/bias
        self._links: List[Tuple[SimNode, SimNode, float, float]] = []
        self._init_links(visible)

        self._alpha = 1.0
        self._alpha_target = 0.0
        self._running = bool(self._nodes)
        self._stopped = False

        logger.debug(
            "Simulation created: %d nodes, %d links", len(self._nodes), len(self._links)
        )

    def _init_links(self, visible: VisibleSet) -> None:
        degree: Dict[str, int] = {}
        pairs = []
        for link in visible.links:
            source = self._by_id.get(link.source)
            target = self._by_id.get(link.target)
            if source is None or target is None:
                continue
            pairs.append((source, target))
            degree[source.node_id] = degree.get(source.node_id, 0) + 1
            degree[target.node_id] = degree.get(target.node_id, 0) + 1

        for source, target in pairs:
            ds = degree[source.node_id]
            dt = degree[target.node_id]
            strength = 1.0 / min(ds, dt)
            bias = ds / (ds + dt)
            self._links.append((source, target, strength, bias))

    def _jiggle(self) -> float:
        return (self._rng.random() - 0.5) * 1e-6

    # ----------------------------------------------------------------
    # Queries
    # ----------------------------------------------------------------

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def alpha_target(self) -> float:
        return self._alpha_target

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_settled(self) -> bool:
        return not self._running and not self._stopped

    @property
    def is_stopped(self) -> bool:
        return self._stopped

    def node(self, node_id: str) -> Optional[SimNode]:
        return self._by_id.get(node_id)

    def positions(self) -> Dict[str, Tuple[float, float]]:
        return {n.node_id: (n.x, n.y) for n in self._nodes}

    def __len__(self) -> int:
        return len(self._nodes)

    # ----------------------------------------------------------------
    # Stepping
    # ----------------------------------------------------------------

    def step(self) -> bool:
        """
        Advance one tick.

        Returns:
            True while the run is active; False once settled, stopped or empty
        """
        if self._stopped or not self._running or not self._nodes:
            return False

        s = self.settings
        self._alpha += (self._alpha_target - self._alpha) * s.alpha_decay

        self._apply_links()
        self._apply_many_body()
        self._apply_collide()
        self._apply_centering()
        self._integrate()

        if self._alpha < s.alpha_min:
            self._running = False
            for n in self._nodes:
                if n.state == PinState.FREE:
                    n.state = PinState.SETTLED
            logger.debug("Simulation settled (alpha=%.5f)", self._alpha)

        return self._running

    def _apply_links(self) -> None:
        # 1. Springs toward link_distance, using predicted positions
        alpha = self._alpha
        distance = self.settings.link_distance
        for source, target, strength, bias in self._links:
            x = target.x + target.vx - source.x - source.vx
            y = target.y + target.vy - source.y - source.vy
            if x == 0:
                x = self._jiggle()
            if y == 0:
                y = self._jiggle()

            length = math.sqrt(x * x + y * y)
            length = (length - distance) / length * alpha * strength
            x *= length
            y *= length

            target.vx -= x * bias
            target.vy -= y * bias
            source.vx += x * (1 - bias)
            source.vy += y * (1 - bias)

    def _apply_many_body(self) -> None:
        # 2. Exact all-pairs charge; distance_min = 1
        alpha = self._alpha
        charge = self.settings.charge
        for node in self._nodes:
            for other in self._nodes:
                if other is node:
                    continue
                x = other.x - node.x
                y = other.y - node.y
                l2 = x * x + y * y
                if x == 0:
                    x = self._jiggle()
                    l2 += x * x
                if y == 0:
                    y = self._jiggle()
                    l2 += y * y
                if l2 < 1:
                    l2 = math.sqrt(l2)

                w = charge * alpha / l2
                node.vx += x * w
                node.vy += y * w

    def _apply_collide(self) -> None:
        # 3. Push overlapping circles apart, weighted by radius squared
        radius = self.settings.collide_radius
        r = radius + radius
        r2 = radius * radius
        weight = r2 / (r2 + r2)

        count = len(self._nodes)
        for i in range(count):
            node = self._nodes[i]
            xi = node.x + node.vx
            yi = node.y + node.vy
            for j in range(i + 1, count):
                other = self._nodes[j]
                x = xi - other.x - other.vx
                y = yi - other.y - other.vy
                l2 = x * x + y * y
                if l2 >= r * r:
                    continue

                if x == 0:
                    x = self._jiggle()
                    l2 += x * x
                if y == 0:
                    y = self._jiggle()
                    l2 += y * y

                length = math.sqrt(l2)
                length = (r - length) / length
                x *= length
                y *= length

                node.vx += x * weight
                node.vy += y * weight
                other.vx -= x * (1 - weight)
                other.vy -= y * (1 - weight)

    def _apply_centering(self) -> None:
        # 4. Independent x/y pull toward the quadrant target
        k = self.settings.quadrant_strength * self._alpha
        radius = self.settings.quadrant_radius
        for node in self._nodes:
            tx, ty = get_descriptor(node.quadrant).center(radius)
            node.vx += (tx - node.x) * k
            node.vy += (ty - node.y) * k

    def _integrate(self) -> None:
        damping = 1 - self.settings.velocity_decay
        for node in self._nodes:
            if node.is_pinned:
                node.x = node.fx
                node.vx = 0.0
                node.y = node.fy
                node.vy = 0.0
            else:
                node.vx *= damping
                node.vy *= damping
                node.x += node.vx
                node.y += node.vy

    # ----------------------------------------------------------------
    # Control
    # ----------------------------------------------------------------

    def restart(self, alpha: float = 1.0) -> None:
        """Reheat the run to alpha and resume stepping."""
        if self._stopped or not self._nodes:
            return
        self._alpha = alpha
        self._running = True
        for n in self._nodes:
            if n.state == PinState.SETTLED:
                n.state = PinState.FREE

    def drag_start(self, node_id: str) -> bool:
        """
        Pin a node at its current position and reheat toward reheat_target.

        Returns:
            True if the node is part of this run
        """
        node = self._by_id.get(node_id)
        if node is None or self._stopped:
            return False

        self._alpha_target = self.settings.reheat_target
        self._running = True
        for n in self._nodes:
            if n.state == PinState.SETTLED:
                n.state = PinState.FREE

        node.fx = node.x
        node.fy = node.y
        node.state = PinState.PINNED
        return True

    def drag_to(self, node_id: str, x: float, y: float) -> bool:
        """Move the pin target of a dragged node (world coordinates)."""
        node = self._by_id.get(node_id)
        if node is None or self._stopped or not node.is_pinned:
            return False
        node.fx = x
        node.fy = y
        return True

    def drag_end(self, node_id: str) -> bool:
        """Release a dragged node and let the run cool again."""
        node = self._by_id.get(node_id)
        if node is None or self._stopped:
            return False

        self._alpha_target = 0.0
        node.fx = None
        node.fy = None
        node.state = PinState.FREE
        return True

    def stop(self) -> None:
        """Halt the run for good; later step() calls are no-ops."""
        if self._stopped:
            return
        self._stopped = True
        self._running = False
        self._links = []
        logger.debug("Simulation stopped")
