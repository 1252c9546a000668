"""
GraphState: the per-document interaction state that survives redraws.

One instance per open document, created with the document and passed
explicitly into every render / response call. It only ever holds node *ids*;
the node itself is owned by the Graph and may disappear at any time.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from .Responses import ClearActiveNode, Response, SetActiveNode

if TYPE_CHECKING:
    from ..core.GraphPrimitives import Graph

logger = logging.getLogger(__name__)


class GraphState:
    """Tracks which node, if any, is the active node."""

    def __init__(self) -> None:
        self.active_node: Optional[str] = None

    # ── Reducer ─────────────────────────────────────────────────────────────

    def apply(self, response: Response) -> None:
        """Fold one user response into the state. The only place that writes ``active_node``."""
        if isinstance(response, SetActiveNode):
            logger.debug(f"GraphState: active node {self.active_node} -> {response.node_id}")
            self.active_node = response.node_id
        elif isinstance(response, ClearActiveNode):
            logger.debug(f"GraphState: active node {self.active_node} -> None")
            self.active_node = None
        else:
            raise TypeError(f"Unknown response {response!r}")

    # ── Queries ─────────────────────────────────────────────────────────────

    def active_node_in(self, graph: 'Graph') -> Optional[str]:
        """The active node id, or None when it no longer exists in ``graph``."""
        if self.active_node is not None and graph.has_node(self.active_node):
            return self.active_node
        return None

    def is_active(self, node_id: str, graph: Optional['Graph'] = None) -> bool:
        if graph is not None:
            return self.active_node_in(graph) == node_id
        return self.active_node == node_id

    def reconcile(self, graph: 'Graph') -> bool:
        """Clear a stale active node. Returns True if something was cleared."""
        if self.active_node is not None and not graph.has_node(self.active_node):
            logger.debug(f"GraphState: clearing stale active node {self.active_node}")
            self.apply(ClearActiveNode())
            return True
        return False
