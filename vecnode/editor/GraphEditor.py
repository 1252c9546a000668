"""
GraphEditorState: the host-side driver for one open document.

Owns the Graph, the GraphState and the layout bookkeeping, performs the edits
the host UI asks for, and runs one redraw pass at a time. Every response
produced by an edit or a redraw goes through ``apply_responses`` so the
active-node state only changes in one place.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from ..config import EditorSettings
from ..core.GraphPrimitives import Graph
from ..core.Interface import INodeData, IUi
from ..noderegistry.NodeRegistry import NodeTemplate, create_node, find_templates
from .Responses import (
    ConnectEventEnded,
    CreatedNode,
    DeleteNodeFull,
    DisconnectEvent,
    NodeResponse,
    SelectNode,
    UserResponse,
)
from .state import GraphState

logger = logging.getLogger(__name__)


class GraphEditorState:
    """Holds the graph, the interaction state and UI layout positions."""

    def __init__(self, settings: Optional[EditorSettings] = None) -> None:
        self.settings = settings if settings is not None else EditorSettings()
        self.graph = Graph()
        self.user_state = GraphState()
        # Draw order, back to front
        self.node_order: List[str] = []
        # UI layout positions: node_id → {x, y}
        self.node_positions: Dict[str, Dict[str, float]] = {}
        self.selected_nodes: List[str] = []

    # ── Node finder ─────────────────────────────────────────────────────────

    def node_finder(self, query: str = "") -> List[NodeTemplate]:
        return find_templates(query)

    # ── Edits ───────────────────────────────────────────────────────────────

    def add_node(self, template: NodeTemplate, position: Optional[Dict[str, float]] = None) -> CreatedNode:
        node_id = create_node(self.graph, template)
        self._place(node_id, position)
        logger.info(f"Editor: created {template.node_graph_label()!r} node {node_id}")
        return CreatedNode(node_id)

    def _place(self, node_id: str, position: Optional[Dict[str, float]] = None) -> None:
        if position is None:
            position = {"x": len(self.node_order) * self.settings.node_spacing, "y": 0.0}
        self.node_positions[node_id] = {"x": float(position["x"]), "y": float(position["y"])}
        self.node_order.append(node_id)

    def connect(self, output_id: str, input_id: str) -> ConnectEventEnded:
        edge = self.graph.add_connection(output_id, input_id)
        return ConnectEventEnded(edge.output_id, edge.input_id)

    def disconnect(self, input_id: str) -> Optional[DisconnectEvent]:
        output_id = self.graph.remove_connection(input_id)
        if output_id is None:
            return None
        return DisconnectEvent(output_id, input_id)

    def delete_node(self, node_id: str) -> DeleteNodeFull:
        node, _ = self.graph.remove_node(node_id)
        self.node_order = [n for n in self.node_order if n != node_id]
        self.node_positions.pop(node_id, None)
        self.selected_nodes = [n for n in self.selected_nodes if n != node_id]
        logger.info(f"Editor: deleted node {node_id}")

        response = DeleteNodeFull(node_id, node)
        self.apply_responses([response])
        return response

    def select_node(self, node_id: str) -> SelectNode:
        self.graph.get_node(node_id)
        self.selected_nodes = [node_id]
        # Selecting raises the node to the front
        self.node_order = [n for n in self.node_order if n != node_id] + [node_id]
        return SelectNode(node_id)

    # ── Responses ───────────────────────────────────────────────────────────

    def apply_responses(self, responses: Iterable[NodeResponse]) -> None:
        for response in responses:
            if isinstance(response, UserResponse):
                self.user_state.apply(response.response)
            elif isinstance(response, DeleteNodeFull):
                self.user_state.reconcile(self.graph)

    # ── Redraw ──────────────────────────────────────────────────────────────

    def sync_layout(self) -> None:
        """Match the layout bookkeeping to the graph, which may have been edited directly."""
        stale = [n for n in self.node_positions if not self.graph.has_node(n)]
        for node_id in stale:
            del self.node_positions[node_id]
        self.node_order = [n for n in self.node_order if self.graph.has_node(n)]
        self.selected_nodes = [n for n in self.selected_nodes if self.graph.has_node(n)]
        if stale:
            logger.debug(f"Editor: dropped layout for removed node(s) {stale}")

        placed = set(self.node_order)
        for node_id in self.graph.iter_nodes():
            if node_id not in placed:
                logger.debug(f"Editor: placing node {node_id} created outside the editor")
                self._place(node_id)

    def draw(self, ui: IUi) -> List[NodeResponse]:
        """One redraw pass over every node. Returns the responses it produced."""
        self.sync_layout()
        self.user_state.reconcile(self.graph)

        responses: List[NodeResponse] = []
        for node_id in list(self.node_order):
            with ui.push_id(node_id):
                responses.extend(self._draw_node(ui, node_id))

        self.apply_responses(responses)
        return responses

    def _draw_node(self, ui: IUi, node_id: str) -> List[NodeResponse]:
        node = self.graph.get_node(node_id)
        ui.label(node.label)

        for param in self.graph.node_inputs(node_id):
            editable = (
                param.shown_inline
                and param.kind.accepts_constant()
                and not self.graph.is_connected(param.id)
            )
            if editable:
                param.value.value_widget(param.port_name, ui)
            else:
                ui.label(param.port_name)

        for param in self.graph.node_outputs(node_id):
            ui.label(param.port_name)

        # Nodes added straight to the graph may carry arbitrary user data
        if not isinstance(node.user_data, INodeData):
            return []
        return node.user_data.bottom_ui(ui, node_id, self.graph, self.user_state)
