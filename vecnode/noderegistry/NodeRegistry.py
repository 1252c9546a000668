from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, TYPE_CHECKING
import logging

from ..core.Errors import RegistryIncomplete
from ..core.Interface import INodeData, IUi
from ..core.Types import BLACK, GOLD, DataType, InputParamKind
from ..core.Values import ScalarValue, Vec2Value
from ..editor.Responses import ClearActiveNode, NodeResponse, SetActiveNode, UserResponse

if TYPE_CHECKING:
    from ..core.GraphPrimitives import Graph
    from ..editor.state import GraphState

logger = logging.getLogger(__name__)

SET_ACTIVE_LABEL = "👇 Set active"
ACTIVE_LABEL = "👉 Active"


# =========================================================================================
# NODE TEMPLATES
#
# A template is a stateless descriptor: a label plus a port-building procedure.
# Both live in lookup tables keyed by the enum. The tables are checked against the
# enum when this module is imported, so a template without a label or builder can
# never be handed to the editor.
# =========================================================================================

class NodeTemplate(Enum):
    MAKE_VECTOR = "MakeVector"
    MAKE_SCALAR = "MakeScalar"
    ADD_SCALAR = "AddScalar"
    SUBTRACT_SCALAR = "SubtractScalar"
    VECTOR_TIMES_SCALAR = "VectorTimesScalar"
    ADD_VECTOR = "AddVector"
    SUBTRACT_VECTOR = "SubtractVector"

    def node_finder_label(self) -> str:
        return _LABELS[self]

    def node_graph_label(self) -> str:
        return self.node_finder_label()

    def user_data(self) -> 'NodeData':
        return NodeData(self)

    def build_node(self, graph: 'Graph', node_id: str):
        _BUILDERS[self](graph, node_id)


@dataclass(frozen=True)
class NodeData(INodeData):
    """Per-node payload: the template the node was built from."""
    template: NodeTemplate

    def bottom_ui(self, ui: IUi, node_id: str, graph: 'Graph', user_state: 'GraphState') -> List[NodeResponse]:
        responses: List[NodeResponse] = []

        # A stale active id (node deleted) counts as "no active node"
        if not user_state.is_active(node_id, graph):
            if ui.button(SET_ACTIVE_LABEL):
                responses.append(UserResponse(SetActiveNode(node_id)))
        else:
            if ui.button(ACTIVE_LABEL, fill=GOLD, text_color=BLACK):
                responses.append(UserResponse(ClearActiveNode()))

        return responses


_LABELS: Dict[NodeTemplate, str] = {
    NodeTemplate.MAKE_VECTOR: "New vector",
    NodeTemplate.MAKE_SCALAR: "New scalar",
    NodeTemplate.ADD_SCALAR: "Scalar add",
    NodeTemplate.SUBTRACT_SCALAR: "Scalar subtract",
    NodeTemplate.ADD_VECTOR: "Vector add",
    NodeTemplate.SUBTRACT_VECTOR: "Vector subtract",
    NodeTemplate.VECTOR_TIMES_SCALAR: "Vector times scalar",
}

# Order shown in the node finder
_ALL_TEMPLATES = (
    NodeTemplate.MAKE_SCALAR,
    NodeTemplate.MAKE_VECTOR,
    NodeTemplate.ADD_SCALAR,
    NodeTemplate.SUBTRACT_SCALAR,
    NodeTemplate.ADD_VECTOR,
    NodeTemplate.SUBTRACT_VECTOR,
    NodeTemplate.VECTOR_TIMES_SCALAR,
)

_BUILDERS: Dict[NodeTemplate, Callable[['Graph', str], None]] = {}


def _builds(*templates: NodeTemplate):
    """Decorator to register a port builder for one or more templates."""
    def decorator(fn: Callable[['Graph', str], None]):
        for template in templates:
            if template in _BUILDERS:
                raise ValueError(f"Node template '{template.value}' already has a builder.")
            _BUILDERS[template] = fn
        return fn
    return decorator


# --- Port helpers ---

def _input_scalar(graph: 'Graph', node_id: str, name: str):
    graph.add_input_param(
        node_id,
        name,
        DataType.SCALAR,
        ScalarValue(0.0),
        InputParamKind.CONNECTION_OR_CONSTANT,
        True,
    )


def _input_vector(graph: 'Graph', node_id: str, name: str):
    graph.add_input_param(
        node_id,
        name,
        DataType.VEC2,
        Vec2Value(0.0, 0.0),
        InputParamKind.CONNECTION_OR_CONSTANT,
        True,
    )


def _output_scalar(graph: 'Graph', node_id: str, name: str):
    graph.add_output_param(node_id, name, DataType.SCALAR)


def _output_vector(graph: 'Graph', node_id: str, name: str):
    graph.add_output_param(node_id, name, DataType.VEC2)


# --- Builders ---

@_builds(NodeTemplate.MAKE_SCALAR)
def _build_make_scalar(graph: 'Graph', node_id: str):
    _input_scalar(graph, node_id, "value")
    _output_scalar(graph, node_id, "out")


@_builds(NodeTemplate.MAKE_VECTOR)
def _build_make_vector(graph: 'Graph', node_id: str):
    _input_scalar(graph, node_id, "x")
    _input_scalar(graph, node_id, "y")
    _output_vector(graph, node_id, "out")


@_builds(NodeTemplate.ADD_SCALAR, NodeTemplate.SUBTRACT_SCALAR)
def _build_scalar_binary(graph: 'Graph', node_id: str):
    _input_scalar(graph, node_id, "A")
    _input_scalar(graph, node_id, "B")
    _output_scalar(graph, node_id, "out")


@_builds(NodeTemplate.ADD_VECTOR, NodeTemplate.SUBTRACT_VECTOR)
def _build_vector_binary(graph: 'Graph', node_id: str):
    _input_vector(graph, node_id, "v1")
    _input_vector(graph, node_id, "v2")
    _output_vector(graph, node_id, "out")


@_builds(NodeTemplate.VECTOR_TIMES_SCALAR)
def _build_vector_times_scalar(graph: 'Graph', node_id: str):
    _input_scalar(graph, node_id, "scalar")
    _input_vector(graph, node_id, "vector")
    _output_vector(graph, node_id, "out")


def _check_registry():
    every = set(NodeTemplate)
    problems = []
    if set(_LABELS) != every:
        problems.append(f"missing labels for {sorted(t.value for t in every - set(_LABELS))}")
    if set(_BUILDERS) != every:
        problems.append(f"missing builders for {sorted(t.value for t in every - set(_BUILDERS))}")
    if len(_ALL_TEMPLATES) != len(every) or set(_ALL_TEMPLATES) != every:
        problems.append("node finder order does not list every template exactly once")
    if problems:
        raise RegistryIncomplete("Node template registry is incomplete: " + "; ".join(problems))


_check_registry()


# --- Catalog API used by the host's node finder ---

def all_templates() -> List[NodeTemplate]:
    return list(_ALL_TEMPLATES)


def label(template: NodeTemplate) -> str:
    return template.node_finder_label()


def user_data(template: NodeTemplate) -> NodeData:
    return template.user_data()


def instantiate_into(template: NodeTemplate, graph: 'Graph', node_id: str):
    template.build_node(graph, node_id)


def create_node(graph: 'Graph', template: NodeTemplate) -> str:
    """Add a node built from ``template`` to ``graph`` and return its id."""
    node_id = graph.add_node(template.node_graph_label(), template.user_data(), template.build_node)
    logger.debug(f"NodeRegistry: created '{template.value}' node {node_id}")
    return node_id


def find_templates(query: str) -> List[NodeTemplate]:
    """Node finder filter: case-insensitive substring match on the finder label."""
    needle = query.strip().lower()
    if not needle:
        return all_templates()
    return [t for t in _ALL_TEMPLATES if needle in t.node_finder_label().lower()]
