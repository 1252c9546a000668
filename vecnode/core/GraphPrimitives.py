from typing import Tuple, NamedTuple, Dict, List, Optional, Any, Callable, Iterator
import logging
import uuid

from .Errors import (
    DuplicatePortName,
    IncompatiblePortTypes,
    InvalidConnection,
    NodeNotFound,
    PortAlreadyConnected,
    PortNotFound,
)
from .Node import Node
from .NodePort import InputParam, OutputParam
from .Types import DataType, InputParamKind
from .Values import ValueType

logger = logging.getLogger(__name__)


# Using NamedTuple for immutability and simple hashability
class Edge(NamedTuple):
    output_id: str
    input_id: str

    def __repr__(self):
        return f"Edge({self.output_id} -> {self.input_id})"


def _new_id() -> str:
    return uuid.uuid4().hex


class Graph:
    """
    Owning store of nodes, ports and connections.

    Ports are kept in flat id-keyed maps (Arena pattern) and nodes refer to
    them by id. A connection is stored as ``input_id -> output_id`` which is
    what makes "at most one wire per input" structural: an output may appear
    as the value of many keys.
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.inputs: Dict[str, InputParam] = {}
        self.outputs: Dict[str, OutputParam] = {}
        self.connections: Dict[str, str] = {}  # input id -> output id

    # --- Nodes ---

    def add_node(self, label: str, user_data: Any = None, build: Optional[Callable[['Graph', str], None]] = None) -> str:
        node_id = _new_id()
        self.nodes[node_id] = Node(node_id, label, user_data)
        logger.debug(f"Graph: added node '{label}' ({node_id})")

        if build is not None:
            try:
                build(self, node_id)
            except Exception:
                logger.warning(f"Graph: building node '{label}' ({node_id}) failed, removing it")
                self.remove_node(node_id)
                raise
        return node_id

    def get_node(self, node_id: str) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            raise NodeNotFound(node_id)
        return node

    def find_node(self, node_id: Optional[str]) -> Optional[Node]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def has_node(self, node_id: Optional[str]) -> bool:
        return node_id is not None and node_id in self.nodes

    def iter_nodes(self) -> Iterator[str]:
        return iter(list(self.nodes.keys()))

    def remove_node(self, node_id: str) -> Tuple[Node, List[Edge]]:
        """Remove a node, its ports and every connection touching them."""
        node = self.get_node(node_id)

        disconnected: List[Edge] = []
        for input_id in node.input_ids():
            output_id = self.connections.pop(input_id, None)
            if output_id is not None:
                disconnected.append(Edge(output_id, input_id))
            del self.inputs[input_id]

        for output_id in node.output_ids():
            for input_id in [i for i, o in self.connections.items() if o == output_id]:
                del self.connections[input_id]
                disconnected.append(Edge(output_id, input_id))
            del self.outputs[output_id]

        del self.nodes[node_id]
        logger.debug(f"Graph: removed node '{node.label}' ({node_id}), dropped {len(disconnected)} connection(s)")
        return node, disconnected

    # --- Ports ---

    def add_input_param(self,
                        node_id: str,
                        name: str,
                        data_type: DataType,
                        value: ValueType,
                        kind: InputParamKind = InputParamKind.CONNECTION_OR_CONSTANT,
                        shown_inline: bool = True) -> str:
        node = self.get_node(node_id)
        if name in node.inputs:
            raise DuplicatePortName(f"Input port '{name}' already exists in node '{node_id}'")

        input_id = _new_id()
        self.inputs[input_id] = InputParam(input_id, node_id, name, data_type, value, kind, shown_inline)
        node.inputs[name] = input_id
        return input_id

    def add_output_param(self, node_id: str, name: str, data_type: DataType) -> str:
        node = self.get_node(node_id)
        if name in node.outputs:
            raise DuplicatePortName(f"Output port '{name}' already exists in node '{node_id}'")

        output_id = _new_id()
        self.outputs[output_id] = OutputParam(output_id, node_id, name, data_type)
        node.outputs[name] = output_id
        return output_id

    def remove_input_param(self, input_id: str):
        param = self.get_input(input_id)
        self.connections.pop(input_id, None)
        del self.nodes[param.node_id].inputs[param.port_name]
        del self.inputs[input_id]

    def remove_output_param(self, output_id: str):
        param = self.get_output(output_id)
        for input_id in [i for i, o in self.connections.items() if o == output_id]:
            del self.connections[input_id]
        del self.nodes[param.node_id].outputs[param.port_name]
        del self.outputs[output_id]

    def get_input(self, input_id: str) -> InputParam:
        param = self.inputs.get(input_id)
        if param is None:
            raise PortNotFound(input_id, kind="Input port")
        return param

    def get_output(self, output_id: str) -> OutputParam:
        param = self.outputs.get(output_id)
        if param is None:
            raise PortNotFound(output_id, kind="Output port")
        return param

    def find_input(self, node_id: str, name: str) -> InputParam:
        return self.get_input(self.get_node(node_id).get_input(name))

    def find_output(self, node_id: str, name: str) -> OutputParam:
        return self.get_output(self.get_node(node_id).get_output(name))

    def node_inputs(self, node_id: str) -> List[InputParam]:
        return [self.inputs[i] for i in self.get_node(node_id).input_ids()]

    def node_outputs(self, node_id: str) -> List[OutputParam]:
        return [self.outputs[o] for o in self.get_node(node_id).output_ids()]

    # --- Connections ---

    def check_connection(self, output_id: str, input_id: str):
        """Raise if wiring ``output_id`` into ``input_id`` is not allowed."""
        output = self.get_output(output_id)
        target = self.get_input(input_id)

        if output.node_id == target.node_id:
            raise InvalidConnection("Cannot connect a node's output to its own input")

        if not target.kind.accepts_connection():
            raise InvalidConnection(f"Input port '{target.port_name}' on node '{target.node_id}' only accepts a constant")

        # --- TYPE CHECKING CONNECTION ---
        if not DataType.is_compatible(output.data_type, target.data_type):
            raise IncompatiblePortTypes(output.data_type, target.data_type)
        # -------------------------------

        if input_id in self.connections:
            raise PortAlreadyConnected(f"Input port '{target.port_name}' on node '{target.node_id}' is already connected")

    def can_connect(self, output_id: str, input_id: str) -> bool:
        try:
            self.check_connection(output_id, input_id)
        except (InvalidConnection, IncompatiblePortTypes, PortAlreadyConnected, PortNotFound):
            return False
        return True

    def add_connection(self, output_id: str, input_id: str) -> Edge:
        try:
            self.check_connection(output_id, input_id)
        except (InvalidConnection, IncompatiblePortTypes, PortAlreadyConnected) as e:
            logger.warning(f"Graph: rejected connection {output_id} -> {input_id}: {e}")
            raise

        self.connections[input_id] = output_id
        logger.debug(f"Graph: connected {output_id} -> {input_id}")
        return Edge(output_id, input_id)

    def remove_connection(self, input_id: str) -> Optional[str]:
        """Disconnect an input. Returns the output it was fed by, if any."""
        output_id = self.connections.pop(input_id, None)
        if output_id is not None:
            logger.debug(f"Graph: disconnected {output_id} -> {input_id}")
        return output_id

    def connection(self, input_id: str) -> Optional[str]:
        return self.connections.get(input_id)

    def is_connected(self, input_id: str) -> bool:
        return input_id in self.connections

    def connections_from(self, output_id: str) -> List[str]:
        return [i for i, o in self.connections.items() if o == output_id]

    def iter_connections(self) -> Iterator[Edge]:
        return iter([Edge(o, i) for i, o in self.connections.items()])

    def reset(self):
        self.nodes.clear()
        self.inputs.clear()
        self.outputs.clear()
        self.connections.clear()
