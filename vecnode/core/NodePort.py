from __future__ import annotations
import logging

from .Errors import TypeMismatch
from .Types import DataType, InputParamKind, PortDirection
from .Values import ValueType


# Get a logger for this module
logger = logging.getLogger(__name__)


class NodePort:
    def __init__(self,
                 port_id: str,
                 node_id: str,
                 port_name: str,
                 direction: PortDirection,
                 data_type: DataType):

        self.id = port_id
        self.node_id = node_id
        self.port_name = port_name
        self.direction = direction
        self.data_type = data_type

    def isInputPort(self) -> bool:
        return self.direction == PortDirection.INPUT

    def isOutputPort(self) -> bool:
        return self.direction == PortDirection.OUTPUT

    # return the id of the node that owns this port
    def portOwner(self) -> str:
        return self.node_id

    def __repr__(self):
        return f"{type(self).__name__}({self.node_id}.{self.port_name}: {self.data_type.display_name()})"


class InputParam(NodePort):
    """
    An input port. Holds a constant value that is used whenever nothing is
    wired into it; ``kind`` says whether wiring, a constant, or either is allowed.
    """
    def __init__(self,
                 port_id: str,
                 node_id: str,
                 port_name: str,
                 data_type: DataType,
                 value: ValueType,
                 kind: InputParamKind = InputParamKind.CONNECTION_OR_CONSTANT,
                 shown_inline: bool = True):
        super().__init__(port_id, node_id, port_name, PortDirection.INPUT, data_type)

        self.kind = kind
        self.shown_inline = shown_inline
        self.value: ValueType = None
        self.setValue(value)

    def setValue(self, value: ValueType):
        # --- TYPE CHECKING RUNTIME ---
        if not ValueType.validate(value, self.data_type):
            actual = getattr(value, "data_type", None)
            if actual is None:
                raise TypeError(f"Port '{self.port_name}' expected a ValueType, got {type(value).__name__}")
            raise TypeMismatch(self.data_type, actual, context=f"input '{self.port_name}' on node '{self.node_id}'")
        # -----------------------------
        logger.debug(f"Setting input '{self.node_id}.{self.port_name}' to {value}")
        self.value = value

    def getValue(self) -> ValueType:
        return self.value


class OutputParam(NodePort):
    def __init__(self, port_id: str, node_id: str, port_name: str, data_type: DataType):
        super().__init__(port_id, node_id, port_name, PortDirection.OUTPUT, data_type)
