from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .Types import DataType


class GraphError(Exception):
    """Base class for every error raised by the graph core."""
    pass


class TypeMismatch(GraphError, TypeError):
    """
    A value was read (or stored) as a variant it does not hold.

    Carries the DataType that was asked for and the one actually present so an
    evaluation layer can say which port disagreed.
    """
    def __init__(self, expected: 'DataType', actual: 'DataType', context: str = ""):
        self.expected = expected
        self.actual = actual
        self.context = context
        message = f"Invalid cast from {actual.display_name()} to {expected.display_name()}"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class IncompatiblePortTypes(GraphError, ValueError):
    def __init__(self, output_type: 'DataType', input_type: 'DataType'):
        self.output_type = output_type
        self.input_type = input_type
        super().__init__(
            f"Type Mismatch: Cannot connect {output_type.display_name()} output "
            f"to {input_type.display_name()} input"
        )


class PortAlreadyConnected(GraphError, ValueError):
    pass


class InvalidConnection(GraphError, ValueError):
    pass


class DuplicatePortName(GraphError, ValueError):
    pass


class NodeNotFound(GraphError, KeyError):
    def __init__(self, node_id: Any):
        self.node_id = node_id
        super().__init__(f"Node with id '{node_id}' does not exist in the graph")


class PortNotFound(GraphError, KeyError):
    def __init__(self, port_id: Any, kind: str = "Port"):
        self.port_id = port_id
        super().__init__(f"{kind} '{port_id}' not found in the graph")


class RegistryIncomplete(GraphError, RuntimeError):
    pass
