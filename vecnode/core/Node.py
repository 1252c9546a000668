from typing import List, Dict, Any

from .Errors import PortNotFound


# A node only records the ids of its ports, in declaration order. The ports
# themselves live in the Graph (Arena pattern) so that connections can be
# stored as plain id pairs.
class Node:
    def __init__(self, node_id: str, label: str, user_data: Any = None):
        self.id = node_id
        self.label = label
        self.user_data = user_data

        # Use Standard Dicts - insertion order is the declared port order
        self.inputs: Dict[str, str] = {}   # port name -> input id
        self.outputs: Dict[str, str] = {}  # port name -> output id

    def get_input(self, port_name: str) -> str:
        input_id = self.inputs.get(port_name)
        if input_id is None:
            raise PortNotFound(f"{self.id}.{port_name}", kind="Input port")
        return input_id

    def get_output(self, port_name: str) -> str:
        output_id = self.outputs.get(port_name)
        if output_id is None:
            raise PortNotFound(f"{self.id}.{port_name}", kind="Output port")
        return output_id

    def input_ids(self) -> List[str]:
        return list(self.inputs.values())

    def output_ids(self) -> List[str]:
        return list(self.outputs.values())

    def output_names(self) -> List[str]:
        return list(self.outputs.keys())

    def __repr__(self):
        return f"Node({self.label!r}, {self.id})"
