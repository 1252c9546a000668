from __future__ import annotations
from typing import Optional, List, Any, ContextManager, TYPE_CHECKING

from abc import ABC, abstractmethod

from .Types import Color32

if TYPE_CHECKING:
    from .GraphPrimitives import Graph


# The host immediate-mode toolkit. Only the handful of widgets the core
# draws with are required; everything else stays on the host side.
class IUi(ABC):
    @abstractmethod
    def label(self, text: str):
        pass

    # Returns True when the button was clicked this frame
    @abstractmethod
    def button(self, text: str, fill: Optional[Color32] = None, text_color: Optional[Color32] = None) -> bool:
        pass

    # Returns the (possibly edited) value
    @abstractmethod
    def drag_value(self, value: float) -> float:
        pass

    @abstractmethod
    def horizontal(self) -> ContextManager[Any]:
        pass

    @abstractmethod
    def push_id(self, id_source: Any) -> ContextManager[Any]:
        pass


class IWidgetValue(ABC):
    @abstractmethod
    def value_widget(self, param_name: str, ui: IUi):
        """Draw an editor for this value. Edits change the payload, never the variant."""
        pass


class INodeData(ABC):
    @abstractmethod
    def bottom_ui(self, ui: IUi, node_id: str, graph: 'Graph', user_state: Any) -> List[Any]:
        """Draw the node body and return the responses emitted this frame."""
        pass
