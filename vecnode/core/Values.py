from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import Any, ClassVar, NamedTuple

from .Errors import TypeMismatch
from .Interface import IUi, IWidgetValue
from .Types import DataType


class Vec2(NamedTuple):
    x: float = 0.0
    y: float = 0.0


class ValueType(IWidgetValue):
    """
    Runtime value held by an input port: a tagged union of ScalarValue and
    Vec2Value. The tag is the class attribute ``data_type``.

    The narrowing accessors behave like a checked downcast. They hand back an
    immutable payload (a float or a Vec2), so nothing read out of a value
    aliases the value itself; callers that want to keep inspecting the port
    should hold on to the port, not the payload.
    """
    data_type: ClassVar[DataType]

    def as_scalar(self) -> float:
        raise TypeMismatch(DataType.SCALAR, self.data_type)

    def as_vector(self) -> Vec2:
        raise TypeMismatch(DataType.VEC2, self.data_type)

    def copy(self) -> 'ValueType':
        return dataclasses.replace(self)

    @staticmethod
    def default_for(data_type: DataType) -> 'ValueType':
        if data_type == DataType.SCALAR:
            return ScalarValue(0.0)
        elif data_type == DataType.VEC2:
            return Vec2Value(0.0, 0.0)
        raise ValueError(f"No value variant for data type {data_type}")

    @staticmethod
    def validate(value: Any, data_type: DataType) -> bool:
        return isinstance(value, ValueType) and value.data_type == data_type


@dataclass
class ScalarValue(ValueType):
    value: float = 0.0

    data_type: ClassVar[DataType] = DataType.SCALAR

    def as_scalar(self) -> float:
        return self.value

    def value_widget(self, param_name: str, ui: IUi):
        with ui.horizontal():
            ui.label(param_name)
            self.value = float(ui.drag_value(self.value))


@dataclass
class Vec2Value(ValueType):
    x: float = 0.0
    y: float = 0.0

    data_type: ClassVar[DataType] = DataType.VEC2

    def as_vector(self) -> Vec2:
        return Vec2(self.x, self.y)

    def value_widget(self, param_name: str, ui: IUi):
        ui.label(param_name)
        with ui.horizontal():
            ui.label("x")
            self.x = float(ui.drag_value(self.x))
            ui.label("y")
            self.y = float(ui.drag_value(self.y))
