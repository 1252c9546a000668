from enum import Enum, auto
from typing import NamedTuple

from .Errors import RegistryIncomplete


class Color32(NamedTuple):
    r: int
    g: int
    b: int


BLACK = Color32(0, 0, 0)
GOLD = Color32(255, 215, 0)


class PortDirection(Enum):
    INPUT = auto()
    OUTPUT = auto()


class InputParamKind(Enum):
    # What an input port may be fed by
    CONNECTION_ONLY = auto()
    CONSTANT_ONLY = auto()
    CONNECTION_OR_CONSTANT = auto()

    def accepts_connection(self) -> bool:
        return self != InputParamKind.CONSTANT_ONLY

    def accepts_constant(self) -> bool:
        return self != InputParamKind.CONNECTION_ONLY


class DataType(Enum):
    SCALAR = "scalar"
    VEC2 = "vec2"

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def display_color(self) -> Color32:
        return _DISPLAY_COLORS[self]

    @staticmethod
    def is_compatible(output_type: 'DataType', input_type: 'DataType') -> bool:
        # No implicit widening: a scalar never feeds a vector input.
        return output_type == input_type


_DISPLAY_NAMES = {
    DataType.SCALAR: "scalar",
    DataType.VEC2: "2d vector",
}

_DISPLAY_COLORS = {
    DataType.SCALAR: Color32(38, 109, 211),
    DataType.VEC2: Color32(238, 207, 109),
}


def _check_display_tables():
    every = set(DataType)
    missing = [name for name, table in (('names', _DISPLAY_NAMES), ('colors', _DISPLAY_COLORS)) if set(table) != every]
    if missing:
        raise RegistryIncomplete(f"DataType display {' and '.join(missing)} do not cover every variant")


_check_display_tables()


def display_name(data_type: DataType) -> str:
    return data_type.display_name()


def display_color(data_type: DataType) -> Color32:
    return data_type.display_color()


def is_compatible(output_type: DataType, input_type: DataType) -> bool:
    return DataType.is_compatible(output_type, input_type)
