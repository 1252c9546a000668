import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

import pytest
from vecnode.core import Types
from vecnode.core.Errors import RegistryIncomplete
from vecnode.core.Types import (
    DataType,
    InputParamKind,
    Color32,
    display_name,
    display_color,
    is_compatible,
)


class TestDataType:

    def setup_method(self):
        # Stub: Setup logic here
        pass

    def teardown_method(self):
        # Stub: Cleanup logic here
        pass

    def test_display_names(self):
        assert display_name(DataType.SCALAR) == "scalar"
        assert display_name(DataType.VEC2) == "2d vector"

    def test_display_names_non_empty_and_unique(self):
        names = [display_name(d) for d in DataType]
        assert all(names)
        assert len(set(names)) == len(names)

    def test_display_colors(self):
        assert display_color(DataType.SCALAR) == Color32(38, 109, 211)
        assert display_color(DataType.VEC2) == Color32(238, 207, 109)

    def test_display_colors_unique(self):
        colors = [display_color(d) for d in DataType]
        assert len(set(colors)) == len(colors)

    def test_methods_match_functions(self):
        for d in DataType:
            assert d.display_name() == display_name(d)
            assert d.display_color() == display_color(d)

    @pytest.mark.parametrize("output_type, input_type, expected", [
        (DataType.SCALAR, DataType.SCALAR, True),
        (DataType.VEC2, DataType.VEC2, True),
        (DataType.SCALAR, DataType.VEC2, False),
        (DataType.VEC2, DataType.SCALAR, False),
    ])
    def test_compatibility_is_equality(self, output_type, input_type, expected):
        """No implicit widening between scalar and vector"""
        assert is_compatible(output_type, input_type) is expected


class TestInputParamKind:

    def test_connection_or_constant_accepts_both(self):
        kind = InputParamKind.CONNECTION_OR_CONSTANT
        assert kind.accepts_connection() is True
        assert kind.accepts_constant() is True

    def test_connection_only(self):
        kind = InputParamKind.CONNECTION_ONLY
        assert kind.accepts_connection() is True
        assert kind.accepts_constant() is False

    def test_constant_only(self):
        kind = InputParamKind.CONSTANT_ONLY
        assert kind.accepts_connection() is False
        assert kind.accepts_constant() is True


class TestDisplayTables:

    def test_tables_cover_every_variant(self):
        Types._check_display_tables()

    def test_missing_color_is_reported(self, monkeypatch):
        monkeypatch.delitem(Types._DISPLAY_COLORS, DataType.VEC2)
        with pytest.raises(RegistryIncomplete, match="colors"):
            Types._check_display_tables()

    def test_missing_name_is_reported(self, monkeypatch):
        monkeypatch.delitem(Types._DISPLAY_NAMES, DataType.SCALAR)
        with pytest.raises(RegistryIncomplete, match="names"):
            Types._check_display_tables()
