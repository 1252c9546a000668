import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from contextlib import contextmanager

import pytest
from vecnode.core.Errors import GraphError, TypeMismatch
from vecnode.core.Interface import IUi
from vecnode.core.Types import DataType
from vecnode.core.Values import ValueType, ScalarValue, Vec2Value, Vec2


# Minimal UI that answers every drag with a scripted value
class ScriptedUi(IUi):
    def __init__(self, drags):
        self.drags = list(drags)
        self.labels = []

    def label(self, text):
        self.labels.append(text)

    def button(self, text, fill=None, text_color=None):
        return False

    def drag_value(self, value):
        return self.drags.pop(0) if self.drags else value

    @contextmanager
    def horizontal(self):
        yield self

    @contextmanager
    def push_id(self, id_source):
        yield self


class TestValueType:

    def setup_method(self):
        # Stub: Setup logic here
        pass

    def teardown_method(self):
        # Stub: Cleanup logic here
        pass

    def test_scalar_as_scalar(self):
        assert ScalarValue(3.5).as_scalar() == 3.5

    def test_scalar_as_vector_fails(self):
        with pytest.raises(TypeMismatch) as excinfo:
            ScalarValue(3.5).as_vector()

        assert excinfo.value.expected == DataType.VEC2
        assert excinfo.value.actual == DataType.SCALAR

    def test_vector_as_vector(self):
        v = Vec2Value(1.0, -2.0).as_vector()
        assert v == Vec2(1.0, -2.0)
        assert v.x == 1.0
        assert v.y == -2.0

    def test_vector_as_scalar_fails(self):
        with pytest.raises(TypeMismatch) as excinfo:
            Vec2Value(1.0, 2.0).as_scalar()

        assert excinfo.value.expected == DataType.SCALAR
        assert excinfo.value.actual == DataType.VEC2

    def test_type_mismatch_is_recoverable_graph_error(self):
        """The error can be caught generically and names both kinds"""
        with pytest.raises(GraphError, match="Invalid cast from 2d vector to scalar"):
            Vec2Value().as_scalar()

    def test_payload_does_not_alias_value(self):
        value = Vec2Value(1.0, 1.0)
        payload = value.as_vector()
        value.x = 9.0
        assert payload == Vec2(1.0, 1.0)

    def test_data_type_tags(self):
        assert ScalarValue().data_type == DataType.SCALAR
        assert Vec2Value().data_type == DataType.VEC2

    def test_default_for(self):
        assert ValueType.default_for(DataType.SCALAR) == ScalarValue(0.0)
        assert ValueType.default_for(DataType.VEC2) == Vec2Value(0.0, 0.0)

    def test_validate(self):
        assert ValueType.validate(ScalarValue(1.0), DataType.SCALAR) is True
        assert ValueType.validate(ScalarValue(1.0), DataType.VEC2) is False
        assert ValueType.validate(1.0, DataType.SCALAR) is False

    def test_variants_never_compare_equal(self):
        assert ScalarValue(0.0) != Vec2Value(0.0, 0.0)

    def test_copy_is_independent(self):
        original = Vec2Value(1.0, 2.0)
        duplicate = original.copy()
        duplicate.y = 5.0
        assert original == Vec2Value(1.0, 2.0)
        assert duplicate == Vec2Value(1.0, 5.0)

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            ValueType()


class TestValueWidget:

    def test_scalar_widget_edits_payload(self):
        ui = ScriptedUi([4.25])
        value = ScalarValue(0.0)

        value.value_widget("value", ui)

        assert ui.labels == ["value"]
        assert value == ScalarValue(4.25)

    def test_vector_widget_edits_both_components(self):
        ui = ScriptedUi([1.5, -3.0])
        value = Vec2Value(0.0, 0.0)

        value.value_widget("v1", ui)

        assert ui.labels == ["v1", "x", "y"]
        assert value == Vec2Value(1.5, -3.0)
        assert value.data_type == DataType.VEC2

    def test_widget_without_edit_keeps_value(self):
        ui = ScriptedUi([])
        value = Vec2Value(2.0, 3.0)
        value.value_widget("vector", ui)
        assert value == Vec2Value(2.0, 3.0)
