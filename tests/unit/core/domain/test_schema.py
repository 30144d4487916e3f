# tests/unit/core/domain/test_schema.py

"""Tests for FieldSpec and RecordSchema"""

# Standard library imports
from decimal import Decimal
from operator import attrgetter
from operator import itemgetter

# Third party imports
import pytest

# Local imports
from record_export.core.domain.enums import FieldType
from record_export.core.domain.errors import RenderError
from record_export.core.domain.schema import FieldSpec
from record_export.core.domain.schema import RecordSchema


class TestFieldSpec:
    """Test reading and type-checking single fields"""

    def test_extract_reads_through_accessor(self):
        spec = FieldSpec("Qty", FieldType.QUANTITY, itemgetter("qty"))

        assert spec.extract({"qty": 4}) == 4

    def test_none_is_passed_through(self):
        """Missing values render as empty cells, not errors"""
        spec = FieldSpec("Name", FieldType.TEXT, itemgetter("name"))

        assert spec.extract({"name": None}) is None

    @pytest.mark.parametrize("value", [Decimal("1.50"), 3, 2.25])
    def test_currency_accepts_numbers(self, value):
        spec = FieldSpec("Price", FieldType.CURRENCY, itemgetter("price"))

        assert spec.extract({"price": value}) == value

    def test_missing_attribute_becomes_render_error(self):
        spec = FieldSpec("Id", FieldType.INTEGER, attrgetter("id"))

        with pytest.raises(RenderError, match="Cannot read field 'Id'"):
            spec.extract(object())

    def test_missing_key_becomes_render_error(self):
        spec = FieldSpec("Id", FieldType.INTEGER, itemgetter("id"))

        with pytest.raises(RenderError, match="Cannot read field 'Id'"):
            spec.extract({})

    def test_short_tuple_becomes_render_error(self):
        """IndexError from a positional accessor is reported like a missing key"""
        spec = FieldSpec("Qty", FieldType.QUANTITY, itemgetter(3))

        with pytest.raises(RenderError, match="Cannot read field 'Qty'") as exc_info:
            spec.extract((1, 2))

        assert isinstance(exc_info.value.__cause__, IndexError)

    def test_accessor_value_error_becomes_render_error(self):
        def broken(record):
            raise ValueError("not ready")

        spec = FieldSpec("Name", FieldType.TEXT, broken)

        with pytest.raises(RenderError, match="not ready"):
            spec.extract({})

    def test_wrong_type_rejected(self):
        spec = FieldSpec("Id", FieldType.INTEGER, itemgetter("id"))

        with pytest.raises(RenderError, match="expects integer"):
            spec.extract({"id": "1"})

    def test_bool_is_not_an_integer(self):
        """bool subclasses int but is not a valid quantity"""
        spec = FieldSpec("Stock", FieldType.QUANTITY, itemgetter("stock"))

        with pytest.raises(RenderError):
            spec.extract({"stock": True})


class TestRecordSchema:
    """Test schema construction and record projection"""

    @pytest.fixture
    def schema(self):
        return RecordSchema(
            "Row",
            [
                FieldSpec("Key", FieldType.INTEGER, itemgetter("key")),
                FieldSpec("Label", FieldType.TEXT, itemgetter("label")),
            ],
        )

    def test_fields_stored_as_tuple(self, schema):
        assert isinstance(schema.fields, tuple)
        assert schema.field_names == ["Key", "Label"]

    def test_values_in_declared_order(self, schema):
        assert schema.values({"label": "a", "key": 9}) == [9, "a"]

    def test_describe(self, schema):
        assert schema.describe({"key": 9, "label": "a"}) == "Key : 9\nLabel : a"

    def test_empty_type_name_rejected(self):
        with pytest.raises(ValueError, match="type name"):
            RecordSchema("", (FieldSpec("Key", FieldType.INTEGER, itemgetter("key")),))

    def test_no_fields_rejected(self):
        with pytest.raises(ValueError, match="no fields"):
            RecordSchema("Row", ())

    def test_duplicate_field_names_rejected(self):
        key = FieldSpec("Key", FieldType.INTEGER, itemgetter("key"))

        with pytest.raises(ValueError, match="duplicate fields: Key"):
            RecordSchema("Row", (key, key))
