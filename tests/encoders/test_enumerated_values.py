import pytest

from svd_encoder.core.exceptions import InvalidEntityError
from svd_encoder.encoders.enumerated_values import (
    encode_enumerated_value,
    encode_enumerated_values,
)
from svd_encoder.svd import EnumeratedValue, EnumeratedValues, Usage
from svd_encoder.utils.config import Config, IdentifierFormat, NumberFormat


class TestEnumeratedValue:
    def test_value(self, config):
        elem = encode_enumerated_value(
            EnumeratedValue(name="Enabled", description="On", value=1), config
        )
        assert elem.tag == "enumeratedValue"
        assert [(c.tag, c.text) for c in elem.elements()] == [
            ("name", "Enabled"),
            ("description", "On"),
            ("value", "1"),
        ]

    def test_is_default(self, config):
        elem = encode_enumerated_value(EnumeratedValue(name="Reserved", is_default=True), config)
        assert elem.child_tags() == ["name", "isDefault"]
        assert elem.find("isDefault").text == "true"

    def test_value_format_and_name_rule(self):
        config = Config(
            enumerated_value_value=NumberFormat.UPPER_HEX,
            enumerated_value_name=IdentifierFormat.CONSTANT,
        )
        elem = encode_enumerated_value(EnumeratedValue(name="HighSpeed", value=10), config)
        assert elem.find("name").text == "HIGH_SPEED"
        assert elem.find("value").text == "0xA"

    @pytest.mark.parametrize(
        "value",
        [
            EnumeratedValue(name="Neither"),
            EnumeratedValue(name="Both", value=1, is_default=True),
        ],
    )
    def test_exactly_one_of_value_and_default(self, config, value):
        with pytest.raises(InvalidEntityError):
            encode_enumerated_value(value, config)


class TestEnumeratedValues:
    def test_container(self, config, enable_values):
        elem = encode_enumerated_values(enable_values, config)
        assert elem.tag == "enumeratedValues"
        assert elem.child_tags() == ["name", "enumeratedValue", "enumeratedValue"]
        assert elem.attributes == {}

    def test_optional_children_order(self, config):
        values = EnumeratedValues(
            name="MODE",
            header_enum_name="ModeEnum",
            usage=Usage.READ_WRITE,
            values=(EnumeratedValue(name="Off", value=0),),
        )
        elem = encode_enumerated_values(values, config)
        assert elem.child_tags() == ["name", "headerEnumName", "usage", "enumeratedValue"]
        assert elem.find("usage").text == "read-write"

    def test_derived_container_may_be_empty(self):
        config = Config(enumerated_values_name=IdentifierFormat.LOWERCASE)
        elem = encode_enumerated_values(EnumeratedValues(derived_from="ENABLE"), config)
        assert elem.children == []
        assert elem.attributes == {"derivedFrom": "enable"}

    def test_empty_container_rejected(self, config):
        with pytest.raises(InvalidEntityError):
            encode_enumerated_values(EnumeratedValues(name="EMPTY"), config)

    def test_nested_error_propagates(self, config):
        values = EnumeratedValues(values=(EnumeratedValue(name="Bad"),))
        with pytest.raises(InvalidEntityError):
            encode_enumerated_values(values, config)
