import pytest

from svd_encoder.core.exceptions import InvalidEntityError
from svd_encoder.encoders.field import encode_bit_range, encode_field
from svd_encoder.svd import (
    Access,
    BitRange,
    BitRangeType,
    DimElement,
    EnumeratedValues,
    Field,
    ModifiedWriteValues,
    ReadAction,
    WriteConstraintRange,
)
from svd_encoder.utils.config import Config, IdentifierFormat


class TestBitRange:
    def test_bit_range_notation(self, config):
        nodes = encode_bit_range(BitRange(offset=4, width=3), config)
        assert [(n.tag, n.text) for n in nodes] == [("bitRange", "[6:4]")]

    def test_offset_width_notation(self, config):
        nodes = encode_bit_range(BitRange(4, 3, BitRangeType.OFFSET_WIDTH), config)
        assert [(n.tag, n.text) for n in nodes] == [("bitOffset", "4"), ("bitWidth", "3")]

    def test_msb_lsb_notation(self, config):
        nodes = encode_bit_range(BitRange.from_msb_lsb(msb=7, lsb=0), config)
        assert [(n.tag, n.text) for n in nodes] == [("lsb", "0"), ("msb", "7")]

    def test_config_overrides_notation(self):
        config = Config(field_bit_range=BitRangeType.BIT_RANGE)
        nodes = encode_bit_range(BitRange(0, 1, BitRangeType.OFFSET_WIDTH), config)
        assert [(n.tag, n.text) for n in nodes] == [("bitRange", "[0:0]")]

    def test_zero_width_rejected(self, config):
        with pytest.raises(InvalidEntityError):
            encode_bit_range(BitRange(offset=0, width=0), config)


class TestEncodeField:
    def test_minimal_field(self, config, make_field):
        elem = encode_field(make_field("EN", 0), config)

        assert elem.tag == "field"
        assert elem.child_tags() == ["name", "bitRange"]
        assert elem.attributes == {}

    def test_full_child_order(self, config, enable_values):
        field = Field(
            name="MODE",
            bit_range=BitRange(offset=2, width=2),
            description="Operating mode",
            access=Access.READ_WRITE,
            modified_write_values=ModifiedWriteValues.ONE_TO_SET,
            write_constraint=WriteConstraintRange(minimum=0, maximum=2),
            read_action=ReadAction.MODIFY,
            enumerated_values=(enable_values, EnumeratedValues(derived_from="OTHER")),
            derived_from="BASE_MODE",
        )
        elem = encode_field(field, config)

        assert elem.child_tags() == [
            "name",
            "description",
            "bitRange",
            "access",
            "modifiedWriteValues",
            "writeConstraint",
            "readAction",
            "enumeratedValues",
            "enumeratedValues",
        ]
        assert elem.find("access").text == "read-write"
        assert elem.attributes == {"derivedFrom": "BASE_MODE"}

    def test_description_equal_to_name_omitted(self, config):
        field = Field(name="EN", bit_range=BitRange(0, 1), description="EN")
        assert "description" not in encode_field(field, config).child_tags()

    def test_field_name_rule(self):
        config = Config(field_name=IdentifierFormat.SNAKE)
        field = Field(name="TxEnable", bit_range=BitRange(0, 1), derived_from="RxEnable")
        elem = encode_field(field, config)

        assert elem.find("name").text == "tx_enable"
        assert elem.attributes["derivedFrom"] == "rx_enable"

    def test_field_array(self, config):
        field = Field(
            name="CH%s",
            bit_range=BitRange(0, 1),
            dim=DimElement(dim=4, dim_increment=1),
        )
        elem = encode_field(field, config)

        assert elem.tag == "field"
        assert elem.child_tags() == ["dim", "dimIncrement", "name", "bitRange"]
        assert elem.find("name").text == "CH%s"

    def test_enumerated_values_error_propagates(self, config):
        field = Field(
            name="EN", bit_range=BitRange(0, 1), enumerated_values=(EnumeratedValues(),)
        )
        with pytest.raises(InvalidEntityError):
            encode_field(field, config)
