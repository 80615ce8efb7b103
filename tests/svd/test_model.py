import pytest

from svd_encoder.svd import (
    BitRange,
    BitRangeType,
    Field,
    RegisterArray,
    RegisterInfo,
    RegisterProperties,
    SingleRegister,
    DimElement,
)


def test_bit_range_bounds():
    rng = BitRange(offset=4, width=3)
    assert rng.lsb == 4
    assert rng.msb == 6
    assert rng.range_type is BitRangeType.BIT_RANGE


def test_bit_range_from_msb_lsb():
    rng = BitRange.from_msb_lsb(msb=15, lsb=8)
    assert rng == BitRange(offset=8, width=8, range_type=BitRangeType.MSB_LSB)


def test_field_offset_and_width():
    field = Field(name="EN", bit_range=BitRange(offset=3, width=2))
    assert field.bit_offset == 3
    assert field.bit_width == 2
    assert field.enumerated_values == ()
    assert field.dim is None


def test_register_info_defaults():
    info = RegisterInfo(name="CTRL", address_offset=0)
    assert info.fields is None
    assert info.properties == RegisterProperties()
    assert info.derived_from is None


def test_entities_are_immutable():
    info = RegisterInfo(name="CTRL", address_offset=0)
    with pytest.raises(AttributeError):
        info.name = "OTHER"


def test_register_variants_wrap_info():
    info = RegisterInfo(name="CTRL", address_offset=0)
    dim = DimElement(dim=2, dim_increment=4)

    assert SingleRegister(info).info is info
    array = RegisterArray(info, dim)
    assert array.info is info
    assert array.dim is dim
