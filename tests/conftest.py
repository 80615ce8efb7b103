"""
Pytest configuration and shared fixtures for the encoder test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'svd_encoder' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from svd_encoder.svd import (  # noqa: E402
    BitRange,
    EnumeratedValue,
    EnumeratedValues,
    Field,
    RegisterInfo,
)
from svd_encoder.utils.config import Config  # noqa: E402
from svd_encoder.utils.config_loader import clear_config_cache  # noqa: E402


def _make_field(name, offset, width=1, derived_from=None, enumerated_values=()):
    return Field(
        name=name,
        bit_range=BitRange(offset=offset, width=width),
        derived_from=derived_from,
        enumerated_values=tuple(enumerated_values),
    )


@pytest.fixture
def make_field():
    """Factory building a minimal field at the given bit offset."""
    return _make_field


@pytest.fixture
def config():
    """Default formatting policy."""
    return Config()


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=".yaml",
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture(autouse=True)
def _clear_config_cache():
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def tie_fields():
    """Two fields sharing offset 4 followed by one at offset 2."""
    return (_make_field("A", 4), _make_field("B", 4), _make_field("C", 2))


@pytest.fixture
def enable_values():
    return EnumeratedValues(
        name="ENABLE",
        values=(
            EnumeratedValue(name="Disabled", value=0),
            EnumeratedValue(name="Enabled", value=1),
        ),
    )


@pytest.fixture
def ctrl_register():
    """A register with a single field and nothing else set."""
    return RegisterInfo(
        name="CTRL",
        address_offset=0x10,
        fields=(_make_field("EN", 0),),
    )
