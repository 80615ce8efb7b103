"""Field ordering strategy.

Decides the sequence in which a register's fields are emitted. The result
is a new list referencing the original Field objects; the source
collection is never reordered.

DERIVE-LAST:
Fields that derive from another entity (directly, or through one of their
enumerated values containers) are moved after all other fields. This only
checks for the presence of a derivedFrom marker. It does not resolve the
reference, so a derived field whose referent is itself derived is not
ordered after that referent. Downstream consumers rely on this positional
contract; it must not be turned into a topological sort.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from svd_encoder.svd.field import Field
from svd_encoder.utils.config import DerivableSorting, DeriveLast, Sorting

logger = logging.getLogger(__name__)


def sort_fields(refs: list[Field], key: Optional[Sorting]) -> None:
    """Stable in-place sort of field references by key.

    Fields with equal keys keep their relative order. A key of None leaves
    the list untouched.
    """
    if key is None:
        return
    if key is Sorting.OFFSET:
        refs.sort(key=lambda f: f.bit_offset)
    elif key is Sorting.OFFSET_REVERSED:
        refs.sort(key=lambda f: f.bit_offset, reverse=True)
    elif key is Sorting.NAME:
        refs.sort(key=lambda f: f.name)


def is_derived(field: Field) -> bool:
    """True if the field or any of its enumerated values derives."""
    if field.derived_from is not None:
        return True
    return any(ev.derived_from is not None for ev in field.enumerated_values)


def sort_derived_fields(fields: Sequence[Field], sorting: DerivableSorting) -> list[Field]:
    """Resolve a sorting specification into the field emission order.

    Args:
        fields: Fields in description order
        sorting: Unchanged(key) or DeriveLast(key)

    Returns:
        Field references in emission order
    """
    if not isinstance(sorting, DeriveLast):
        refs = list(fields)
        sort_fields(refs, sorting.key)
        return refs

    common: list[Field] = []
    derived: list[Field] = []
    for f in fields:
        if is_derived(f):
            derived.append(f)
        else:
            common.append(f)

    logger.debug(f"derive-last ordering: {len(common)} common, {len(derived)} derived fields")

    sort_fields(common, sorting.key)
    sort_fields(derived, sorting.key)
    return common + derived
