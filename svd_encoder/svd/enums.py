"""Enumerated SVD attribute values.

Each member's value is the spelling used in the SVD document.
"""

from enum import Enum


class Access(Enum):
    READ_ONLY = "read-only"
    WRITE_ONLY = "write-only"
    READ_WRITE = "read-write"
    WRITE_ONCE = "writeOnce"
    READ_WRITE_ONCE = "read-writeOnce"


class ModifiedWriteValues(Enum):
    """Effect of a write on the register or field value."""

    ONE_TO_CLEAR = "oneToClear"
    ONE_TO_SET = "oneToSet"
    ONE_TO_TOGGLE = "oneToToggle"
    ZERO_TO_CLEAR = "zeroToClear"
    ZERO_TO_SET = "zeroToSet"
    ZERO_TO_TOGGLE = "zeroToToggle"
    CLEAR = "clear"
    SET = "set"
    MODIFY = "modify"


class ReadAction(Enum):
    """Side effect of a read on the register or field value."""

    CLEAR = "clear"
    SET = "set"
    MODIFY = "modify"
    MODIFY_EXTERNAL = "modifyExternal"


class Usage(Enum):
    READ = "read"
    WRITE = "write"
    READ_WRITE = "read-write"


class Protection(Enum):
    SECURE = "s"
    NON_SECURE = "n"
    PRIVILEGED = "p"
