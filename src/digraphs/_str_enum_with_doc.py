"""Base class for string enums whose members carry a docstring."""

from enum import StrEnum
from typing import Self


class StrEnumWithDoc(StrEnum):
    """String enum where each member may be declared as ``value, doc``.

    The optional second item becomes the member's ``__doc__``; lookups by
    value only consider the first item.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        """Create a member holding ``value`` and documented by ``doc``."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj
