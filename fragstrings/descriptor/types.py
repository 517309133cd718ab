"""Type definitions for fragment descriptors."""

from dataclasses import dataclass
from enum import StrEnum

from dataclasses_json import DataClassJsonMixin

DELIMITER = "__"
WILDCARD = "*"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class FragmentType(StrEnum):
    """A fragment's declared type, valued by its descriptor token."""

    STRING = "%s"
    INTEGER = "%d"

    @property
    def python_type(self) -> type:
        return str if self is FragmentType.STRING else int

    def accepts(self, value: object) -> bool:
        """Check if a Python value can be encoded as this fragment type."""
        if self is FragmentType.STRING:
            return isinstance(value, str)
        # bool is an int subclass but never an integer fragment
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return INT64_MIN <= value <= INT64_MAX


@dataclass(frozen=True)
class FormatSpec(DataClassJsonMixin):
    """A parsed descriptor.

    - fragments: declared fragment types, in order
    - allows_trailing: True when the descriptor ends with ``*``; extra
      trailing fragments are then ignored on decode
    """

    fragments: tuple[FragmentType, ...]
    allows_trailing: bool = False

    @property
    def arity(self) -> int:
        return len(self.fragments)

    @property
    def text(self) -> str:
        """Canonical descriptor literal for this spec."""
        text = "".join(fragment.value for fragment in self.fragments)
        return text + WILDCARD if self.allows_trailing else text

    def __str__(self) -> str:
        return self.text
