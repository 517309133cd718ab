"""Pre-validated fragment formats."""

from typing import Any

from ..descriptor import FormatSpec, parse_descriptor
from .decoding import decode, try_decode
from .encoding import encode


class FragmentFormat:
    """A descriptor checked once, up front, and reused for every call.

    Bind formats to module constants so a malformed descriptor fails at
    import time rather than on first use:

    Example:
        GREETING = FragmentFormat("%s%d")

        text = GREETING.format("hello", 42)   # "%s%d__hello__42"
        name, count = GREETING.parse(text)
    """

    __slots__ = ("_spec",)

    def __init__(self, specifier: str) -> None:
        self._spec = parse_descriptor(specifier)

    @property
    def spec(self) -> FormatSpec:
        return self._spec

    @property
    def text(self) -> str:
        return self._spec.text

    @property
    def arity(self) -> int:
        return self._spec.arity

    @property
    def allows_trailing(self) -> bool:
        return self._spec.allows_trailing

    def format(self, *values: str | int, strict: bool = False) -> str:
        """Encode values into a fragmented string."""
        return encode(self._spec, values, strict=strict)

    def parse(self, text: str, *, strict: bool = False) -> tuple[Any, ...]:
        """Decode a fragmented string, raising DecodeError on failure."""
        return decode(self._spec, text, strict=strict)

    def try_parse(self, text: str, *, strict: bool = False) -> tuple[Any, ...] | None:
        """Decode a fragmented string, returning None on failure."""
        return try_decode(self._spec, text, strict=strict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FragmentFormat):
            return NotImplemented
        return self._spec == other._spec

    def __hash__(self) -> int:
        return hash(self._spec)

    def __repr__(self) -> str:
        return f"FragmentFormat({self.text!r})"
