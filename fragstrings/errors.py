"""Errors raised while parsing descriptors and encoding or decoding fragments."""

from typing import Any

__all__ = [
    "ArityMismatch",
    "DecodeError",
    "DelimiterInValue",
    "DescriptorError",
    "DescriptorMismatch",
    "EncodeError",
    "FragmentError",
    "MalformedEmbeddedDescriptor",
    "MissingDelimiter",
    "Truncated",
    "TypeConversion",
    "TypeMismatch",
    "UnknownToken",
    "WildcardNotAllowed",
]


class FragmentError(RuntimeError):
    """Base error for this package."""


class DescriptorError(FragmentError):
    """Raised when a descriptor cannot be parsed."""

    def __init__(self, message: str, specifier: str, position: int) -> None:
        super().__init__(message)
        self.specifier = specifier
        self.position = position


class UnknownToken(DescriptorError):
    """Raised for a token that is neither ``%s`` nor ``%d``."""

    def __init__(self, specifier: str, token: str, position: int) -> None:
        super().__init__(
            f"Unknown token {token!r} at position {position} in descriptor {specifier!r}",
            specifier,
            position,
        )
        self.token = token


class Truncated(DescriptorError):
    """Raised for a dangling ``%`` or for text after the wildcard."""

    def __init__(self, specifier: str, position: int) -> None:
        super().__init__(
            f"Descriptor {specifier!r} is truncated at position {position}",
            specifier,
            position,
        )


class EncodeError(FragmentError):
    """Raised when values cannot be encoded."""


class DecodeError(FragmentError):
    """Raised when a fragmented string cannot be decoded."""


class ArityMismatch(EncodeError, DecodeError):
    """Raised when the number of values or fragments disagrees with the descriptor."""

    def __init__(self, expected: int, actual: int, allows_trailing: bool = False) -> None:
        at_least = "at least " if allows_trailing else ""
        super().__init__(f"Expected {at_least}{expected} fragments, got {actual}")
        self.expected = expected
        self.actual = actual
        self.allows_trailing = allows_trailing


class TypeMismatch(EncodeError):
    """Raised when a value does not match its declared fragment type."""

    def __init__(self, index: int, expected: str, value: Any) -> None:
        super().__init__(
            f"Value {value!r} at index {index} cannot be encoded as {expected}"
        )
        self.index = index
        self.expected = expected
        self.value = value


class WildcardNotAllowed(EncodeError):
    """Raised when a wildcard descriptor is used for encoding."""

    def __init__(self, specifier: str) -> None:
        super().__init__(f"Descriptor {specifier!r} has a wildcard and cannot be used to encode")
        self.specifier = specifier


class DelimiterInValue(EncodeError):
    """Raised in strict mode when a string value would not split back out."""

    def __init__(self, index: int, value: str) -> None:
        super().__init__(f"Value {value!r} at index {index} would run into the fragment delimiter")
        self.index = index
        self.value = value


class MissingDelimiter(DecodeError):
    """Raised when the input has no delimiter after its descriptor."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No fragment delimiter found in {text!r}")
        self.text = text


class MalformedEmbeddedDescriptor(DecodeError):
    """Raised when the descriptor embedded in the input does not parse."""

    def __init__(self, cause: DescriptorError) -> None:
        super().__init__(f"Malformed embedded descriptor: {cause}")
        self.cause = cause


class TypeConversion(DecodeError):
    """Raised when a fragment's text cannot be converted to its declared type."""

    def __init__(self, index: int, expected: str, fragment: str) -> None:
        super().__init__(f"Fragment {fragment!r} at index {index} is not a valid {expected}")
        self.index = index
        self.expected = expected
        self.fragment = fragment


class DescriptorMismatch(DecodeError):
    """Raised in strict mode when the embedded descriptor differs from the expected one."""

    def __init__(self, expected: str, embedded: str) -> None:
        super().__init__(f"Embedded descriptor {embedded!r} does not match {expected!r}")
        self.expected = expected
        self.embedded = embedded
