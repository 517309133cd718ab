"""Decoding of fragmented strings into typed values."""

import logging
import re

from ..descriptor import DELIMITER, FormatSpec, FragmentType, parse_descriptor
from ..descriptor.types import INT64_MAX, INT64_MIN
from ..errors import (
    ArityMismatch,
    DecodeError,
    DescriptorError,
    DescriptorMismatch,
    MalformedEmbeddedDescriptor,
    MissingDelimiter,
    TypeConversion,
)
from .encoding import resolve_spec

_log = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"-?[0-9]+")


def parse_integer(index: int, fragment: str) -> int:
    """Convert a fragment to a signed 64-bit integer."""
    if not _INTEGER_RE.fullmatch(fragment):
        raise TypeConversion(index, "integer", fragment)

    value = int(fragment)
    if not INT64_MIN <= value <= INT64_MAX:
        raise TypeConversion(index, "integer", fragment)
    return value


def split_fragments(text: str) -> tuple[FormatSpec, list[str]]:
    """Split a fragmented string into its embedded descriptor and raw fragments."""
    head, delimiter, payload = text.partition(DELIMITER)
    if not delimiter:
        raise MissingDelimiter(text)

    try:
        embedded = parse_descriptor(head, allow_wildcard=False)
    except DescriptorError as exc:
        raise MalformedEmbeddedDescriptor(exc) from exc

    # "__" alone carries no fragments; "%s__" carries one empty fragment
    if not payload and not embedded.fragments:
        return embedded, []
    return embedded, payload.split(DELIMITER)


def _check_descriptor(spec: FormatSpec, embedded: FormatSpec) -> None:
    if spec.allows_trailing:
        matches = embedded.fragments[: spec.arity] == spec.fragments
    else:
        matches = embedded.fragments == spec.fragments
    if not matches:
        raise DescriptorMismatch(spec.text, embedded.text)


def decode(spec: FormatSpec | str, text: str, *, strict: bool = False) -> tuple[str | int, ...]:
    """Decode a fragmented string according to the expected descriptor.

    The embedded descriptor only locates the payload; values are interpreted
    with ``spec``. With ``strict`` the embedded descriptor must also agree with
    ``spec`` (as a prefix when ``spec`` has a wildcard).

    Fragments beyond the declared ones are discarded when ``spec`` has a
    wildcard, and are an arity error otherwise.
    """
    spec = resolve_spec(spec)
    embedded, raw = split_fragments(text)

    if strict:
        _check_descriptor(spec, embedded)

    if spec.allows_trailing:
        if len(raw) < spec.arity:
            raise ArityMismatch(spec.arity, len(raw), allows_trailing=True)
        if len(raw) > spec.arity:
            _log.debug("Discarding %d trailing fragments", len(raw) - spec.arity)
    elif len(raw) != spec.arity:
        raise ArityMismatch(spec.arity, len(raw))

    values: list[str | int] = []
    for index, fragment in enumerate(spec.fragments):
        if fragment is FragmentType.INTEGER:
            values.append(parse_integer(index, raw[index]))
        else:
            values.append(raw[index])
    return tuple(values)


def try_decode(
    spec: FormatSpec | str, text: str, *, strict: bool = False
) -> tuple[str | int, ...] | None:
    """Like decode(), but return None when the input does not decode."""
    try:
        return decode(spec, text, strict=strict)
    except DecodeError as exc:
        _log.debug("Could not decode %r: %s", text, exc)
        return None
