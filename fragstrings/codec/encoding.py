"""Encoding of typed values into fragmented strings."""

from collections.abc import Sequence

from ..descriptor import DELIMITER, FormatSpec, FragmentType, parse_descriptor
from ..errors import ArityMismatch, DelimiterInValue, TypeMismatch, WildcardNotAllowed


def resolve_spec(spec: FormatSpec | str) -> FormatSpec:
    """Accept either a parsed spec or descriptor text."""
    if isinstance(spec, FormatSpec):
        return spec
    return parse_descriptor(spec)


def _render(fragment: FragmentType, value: str | int) -> str:
    if fragment is FragmentType.INTEGER:
        return str(value)
    return value  # type: ignore[return-value]


def _check_splittable(index: int, value: str, last: bool) -> None:
    # a trailing "_" merges with the next delimiter into "___"
    if DELIMITER in value or (not last and value.endswith("_")):
        raise DelimiterInValue(index, value)


def encode(spec: FormatSpec | str, values: Sequence[str | int], *, strict: bool = False) -> str:
    """Encode values into a fragmented string.

    Args:
        spec: The descriptor, parsed or as text. Must not have a wildcard.
        values: One value per declared fragment, in order.
        strict: Reject string values that would not split back out of the
            result: any containing ``__``, and any but the last ending in ``_``.

    Returns:
        The descriptor text, then each rendered value, joined by ``__``.
    """
    if isinstance(values, str):
        raise TypeError("Values must be a sequence of values, not a single str")

    spec = resolve_spec(spec)

    if spec.allows_trailing:
        raise WildcardNotAllowed(spec.text)

    if len(values) != spec.arity:
        raise ArityMismatch(spec.arity, len(values))

    rendered = [spec.text]
    for index, (fragment, value) in enumerate(zip(spec.fragments, values)):
        if not fragment.accepts(value):
            raise TypeMismatch(index, fragment.name.lower(), value)
        if strict and fragment is FragmentType.STRING:
            _check_splittable(index, value, last=index == spec.arity - 1)  # type: ignore[arg-type]
        rendered.append(_render(fragment, value))

    if not spec.fragments:
        return spec.text + DELIMITER
    return DELIMITER.join(rendered)
