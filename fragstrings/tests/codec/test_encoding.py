"""Tests for encoding"""

import pytest

import fragstrings
from fragstrings import errors
from fragstrings.codec import decode, encode
from fragstrings.descriptor import parse_descriptor
from fragstrings.errors import (
    ArityMismatch,
    DecodeError,
    DelimiterInValue,
    EncodeError,
    TypeMismatch,
    UnknownToken,
    WildcardNotAllowed,
)


def describe_encode():
    def encodes_single_values(expect):
        expect(encode("%s", ["test"])) == "%s__test"
        expect(encode("%d", [42])) == "%d__42"

    def encodes_mixed_values_in_order(expect):
        expect(encode("%s%s%d", ["foo", "bar", 42])) == "%s%s%d__foo__bar__42"
        expect(encode("%s%d", ["test", 42])) == "%s%d__test__42"
        expect(encode("%d%s", [42, "test"])) == "%d%s__42__test"

    def accepts_parsed_spec(expect):
        spec = parse_descriptor("%d%d")
        expect(encode(spec, [1, 2])) == "%d%d__1__2"

    def accepts_any_sequence(expect):
        expect(encode("%s%d", ("a", 1))) == "%s%d__a__1"

    def renders_negative_integers(expect):
        expect(encode("%d", [-42])) == "%d__-42"

    def renders_integer_bounds(expect):
        expect(encode("%d%d", [-(2**63), 2**63 - 1])) == (
            "%d%d__-9223372036854775808__9223372036854775807"
        )

    def renders_empty_strings(expect):
        expect(encode("%s%s", ["", "x"])) == "%s%s____x"
        expect(encode("%s", [""])) == "%s__"

    def emits_strings_verbatim(expect):
        expect(encode("%s", ["héllo wörld"])) == "%s__héllo wörld"
        expect(encode("%s", ["a_b"])) == "%s__a_b"

    def encodes_empty_descriptor(expect):
        expect(encode("", [])) == "__"


def describe_encode_errors():
    def rejects_too_few_values(expect):
        with pytest.raises(ArityMismatch) as exc:
            encode("%d%d", [42])
        expect(exc.value.expected) == 2
        expect(exc.value.actual) == 1

    def rejects_too_many_values(expect):
        with pytest.raises(ArityMismatch):
            encode("%s", ["a", "b"])
        with pytest.raises(ArityMismatch):
            encode("", ["a"])

    def rejects_wrong_value_type(expect):
        with pytest.raises(TypeMismatch) as exc:
            encode("%s%d", ["a", "b"])
        expect(exc.value.index) == 1
        expect(exc.value.expected) == "integer"

        with pytest.raises(TypeMismatch) as exc:
            encode("%s", [42])
        expect(exc.value.index) == 0
        expect(exc.value.expected) == "string"

    def rejects_bool_for_integer(expect):
        with pytest.raises(TypeMismatch):
            encode("%d", [True])

    def rejects_out_of_range_integer(expect):
        with pytest.raises(TypeMismatch):
            encode("%d", [2**63])

    def rejects_wildcard_descriptor(expect):
        with pytest.raises(WildcardNotAllowed):
            encode("%d*", [42])
        with pytest.raises(WildcardNotAllowed):
            encode("*", [])

    def propagates_descriptor_errors(expect):
        with pytest.raises(UnknownToken):
            encode("%f", [1])

    def errors_are_encode_errors(expect):
        for descriptor, values in [("%d", []), ("%d", ["x"]), ("%s*", ["x"])]:
            with pytest.raises(EncodeError):
                encode(descriptor, values)

    def arity_mismatch_is_also_a_decode_error(expect):
        with pytest.raises(DecodeError):
            encode("%d", [])


def describe_strict_encoding():
    def allows_delimiter_by_default(expect):
        expect(encode("%s", ["a__b"])) == "%s__a__b"

    def rejects_delimiter_in_strict_mode(expect):
        with pytest.raises(DelimiterInValue) as exc:
            encode("%d%s", [1, "a__b"], strict=True)
        expect(exc.value.index) == 1

    def accepts_clean_values_in_strict_mode(expect):
        expect(encode("%s%d", ["a_b", 3], strict=True)) == "%s%d__a_b__3"

    def rejects_trailing_underscore_before_another_value(expect):
        with pytest.raises(DelimiterInValue) as exc:
            encode("%s%s", ["a_", "b"], strict=True)
        expect(exc.value.index) == 0

        with pytest.raises(DelimiterInValue):
            encode("%s%s", ["_", ""], strict=True)
        with pytest.raises(DelimiterInValue):
            encode("%s%d", ["a_", 5], strict=True)

    def accepts_trailing_underscore_on_last_value(expect):
        text = encode("%s%s", ["a", "b_"], strict=True)
        expect(decode("%s%s", text)) == ("a", "b_")

    def accepted_values_decode_back(expect):
        cases = [
            ("%s%s", ["_b", "c"]),
            ("%s%s%s", ["", "_x", "y_"]),
            ("%d%s", [-1, "_a_b_"]),
        ]
        for descriptor, values in cases:
            text = encode(descriptor, values, strict=True)
            expect(decode(descriptor, text)) == tuple(values)


def describe_encode_arguments():
    def rejects_bare_string_as_values(expect):
        with pytest.raises(TypeError):
            encode("%s%s", "ab")

    def package_exports_only_error_classes(expect):
        expect(hasattr(fragstrings, "Any")) == False
        for name in errors.__all__:
            expect(getattr(fragstrings, name)) == getattr(errors, name)
