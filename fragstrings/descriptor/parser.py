"""Fragment descriptor parser using Lark."""

import logging
import os
from functools import lru_cache
from typing import Any

from lark import Lark, Token
from lark.exceptions import UnexpectedInput
from lark.visitors import Transformer

from ..errors import DescriptorError, Truncated, UnknownToken
from .types import WILDCARD, FormatSpec, FragmentType

_log = logging.getLogger(__name__)

_g_parser: Lark | None = None


class TreeTransformer(Transformer):
    """Transform parse tree into a FormatSpec."""

    def string(self, _args: list[Any]) -> FragmentType:
        return FragmentType.STRING

    def integer(self, _args: list[Any]) -> FragmentType:
        return FragmentType.INTEGER

    def start(self, args: list[Any]) -> FormatSpec:
        return FormatSpec(
            fragments=tuple(arg for arg in args if isinstance(arg, FragmentType)),
            allows_trailing=any(isinstance(arg, Token) and arg.type == "WILDCARD" for arg in args),
        )


def _get_parser() -> Lark:
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/descriptor.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(grammar, parser="lalr")

    return _g_parser


def _classify(specifier: str, exc: UnexpectedInput) -> DescriptorError:
    """Map a Lark parse failure onto the descriptor error kinds."""
    position = exc.pos_in_stream if exc.pos_in_stream is not None else len(specifier)

    if WILDCARD in specifier[:position]:
        return Truncated(specifier, position)
    if position == len(specifier) - 1 and specifier[position] == "%":
        return Truncated(specifier, position)
    return UnknownToken(specifier, specifier[position : position + 2], position)


@lru_cache(maxsize=256)
def _parse(specifier: str, allow_wildcard: bool) -> FormatSpec:
    _log.debug("Parsing descriptor %r", specifier)

    try:
        tree = _get_parser().parse(specifier)
    except UnexpectedInput as exc:
        raise _classify(specifier, exc) from exc

    spec = TreeTransformer().transform(tree)

    if spec.allows_trailing and not allow_wildcard:
        raise UnknownToken(specifier, WILDCARD, len(specifier) - 1)

    return spec


def parse_descriptor(specifier: str, *, allow_wildcard: bool = True) -> FormatSpec:
    """Parse a descriptor such as ``%s%d`` or ``%s%s*`` into a FormatSpec.

    Args:
        specifier: The descriptor text.
        allow_wildcard: Whether a trailing ``*`` is accepted. Descriptors
            embedded in a fragmented string never carry one.

    Raises:
        UnknownToken: A token other than ``%s``/``%d`` was found.
        Truncated: A dangling ``%`` or text after ``*`` was found.
    """
    if not isinstance(specifier, str):
        raise TypeError(f"Descriptor must be str, not {type(specifier).__name__}")

    return _parse(specifier, allow_wildcard)
