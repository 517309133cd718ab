"""Formats file parser using Lark."""

import logging
import os
from dataclasses import dataclass
from typing import Any

from lark import Lark
from lark.exceptions import UnexpectedInput
from lark.visitors import Transformer

from ..descriptor import parse_descriptor
from ..errors import DescriptorError
from .types import FormatDef
from .util import to_snake_case

_log = logging.getLogger(__name__)

_g_parser: Lark | None = None


class ValidationError(RuntimeError):
    """Raised when a formats file fails validation."""


@dataclass
class _Comment:
    value: str
    line: int


@dataclass
class _Name:
    value: str
    line: int


class TreeTransformer(Transformer):
    """Transform parse tree into format definitions."""

    def comment(self, args: list[Any]) -> _Comment:
        return _Comment(value=str(args[0])[1:].strip(), line=args[0].line)

    def descriptor(self, args: list[Any]) -> str:
        return str(args[0])[1:-1]

    def format_def(self, args: list[Any]) -> FormatDef:
        name, descriptor = args
        return FormatDef(name=name.value, descriptor=descriptor, comment=None, line=name.line)

    def name(self, args: list[Any]) -> _Name:
        return _Name(value=str(args[0]), line=args[0].line)

    def start(self, args: list[Any]) -> list[Any]:
        return args


def _attach_comments(items: list[Any]) -> list[FormatDef]:
    """Attach comments on the line above, or trailing on the same line."""
    formats: list[FormatDef] = []
    pending: _Comment | None = None

    for item in items:
        if isinstance(item, _Comment):
            if formats and formats[-1].line == item.line and formats[-1].comment is None:
                formats[-1].comment = item.value
            else:
                pending = item
            continue

        if pending and pending.line == item.line - 1:
            item.comment = pending.value
        pending = None
        formats.append(item)

    return formats


def validate(formats: list[FormatDef]) -> None:
    """Validate parsed format definitions."""
    seen: dict[str, FormatDef] = {}

    for fmt in formats:
        key = to_snake_case(fmt.name)
        if key in seen:
            raise ValidationError(
                f"{fmt.name} (line {fmt.line}) clashes with {seen[key].name} (line {seen[key].line})"
            )
        seen[key] = fmt

        try:
            parse_descriptor(fmt.descriptor)
        except DescriptorError as exc:
            raise ValidationError(f"{fmt.name} (line {fmt.line}): {exc}") from exc


def parse(text: str) -> list[FormatDef]:
    """Parse a formats file."""
    global _g_parser

    if not _g_parser:
        with open(f"{os.path.dirname(__file__)}/formats.lark", encoding="utf-8") as f:
            grammar = f.read()

        _g_parser = Lark(grammar, parser="lalr")

    try:
        tree = _g_parser.parse(text)
    except UnexpectedInput as exc:
        raise ValidationError(f"Syntax error at line {exc.line}, column {exc.column}") from exc

    formats = _attach_comments(TreeTransformer().transform(tree))
    validate(formats)

    _log.debug("Parsed %d formats", len(formats))
    return formats
