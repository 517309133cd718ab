"""Type definitions for formats files."""

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin


@dataclass
class FormatDef(DataClassJsonMixin):
    """A named descriptor declared in a formats file."""

    name: str
    descriptor: str
    comment: str | None
    line: int
