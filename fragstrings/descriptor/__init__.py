"""Fragment descriptor grammar."""

from .parser import parse_descriptor as parse_descriptor
from .types import DELIMITER as DELIMITER
from .types import WILDCARD as WILDCARD
from .types import FormatSpec as FormatSpec
from .types import FragmentType as FragmentType
