"""fragstrings - typed values packed into delimited strings."""

from importlib.metadata import PackageNotFoundError, version

from .codec import FragmentFormat, decode, encode, try_decode
from .descriptor import FormatSpec, FragmentType, parse_descriptor
from .errors import *

try:
    __version__ = version("fragstrings")
except PackageNotFoundError:
    __version__ = "(local)"
