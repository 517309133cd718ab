"""Encoding and decoding of fragmented strings."""

from .decoding import decode as decode
from .decoding import split_fragments as split_fragments
from .decoding import try_decode as try_decode
from .encoding import encode as encode
from .fragment_format import FragmentFormat as FragmentFormat
