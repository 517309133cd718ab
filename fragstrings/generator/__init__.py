"""Code generation for fragment formats files."""

from .parser import *
from .types import *
