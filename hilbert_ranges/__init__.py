"""Hilbert curve indexing and box-to-range decomposition.

Exports :class:`HilbertCurve` for point <-> index conversion and range
queries, the :class:`Range` / :class:`Box` value types, and the error type
raised on contract violations.
"""

from ._version import __version__
from .curve import HilbertCurve
from .errors import InvalidArgumentError
from .geometry import Box, Range, simplify

__all__ = (
    "__version__",
    "HilbertCurve",
    "InvalidArgumentError",
    "Box",
    "Range",
    "simplify",
)
