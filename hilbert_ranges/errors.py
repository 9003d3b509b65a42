from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a call violates a precondition (arity, range, depth, curve size)."""
