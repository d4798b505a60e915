"""
Exception hierarchy for seqview.

The engine favours precondition contracts over recoverable errors. A missing
match is a normal outcome (``None`` / ``False``) and never raises.
"""


class SeqViewError(Exception):
    """Base class for all seqview errors."""


class PreconditionError(SeqViewError, AssertionError):
    """
    A caller contract was violated.

    Raised for capacity and length mismatches (``copy`` with a source of a
    different length, ``concat``/``join`` into a destination that is too
    small). The check happens before any element is written.
    """


class ReadOnlyViewError(SeqViewError, TypeError):
    """A mutating operation was requested on a read-only buffer."""


class UnsupportedBufferError(SeqViewError, TypeError):
    """The buffer is not a one-dimensional integer or floating-point run."""


__all__ = [
    'SeqViewError',
    'PreconditionError',
    'ReadOnlyViewError',
    'UnsupportedBufferError',
]
