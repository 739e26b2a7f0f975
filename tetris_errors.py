"""Exceptions for the falling-block engine."""


class InvariantError(Exception):
    """Internal state is corrupted (unknown piece type, impossible clear count,
    write outside the board). Never raised under correct operation."""
    pass
