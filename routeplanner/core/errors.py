# routeplanner/core/errors.py
#!/usr/bin/env python3


class LoadError(ValueError):
    """Grid source is unreadable or malformed. Nothing of it is used."""


class InvalidCoordinate(ValueError):
    """Operator picked a cell that is off the grid, not empty, or already taken."""


class IllegalTransition(ValueError):
    """A cell was asked to move to a state its current state cannot reach."""
