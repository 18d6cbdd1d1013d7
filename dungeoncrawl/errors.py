from __future__ import annotations


class DungeonError(Exception):
    pass


class FormatError(DungeonError):
    """Save data is truncated or inconsistent."""


class ValidationError(DungeonError):
    """A dungeon broke one of its structural invariants."""


class InvalidChoice(DungeonError):
    """The player asked to move somewhere they can't go."""
