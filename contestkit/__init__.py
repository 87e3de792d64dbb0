"""Solutions to small olympiad-style programming problems, as functions and commands."""

__version__ = "0.1.0"
__all__ = ["army", "bank", "chocolate", "digits", "hiking", "lessons", "paints"]