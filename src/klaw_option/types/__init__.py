"""Core types: Option, Some, Nothing and their constructors."""

from klaw_option.types.nil import is_nil
from klaw_option.types.option import Nothing, Option, Some, from_nullable, nothing, some

__all__ = [
    "Nothing",
    "Option",
    "Some",
    "from_nullable",
    "is_nil",
    "nothing",
    "some",
]
