"""Core types: Outcome, Success, Failure, Option, Some, Nothing."""

from resulttype.types.option import Nothing, NothingType, Option, Some
from resulttype.types.outcome import Failure, Outcome, Success, collect, combine, failure, success

__all__ = [
    'Failure',
    'Nothing',
    'NothingType',
    'Option',
    'Outcome',
    'Some',
    'Success',
    'collect',
    'combine',
    'failure',
    'success',
]
