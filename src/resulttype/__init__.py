"""resulttype: Outcome and DeferredOutcome types for Python 3.13+.

Flat imports (preferred):
    from resulttype import Outcome, Success, Failure, DeferredOutcome
    from resulttype import success, failure, combine, deferred

Submodule imports (for organization):
    from resulttype.types import Outcome, Option
    from resulttype.deferred import DeferredOutcome
"""

# Types
from resulttype.types import (
    Failure,
    Nothing,
    NothingType,
    Option,
    Outcome,
    Some,
    Success,
    collect,
    combine,
    failure,
    success,
)

# Deferred evaluation
from resulttype.deferred import DeferredOutcome
from resulttype.decorators import deferred

# Errors
from resulttype.errors import InvalidArgumentError

# Configuration
from resulttype._config import Config, get_config, init
from resulttype._logging import configure_logging, get_logger

__all__ = [
    'Config',
    'DeferredOutcome',
    'Failure',
    'InvalidArgumentError',
    'Nothing',
    'NothingType',
    'Option',
    'Outcome',
    'Some',
    'Success',
    'collect',
    'combine',
    'configure_logging',
    'deferred',
    'failure',
    'get_config',
    'get_logger',
    'init',
    'success',
]
