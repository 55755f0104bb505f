"""
bounded_enum: runtime-checked enumerations for Python values.

A BoundedValue restricts a variable to one of a fixed, ordered set of
allowed values, with optional transient (key-gated) or permanent locking.

ERROR MODES:
------------
Permissive (default): failures are silent no-ops with sentinel returns.
Strict: failures raise the typed errors in bounded_enum.errors.

The mode is chosen once, at construction.
"""

from bounded_enum.errors import (
    AlreadyLockedError,
    AlreadyUnlockedError,
    BoundedValueError,
    ConstructionError,
    InvalidCredentialError,
    InvalidStateError,
    LockError,
    LockedStateError,
)
from bounded_enum.locking import LockKey, LockState
from bounded_enum.model import NOT_FOUND, BoundedValue, ErrorMode

__version__ = "0.1.0"

__all__ = [
    "AlreadyLockedError",
    "AlreadyUnlockedError",
    "BoundedValue",
    "BoundedValueError",
    "ConstructionError",
    "ErrorMode",
    "InvalidCredentialError",
    "InvalidStateError",
    "LockError",
    "LockKey",
    "LockState",
    "LockedStateError",
    "NOT_FOUND",
]
