"""
Error taxonomy for BoundedValue.

Every fallible BoundedValue operation raises one of these in strict mode.
In permissive mode none of them ever leave the instance.

    BoundedValueError
        ConstructionError       missing or non-iterable allowed values
        InvalidStateError       value outside the allowed set
        LockError
            LockedStateError        set_state while locked
            AlreadyLockedError      lock while locked
            AlreadyUnlockedError    unlock while unlocked
            InvalidCredentialError  wrong key, or permanent lock
"""


class BoundedValueError(Exception):
    """Base class for all BoundedValue errors."""


class ConstructionError(BoundedValueError, TypeError):
    """The allowed values were missing, empty or not iterable."""


class InvalidStateError(BoundedValueError, ValueError):
    """A candidate value is not one of the allowed values."""


class LockError(BoundedValueError):
    """Base class for lock-related errors."""


class LockedStateError(LockError, TypeError):
    """The current value cannot change while the instance is locked."""


class AlreadyLockedError(LockError):
    pass


class AlreadyUnlockedError(LockError):
    pass


class InvalidCredentialError(LockError, TypeError):
    """The key does not unlock this instance (or it is locked permanently)."""
