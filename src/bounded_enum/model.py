"""
Core BoundedValue Object

A BoundedValue is a runtime-checked enumeration: a variable restricted to
one of a fixed, ordered set of allowed values, optionally locked to its
current value.

It holds:
    - Allowed values (ordered, immutable, non-empty)
    - Current value (always one of the allowed values)
    - Lock state (unlocked, transient with a key, permanent)
    - Error mode (strict or permissive, fixed at construction)

ERROR MODES:
    Every fallible operation behaves the same way in a given mode:
        - STRICT raises a typed error from bounded_enum.errors
        - PERMISSIVE (the default) never raises; it returns a benign
          sentinel (False, the unchanged current value) and logs the
          suppressed error at DEBUG level

    Validity is checked before the lock. An invalid value is rejected the
    same way whether or not the instance is locked.
"""

import logging
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

from bounded_enum.errors import (
    AlreadyLockedError,
    AlreadyUnlockedError,
    BoundedValueError,
    ConstructionError,
    InvalidCredentialError,
    InvalidStateError,
    LockedStateError,
)
from bounded_enum.locking import LockKey, LockState

logger = logging.getLogger(__name__)

NOT_FOUND = -1

# Substituted in permissive mode when no usable allowed values are given
_FALLBACK_STATES: Tuple[Any, ...] = (True,)


class ErrorMode(Enum):
    """
    How fallible operations report failure.

    Chosen once at construction and never changed afterwards.
    """

    STRICT = "strict"
    PERMISSIVE = "permissive"

    @classmethod
    def resolve(cls, flag: Union[bool, "ErrorMode"]) -> "ErrorMode":
        """Map a suppress_errors flag (or an ErrorMode) to an ErrorMode."""
        if isinstance(flag, cls):
            return flag
        return cls.PERMISSIVE if flag else cls.STRICT

    @property
    def suppresses(self) -> bool:
        return self is ErrorMode.PERMISSIVE


def _coerce_states(allowed_values: Any, mode: ErrorMode) -> Tuple[Any, ...]:
    """Turn the constructor argument into a non-empty tuple of allowed values."""
    if allowed_values is None:
        if not mode.suppresses:
            raise ConstructionError("BoundedValue must be constructed with exactly one argument")
        logger.debug("No allowed values given, using %r", _FALLBACK_STATES)
        return _FALLBACK_STATES

    try:
        states = tuple(allowed_values)
    except TypeError:
        if not mode.suppresses:
            raise ConstructionError(
                "BoundedValue must be constructed with exactly one argument that is array-like, "
                f"got {type(allowed_values).__name__}"
            ) from None
        logger.debug("Allowed values %r are not iterable, using %r", allowed_values, _FALLBACK_STATES)
        return _FALLBACK_STATES

    if not states:
        if not mode.suppresses:
            raise ConstructionError("BoundedValue must be constructed with at least one allowed value")
        logger.debug("Allowed values are empty, using %r", _FALLBACK_STATES)
        return _FALLBACK_STATES

    return states


class BoundedValue:
    """
    A value restricted to a fixed, ordered set of allowed values.

    The first allowed value is the initial current value. Allowed values are
    compared with ==, first match wins, exactly like list.index.

    Example:
        fan = BoundedValue(["OFF", "LOW", "MID", "HIGH"], suppress_errors=False)
        fan.state               # 'OFF'
        fan.set_state("MID")    # 'MID'

        key = fan.lock()
        fan.set_state("LOW")    # raises LockedStateError
        fan.unlock(key)         # True
        fan.set_state("LOW")    # 'LOW'

    Args:
        allowed_values:
            Any iterable of values. Lists and tuples are used as given,
            other iterables (generators, ranges, strings, sets) are
            materialised in iteration order.
        suppress_errors:
            True (default) or ErrorMode.PERMISSIVE for permissive mode,
            False or ErrorMode.STRICT for strict mode.

    Raises:
        ConstructionError: in strict mode, if allowed_values is None,
            empty or not iterable. Permissive mode falls back to (True,).
    """

    def __init__(self, allowed_values: Optional[Iterable[Any]] = None,
                 suppress_errors: Union[bool, ErrorMode] = True):
        mode = ErrorMode.resolve(suppress_errors)
        states = _coerce_states(allowed_values, mode)

        self._mode = mode
        self._states = states
        self._current = states[0]
        self._lock_state = LockState.UNLOCKED
        self._lock_key: Optional[LockKey] = None

    # =========================================================================
    # Construction helpers
    # =========================================================================

    @classmethod
    def from_values(cls, *values: Any) -> "BoundedValue":
        """Build a permissive BoundedValue from positional arguments."""
        return cls(values)

    @staticmethod
    def is_instance(obj: Any) -> bool:
        return isinstance(obj, BoundedValue)

    # =========================================================================
    # Read accessors
    # =========================================================================

    @property
    def mode(self) -> ErrorMode:
        return self._mode

    @property
    def lock_state(self) -> LockState:
        return self._lock_state

    @property
    def state(self) -> Any:
        return self.get_state()

    @state.setter
    def state(self, candidate: Any) -> None:
        self.set_state(candidate)

    @property
    def value(self) -> Any:
        return self.get_state()

    @value.setter
    def value(self, candidate: Any) -> None:
        self.set_state(candidate)

    @property
    def states(self) -> Tuple[Any, ...]:
        return self.get_valid_states()

    @property
    def length(self) -> int:
        return len(self._states)

    def get_state(self) -> Any:
        """Return the current value."""
        return self._current

    def get_valid_states(self) -> Tuple[Any, ...]:
        """
        Return the allowed values.

        The tuple is the instance's own storage; being immutable, it can be
        handed out without a copy.
        """
        return self._states

    def index_of(self, candidate: Any) -> int:
        """
        Find a candidate among the allowed values.

        Args:
            candidate: Value to look up

        Returns:
            Index of the first equal allowed value, or NOT_FOUND (-1)
        """
        try:
            return self._states.index(candidate)
        except ValueError:
            return NOT_FOUND

    def search(self, candidate: Any) -> int:
        """Search operator; same result as index_of."""
        return self.index_of(candidate)

    def is_valid_state(self, candidate: Any) -> bool:
        return self.index_of(candidate) != NOT_FOUND

    def is_locked(self) -> bool:
        return self._lock_state.is_locked

    # =========================================================================
    # Mutators
    # =========================================================================

    def set_state(self, candidate: Any) -> Any:
        """
        Change the current value.

        Args:
            candidate: New value, must be one of the allowed values

        Returns:
            The current value after the call (unchanged on a suppressed
            failure)

        Raises:
            InvalidStateError: strict mode, candidate is not allowed
            LockedStateError: strict mode, instance is locked
        """
        if not self.is_valid_state(candidate):
            return self._fail(InvalidStateError(f"{candidate!r} is not a valid state"), self._current)

        if self.is_locked():
            return self._fail(
                LockedStateError(f"State cannot be changed from {self._current!r} while locked"),
                self._current,
            )

        logger.debug("State changed from %r to %r", self._current, candidate)
        self._current = candidate
        return self._current

    def lock(self, permanent: bool = False) -> Union[LockKey, bool]:
        """
        Lock the instance to its current value.

        Args:
            permanent: Only True itself makes the lock permanent; it can
                then never be released

        Returns:
            A fresh LockKey for a transient lock, True for a permanent lock,
            False if already locked (permissive mode)

        Raises:
            AlreadyLockedError: strict mode, instance is already locked
        """
        if self.is_locked():
            return self._fail(AlreadyLockedError("BoundedValue is already locked"), False)

        if permanent is True:
            self._lock_state = LockState.PERMANENT
            logger.debug("Locked permanently at %r", self._current)
            return True

        self._lock_key = LockKey()
        self._lock_state = LockState.TRANSIENT
        logger.debug("Locked at %r with %r", self._current, self._lock_key)
        return self._lock_key

    def unlock(self, key: Any = None) -> bool:
        """
        Release a transient lock.

        Only the exact LockKey returned by the lock() call that created the
        current lock releases it. A permanent lock accepts no key.

        Raises:
            AlreadyUnlockedError: strict mode, instance is not locked
            InvalidCredentialError: strict mode, wrong key or permanent lock
        """
        if not self.is_locked():
            return self._fail(AlreadyUnlockedError("BoundedValue is already unlocked"), False)

        if self._lock_state is LockState.PERMANENT:
            return self._fail(InvalidCredentialError("BoundedValue is locked permanently"), False)

        if key is not self._lock_key:
            return self._fail(InvalidCredentialError(f"Invalid key to unlock BoundedValue: {key!r}"), False)

        self._lock_state = LockState.UNLOCKED
        self._lock_key = None
        logger.debug("Unlocked at %r", self._current)
        return True

    def _fail(self, error: BoundedValueError, fallback: Any) -> Any:
        if not self._mode.suppresses:
            raise error
        logger.debug("Suppressed %s: %s", type(error).__name__, error)
        return fallback

    # =========================================================================
    # Traversal
    # =========================================================================

    def __iter__(self) -> Iterator[Any]:
        for state in self._states:
            yield state

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, candidate: Any) -> bool:
        return self.is_valid_state(candidate)

    def for_each(self, visitor: Callable[[Any, int, Tuple[Any, ...]], Any]) -> None:
        """Call visitor(state, index, states) for every allowed value, in order."""
        for index, state in enumerate(self._states):
            visitor(state, index, self._states)

    # =========================================================================
    # Conversions
    # =========================================================================

    def to_index(self) -> int:
        """Index of the current value among the allowed values."""
        return self.index_of(self._current)

    def to_display_string(self) -> str:
        return str(self._current)

    def to_primitive(self) -> Any:
        return self._current

    def display_tag(self) -> str:
        return "BoundedValue"

    def __int__(self) -> int:
        return self.to_index()

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (
            f"{self.display_tag()}({self._current!r}, states={list(self._states)!r}, "
            f"mode={self._mode.value}, lock_state={self._lock_state.value})"
        )
