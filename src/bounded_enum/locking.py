"""
Lock states and unlock credentials for BoundedValue.

A BoundedValue is either unlocked, locked transiently (a LockKey was handed
out and only that exact key releases it) or locked permanently (no key
exists, the lock is terminal).

IMPORTANT:
    LockKey equality is identity. Two keys are never equal, and a key is
    never equal to any application value, whatever its token looks like.
"""

import secrets
from dataclasses import dataclass, field
from enum import Enum


class LockState(Enum):
    """Lock status of a BoundedValue."""

    UNLOCKED = "unlocked"
    TRANSIENT = "transient"
    PERMANENT = "permanent"

    @property
    def is_locked(self) -> bool:
        return self is not LockState.UNLOCKED


@dataclass(frozen=True, eq=False)
class LockKey:
    """
    Opaque, single-use credential returned by a transient lock.

    Properties:
        token:
            Random 128-bit hex string. Display only; it plays no part
            in matching a key against a lock.

    Example:
        key = fan.lock()
        fan.unlock(key)          # True
        fan.unlock(key)          # already unlocked
    """

    token: str = field(default_factory=lambda: secrets.token_hex(16))

    def __repr__(self) -> str:
        return f"LockKey({self.token[:8]}...)"
