"""
Serialization helpers for BoundedValue definitions.

Provides JSON/YAML export and import via an intermediate dict representation:

    {"states": [...], "state": <current>, "strict": bool, "locked": "unlocked"}

A definition describes how to build an instance; it is not a snapshot of a
live one. Lock keys are never exported, so a transient lock comes back
unlocked. A permanent lock is re-applied.

A catalog is a mapping of names to definitions, e.g. the enumerations an
application declares in a YAML config file.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict

import yaml

from bounded_enum.errors import ConstructionError
from bounded_enum.locking import LockState
from bounded_enum.model import BoundedValue, ErrorMode

logger = logging.getLogger(__name__)


def bounded_to_dict(bv: BoundedValue) -> Dict[str, Any]:
    return {
        "states": list(bv.states),
        "state": bv.state,
        "strict": bv.mode is ErrorMode.STRICT,
        "locked": bv.lock_state.value,
    }


def bounded_from_dict(d: Any) -> BoundedValue:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported definition type: {type(d)}")
    if "states" not in d:
        raise ConstructionError("Definition is missing 'states'")

    strict = d.get("strict", False)
    if not isinstance(strict, bool):
        raise ConstructionError(f"Unsupported strict flag: {strict!r}, expected true or false")
    bv = BoundedValue(d["states"], suppress_errors=not strict)

    if "state" in d:
        bv.set_state(d["state"])

    try:
        locked = LockState(d.get("locked", LockState.UNLOCKED.value))
    except ValueError:
        raise ConstructionError(f"Unsupported lock state: {d['locked']!r}") from None
    if locked is LockState.PERMANENT:
        bv.lock(permanent=True)
    elif locked is LockState.TRANSIENT:
        logger.debug("Transient lock not restored for %r, its key is not exported", bv)
    return bv


def bounded_to_json(bv: BoundedValue) -> str:
    return json.dumps(bounded_to_dict(bv), sort_keys=True)


def bounded_from_json(s: str) -> BoundedValue:
    d = json.loads(s)
    return bounded_from_dict(d)


def bounded_to_yaml(bv: BoundedValue) -> str:
    return yaml.safe_dump(bounded_to_dict(bv))


def bounded_from_yaml(s: str) -> BoundedValue:
    d = yaml.safe_load(s)
    return bounded_from_dict(d)


def catalog_to_dict(catalog: Dict[str, BoundedValue]) -> Dict[str, Any]:
    return {name: bounded_to_dict(bv) for name, bv in catalog.items()}


def catalog_from_dict(d: Any) -> Dict[str, BoundedValue]:
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported catalog type: {type(d)}")
    return {str(name): bounded_from_dict(definition) for name, definition in d.items()}


def catalog_to_yaml(catalog: Dict[str, BoundedValue]) -> str:
    return yaml.safe_dump(catalog_to_dict(catalog))


def catalog_from_yaml(s: str) -> Dict[str, BoundedValue]:
    """
    Build named BoundedValues from a YAML document.

    Example:
        fan_speed:
          states: ["OFF", "LOW", "MID", "HIGH"]
          strict: true
        region:
          states: [eu, us]
          state: us
          locked: permanent
    """
    d = yaml.safe_load(s)
    return catalog_from_dict(d)
