#!/usr/bin/env python3
"""
Demo: BoundedValue in strict and permissive mode.

Shows state changes, transient and permanent locks, traversal and a
YAML round-trip of the example catalog.
"""

import logging

from bounded_enum import BoundedValue, LockedStateError
from bounded_enum.examples import build_example_catalog, build_fan_speed
from bounded_enum.serialization import catalog_from_yaml, catalog_to_yaml


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    print("=" * 80)
    print("BOUNDED VALUE DEMO")
    print("=" * 80)

    # =========================================================================
    # STRICT MODE
    # =========================================================================
    print("\nSTRICT MODE:")
    print("-" * 80)
    fan = build_fan_speed(strict=True)
    print(f"Initial state: {fan.state}")
    print(f"set_state('MID') -> {fan.set_state('MID')}")

    key = fan.lock()
    print(f"lock() -> {key!r}")
    try:
        fan.set_state("LOW")
    except LockedStateError as exc:
        print(f"set_state('LOW') while locked -> {type(exc).__name__}: {exc}")
    print(f"unlock(key) -> {fan.unlock(key)}")
    print(f"set_state('LOW') -> {fan.set_state('LOW')}")
    print(f"int(fan) -> {int(fan)}, str(fan) -> {fan}")

    # =========================================================================
    # PERMISSIVE MODE
    # =========================================================================
    print("\nPERMISSIVE MODE:")
    print("-" * 80)
    grade = BoundedValue.from_values("A", "B")
    print(f"set_state('Z') -> {grade.set_state('Z')}")
    print(f"index_of('Z') -> {grade.index_of('Z')}, is_valid_state('Z') -> {grade.is_valid_state('Z')}")
    print(f"lock(permanent=True) -> {grade.lock(permanent=True)}")
    print(f"unlock(None) -> {grade.unlock(None)}")

    # =========================================================================
    # TRAVERSAL AND CATALOG
    # =========================================================================
    print("\nTRAVERSAL:")
    print("-" * 80)
    fan.for_each(lambda state, index, states: print(f"  {index}: {state}"))

    print("\nCATALOG YAML:")
    print("-" * 80)
    yaml_text = catalog_to_yaml(build_example_catalog())
    print(yaml_text)
    for name, bv in catalog_from_yaml(yaml_text).items():
        print(f"  {name}: {bv!r}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    main()
