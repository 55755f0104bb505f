"""
Example enumerations used by the demo script and the tests.

Builds a few everyday BoundedValues (fan speed, traffic light, region) and a
small named catalog of them.
"""
from typing import Dict

from bounded_enum.model import BoundedValue

FAN_SPEEDS = ("OFF", "LOW", "MID", "HIGH")
TRAFFIC_LIGHTS = ("RED", "GREEN", "AMBER")


def build_fan_speed(strict: bool = False) -> BoundedValue:
    return BoundedValue(list(FAN_SPEEDS), suppress_errors=not strict)


def build_traffic_light(strict: bool = False) -> BoundedValue:
    return BoundedValue(list(TRAFFIC_LIGHTS), suppress_errors=not strict)


def build_example_catalog() -> Dict[str, BoundedValue]:
    catalog = {
        "fan_speed": build_fan_speed(strict=True),
        "traffic_light": build_traffic_light(),
        "region": BoundedValue.from_values("eu", "us", "apac"),
    }

    # Deployment region is chosen once and never changes afterwards
    catalog["region"].set_state("us")
    catalog["region"].lock(permanent=True)

    return catalog
