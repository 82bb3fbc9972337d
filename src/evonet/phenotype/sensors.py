"""
Evonet Sensors Module

Boundary between a host simulation and the network. The host (for example a
set of distance-sensing rays cast from an agent) measures its surroundings and
hands the readings over as plain numbers; this module validates them and
assembles the network input vector. Reading the scene itself is left to the host.

Conventions:
    - one reading per configured sensor, in a fixed order
    - readings are non-negative distances
    - 0.0 means "nothing detected"

Functions:
    sensor_inputs(readings, extra_inputs): Validate readings and build the input list
"""

import math
from typing import Iterable

from evonet.errors import DimensionMismatch

NO_DETECTION = 0.0

def sensor_inputs(readings     : Iterable[float],
                  extra_inputs : Iterable[float] = (),
                  expected_size: int | None = None) -> list[float]:
    """
    Convert sensor readings (plus optional extra scalars) into a network input list.

    Parameters:
        readings:      Distances measured by each sensor (0.0 = no detection)
        extra_inputs:  Additional scalar inputs appended after the readings
                       (for example the agent's own speed)
        expected_size: If given, the total number of inputs the network expects

    Returns:
        The readings followed by the extra inputs, as floats
    """
    values = []
    for index, reading in enumerate(readings):
        reading = float(reading)
        if not math.isfinite(reading) or reading < 0.0:
            raise ValueError(f"Sensor reading {index} must be a finite, non-negative distance, got {reading}")
        values.append(reading)

    values.extend(float(value) for value in extra_inputs)

    if expected_size is not None and len(values) != expected_size:
        raise DimensionMismatch(f"Expected {expected_size} inputs, got {len(values)} "
                                f"(sensor readings plus extra inputs)")
    return values
