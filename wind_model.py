# wind_model.py
import math

from flight_data import WindMode


def get_wind_for_altitude(altitude_m, wind_field):
    """
    Finds the wind speed and direction for a given altitude.

    Single mode ignores altitude. Gradient mode clamps to the lowest/highest
    layer outside the layered range and interpolates linearly in between.
    Layers must already be sorted by ascending altitude.

    Direction is blended as raw degrees, so layers at 350 and 10 degrees
    interpolate through 180 rather than through North.
    """
    if wind_field.mode is WindMode.SINGLE:
        return wind_field.speed, wind_field.direction

    layers = wind_field.layers
    if not layers:
        return 0.0, 0.0

    lowest, highest = layers[0], layers[-1]
    if altitude_m <= lowest.altitude:
        return lowest.speed, lowest.direction
    if altitude_m >= highest.altitude:
        return highest.speed, highest.direction

    for lower, upper in zip(layers, layers[1:]):
        if lower.altitude <= altitude_m <= upper.altitude:
            ratio = (altitude_m - lower.altitude) / (upper.altitude - lower.altitude)
            speed = lower.speed + (upper.speed - lower.speed) * ratio
            direction = lower.direction + (upper.direction - lower.direction) * ratio
            return speed, direction

    return 0.0, 0.0


def wind_velocity_components(speed_mps, direction_deg):
    """
    Converts a meteorological wind (direction it blows FROM) into the
    north/east components of the air's velocity.
    """
    drift_direction = (direction_deg + 180) % 360  # Wind direction to drift direction
    drift_rad = math.radians(drift_direction)
    return speed_mps * math.cos(drift_rad), speed_mps * math.sin(drift_rad)
