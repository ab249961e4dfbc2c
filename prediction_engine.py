# prediction_engine.py
import math
import logging

from config import SIMULATION
from flight_data import PredictionResult
from physics_engine import run_forward_simulation
from velocity_fusion import fuse_velocity

NO_FIX_TOLERANCE_DEG = 0.0001

BASE_CONFIDENCE_M = 15.0
CONFIDENCE_PER_ALT_M = 0.05
CONFIDENCE_PER_SECOND = 0.5


def calculate_confidence_radius(initial_alt, time_to_impact):
    """Heuristic uncertainty radius (m); grows with altitude and flight time."""
    return BASE_CONFIDENCE_M + CONFIDENCE_PER_ALT_M * initial_alt + CONFIDENCE_PER_SECOND * time_to_impact


def get_ground_altitude(lat, lon, terrain_settings):
    """
    Ground elevation under a point. Only a static local elevation is
    supported; disabled terrain correction means a flat ground at 0 m.
    """
    if not terrain_settings.get('enabled') or terrain_settings.get('provider') == 'none':
        return 0.0
    return float(terrain_settings.get('elevation_m', 0.0))


def validate_prediction_inputs(current_telemetry, min_altitude=SIMULATION['min_altitude_m']):
    """Checks whether a sample can be used for a prediction."""
    if not all(math.isfinite(v) for v in (current_telemetry.lat, current_telemetry.lon,
                                          current_telemetry.alt)):
        return False, "Non-finite position"

    if current_telemetry.alt < min_altitude:
        return False, "Too close to ground"

    if (abs(current_telemetry.lat) < NO_FIX_TOLERANCE_DEG and
            abs(current_telemetry.lon) < NO_FIX_TOLERANCE_DEG):
        return False, "No GPS fix"

    return True, "Valid"


def predict_landing(current_telemetry, descent, wind_field, policy,
                    ground_altitude=0.0, history=()):
    """
    Predicts where and when the vehicle will reach the ground.

    Args:
        current_telemetry (TelemetrySample): Latest telemetry.
        descent (DescentProfile): Parachute phase parameters.
        wind_field (WindField): Wind settings snapshot.
        policy (LandingPolicy): Heading source for the initial velocity.
        ground_altitude (float): Terrain elevation, 0 without terrain correction.
        history: Recent time-ascending telemetry used for the GPS ground track.

    Returns:
        A PredictionResult, or None if the telemetry is not good enough yet.
    """
    is_valid, reason = validate_prediction_inputs(current_telemetry)
    if not is_valid:
        logging.debug(f"Skipping prediction: {reason}")
        return None

    initial_velocity = fuse_velocity(
        history,
        current_telemetry.heading,
        current_telemetry.horiz_speed,
        policy
    )

    simulation = run_forward_simulation(
        current_telemetry,
        initial_velocity,
        descent,
        wind_field,
        ground_altitude=ground_altitude,
        timestep=SIMULATION['timestep_s'],
        max_steps=SIMULATION['max_steps'],
        path_decimation=SIMULATION['path_decimation']
    )

    time_to_impact = simulation['time_s']

    return PredictionResult(
        lat=simulation['pred_lat'],
        lon=simulation['pred_lon'],
        time_to_impact=time_to_impact,
        confidence_radius=calculate_confidence_radius(current_telemetry.alt, time_to_impact),
        path=tuple(simulation['path'])
    )
