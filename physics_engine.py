# physics_engine.py
import math
import logging

from atmosphere import get_air_density
from flight_data import FlightPhase, PathPoint
from utils import displace_coordinate
from wind_model import get_wind_for_altitude, wind_velocity_components

G = 9.81  # Gravity (m/s^2)

# Ballistic ascent approximation. The real airframe is unknown here, so the
# vehicle is treated as a heavy, streamlined body until apogee.
ASCENT_MASS_FACTOR = 2.0
ASCENT_AREA_M2 = 0.015
ASCENT_DRAG_COEFFICIENT = 0.5

# Parachute fallbacks for non-positive descent settings
FALLBACK_MASS_KG = 1.0
FALLBACK_AREA_M2 = 0.5
FALLBACK_DRAG_COEFFICIENT = 1.5


def get_aero_parameters(phase, descent):
    """Returns (mass, area, Cd) for the current flight phase."""
    mass = descent.mass_kg if descent.mass_kg > 0 else FALLBACK_MASS_KG

    # Ascent doubles the guarded payload mass, not the raw setting
    if phase is FlightPhase.ASCENDING:
        return mass * ASCENT_MASS_FACTOR, ASCENT_AREA_M2, ASCENT_DRAG_COEFFICIENT

    area = descent.parachute_area_m2 if descent.parachute_area_m2 > 0 else FALLBACK_AREA_M2
    cd = descent.drag_coefficient if descent.drag_coefficient > 0 else FALLBACK_DRAG_COEFFICIENT
    return mass, area, cd


# --- The Main Simulation Engine ---
def run_forward_simulation(current_telemetry, initial_velocity, descent, wind_field,
                           ground_altitude=0.0, timestep=0.2, max_steps=18000,
                           path_decimation=5):
    """
    Time-steps the vehicle forward under gravity and quadratic drag until it
    reaches the ground or the step cap.

    Drag is computed against the wind-relative velocity. Aerodynamic
    parameters switch from the ballistic ascent model to the parachute model
    once vertical velocity stops being positive (apogee).

    Args:
        current_telemetry (TelemetrySample): Starting state.
        initial_velocity (tuple): Fused (v_north, v_east) in m/s.
        descent (DescentProfile): Parachute phase parameters.
        wind_field (WindField): Wind settings snapshot.
        ground_altitude (float): Altitude of the ground under the vehicle.
        timestep (float): Integration step in seconds.
        max_steps (int): Hard cap on the number of steps.
        path_decimation (int): Record every Nth step in the path.

    Returns:
        A dictionary with the final position, step count, simulated time,
        final phase and the decimated path (list of PathPoint).
    """
    sim_lat = current_telemetry.lat
    sim_lon = current_telemetry.lon
    sim_alt = current_telemetry.alt
    v_north, v_east = initial_velocity
    v_up = current_telemetry.vel_v

    phase = FlightPhase.ASCENDING if v_up > 0 else FlightPhase.DESCENDING
    path = []
    steps = 0

    while sim_alt > ground_altitude and steps < max_steps:
        mass, area, cd = get_aero_parameters(phase, descent)

        if phase is FlightPhase.ASCENDING and v_up <= 0:
            phase = FlightPhase.DESCENDING
            logging.debug(f"Apogee reached at {sim_alt:.1f}m after {steps * timestep:.1f}s")

        # --- 1. Environment at current altitude ---
        # The live density reading only calibrates the first step.
        if steps == 0:
            rho = get_air_density(sim_alt, current_telemetry.density, current_telemetry.alt)
        else:
            rho = get_air_density(sim_alt)

        wind_speed, wind_dir = get_wind_for_altitude(sim_alt, wind_field)
        wind_north, wind_east = wind_velocity_components(wind_speed, wind_dir)

        # --- 2. Forces ---
        # Drag depends on movement THROUGH the air
        rel_north = v_north - wind_north
        rel_east = v_east - wind_east
        rel_up = v_up
        rel_mag = math.sqrt(rel_north ** 2 + rel_east ** 2 + rel_up ** 2)

        # F_drag = -0.5 * rho * |v_rel| * Cd * A * v_rel
        if rel_mag > 0:
            drag_factor = -0.5 * rho * rel_mag * cd * area
        else:
            drag_factor = 0.0

        a_north = drag_factor * rel_north / mass
        a_east = drag_factor * rel_east / mass
        a_up = (drag_factor * rel_up - mass * G) / mass

        # --- 3. Integrate (explicit Euler) ---
        v_north += a_north * timestep
        v_east += a_east * timestep
        v_up += a_up * timestep

        sim_lat, sim_lon = displace_coordinate(sim_lat, sim_lon,
                                               v_north * timestep, v_east * timestep)
        sim_alt += v_up * timestep
        steps += 1

        # Decimate points for rendering
        if (steps % path_decimation == 0 or sim_alt <= ground_altitude
                or steps == max_steps):
            path.append(PathPoint(sim_lat, sim_lon, max(ground_altitude, sim_alt)))

    if steps >= max_steps and sim_alt > ground_altitude:
        logging.warning(f"Simulation hit the {max_steps} step cap at {sim_alt:.1f}m")

    # Ensure the path ends exactly on the ground
    if not path or path[-1].alt > ground_altitude:
        path.append(PathPoint(sim_lat, sim_lon, ground_altitude))

    return {
        "pred_lat": sim_lat,
        "pred_lon": sim_lon,
        "final_alt": sim_alt,
        "steps": steps,
        "time_s": steps * timestep,
        "phase": phase,
        "path": path,
    }
