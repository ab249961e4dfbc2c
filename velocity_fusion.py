# velocity_fusion.py
import math
import logging

from flight_data import HeadingSource

METERS_PER_DEG_LAT = 111320

# GPS pairs further apart than this are stale, closer ones are jitter
MIN_GPS_DT_S = 0.1
MAX_GPS_DT_S = 3.0

# AUTO heading source heuristics
GUIDED_SPEED_MPS = 5.0
GUIDED_GPS_WEIGHT = 0.3    # moving under its own heading: trust the IMU
DRIFTING_GPS_WEIGHT = 0.8  # drifting: heading may be spinning, trust GPS


def gps_ground_track_vector(history):
    """
    Derives the ground track velocity from recent GPS fixes.

    Compares the newest fix with the one two samples earlier to smooth out
    jitter. Returns (v_north, v_east) in m/s, or None if there are fewer than
    three fixes or their time gap is outside (0.1 s, 3.0 s).
    """
    if len(history) < 3:
        return None

    p_last = history[-1]
    p_prev = history[-3]
    dt = (p_last.timestamp_ms - p_prev.timestamp_ms) / 1000.0

    if not (MIN_GPS_DT_S < dt < MAX_GPS_DT_S):
        return None

    meters_per_deg_lon = METERS_PER_DEG_LAT * math.cos(math.radians(p_last.lat))
    v_north = (p_last.lat - p_prev.lat) * METERS_PER_DEG_LAT / dt
    v_east = (p_last.lon - p_prev.lon) * meters_per_deg_lon / dt
    return v_north, v_east


def imu_heading_vector(heading_deg, horiz_speed):
    """Velocity along the IMU heading (0=North, 90=East)."""
    heading_rad = math.radians(heading_deg)
    return horiz_speed * math.cos(heading_rad), horiz_speed * math.sin(heading_rad)


def fuse_velocity(history, heading_deg, horiz_speed, policy):
    """
    Blends the GPS ground track and IMU heading into one horizontal velocity.

    Args:
        history: Time-ascending sequence of TelemetrySample.
        heading_deg (float): Current IMU heading.
        horiz_speed (float): Current horizontal speed (m/s).
        policy (LandingPolicy): Heading source and GPS weight.

    Returns:
        A (v_north, v_east) tuple in m/s.
    """
    imu_vec = imu_heading_vector(heading_deg, horiz_speed)
    gps_vec = gps_ground_track_vector(history)

    if gps_vec is None:
        return imu_vec

    source = policy.heading_source
    if source is HeadingSource.GPS:
        return gps_vec
    if source is HeadingSource.IMU:
        return imu_vec

    if source is HeadingSource.FUSED:
        gps_weight = policy.gps_weight
    else:
        gps_weight = GUIDED_GPS_WEIGHT if horiz_speed > GUIDED_SPEED_MPS else DRIFTING_GPS_WEIGHT

    logging.debug(f"Fusing velocity with GPS weight {gps_weight:.2f} ({source.value})")
    v_north = gps_vec[0] * gps_weight + imu_vec[0] * (1 - gps_weight)
    v_east = gps_vec[1] * gps_weight + imu_vec[1] * (1 - gps_weight)
    return v_north, v_east
