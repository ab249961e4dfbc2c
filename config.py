# config.py

# --- 1. File Paths ---
# All file paths are defined in one place.
PATHS = {
    "flight_log": "flight_log.csv",
    "prediction_export": "predicted_path.csv",
}

# --- 2. Payload Descent Properties (parachute phase) ---
DESCENT_PHYSICS = {
    "mass_kg": 1.0,
    "parachute_area_m2": 0.5,
    "drag_coefficient": 1.5,
}

# --- 3. Wind Model ---
# "single" uses speed/direction everywhere, "gradient" interpolates the layers.
# Layer format: (Altitude_meters, Speed_mps, Direction_FROM_degrees)
WIND_SETTINGS = {
    "mode": "single",
    "speed_mps": 5.0,
    "direction_deg": 0.0,
    "layers": [
        (0, 2.0, 45),
        (500, 5.0, 90),
        (1000, 12.0, 120),
    ],
}

# --- 4. Landing Prediction Settings ---
LANDING_SETTINGS = {
    "heading_source": "auto",  # gps | imu | fused | auto
    "gps_weight": 0.7,         # 1.0 = 100% GPS, 0.0 = 100% IMU (fused only)
    "prediction_interval_ms": 2000,
}

# --- 5. Terrain Correction ---
TERRAIN_SETTINGS = {
    "enabled": False,
    "provider": "local",  # none | local
    "elevation_m": 0.0,
}

# --- 6. Simulation Engine Parameters ---
SIMULATION = {
    "timestep_s": 0.2,
    "max_steps": 18000,     # ~1 hour of simulated flight
    "path_decimation": 5,   # record every Nth step
    "min_altitude_m": 5.0,
    "history_length": 10,
    "replay_delay_s": 0.0,
}
