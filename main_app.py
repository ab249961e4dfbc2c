# main_app.py
import logging
import pandas as pd

from config import (PATHS, DESCENT_PHYSICS, WIND_SETTINGS, LANDING_SETTINGS,
                    TERRAIN_SETTINGS, SIMULATION)
from flight_data import (descent_profile_from_settings, wind_field_from_settings,
                         landing_policy_from_settings)
from prediction_engine import predict_landing, get_ground_altitude
from telemetry_buffer import TelemetryBuffer
from utils import setup_logging, calculate_displacement, calculate_landing_error
from data_sources.replay_data_source import get_telemetry_stream


def export_prediction_path(prediction, filename):
    """Writes a prediction's path to CSV for offline analysis."""
    df = pd.DataFrame(
        [(p.lat, p.lon, p.alt) for p in prediction.path],
        columns=['lat', 'lon', 'alt']
    )
    df['time_to_impact_s'] = prediction.time_to_impact
    df['confidence_radius_m'] = prediction.confidence_radius
    df.to_csv(filename, index=False)
    logging.info(f"Exported {len(df)} path points to {filename}")
    return df


def run_ground_station(log_filename=None, export_filename=None, replay_delay_s=None):
    """
    Replays a flight log through the landing predictor.

    Settings are frozen once at start-up, so every prediction sees the same
    snapshot. A prediction runs at most once per prediction interval of
    telemetry time. Returns the last prediction made, or None.
    """
    setup_logging()
    logging.info("--- CanSat Ground Station: Landing Predictor ---")

    descent = descent_profile_from_settings(DESCENT_PHYSICS)
    wind_field = wind_field_from_settings(WIND_SETTINGS)
    policy = landing_policy_from_settings(LANDING_SETTINGS)
    interval_ms = LANDING_SETTINGS['prediction_interval_ms']

    history = TelemetryBuffer(max_size=SIMULATION['history_length'])
    last_prediction = None
    last_prediction_time = None
    prediction_count = 0

    for sample in get_telemetry_stream(log_filename, replay_delay_s):
        history.add_sample(sample)

        if (last_prediction_time is not None and
                sample.timestamp_ms - last_prediction_time <= interval_ms):
            continue

        ground_alt = get_ground_altitude(sample.lat, sample.lon, TERRAIN_SETTINGS)
        prediction = predict_landing(sample, descent, wind_field, policy,
                                     ground_altitude=ground_alt,
                                     history=history.snapshot())
        if prediction is None:
            continue

        last_prediction = prediction
        last_prediction_time = sample.timestamp_ms
        prediction_count += 1

        disp_n, disp_e = calculate_displacement(sample.lat, sample.lon,
                                                prediction.lat, prediction.lon)
        logging.info(
            f"Altitude: {sample.alt:.1f}m | Ground speed: {history.get_smoothed_speed():.1f}m/s "
            f"over {history.get_total_distance():.0f}m | Landing: Lat={prediction.lat:.6f}, "
            f"Lon={prediction.lon:.6f} ({disp_n:+.0f}m N, {disp_e:+.0f}m E) | "
            f"T-{prediction.time_to_impact:.1f}s | Radius: {prediction.confidence_radius:.0f}m"
        )

    if last_prediction is None:
        logging.warning("No landing prediction could be made from this log.")
        return None

    final_fix = history.latest()
    error_m = calculate_landing_error(last_prediction.lat, last_prediction.lon,
                                      final_fix.lat, final_fix.lon)
    logging.info(f"{prediction_count} predictions | Last prediction vs. final fix: {error_m:.1f}m")

    # An empty filename (argument or PATHS entry) disables the export
    if export_filename is None:
        export_filename = PATHS['prediction_export']
    if export_filename:
        export_prediction_path(last_prediction, export_filename)

    return last_prediction


if __name__ == "__main__":
    run_ground_station()
