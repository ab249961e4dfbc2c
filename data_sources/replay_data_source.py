# data_sources/replay_data_source.py
import time
import logging
import pandas as pd

from config import PATHS, SIMULATION
from flight_data import TelemetrySample

REQUIRED_COLUMNS = ['lat', 'lon', 'alt']


def get_telemetry_stream(log_filename=None, replay_delay_s=None):
    """
    A generator that reads a recorded flight log CSV and replays it
    as if it were a live telemetry stream, one TelemetrySample per row.
    """
    log_filename = log_filename or PATHS['flight_log']
    if replay_delay_s is None:
        replay_delay_s = SIMULATION['replay_delay_s']

    logging.info(f"--- RUNNING IN REPLAY MODE (Reading from {log_filename}) ---")

    try:
        df = pd.read_csv(log_filename)
    except FileNotFoundError:
        logging.error(f"FATAL ERROR: Flight log not found: '{log_filename}'")
        return  # Stop the generator

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        logging.error(f"FATAL ERROR: Flight log is missing columns: {missing}")
        return

    # Rows with gaps in the required fields cannot be replayed
    df = df.dropna(subset=REQUIRED_COLUMNS).fillna(0.0)

    for _, row in df.iterrows():
        yield TelemetrySample.from_packet(row.to_dict())
        if replay_delay_s > 0:
            time.sleep(replay_delay_s)

    logging.info("--- REPLAY FINISHED ---")
