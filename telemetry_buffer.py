# telemetry_buffer.py
import logging
from collections import deque
from typing import Optional, Tuple

import numpy as np

from flight_data import TelemetrySample
from utils import calculate_distance


def _segment_lengths(samples):
    """Great circle lengths (m) between consecutive fixes."""
    return np.array([
        calculate_distance(a.lat, a.lon, b.lat, b.lon)
        for a, b in zip(samples, samples[1:])
    ])


class TelemetryBuffer:
    """
    Bounded, time-ordered window of recent telemetry samples.
    Predictions receive an immutable snapshot of it, never the buffer itself.
    """

    def __init__(self, max_size: int = 10):
        self.max_size = max_size
        self._samples = deque(maxlen=max_size)
        logging.info(f"TelemetryBuffer initialized: {max_size} samples")

    def __len__(self) -> int:
        return len(self._samples)

    def add_sample(self, sample: TelemetrySample) -> bool:
        """
        Appends a sample. Samples older than the newest one are dropped so the
        window stays time-ascending.
        """
        if self._samples and sample.timestamp_ms < self._samples[-1].timestamp_ms:
            logging.warning(f"Dropping out-of-order sample at {sample.timestamp_ms:.0f}ms")
            return False
        self._samples.append(sample)
        return True

    def snapshot(self) -> Tuple[TelemetrySample, ...]:
        return tuple(self._samples)

    def latest(self) -> Optional[TelemetrySample]:
        if not self._samples:
            return None
        return self._samples[-1]

    def get_total_distance(self) -> float:
        """Ground track length (m) covered by the buffered fixes."""
        if len(self._samples) < 2:
            return 0.0
        return float(np.sum(_segment_lengths(list(self._samples))))

    def get_smoothed_speed(self, window_size: int = 5) -> float:
        """
        Ground speed (m/s) over the last `window_size` intervals: total path
        length divided by elapsed time. Returns 0 for spans of 0.1 s or less.
        """
        if len(self._samples) < 2:
            return 0.0

        window = list(self._samples)[-(window_size + 1):]
        time_diff = (window[-1].timestamp_ms - window[0].timestamp_ms) / 1000.0
        if time_diff <= 0.1:
            return 0.0

        return float(np.sum(_segment_lengths(window))) / time_diff
