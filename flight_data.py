# flight_data.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class HeadingSource(Enum):
    """Where the initial horizontal velocity vector comes from."""
    GPS = "gps"
    IMU = "imu"
    FUSED = "fused"
    AUTO = "auto"


class FlightPhase(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class WindMode(Enum):
    SINGLE = "single"
    GRADIENT = "gradient"


@dataclass(frozen=True)
class TelemetrySample:
    """One live telemetry reading from the vehicle."""
    lat: float
    lon: float
    alt: float                 # meters above the ground reference
    vel_v: float = 0.0         # m/s, up is positive
    horiz_speed: float = 0.0   # m/s
    heading: float = 0.0       # degrees, 0=North, 90=East
    density: float = 0.0       # kg/m^3, 0 when the sensor has no reading
    timestamp_ms: float = 0.0

    @classmethod
    def from_packet(cls, packet: Dict) -> "TelemetrySample":
        """Builds a sample from a telemetry dictionary (flight log row or JSON packet)."""
        return cls(
            lat=float(packet['lat']),
            lon=float(packet['lon']),
            alt=float(packet['alt']),
            vel_v=float(packet.get('vel_v', 0.0)),
            horiz_speed=float(packet.get('horiz_speed', 0.0)),
            heading=float(packet.get('heading', 0.0)),
            density=float(packet.get('density', 0.0)),
            timestamp_ms=float(packet.get('time_ms', 0.0)),
        )


@dataclass(frozen=True)
class WindLayer:
    """Wind at a single altitude."""
    altitude: float
    speed: float
    direction: float  # Direction FROM (meteorological convention)


@dataclass(frozen=True)
class WindField:
    mode: WindMode = WindMode.SINGLE
    speed: float = 0.0
    direction: float = 0.0
    layers: Tuple[WindLayer, ...] = ()


@dataclass(frozen=True)
class DescentProfile:
    mass_kg: float
    parachute_area_m2: float
    drag_coefficient: float


@dataclass(frozen=True)
class LandingPolicy:
    heading_source: HeadingSource = HeadingSource.AUTO
    gps_weight: float = 0.5


@dataclass(frozen=True)
class PathPoint:
    lat: float
    lon: float
    alt: float


@dataclass(frozen=True)
class PredictionResult:
    lat: float
    lon: float
    time_to_impact: float      # seconds
    confidence_radius: float   # meters
    path: Tuple[PathPoint, ...] = field(default_factory=tuple)


# --- Settings -> immutable snapshots ---

def descent_profile_from_settings(settings: Dict) -> DescentProfile:
    return DescentProfile(
        mass_kg=float(settings['mass_kg']),
        parachute_area_m2=float(settings['parachute_area_m2']),
        drag_coefficient=float(settings['drag_coefficient']),
    )


def wind_field_from_settings(settings: Dict) -> WindField:
    """
    Freezes a wind settings dictionary into a WindField.
    Gradient layers are sorted by altitude here, since the wind model
    reads them in ascending order and never sorts them itself.
    """
    layers = sorted(
        (WindLayer(float(alt), float(speed), float(direction))
         for alt, speed, direction in settings.get('layers', [])),
        key=lambda layer: layer.altitude,
    )
    return WindField(
        mode=WindMode(settings.get('mode', 'single')),
        speed=float(settings.get('speed_mps', 0.0)),
        direction=float(settings.get('direction_deg', 0.0)),
        layers=tuple(layers),
    )


def landing_policy_from_settings(settings: Dict) -> LandingPolicy:
    return LandingPolicy(
        heading_source=HeadingSource(settings.get('heading_source', 'auto')),
        gps_weight=float(settings.get('gps_weight', 0.5)),
    )
