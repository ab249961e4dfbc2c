# utils.py
import logging
import math
from geopy.distance import geodesic, great_circle

# Mean Earth radius in meters (spherical approximation)
EARTH_RADIUS_M = 6371e3


def setup_logging(level=logging.INFO):
    """Sets up a basic logging configuration."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def calculate_distance(lat1, lon1, lat2, lon2):
    """Great circle distance in meters on the same sphere the predictor uses."""
    return great_circle((lat1, lon1), (lat2, lon2), radius=EARTH_RADIUS_M / 1000.0).meters


def displace_coordinate(lat_deg, lon_deg, d_north_m, d_east_m):
    """
    Moves a lat/lon point by a north/east offset in meters using a local
    spherical approximation. Longitude scaling changes with latitude.
    """
    d_lat = math.degrees(d_north_m / EARTH_RADIUS_M)
    d_lon = math.degrees(d_east_m / (EARTH_RADIUS_M * math.cos(math.radians(lat_deg))))
    return lat_deg + d_lat, lon_deg + d_lon


def calculate_displacement(lat, lon, landing_lat, landing_lon):
    """
    Calculates the North (lat) and East (lon) displacement in meters
    between a start point and a landing point.
    """
    p_a = (lat, lon)

    disp_lat_m = geodesic(p_a, (landing_lat, lon)).meters
    if landing_lat < lat:
        disp_lat_m *= -1

    disp_lon_m = geodesic(p_a, (lat, landing_lon)).meters
    if landing_lon < lon:
        disp_lon_m *= -1

    return disp_lat_m, disp_lon_m


def calculate_landing_error(pred_lat, pred_lon, true_lat, true_lon):
    """Landing error in meters using the precise geodesic formula."""
    return geodesic((true_lat, true_lon), (pred_lat, pred_lon)).meters
