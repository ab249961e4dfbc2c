# atmosphere.py

# International Standard Atmosphere (troposphere) constants
T_STD = 288.15     # Standard temperature at sea level (K)
P_STD = 101325.0   # Standard pressure at sea level (Pa)
L_RATE = 0.0065    # Temperature lapse rate (K/m)
R_GAS = 287.05     # Specific gas constant for dry air (J/(kg*K))
ISA_EXPONENT = 5.2561

MAX_ATMOSPHERE_ALT_M = 40000.0
MIN_REFERENCE_DENSITY = 0.1


def isa_density(altitude_m):
    """Air density (kg/m^3) predicted by the ISA troposphere relation."""
    temperature = T_STD - L_RATE * altitude_m
    pressure = P_STD * (1 - L_RATE * altitude_m / T_STD) ** ISA_EXPONENT
    return pressure / (R_GAS * temperature)


def get_air_density(altitude_m, reference_density=0.0, reference_altitude_m=0.0):
    """
    Calculates air density (rho) at an altitude using the ISA model.

    If a live density reading is available (reference_density > 0.1 kg/m^3),
    the whole profile is scaled by the ratio between that reading and what
    ISA predicts at the altitude it was taken.

    Args:
        altitude_m (float): Altitude to evaluate.
        reference_density (float): Measured density, 0 when unknown.
        reference_altitude_m (float): Altitude of the measurement.

    Returns:
        Density in kg/m^3, 0 above 40 km.
    """
    if altitude_m > MAX_ATMOSPHERE_ALT_M:
        return 0.0  # Vacuum approximation

    density = isa_density(altitude_m)

    if reference_density > MIN_REFERENCE_DENSITY:
        factor = reference_density / isa_density(reference_altitude_m)
        return density * factor

    return density
