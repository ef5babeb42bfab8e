"""
Thermodynamic relations used for the reference curves.
"""

from ..constants import POISSON_EXPONENT, REFERENCE_PRESSURE, ZERO_CELSIUS


def dry_adiabat_temperature(theta, pressure):
    """
    Temperature along a dry adiabat (Poisson's equation).
    
    Works on scalars and numpy arrays alike.
    
    Args:
        theta: Potential temperature in °C
        pressure: Pressure in hPa
        
    Returns:
        Temperature in °C of a parcel with potential temperature ``theta``
        brought dry-adiabatically to ``pressure``
        
    Example:
        >>> round(dry_adiabat_temperature(20, 1000), 6)
        20.0
    """
    return (theta + ZERO_CELSIUS) / (REFERENCE_PRESSURE / pressure) ** POISSON_EXPONENT - ZERO_CELSIUS

