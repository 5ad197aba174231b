"""
core/constants.py

Application-wide constants and lookup tables.

Contains the NPF rule coefficients, the static sensor and trail tables,
parameter defaults, control ranges, and UI options.
"""

from types import MappingProxyType
from typing import Dict, Mapping

# ============================================================================
# LOOKUP TABLES
# ============================================================================

# Physical horizontal sensor width per sensor class, in micrometers
SENSOR_PHYSICAL_WIDTH_UM: Mapping[str, int] = MappingProxyType({
    'full': 36000,
    'apsc-canon': 22300,
    'apsc-other': 23600,
    'micro-four-thirds': 17300,
})

# Dimensionless factor scaling the allowed star movement
TRAIL_COEFFICIENT: Mapping[str, float] = MappingProxyType({
    'pin-point': 1.0,
    'slight': 2.0,
    'visible': 3.0,
})

# ============================================================================
# NPF RULE COEFFICIENTS
# ============================================================================

NPF_APERTURE_COEFFICIENT: float = 16.856
NPF_FOCAL_COEFFICIENT: float = 0.0997
NPF_PITCH_COEFFICIENT: float = 13.713
DECLINATION_OFFSET_DEG: float = 0.0  # Latitude/declination input is not wired up

# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_SENSOR_SIZE: str = 'full'
DEFAULT_PIXEL_WIDTH: int = 6000
DEFAULT_FOCAL_LENGTH: int = 50
DEFAULT_F_NUMBER: float = 1.4
DEFAULT_TRAIL_TOLERANCE: str = 'pin-point'

# ============================================================================
# CONTROL RANGES
# ============================================================================

PIXEL_WIDTH_MIN: int = 1
PIXEL_WIDTH_MAX: int = 10000
FOCAL_LENGTH_MIN: int = 1
FOCAL_LENGTH_MAX: int = 1000
F_NUMBER_MIN: float = 1.0
F_NUMBER_MAX: float = 36.0
F_NUMBER_STEP: float = 0.1

EXPOSURE_DISPLAY_DECIMALS: int = 1
PIXEL_PITCH_DISPLAY_DECIMALS: int = 2
CURVE_POINTS: int = 500  # Samples along the focal length axis of the exposure chart
RECONNECT_TIMEOUT: int = 120  # Reconnect timeout in seconds for the browser client

# ============================================================================
# UI OPTIONS
# ============================================================================

SENSOR_SIZE_OPTIONS: Dict[str, str] = {
    'full': 'Full frame',
    'apsc-canon': 'APS-C (Canon)',
    'apsc-other': 'APS-C (other)',
    'micro-four-thirds': 'Micro Four Thirds',
}

TRAIL_TOLERANCE_OPTIONS: Dict[str, str] = {
    'pin-point': 'Pin-point stars',
    'slight': 'Slight trail',
    'visible': 'Visible trail',
}

NPF_THEORY_URL: str = 'https://sahavre.fr/wp/les-coulisses-de-la-regle-npf/'
