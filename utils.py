"""
utils.py
NPF rule computations.
Provides the pure functions that turn a set of photographic parameters into
the longest exposure before stars visibly trail. The formula is

    t = k * (16.856 * N + 0.0997 * f + 13.713 * p) / (f * cos(delta))

where N is the f-number, f the focal length in mm, p the pixel pitch in
micrometers, k the trail tolerance coefficient and delta the declination
offset (always 0 here).
Division edge cases:
    A zero focal length or zero pixel width is reachable while the user is
    editing a field. Both propagate as +inf instead of raising.
"""
import numpy as np
import numpy.typing as npt
from typing import Tuple
from core.constants import (
    SENSOR_PHYSICAL_WIDTH_UM,
    TRAIL_COEFFICIENT,
    NPF_APERTURE_COEFFICIENT,
    NPF_FOCAL_COEFFICIENT,
    NPF_PITCH_COEFFICIENT,
    DECLINATION_OFFSET_DEG,
)
# ============================================================================
# PIXEL PITCH
# ============================================================================
def compute_pixel_pitch(sensor_size: str, pixel_width: int) -> float:
    """
    Compute the spacing between photosites.
    Args:
        sensor_size: Sensor class key ('full', 'apsc-canon', 'apsc-other',
                     'micro-four-thirds')
        pixel_width: Horizontal image resolution in pixels
    Returns:
        Pixel pitch in micrometers. +inf when pixel_width is 0.
    """
    sensor_width = np.float64(SENSOR_PHYSICAL_WIDTH_UM[sensor_size])
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(sensor_width / np.float64(pixel_width))
# ============================================================================
# EXPOSURE TIME
# ============================================================================
def _npf(
    f_number: float,
    focal_length: npt.ArrayLike,
    pixel_pitch: float,
    coefficient: float,
) -> npt.NDArray[np.float64]:
    focal = np.asarray(focal_length, dtype=np.float64)
    declination = np.cos(np.deg2rad(DECLINATION_OFFSET_DEG))
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        numerator = (
            NPF_APERTURE_COEFFICIENT * np.float64(f_number)
            + NPF_FOCAL_COEFFICIENT * focal
            + NPF_PITCH_COEFFICIENT * np.float64(pixel_pitch)
        )
        return coefficient * numerator / (focal * declination)
def compute_exposure_time(
    sensor_size: str,
    pixel_width: int,
    focal_length: float,
    f_number: float,
    trail_tolerance: str,
) -> float:
    """
    Compute the maximum exposure time under the NPF rule.
    The result is full precision; rounding for display is left to the caller.
    Args:
        sensor_size: Sensor class key
        pixel_width: Horizontal image resolution in pixels
        focal_length: Effective focal length in millimeters
        f_number: Aperture as f-number
        trail_tolerance: Trail tolerance key ('pin-point', 'slight', 'visible')
    Returns:
        Exposure time in seconds. +inf when focal_length or pixel_width is 0.
    """
    pitch = compute_pixel_pitch(sensor_size, pixel_width)
    coefficient = TRAIL_COEFFICIENT[trail_tolerance]
    return float(_npf(f_number, focal_length, pitch, coefficient))
def compute_exposure_curve(
    sensor_size: str,
    pixel_width: int,
    f_number: float,
    trail_tolerance: str,
    focal_min: float,
    focal_max: float,
    n_points: int,
) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Sweep exposure time across a range of focal lengths.
    Used to draw the exposure chart; all other parameters are held fixed.
    Args:
        sensor_size: Sensor class key
        pixel_width: Horizontal image resolution in pixels
        f_number: Aperture as f-number
        trail_tolerance: Trail tolerance key
        focal_min: First focal length in the sweep (mm)
        focal_max: Last focal length in the sweep (mm)
        n_points: Number of samples
    Returns:
        Tuple of (focal_lengths, exposure_times) arrays of length n_points
    """
    focal_lengths = np.linspace(focal_min, focal_max, n_points, dtype=np.float64)
    pitch = compute_pixel_pitch(sensor_size, pixel_width)
    coefficient = TRAIL_COEFFICIENT[trail_tolerance]
    return focal_lengths, _npf(f_number, focal_lengths, pitch, coefficient)
