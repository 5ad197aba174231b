"""
ui/plots.py

Plot update functions for the exposure chart.

Draws the NPF exposure time across the focal length range for the current
sensor, resolution, aperture and trail tolerance, with a marker at the
currently selected focal length.
"""

import math
import numpy as np
import plotly.graph_objects as go

from utils import compute_exposure_curve
from core import (
    PLOT_CONFIG,
    FOCAL_LENGTH_MIN,
    FOCAL_LENGTH_MAX,
    CURVE_POINTS,
)


def get_plot_template(dark_mode: bool) -> str:
    """
    Get current Plotly template based on dark mode setting.

    Args:
        dark_mode: Whether dark mode is active

    Returns:
        'plotly_dark' if dark mode is active, 'plotly' otherwise
    """
    return 'plotly_dark' if dark_mode else 'plotly'


def get_base_layout(dark_mode: bool, **kwargs) -> dict:
    """
    Get base Plotly layout with common settings.

    Additional keyword arguments override or extend base settings.

    Args:
        dark_mode: Whether dark mode is active
        **kwargs: Additional layout parameters to merge with base config

    Returns:
        Dictionary of layout parameters suitable for fig.update_layout()
    """
    base = dict(
        margin=PLOT_CONFIG.get_default_margin(),
        template=get_plot_template(dark_mode),
        height=PLOT_CONFIG.height,
        xaxis=dict(showgrid=True),
        yaxis=dict(showgrid=True),
    )
    base.update(kwargs)
    return base


def create_exposure_figure(store, dark_mode: bool) -> go.Figure:
    """
    Build the exposure-vs-focal-length chart.

    Non-finite samples are dropped from the curve (plotted as gaps) and the
    current-setting marker is omitted when the current exposure is not finite.

    Args:
        store: ParameterStore instance
        dark_mode: Whether dark mode is active

    Returns:
        Plotly figure
    """
    params = store.params
    focal_lengths, exposure_times = compute_exposure_curve(
        params.sensor_size.value,
        params.pixel_width,
        params.f_number,
        params.trail_tolerance.value,
        FOCAL_LENGTH_MIN,
        FOCAL_LENGTH_MAX,
        CURVE_POINTS,
    )
    exposure_times = np.where(np.isfinite(exposure_times), exposure_times, np.nan)

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=focal_lengths,
        y=exposure_times,
        mode='lines',
        name='NPF limit',
        line=dict(color=PLOT_CONFIG.color_curve, width=PLOT_CONFIG.curve_line_width),
        hovertemplate='%{x:.0f} mm: %{y:.1f} s<extra></extra>',
    ))

    current = store.exposure_time
    if math.isfinite(current):
        fig.add_trace(go.Scatter(
            x=[store.focal_length],
            y=[current],
            mode='markers',
            name='Current',
            marker=dict(color=PLOT_CONFIG.color_marker, size=PLOT_CONFIG.marker_size),
            hovertemplate='%{x:.0f} mm: %{y:.1f} s<extra></extra>',
        ))

    fig.update_layout(**get_base_layout(
        dark_mode,
        xaxis=dict(showgrid=True, title='Focal length (mm)'),
        yaxis=dict(showgrid=True, title='Max exposure (s)', type=PLOT_CONFIG.axis_type_y),
        showlegend=False,
    ))
    return fig


def update_exposure_plot(store, dark_mode, exposure_plot) -> None:
    """
    Redraw the exposure chart.

    Args:
        store: ParameterStore instance
        dark_mode: Whether dark mode is active
        exposure_plot: NiceGUI plotly component
    """
    exposure_plot.figure = create_exposure_figure(store, dark_mode)
    exposure_plot.update()
