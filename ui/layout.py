"""
ui/layout.py

UI layout construction for the calculator.

Builds the header, parameter controls, result display and exposure chart.
"""

from nicegui import ui
from typing import NamedTuple
from core import (
    SENSOR_SIZE_OPTIONS,
    TRAIL_TOLERANCE_OPTIONS,
    PIXEL_WIDTH_MIN,
    PIXEL_WIDTH_MAX,
    FOCAL_LENGTH_MIN,
    FOCAL_LENGTH_MAX,
    F_NUMBER_MIN,
    F_NUMBER_MAX,
    F_NUMBER_STEP,
    NPF_THEORY_URL,
)


class UIComponents(NamedTuple):
    """Container for all UI components that need to be accessed by callbacks."""
    # Header
    icon: ui.icon

    # Selects
    sensor_select: ui.select
    trail_select: ui.select

    # Text / slider pairs
    pixel_width_input: ui.input
    pixel_width_slider: ui.slider
    focal_length_input: ui.input
    focal_length_slider: ui.slider
    f_number_input: ui.input
    f_number_slider: ui.slider

    # Results
    exposure_label: ui.label
    pixel_pitch_label: ui.label
    exposure_plot: ui.plotly


def _text_slider_row(label: str, text: str, value, min_value, max_value, step):
    """Build one labelled text input with a slider beside it."""
    with ui.row().classes('w-full items-center gap-4'):
        ui.label(label).classes('text-sm font-medium w-48')
        text_input = ui.input(value=text).classes('w-32')
        slider = ui.slider(min=min_value, max=max_value, step=step, value=value).classes('flex-grow')
    return text_input, slider


def build_main_layout(store) -> UIComponents:
    """
    Build the complete calculator UI layout.

    Args:
        store: ParameterStore instance used for initial control values

    Returns:
        UIComponents namedtuple containing references to all interactive components
    """

    # ========================================================================
    # HEADER
    # ========================================================================

    with ui.header().classes('justify-between items-center'):
        ui.label('NPF Rule').classes('text-xl font-bold')
        icon = ui.icon('light_mode', size='md').classes('cursor-pointer')

    with ui.row().classes('w-full justify-center'):
        ui.label('Theory:').classes('text-gray-400')
        ui.link('Les coulisses de la règle NPF', NPF_THEORY_URL, new_tab=True)

    ui.separator()

    # ========================================================================
    # PARAMETERS
    # ========================================================================

    with ui.column().classes('w-full gap-4'):
        ui.label('Parameters').classes('text-lg font-bold')

        sensor_select = ui.select(
            options=SENSOR_SIZE_OPTIONS,
            value=store.sensor_size.value,
            label='Sensor size'
        ).classes('w-64')

        pixel_width_input, pixel_width_slider = _text_slider_row(
            'Image width (px)',
            store.raw_text('pixel_width'),
            store.pixel_width,
            PIXEL_WIDTH_MIN,
            PIXEL_WIDTH_MAX,
            1,
        )
        focal_length_input, focal_length_slider = _text_slider_row(
            'Effective focal length (mm)',
            store.raw_text('focal_length'),
            store.focal_length,
            FOCAL_LENGTH_MIN,
            FOCAL_LENGTH_MAX,
            1,
        )
        f_number_input, f_number_slider = _text_slider_row(
            'Aperture (f/)',
            store.raw_text('f_number'),
            store.f_number,
            F_NUMBER_MIN,
            F_NUMBER_MAX,
            F_NUMBER_STEP,
        )

        trail_select = ui.select(
            options=TRAIL_TOLERANCE_OPTIONS,
            value=store.trail_tolerance.value,
            label='Star rendering'
        ).classes('w-64')

    ui.separator()

    # ========================================================================
    # RESULTS
    # ========================================================================

    with ui.column().classes('w-full gap-2'):
        ui.label('Maximum exposure').classes('text-lg font-bold')
        exposure_label = ui.label('').classes('text-4xl font-bold text-primary')
        pixel_pitch_label = ui.label('').classes('text-gray-400')
        exposure_plot = ui.plotly({}).classes('w-full')

    # ========================================================================
    # RETURN COMPONENTS
    # ========================================================================

    return UIComponents(
        icon=icon,
        sensor_select=sensor_select,
        trail_select=trail_select,
        pixel_width_input=pixel_width_input,
        pixel_width_slider=pixel_width_slider,
        focal_length_input=focal_length_input,
        focal_length_slider=focal_length_slider,
        f_number_input=f_number_input,
        f_number_slider=f_number_slider,
        exposure_label=exposure_label,
        pixel_pitch_label=pixel_pitch_label,
        exposure_plot=exposure_plot,
    )
