"""
ui/callbacks.py

Event handlers and callbacks for UI interactions.

Every handler forwards the user's edit to the ParameterStore as a single
dispatched action, then re-renders from the store's state. Handlers never
modify parameter values directly.
"""

import math
import traceback
from nicegui import ui

from core import (
    save_config,
    ParameterStore,
    UIState,
    SetSensorSize,
    SetTrailTolerance,
    SetPixelWidth,
    SetFocalLength,
    SetFNumber,
    PIXEL_WIDTH_MIN,
    PIXEL_WIDTH_MAX,
    FOCAL_LENGTH_MIN,
    FOCAL_LENGTH_MAX,
    F_NUMBER_MIN,
    F_NUMBER_MAX,
    EXPOSURE_DISPLAY_DECIMALS,
    PIXEL_PITCH_DISPLAY_DECIMALS,
)
from ui.layout import UIComponents
from ui.plots import update_exposure_plot


# field -> (action type, text component, slider component, slider min, slider max)
NUMERIC_CONTROLS = {
    'pixel_width': (SetPixelWidth, 'pixel_width_input', 'pixel_width_slider', PIXEL_WIDTH_MIN, PIXEL_WIDTH_MAX),
    'focal_length': (SetFocalLength, 'focal_length_input', 'focal_length_slider', FOCAL_LENGTH_MIN, FOCAL_LENGTH_MAX),
    'f_number': (SetFNumber, 'f_number_input', 'f_number_slider', F_NUMBER_MIN, F_NUMBER_MAX),
}

# field -> (action type, select component)
SELECT_CONTROLS = {
    'sensor_size': (SetSensorSize, 'sensor_select'),
    'trail_tolerance': (SetTrailTolerance, 'trail_select'),
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def format_exposure_time(seconds: float) -> str:
    """
    Format an exposure time for display.

    Args:
        seconds: Exposure time, possibly infinite

    Returns:
        e.g. '2.2 s', or '∞' for an unbounded exposure
    """
    if math.isinf(seconds) and seconds > 0:
        return '∞'
    if not math.isfinite(seconds):
        return '—'
    return f'{round(seconds, EXPOSURE_DISPLAY_DECIMALS):.{EXPOSURE_DISPLAY_DECIMALS}f} s'


def format_pixel_pitch(pitch_um: float) -> str:
    """Format pixel pitch for the info line under the result."""
    if not math.isfinite(pitch_um):
        return 'Pixel pitch: —'
    return f'Pixel pitch: {pitch_um:.{PIXEL_PITCH_DISPLAY_DECIMALS}f} µm'


def clamp_to_slider(value: float, min_value: float, max_value: float) -> float:
    """Keep a slider inside its range when the text field holds an out-of-range value."""
    return min(max(value, min_value), max_value)


def sync_slider(store: ParameterStore, state: UIState, components: UIComponents, field: str) -> None:
    """Move a slider to the store's canonical value without re-dispatching."""
    _, _, slider_name, min_value, max_value = NUMERIC_CONTROLS[field]
    state.updating = True
    try:
        getattr(components, slider_name).value = clamp_to_slider(getattr(store, field), min_value, max_value)
    finally:
        state.updating = False


def sync_text(store: ParameterStore, state: UIState, components: UIComponents, field: str) -> None:
    """Show the store's shadow text in a text input without re-dispatching."""
    _, text_name, _, _, _ = NUMERIC_CONTROLS[field]
    state.updating = True
    try:
        getattr(components, text_name).value = store.raw_text(field)
    finally:
        state.updating = False


def render_results(store: ParameterStore, dark_mode: bool, components: UIComponents) -> None:
    """
    Re-render every read-only view of the store.

    Args:
        store: ParameterStore instance
        dark_mode: Whether dark mode is active
        components: UIComponents namedtuple
    """
    try:
        components.exposure_label.text = format_exposure_time(store.exposure_time)
        components.pixel_pitch_label.text = format_pixel_pitch(store.pixel_pitch)
        update_exposure_plot(store, dark_mode, components.exposure_plot)
    except Exception as e:
        ui.notify(f'Failed to update results: {str(e)}', type='negative')
        print(f'Render error: {e}')
        traceback.print_exc()


# ============================================================================
# CALLBACK FUNCTIONS
# ============================================================================

def create_toggle_dark_callback(store, dark, components):
    """
    Create callback for theme toggle button.

    Args:
        store: ParameterStore instance
        dark: Dark mode instance
        components: UIComponents namedtuple

    Returns:
        Callback function
    """
    def toggle_dark() -> None:
        """Toggle between dark and light mode themes."""
        dark.toggle()
        save_config({"dark_mode": dark.value})
        components.icon.set_name('light_mode' if dark.value else 'dark_mode')
        render_results(store, dark.value, components)

    return toggle_dark


def create_select_change_callback(store, state, dark, components, field: str):
    """
    Create callback for the sensor size or trail tolerance select.

    Args:
        store: ParameterStore instance
        state: UIState instance
        dark: Dark mode instance
        components: UIComponents namedtuple
        field: 'sensor_size' or 'trail_tolerance'

    Returns:
        Callback function
    """
    action_type, select_name = SELECT_CONTROLS[field]

    def on_select_change() -> None:
        value = getattr(components, select_name).value
        if state.updating or value is None:
            return
        store.dispatch(action_type(value))
        render_results(store, dark.value, components)

    return on_select_change


def create_text_change_callback(store, state, dark, components, field: str):
    """
    Create callback for a free-text numeric input.

    The raw text is always dispatched. When it does not parse, the store keeps
    its previous value and nothing is re-rendered; the text box keeps showing
    what the user typed.

    Args:
        store: ParameterStore instance
        state: UIState instance
        dark: Dark mode instance
        components: UIComponents namedtuple
        field: 'pixel_width', 'focal_length' or 'f_number'

    Returns:
        Callback function
    """
    action_type, text_name, _, _, _ = NUMERIC_CONTROLS[field]

    def on_text_change() -> None:
        if state.updating:
            return
        raw = getattr(components, text_name).value
        if not store.dispatch(action_type('' if raw is None else str(raw))):
            return
        sync_slider(store, state, components, field)
        render_results(store, dark.value, components)

    return on_text_change


def create_slider_change_callback(store, state, dark, components, field: str):
    """
    Create callback for a range slider.

    Slider values are always in range and always parse, so the text input is
    overwritten with the new canonical value.

    Args:
        store: ParameterStore instance
        state: UIState instance
        dark: Dark mode instance
        components: UIComponents namedtuple
        field: 'pixel_width', 'focal_length' or 'f_number'

    Returns:
        Callback function
    """
    action_type, _, slider_name, _, _ = NUMERIC_CONTROLS[field]

    def on_slider_change() -> None:
        value = getattr(components, slider_name).value
        if state.updating or value is None:
            return
        if not store.dispatch(action_type(value)):
            return
        sync_text(store, state, components, field)
        render_results(store, dark.value, components)

    return on_slider_change
