"""
ui package

User interface components including layout and event handlers.
"""

from .layout import build_main_layout, UIComponents
from .callbacks import (
    NUMERIC_CONTROLS,
    SELECT_CONTROLS,
    create_toggle_dark_callback,
    create_select_change_callback,
    create_text_change_callback,
    create_slider_change_callback,
    render_results,
)
from .plots import (
    create_exposure_figure,
    update_exposure_plot,
)

__all__ = [
    # Layout
    'build_main_layout',
    'UIComponents',
    # Callbacks
    'NUMERIC_CONTROLS',
    'SELECT_CONTROLS',
    'create_toggle_dark_callback',
    'create_select_change_callback',
    'create_text_change_callback',
    'create_slider_change_callback',
    'render_results',
    # Plots
    'create_exposure_figure',
    'update_exposure_plot',
]
