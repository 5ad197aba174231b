"""
app.py

NPF Rule Calculator - Main Application Entry Point

A NiceGUI application that computes the longest exposure before stars visibly
trail, from sensor size, image width, focal length, aperture and accepted
trail. Each page session owns one ParameterStore; the UI only reads from it
and dispatches actions to it.

This is the main entry point that wires together UI components, callbacks, and the store.
"""

from nicegui import ui, app
from core import ParameterStore, UIState, load_config, RECONNECT_TIMEOUT
from ui import (
    NUMERIC_CONTROLS,
    SELECT_CONTROLS,
    build_main_layout,
    create_toggle_dark_callback,
    create_select_change_callback,
    create_text_change_callback,
    create_slider_change_callback,
    render_results,
)


@ui.page('/')
def main_page() -> None:
    """
    Main application page with all UI components and event handlers.

    Constructs the calculator interface and wires up all callbacks.
    """
    # Initialize store, state and UI mode
    config = load_config()
    dark = ui.dark_mode(config["dark_mode"])
    store = ParameterStore()
    state = UIState()

    # Build UI layout
    components = build_main_layout(store)
    components.icon.set_name('light_mode' if dark.value else 'dark_mode')

    # Wire up callbacks to UI components
    components.icon.on('click', create_toggle_dark_callback(store, dark, components))

    for field, (_, select_name) in SELECT_CONTROLS.items():
        getattr(components, select_name).on(
            'update:model-value',
            create_select_change_callback(store, state, dark, components, field),
        )

    for field, (_, text_name, slider_name, _, _) in NUMERIC_CONTROLS.items():
        getattr(components, text_name).on(
            'update:model-value',
            create_text_change_callback(store, state, dark, components, field),
        )
        getattr(components, slider_name).on(
            'update:model-value',
            create_slider_change_callback(store, state, dark, components, field),
            throttle=0.05,
        )

    render_results(store, dark.value, components)


def shutdown() -> None:
    """Clean shutdown handler."""
    print('Shutting down...')


# Application lifecycle hooks
app.on_shutdown(shutdown)

# Run the application
if __name__ in {'__main__', '__mp_main__'}:
    ui.run(title='NPF Rule', reconnect_timeout=RECONNECT_TIMEOUT)
