"""UI components for the pinball track editor."""

__all__ = [
    "controls_panel",
    "log_panel",
    "main_window",
    "track_canvas",
]
