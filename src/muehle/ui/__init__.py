"""PyQt6 front-end: board scene, main window and application bootstrap."""
