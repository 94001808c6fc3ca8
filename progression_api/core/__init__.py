"""Core utilities: constants and numeric conventions."""
