"""Tax constants and functions."""
