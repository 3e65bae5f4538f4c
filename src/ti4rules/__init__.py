"""Rule automation core for the TI4 tabletop simulator plugin."""

__version__ = "0.3.0"
