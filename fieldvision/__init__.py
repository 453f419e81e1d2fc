"""Field-line scanning, line and circle fitting and byte-order helpers for robot localization."""

__version__ = "0.1.0"
__all__ = ["colors", "common", "endian", "fitcircle", "localization"]