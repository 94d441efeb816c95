"""Geospatial filtering for municipal civic-issue reports."""

__version__ = "0.1.0"
