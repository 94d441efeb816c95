"""Utils module."""
