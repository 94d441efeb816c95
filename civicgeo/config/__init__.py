"""Config module."""
