"""Routers module."""
