"""Middleware module."""
