"""Cli module."""
