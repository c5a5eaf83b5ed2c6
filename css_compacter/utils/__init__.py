"""Utilities for CSS Compacter."""
