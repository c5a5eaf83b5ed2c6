"""Tests for CSS Compacter."""
