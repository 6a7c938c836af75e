"""Utility modules for formatting, parsing and validation."""
