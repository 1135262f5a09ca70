"""Formatting: line wrapping, cell layout and border assembly."""
