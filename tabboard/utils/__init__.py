"""Utility helpers package for IDs and JSON I/O."""
