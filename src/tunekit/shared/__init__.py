"""Helpers shared by endpoint wrappers."""
