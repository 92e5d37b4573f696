"""Utility modules for nvd-mirror."""
