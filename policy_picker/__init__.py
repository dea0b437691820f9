"""Approval policy picker for terminal agent front ends."""

__version__ = "0.1.0"
