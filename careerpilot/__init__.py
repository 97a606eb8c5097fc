"""Offline demo backend for the CareerPilot career-coaching app."""

__version__ = "0.3.0"
