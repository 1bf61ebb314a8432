"""Logging-backed notification delivery."""
