"""Household-wide application services."""
