"""Couche infrastructure : persistance SQL."""
