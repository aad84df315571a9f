"""Reverse geocoding and place enrichment."""
