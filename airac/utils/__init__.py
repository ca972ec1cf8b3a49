"""Utilities built around the AIRAC cycle model."""
