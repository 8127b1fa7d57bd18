"""Utility helpers shared across egypt-nid modules."""
