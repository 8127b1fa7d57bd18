"""Command-line interface for egypt-nid."""
