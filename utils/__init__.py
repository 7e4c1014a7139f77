"""Application-wide helpers."""
