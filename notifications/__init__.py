"""Admission and billing notices."""
