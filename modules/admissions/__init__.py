"""Admission desk front ends."""
