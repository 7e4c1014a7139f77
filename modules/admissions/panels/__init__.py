"""Admission desk panels."""
