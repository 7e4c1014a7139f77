"""Notification panels."""
