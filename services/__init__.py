"""Billing and admission services."""
