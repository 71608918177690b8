"""Shared records, validation, date and formatting helpers."""
