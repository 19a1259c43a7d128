"""Shared helpers for lexparse."""
