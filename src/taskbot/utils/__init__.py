"""Shared helpers for taskbot."""
