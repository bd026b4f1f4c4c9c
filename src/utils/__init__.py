"""Logging, errors, coercion, formatting and permission helpers."""
