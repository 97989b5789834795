"""Core infrastructure."""
