"""Shared infrastructure: exception hierarchy and logging configuration."""
