"""Presentation layer: user-facing assertion API."""
