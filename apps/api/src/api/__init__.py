"""Dependency bot test app API."""
