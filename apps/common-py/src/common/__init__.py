"""Shared helpers and clients for the dependency bot test app."""
