"""Identifier generation."""

import uuid


def generate_id() -> str:
    """Return a random UUID4 in its 36 character text form."""
    return str(uuid.uuid4())
