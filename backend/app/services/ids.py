"""Identifier generation for projects and embedded items."""

from uuid import uuid4


class IdGenerator:
    """Produces opaque, globally unique string ids."""

    def new_id(self) -> str:
        return uuid4().hex
