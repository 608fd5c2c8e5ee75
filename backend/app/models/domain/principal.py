"""Authenticated principal model."""

from pydantic import BaseModel


class Principal(BaseModel):
    """The caller as vouched for by the authentication layer."""
    id: str
    username: str = ""
