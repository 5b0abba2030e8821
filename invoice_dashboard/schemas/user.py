"""User Schemas — stored account row and its public projection."""

from pydantic import BaseModel


class UserRecord(BaseModel):
    """Full users row, including the password hash. Never returned over HTTP."""
    id: str
    name: str
    email: str
    password: str


class UserPublic(BaseModel):
    id: str
    name: str
    email: str
