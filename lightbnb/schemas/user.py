"""
Pydantic schemas for user records.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """Fields accepted when inserting a user."""

    name: str = Field(..., description="User's display name", example="Devin Sanders")

    email: str = Field(..., description="Login email", example="tristanjacobs@gmail.com")

    password: str = Field(..., description="Password hash as produced by the caller")


class UserRecord(UserCreate):
    """A row of the users table."""

    id: int

    model_config = ConfigDict(from_attributes=True)
