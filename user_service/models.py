from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# Loose shape check only: something@something, no whitespace.
_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class UserIn(BaseModel):
    """Request body for POST /users and PUT /users/{id}.

    All fields are required: PUT is a full replacement, not a patch. Any ``id``
    sent by the client is ignored.
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Display name")
    email: str = Field(..., min_length=1, pattern=_EMAIL_PATTERN, description="Email-shaped address")
    # Strict: "25", 25.5 and true are all rejected.
    age: StrictInt = Field(..., description="Age in years")


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    age: int


class HealthResponse(BaseModel):
    ok: bool
    service: str
    version: str
    users: int
