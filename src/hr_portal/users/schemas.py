from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class LoginSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(min_length=6)
