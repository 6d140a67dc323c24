"""Request models for user registration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateUserRequest(BaseModel):
    """JSON body accepted by ``POST /api/users``."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    email: str = Field(min_length=3, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1, max_length=1024)

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        """Require a single ``@`` with text on both sides."""

        local, sep, domain = value.partition("@")
        if not sep or not local or not domain or "@" in domain:
            raise ValueError("Please provide a valid email address.")
        return value


__all__ = ["CreateUserRequest"]
