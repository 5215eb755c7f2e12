"""User Schemas — profile registration and update payloads."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    email: EmailStr
    name: str | None = Field(None, max_length=255)


class UserProfileUpdate(BaseModel):
    """Partial profile update — only fields present in the request change."""
    name: str | None = Field(None, max_length=255)
    email: EmailStr | None = None
    groom_first_name: str | None = Field(None, max_length=100)
    groom_last_name: str | None = Field(None, max_length=100)
    bride_first_name: str | None = Field(None, max_length=100)
    bride_last_name: str | None = Field(None, max_length=100)


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str | None = None
    website_url: str | None = None
    groom_first_name: str | None = None
    groom_last_name: str | None = None
    bride_first_name: str | None = None
    bride_last_name: str | None = None
    created_at: datetime
