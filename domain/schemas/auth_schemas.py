from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


class CreateUserParams(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=128)

    @field_validator("name")
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


class SignInParams(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class Session(BaseModel):
    """Session established by an email/password sign-in."""

    id: str = Field(alias="$id")
    user_id: str = Field(alias="userId")
    provider: Optional[str] = None
    expire: Optional[str] = None
    secret: Optional[str] = None

    model_config = {"populate_by_name": True, "extra": "ignore"}


class UserProfileCreate(BaseModel):
    """Document data of a new user profile."""

    account_id: str = Field(..., min_length=1, alias="accountId")
    email: str
    name: str
    avatar: str

    model_config = {"populate_by_name": True}

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)


class UserProfile(BaseModel):
    id: str = Field(alias="$id")
    account_id: str = Field(alias="accountId")
    email: str
    name: str
    avatar: Optional[str] = None
    created_at: Optional[str] = Field(default=None, alias="$createdAt")

    model_config = {"populate_by_name": True, "extra": "ignore"}
