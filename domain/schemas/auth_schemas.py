from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """Schema for account registration"""

    email: str = Field(..., min_length=1, description="Unique e-mail address")
    password: str = Field(..., min_length=1, description="Plain password, checked against the policy")
    nickname: str = Field(..., min_length=1, description="Unique public nickname")
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: Optional[str] = None
    gender: Optional[str] = None


class RegisterResponse(BaseModel):
    user_id: int
    email: str
    nickname: str
    first_name: str

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    """Login with either the e-mail or the nickname"""

    model_config = ConfigDict(populate_by_name=True)

    login_identifier: str = Field(
        ..., min_length=1, alias="loginIdentifier", description="E-mail or nickname"
    )
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    token: str
    message: str
