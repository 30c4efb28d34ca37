"""
Bookstore Backend — User Credential Schemas
=============================================

What:  Payloads exchanged with the identity provider's fixed endpoints
       (/api/users/register and /api/users/login).
Who:   Built by the login / registration forms and sent by
       AuthenticationClient. The provider itself is an external service.
"""

from pydantic import BaseModel, EmailStr, Field, model_validator


class UserRegistration(BaseModel):
    """Registration form; both password fields must match."""
    email_address: EmailStr = Field(description="Login e-mail address")
    password: str = Field(min_length=6, max_length=15, description="Password")
    confirm_password: str = Field(description="Password, typed again")

    @model_validator(mode="after")
    def passwords_match(self) -> "UserRegistration":
        if self.password != self.confirm_password:
            raise ValueError("Password and confirmation password do not match")
        return self


class UserLogin(BaseModel):
    """Login form."""
    email_address: EmailStr
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    """Body returned by a successful login."""
    token: str
