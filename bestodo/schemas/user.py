from pydantic import BaseModel, EmailStr, field_validator
from bestodo.config.validators import validate_password, validate_username


class SignUpRequest(BaseModel):
    """Schema for creating a new account"""
    username: str
    email: EmailStr
    password: str

    @field_validator('username')
    @classmethod
    def validate_username_length(cls, v):
        is_valid, errors = validate_username(v)
        if not is_valid:
            raise ValueError(", ".join(errors))
        return v.strip()

    @field_validator('password')
    @classmethod
    def validate_password_length(cls, v):
        is_valid, errors = validate_password(v)
        if not is_valid:
            raise ValueError(", ".join(errors))
        return v


class SignInRequest(BaseModel):
    """Schema for user login"""
    email: EmailStr
    password: str

    @field_validator('password')
    @classmethod
    def validate_password_present(cls, v):
        if not v:
            raise ValueError('Password is required')
        return v
