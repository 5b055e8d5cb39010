from pydantic import BaseModel


class AuthResponse(BaseModel):
    """Schema for signup/signin responses"""
    message: str
    token: str


class AuthenticatedUser(BaseModel):
    """Identity resolved from a validated bearer token"""
    id: str

    class Config:
        frozen = True
