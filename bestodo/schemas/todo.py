from pydantic import BaseModel, Field, StrictBool, field_validator
from datetime import datetime


class TodoCreate(BaseModel):
    """Schema for creating a new todo"""
    title: str

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v or not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()


class TodoStatusUpdate(BaseModel):
    """Schema for setting a todo's completion flag"""
    is_completed: StrictBool = Field(alias="isCompleted")


class TodoResponse(BaseModel):
    """Schema for todo response"""
    id: str
    user_id: str = Field(serialization_alias="userId")
    title: str
    is_completed: bool = Field(serialization_alias="isCompleted")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
