from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from bestodo.database.connection import Base
from bestodo.models.user import generate_id, utcnow


class Todo(Base):
    """Todo table to store todo items"""
    __tablename__ = "todos"

    id = Column(String(36), primary_key=True, default=generate_id)
    # Owner is fixed at creation; no update path writes this column
    user_id = Column(String(36), ForeignKey("users.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    is_completed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    owner = relationship("User", back_populates="todos")
