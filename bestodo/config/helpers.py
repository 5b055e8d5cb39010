import uuid
from sqlalchemy.orm import Session
from bestodo.errors import NotFoundError, ValidationError
from bestodo.models.todo import Todo


def parse_todo_id(todo_id: str) -> str:
    """
    Normalize a todo id taken from the request path.

    Raises:
        ValidationError: if todo_id is not a UUID
    """
    try:
        return str(uuid.UUID(todo_id))
    except (ValueError, AttributeError, TypeError):
        raise ValidationError("Invalid todo ID")


def get_owned_todo_or_404(db: Session, todo_id: str, user_id: str) -> Todo:
    """
    Get a todo by ID for its owner or raise 404.

    A todo owned by another user is reported exactly like a missing one.

    Args:
        db: Database session
        todo_id: ID of the todo to retrieve
        user_id: ID of the authenticated caller

    Returns:
        Todo: Todo object if found and owned by user_id

    Raises:
        NotFoundError: if no todo with that ID belongs to user_id
    """
    todo = db.query(Todo).filter(Todo.id == todo_id, Todo.user_id == user_id).first()
    if not todo:
        raise NotFoundError("Todo not found")
    return todo
