from typing import List
from sqlalchemy import update
from sqlalchemy.orm import Session
from bestodo.config.helpers import get_owned_todo_or_404, parse_todo_id
from bestodo.errors import NotFoundError
from bestodo.models.todo import Todo
from bestodo.models.user import utcnow
import logging

logger = logging.getLogger(__name__)


class TodoService:
    """
    Todo operations scoped to a single owner.

    Every query filters on both the todo id and the caller's user id, so a
    todo belonging to someone else behaves exactly like one that does not
    exist.
    """

    def __init__(self, db: Session):
        self.db = db

    def list(self, user_id: str) -> List[Todo]:
        return (
            self.db.query(Todo)
            .filter(Todo.user_id == user_id)
            .order_by(Todo.created_at, Todo.id)
            .all()
        )

    def create(self, user_id: str, title: str) -> Todo:
        new_todo = Todo(user_id=user_id, title=title, is_completed=False)
        self.db.add(new_todo)
        self.db.commit()
        self.db.refresh(new_todo)
        logger.info(f"User {user_id} created todo {new_todo.id}")
        return new_todo

    def get(self, user_id: str, todo_id: str) -> Todo:
        return get_owned_todo_or_404(self.db, parse_todo_id(todo_id), user_id)

    def set_completed(self, user_id: str, todo_id: str, is_completed: bool) -> Todo:
        """Set the completion flag in one filtered UPDATE ... RETURNING"""
        stmt = (
            update(Todo)
            .where(Todo.id == parse_todo_id(todo_id), Todo.user_id == user_id)
            .values(is_completed=is_completed, updated_at=utcnow())
            .returning(Todo)
        )
        todo = self.db.execute(stmt).scalar_one_or_none()
        if todo is None:
            raise NotFoundError("Todo not found")

        self.db.commit()
        logger.info(f"User {user_id} set todo {todo.id} completed={is_completed}")
        return todo

    def delete(self, user_id: str, todo_id: str) -> None:
        deleted = (
            self.db.query(Todo)
            .filter(Todo.id == parse_todo_id(todo_id), Todo.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if deleted == 0:
            raise NotFoundError("Todo not found")

        self.db.commit()
        logger.info(f"User {user_id} deleted todo {todo_id}")
