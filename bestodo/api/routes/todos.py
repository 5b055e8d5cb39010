from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from bestodo.database.connection import get_db
from bestodo.auth.dependencies import AuthGateRoute, get_current_user
from bestodo.schemas.todo import MessageResponse, TodoCreate, TodoResponse, TodoStatusUpdate
from bestodo.schemas.token import AuthenticatedUser
from bestodo.services.todos import TodoService

# The auth gate runs before body parsing, handlers or store access on this router
router = APIRouter(
    prefix="/api/todos",
    tags=["Todos"],
    route_class=AuthGateRoute,
)


def get_todo_service(db: Session = Depends(get_db)) -> TodoService:
    return TodoService(db)


@router.get("", response_model=List[TodoResponse])
def get_todos(
    current_user: AuthenticatedUser = Depends(get_current_user),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Get the caller's todos, oldest first
    """
    return todo_service.list(current_user.id)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo: TodoCreate,
    current_user: AuthenticatedUser = Depends(get_current_user),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Create a new todo
    - **title**: Todo title (required, cannot be empty)
    """
    return todo_service.create(current_user.id, todo.title)


@router.get("/{todo_id}", response_model=TodoResponse)
def get_todo(
    todo_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Get a specific todo by ID
    - **todo_id**: ID of the todo to retrieve
    """
    return todo_service.get(current_user.id, todo_id)


@router.patch("/{todo_id}", response_model=TodoResponse)
def update_todo_status(
    todo_id: str,
    todo_update: TodoStatusUpdate,
    current_user: AuthenticatedUser = Depends(get_current_user),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Set a todo's completion flag
    - **todo_id**: ID of the todo to update
    - **isCompleted**: New completion status
    """
    return todo_service.set_completed(current_user.id, todo_id, todo_update.is_completed)


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: str,
    current_user: AuthenticatedUser = Depends(get_current_user),
    todo_service: TodoService = Depends(get_todo_service),
):
    """
    Delete a todo permanently
    - **todo_id**: ID of the todo to delete
    """
    todo_service.delete(current_user.id, todo_id)
    return {"message": "Todo deleted successfully"}
