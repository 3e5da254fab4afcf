# =============================================================================
# app/routers/todos.py - Todo CRUD Endpoints
# =============================================================================
#   GET    /todos        list the caller's todos (newest first)
#   POST   /todos        create a todo
#   PATCH  /todos/{id}   partial update
#   DELETE /todos/{id}   delete
#
# Every endpoint, including the catch-alls, authenticates first, so an
# unauthenticated request gets 401 whatever the method or path. Any other
# authenticated method/path under /todos is a 404.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from app.auth import get_current_user, AuthUser
from app.exceptions import RouteNotFoundError
from core.models.todo import DeleteResponse, TodoCreate, TodoResponse, TodoUpdate
from core.services.todo_service import TodoService

router = APIRouter()

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


@router.get("", response_model=list[TodoResponse])
def list_todos(
    user: AuthUser = Depends(get_current_user),
):
    """
    List all todos owned by the authenticated user.

    Ordered by creation time, newest first. No pagination.
    """
    return TodoService.list_todos(user.id)


@router.post("", response_model=TodoResponse, status_code=status.HTTP_201_CREATED)
def create_todo(
    request: TodoCreate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Create a todo.

    New todos always start with `completed=false`.
    """
    return TodoService.create_todo(user.id, request)


@router.patch("/{todo_id}", response_model=TodoResponse)
def update_todo(
    todo_id: Annotated[str, Path(description="Todo UUID")],
    request: TodoUpdate,
    user: AuthUser = Depends(get_current_user),
):
    """
    Update some fields of a todo.

    `id`, `user_id` and `created_at` cannot be changed; `updated_at` is
    refreshed on every call. 404 if the todo does not exist or is not
    the caller's.
    """
    return TodoService.update_todo(user.id, todo_id, request.to_update_dict())


@router.delete("/{todo_id}", response_model=DeleteResponse)
def delete_todo(
    todo_id: Annotated[str, Path(description="Todo UUID")],
    user: AuthUser = Depends(get_current_user),
):
    """
    Delete a todo.

    404 if the todo does not exist, was already deleted, or is not the
    caller's.
    """
    TodoService.delete_todo(user.id, todo_id)
    return DeleteResponse(success=True)


# =============================================================================
# Catch-alls (registered last so the routes above win)
# =============================================================================

@router.api_route("", methods=ALL_METHODS, include_in_schema=False)
@router.api_route("/{rest:path}", methods=ALL_METHODS, include_in_schema=False)
def unsupported_route(
    user: AuthUser = Depends(get_current_user),
):
    raise RouteNotFoundError()
