# =============================================================================
# core/services/todo_service.py - Todo Business Logic
# =============================================================================
# Owner-scoped CRUD against the `todos` table.
#
# Every query carries `.eq("user_id", ...)`. Because the service_role client
# bypasses RLS, that filter is the only thing keeping users apart. A todo
# that exists but belongs to someone else is reported as not found.
# =============================================================================

import logging
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient
from core.models.todo import PROTECTED_FIELDS, TodoCreate
from app.exceptions import StoreError, TodoNotFoundError

logger = logging.getLogger(__name__)

TODOS_TABLE = "todos"


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


class TodoService:
    """
    Service for todo operations.

    Provides a clean interface between API routes and database.
    Nothing is cached between calls; each call re-reads the store.
    """

    @staticmethod
    def list_todos(user_id: UUID | str) -> list[dict[str, Any]]:
        """
        List every todo owned by the user, newest first.

        Args:
            user_id: The caller

        Returns:
            List of todo rows

        Raises:
            StoreError: If the query fails
        """
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TODOS_TABLE)
                .select("*")
                .eq("user_id", str(user_id))
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []

        except Exception as e:
            logger.error(f"Failed to list todos for user {user_id}: {e}")
            raise StoreError(str(e))

    @staticmethod
    def list_open_todos(user_id: UUID | str) -> list[dict[str, Any]]:
        """
        List the user's incomplete todos, newest first.

        Raises:
            StoreError: If the query fails
        """
        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TODOS_TABLE)
                .select("*")
                .eq("user_id", str(user_id))
                .eq("completed", False)
                .order("created_at", desc=True)
                .execute()
            )
            return response.data or []

        except Exception as e:
            logger.error(f"Failed to list open todos for user {user_id}: {e}")
            raise StoreError(str(e))

    @staticmethod
    def create_todo(user_id: UUID | str, todo: TodoCreate) -> dict[str, Any]:
        """
        Create a todo for the user.

        The database assigns `id`, `created_at` and `updated_at`.
        `completed` always starts False.

        Args:
            user_id: The owner
            todo: Validated create payload

        Returns:
            The inserted row

        Raises:
            StoreError: If the insert fails
        """
        client = SupabaseClient.get_client()

        data = {
            "title": todo.title,
            "description": todo.description,
            "priority": todo.priority.value,
            "user_id": str(user_id),
            "completed": False,
        }

        try:
            response = (
                client.table(TODOS_TABLE)
                .insert(data)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to create todo: {e}")
            raise StoreError(str(e))

        if not response.data:
            raise StoreError("Insert returned no data")

        created = response.data[0]
        logger.info(f"Created todo: {created.get('id')} for user: {user_id}")
        return created

    @staticmethod
    def update_todo(
        user_id: UUID | str,
        todo_id: str,
        updates: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Apply a partial update to one of the user's todos.

        `id`, `user_id` and `created_at` are dropped from `updates`;
        `updated_at` is always set to now.

        Args:
            user_id: The caller
            todo_id: The todo to change
            updates: Column -> new value

        Returns:
            The updated row

        Raises:
            TodoNotFoundError: If no todo matches both todo_id and user_id
            StoreError: If the update fails
        """
        if not SupabaseClient.is_valid_uuid(todo_id):
            raise TodoNotFoundError(todo_id)

        update_data = {
            key: value for key, value in updates.items()
            if key not in PROTECTED_FIELDS
        }
        update_data["updated_at"] = _utcnow()

        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TODOS_TABLE)
                .update(update_data)
                .eq("id", todo_id)
                .eq("user_id", str(user_id))
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update todo {todo_id}: {e}")
            raise StoreError(str(e))

        if not response.data:
            raise TodoNotFoundError(todo_id)

        logger.info(f"Updated todo: {todo_id} fields: {sorted(update_data)}")
        return response.data[0]

    @staticmethod
    def delete_todo(user_id: UUID | str, todo_id: str) -> None:
        """
        Delete one of the user's todos.

        Raises:
            TodoNotFoundError: If no todo matches both todo_id and user_id
                (including when it was already deleted)
            StoreError: If the delete fails
        """
        if not SupabaseClient.is_valid_uuid(todo_id):
            raise TodoNotFoundError(todo_id)

        client = SupabaseClient.get_client()

        try:
            response = (
                client.table(TODOS_TABLE)
                .delete()
                .eq("id", todo_id)
                .eq("user_id", str(user_id))
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to delete todo {todo_id}: {e}")
            raise StoreError(str(e))

        if not response.data:
            raise TodoNotFoundError(todo_id)

        logger.info(f"Deleted todo: {todo_id} for user: {user_id}")
