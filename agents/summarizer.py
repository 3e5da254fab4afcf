# =============================================================================
# agents/summarizer.py - Todo Summary Generator
# =============================================================================
# Formats a user's open todos into a prompt and asks OpenAI for a Slack
# digest. The model's text is returned as-is.
# =============================================================================

import logging
from typing import Any

from agents.prompts.summary_prompt import SUMMARY_SYSTEM_PROMPT, build_summary_prompt
from app.config import settings
from app.exceptions import SummaryGenerationError
from core.models.todo import TodoPriority

logger = logging.getLogger(__name__)

# Lazy-loaded OpenAI client
_client = None


def get_openai_client():
    """Get or create OpenAI client (lazy initialization)."""
    global _client
    if _client is None:
        from openai import OpenAI
        _client = OpenAI(api_key=settings.OPENAI_API_KEY)
    return _client


def _priority_rank(todo: dict[str, Any]) -> int:
    try:
        return TodoPriority(todo.get("priority") or TodoPriority.MEDIUM).rank
    except ValueError:
        return len(TodoPriority)


def format_todos_for_prompt(todos: list[dict[str, Any]]) -> str:
    """
    Render todos as Title/Description/Priority blocks.

    Blocks are ordered high -> medium -> low; the incoming order is kept
    within a tier.

    Args:
        todos: Todo rows

    Returns:
        Blocks separated by a blank line
    """
    ordered = sorted(todos, key=_priority_rank)
    return "\n\n".join(
        f"Title: {todo.get('title', '')}\n"
        f"Description: {todo.get('description') or 'None'}\n"
        f"Priority: {todo.get('priority') or 'medium'}"
        for todo in ordered
    )


def generate_summary(todos: list[dict[str, Any]]) -> str:
    """
    Generate a Slack-formatted summary of the given todos.

    Makes exactly one chat completion call. Callers handle the empty
    list themselves; this function always calls the model.

    Args:
        todos: Open todo rows

    Returns:
        The model's text, unmodified

    Raises:
        SummaryGenerationError: If the call fails or returns no text
    """
    prompt = build_summary_prompt(format_todos_for_prompt(todos))

    try:
        client = get_openai_client()
        response = client.chat.completions.create(
            model=settings.OPENAI_MODEL,
            messages=[
                {"role": "system", "content": SUMMARY_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=settings.SUMMARY_TEMPERATURE,
            max_tokens=settings.SUMMARY_MAX_TOKENS,
        )
    except Exception as e:
        logger.error(f"OpenAI API error: {e}")
        raise SummaryGenerationError(str(e))

    summary = response.choices[0].message.content if response.choices else None
    if not summary:
        raise SummaryGenerationError("model returned an empty response")

    logger.info(f"Generated summary for {len(todos)} todos ({len(summary)} chars)")
    return summary
