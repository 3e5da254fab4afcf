# =============================================================================
# agents/ - LLM-backed Helpers
# =============================================================================
# - summarizer.py: writes the Slack digest of a user's open todos
# - prompts/: prompt text used by the summarizer
# =============================================================================

from agents.summarizer import format_todos_for_prompt, generate_summary

__all__ = [
    "format_todos_for_prompt",
    "generate_summary",
]
