# =============================================================================
# agents/prompts/ - Prompts for the Summary Agent
# =============================================================================
# - summary_prompt.py: instructions for the Slack todo digest
# =============================================================================

from agents.prompts.summary_prompt import (
    SUMMARY_INSTRUCTIONS,
    SUMMARY_SYSTEM_PROMPT,
    build_summary_prompt,
)

__all__ = [
    "SUMMARY_INSTRUCTIONS",
    "SUMMARY_SYSTEM_PROMPT",
    "build_summary_prompt",
]
