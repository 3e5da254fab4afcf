# =============================================================================
# agents/prompts/summary_prompt.py - Todo Summary Prompt
# =============================================================================
# Fixed instructions for turning a list of open todos into a Slack message.
#
# Usage:
#   prompt = build_summary_prompt(todo_text)
# =============================================================================

from __future__ import annotations

SUMMARY_SYSTEM_PROMPT = (
    "You write short status digests of a person's to-do list for their team's "
    "Slack channel. You only use the tasks you are given."
)

SUMMARY_INSTRUCTIONS = """Please summarize the following to-do list items.
Format the summary for a Slack message using Slack's markdown.
The summary should be concise, professional, and actionable.
Organize the summary by priority.
For High priority tasks, prefix them with a 🔴 (red circle) emoji.
For Medium priority tasks, prefix them with a 🟡 (yellow circle) emoji.
For Low priority tasks, prefix them with a 🟢 (green circle) emoji.
Under each priority, list the tasks as bullet points.
Within each bullet point, make the task title bold (e.g., *Task Title*: Description...).
Start the summary with a clear heading like "Key Action Items:".
List the priority groups in order: High, then Medium, then Low."""


def build_summary_prompt(todo_text: str) -> str:
    """Append the formatted todos to the fixed instructions."""
    return f"{SUMMARY_INSTRUCTIONS}\n\n{todo_text}"
