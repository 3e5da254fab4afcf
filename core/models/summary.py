# =============================================================================
# core/models/summary.py - Summary Schemas
# =============================================================================
# Responses of POST /summarize.
# =============================================================================

from pydantic import BaseModel


class SummaryResponse(BaseModel):
    """Summary was generated and Slack accepted it."""
    success: bool = True
    message: str = "Todo summary sent to Slack successfully"
    summary: str


class NoPendingTodosResponse(BaseModel):
    """Nothing open, so nothing was generated or sent."""
    message: str = "No pending todos to summarize"
