"""
Outcome rendering shared by the tool modules.

Every tool call ends here: Found data goes through a response builder,
NotFound and Failed get their fixed messages.
"""

from collections.abc import Callable

from pydantic import BaseModel

from ..core.maps import Failed, Found, NotFound, Outcome
from ..models.responses import ErrorResponse, NotFoundResponse, format_response


def outcome_to_model(outcome: Outcome, build: Callable[[object], BaseModel]) -> BaseModel:
    if isinstance(outcome, Found):
        return build(outcome.data)
    if isinstance(outcome, NotFound):
        return NotFoundResponse(message=outcome.message, detail=outcome.detail)
    if isinstance(outcome, Failed):
        return ErrorResponse(error=outcome.reason)
    raise TypeError(f"Unknown outcome: {outcome!r}")


def render_outcome(
    outcome: Outcome, build: Callable[[object], BaseModel], output_mode: str = "text"
) -> str:
    """Render a Found/NotFound/Failed outcome as tool output text."""
    return format_response(outcome_to_model(outcome, build), output_mode)
