# report.py
# Consumer side of `greet`: the GitHub Action parses its stdout, records a
# workflow result and posts a pull-request comment.
from __future__ import annotations
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from qoder_cli.greeting import GreetingResponse

import logging
logger = logging.getLogger(__name__)


class ActionResult(BaseModel):
    success: bool = True
    cli_response: GreetingResponse
    timestamp: datetime = Field(description="When the action finished processing the response.")


def _now(now: datetime | None) -> datetime:
    return now or datetime.now(timezone.utc)


def parse_response(raw: str | bytes) -> GreetingResponse:
    """Validate the CLI's stdout back into a :class:`GreetingResponse`.

    Surrounding whitespace (the trailing newline in particular) is ignored.
    Raises pydantic's ``ValidationError`` on anything else.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    return GreetingResponse.model_validate_json(raw.strip())


def action_result(response: GreetingResponse, now: datetime | None = None) -> ActionResult:
    return ActionResult(success=True, cli_response=response, timestamp=_now(now))


def render_comment(response: GreetingResponse, now: datetime | None = None) -> str:
    """Markdown body for the pull-request comment."""
    status = "✅ Success" if response.success else "❌ Failed"
    logger.debug(f"Rendering comment with status {status}")
    return (
        "## 🤖 Qoder Action Result\n"
        "\n"
        f"{response.message}\n"
        "\n"
        "**Details:**\n"
        f"- User Input: `{response.user_input}`\n"
        f"- Status: {status}\n"
        f"- Timestamp: {_now(now).isoformat()}\n"
        "\n"
        "---\n"
        "_Powered by Qoder Action MVP_ 🚀"
    )
