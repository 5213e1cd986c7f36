# greeting.py
from __future__ import annotations
from typing import Final

from pydantic import BaseModel, Field
from pydantic_core import PydanticSerializationError

import logging
logger = logging.getLogger(__name__)


GREETING_TEMPLATE: Final = "Hello! 👋 I received your input: '{user_input}'. Nice to meet you!"


class EncodingError(Exception):
    """Raised when a response cannot be turned into UTF-8 JSON."""


class GreetingResponse(BaseModel):
    message: str = Field(description="The greeting built from the user input.")
    user_input: str = Field(description="The argument as received, with invalid UTF-8 replaced by U+FFFD.")
    success: bool = Field(default=True, description="Always true on the success path.")


def _valid_utf8(text: str) -> str:
    """Replace anything that is not valid UTF-8 with U+FFFD."""
    try:
        # undecodable argv bytes arrive as \udc80-\udcff escapes
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")


def build_greeting(user_input: str) -> GreetingResponse:
    """Wrap ``user_input`` into the greeting template.

    Any text is accepted, including the empty string. Nothing is escaped
    here; escaping is left to :func:`serialize`. Bytes that were not valid
    UTF-8 on the command line come out as U+FFFD.
    """
    user_input = _valid_utf8(user_input)
    return GreetingResponse(
        message=GREETING_TEMPLATE.format(user_input=user_input),
        user_input=user_input,
        success=True,
    )


def serialize(response: GreetingResponse) -> bytes:
    """Compact UTF-8 JSON with keys in declaration order."""
    try:
        payload = response.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as err:
        raise EncodingError(str(err)) from err
    logger.debug(f"Serialized response ({len(payload)} bytes)")
    return payload
