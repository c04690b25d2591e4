"""Translate Perplexity response bodies into lookup replies."""

from __future__ import annotations

import json
from logging import getLogger

from pydantic import ValidationError

from shipinfo.domain.ports.lookup import LookupReply

from .schema import ChatCompletionResponse

log = getLogger(__name__)


def translate_reply(body: object) -> LookupReply:
    """Pull the top choice's content out of a decoded response body.

    ``body`` is the decoded JSON, or the raw text when the response was not JSON.
    """

    return LookupReply(content=extract_content(body), body=stringify_body(body))


def extract_content(body: object) -> str | None:
    if not isinstance(body, dict):
        return None
    try:
        response = ChatCompletionResponse.model_validate(body)
    except ValidationError as exc:
        log.debug("Response body is not a chat completion: %s", exc)
        return None
    return response.content


def stringify_body(body: object) -> str:
    if isinstance(body, str):
        return body
    try:
        return json.dumps(body, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(body)
