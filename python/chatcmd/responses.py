"""Response helpers shared by the routers.

Chatbots substitute the raw response body into their message, so almost
everything is answered as ``text/plain`` with status 200, including
user-facing errors.
"""
from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse


def text(content: str) -> PlainTextResponse:
    return PlainTextResponse(content)


def json(data: Any) -> JSONResponse:
    return JSONResponse(data)


def wants_json(request: Request) -> bool:
    """True when the Accept header asks for JSON (``*/json`` or ``*+json``)."""
    accept = request.headers.get("accept", "")
    return "/json" in accept or "+json" in accept


def int_param(value: str | None, default: int) -> int:
    """Lenient integer query parameter: blank or unparseable input yields *default*."""
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default
