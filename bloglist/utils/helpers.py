from collections.abc import MutableMapping
from datetime import datetime
from time import perf_counter
from typing import Any
from uuid import UUID

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Match, Route


def host(request: Request) -> str:
    """Return the host IP address."""
    return request.client.host if request.client else "unknown"


def today_str() -> str:
    """Return the current local time as a string."""
    return datetime.now(datetime.now().astimezone().tzinfo).strftime(
        "%Y-%m-%d %H:%M:%S",
    )


def time_taken(start_time: float) -> str:
    elapsed_ms = (perf_counter() - start_time) * 1000
    return f"{elapsed_ms:.2f}ms"


def get_summary(request: Request) -> str | None:
    """Extract route summary from request."""

    scope: MutableMapping[str, Any] = request.scope
    app: FastAPI = scope["app"]
    routes: list[BaseRoute] = app.routes

    summary = None
    for route in routes:
        is_api_route = type(route) is APIRoute
        is_route = type(route) is Route
        if is_api_route and route.matches(scope)[0] == Match.FULL:
            summary = route.summary
            break
        if is_route and route.matches(scope)[0] == Match.FULL:
            summary = route.name
            break

    return summary


def try_parse_uuid(value: str | UUID | None) -> UUID | None:
    """
    Parse `value` as a UUID without raising.

    Args:
        value: Candidate identifier.

    Returns:
        UUID | None: Parsed UUID, or None when `value` is not a UUID.
    """
    if isinstance(value, UUID):
        return value
    if not value:
        return None
    try:
        return UUID(value)
    except (ValueError, TypeError, AttributeError):
        return None
