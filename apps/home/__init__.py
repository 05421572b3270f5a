"""Home service.

The two home endpoints do almost nothing of their own: they read what the
client sent, log it, and answer with fixed content.  This module holds that
glue so the HTTP layer in :mod:`apps.home.main` only deals with routing and
response headers.

* ``POST /home/post`` answers with a small catalogue of featured movies.
* ``GET /home/get`` answers with a fixed greeting written in two chunks.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Iterable, List, Optional

from fastapi import Request
from pydantic import ValidationError

from lib.contracts.movie import Movie
from lib.contracts.visitor import Visitor
from lib.telemetry.logger import get_logger

logger = get_logger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")
GREETING_PREFIX = "content body string"
GREETING = "Hello from Vert.x"


def featured_movies() -> List[Movie]:
    """Return the fixed catalogue served by ``POST /home/post``."""

    titanic = Movie()
    titanic.title = "Titanic"
    titanic.director = "James Cameron"
    titanic.box_office = Decimal(657567567)

    return [
        titanic,
        Movie(title="Transformer", director="Micheal Bay", box_office=Decimal(45657)),
    ]


def render_movies(movies: Iterable[Movie]) -> str:
    """Pretty-print ``movies`` as a JSON array using their wire field names."""

    payload = [m.model_dump(mode="json", by_alias=True) for m in movies]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def read_visitor(body: bytes) -> Optional[Visitor]:
    """Decode a JSON object body into a :class:`Visitor`.

    Anything that is not a JSON object is logged and ignored; the caller
    still answers normally.
    """

    if not body:
        return None
    try:
        data = json.loads(body)
    except ValueError as exc:
        logger.warning("request body is not JSON: %s", exc)
        return None
    if not isinstance(data, dict):
        logger.warning("request body is not a JSON object: %s", type(data).__name__)
        return None
    try:
        return Visitor.model_validate(data)
    except ValidationError as exc:
        logger.warning("request body has invalid visitor fields: %s", exc.errors())
        return None


class HomeService:
    """Request inspection and fixed content for the home endpoints."""

    async def inspect(self, request: Request) -> Optional[Visitor]:
        """Log everything the client sent with ``request``.

        Returns the visitor decoded from a JSON body, if any.
        """

        body = await request.body()
        visitor = read_visitor(body)
        if visitor is not None:
            logger.info("name is %s and age is %s", visitor.name, visitor.age)

        await self._log_form(request)

        logger.info("request path is %s", request.url.path)
        logger.info("query is %s", request.url.query)
        for key, value in request.headers.items():
            logger.debug("header %s=%s", key, value)
        for key, value in request.query_params.multi_items():
            logger.debug("param %s=%s", key, value)
        return visitor

    async def _log_form(self, request: Request) -> None:
        content_type = request.headers.get("content-type", "")
        if not content_type.startswith(FORM_CONTENT_TYPES):
            return
        try:
            form = await request.form()
        except Exception as exc:
            logger.warning("could not parse form body: %s", exc)
            return
        for key, value in form.multi_items():
            logger.debug("form %s=%s", key, value)

    def greeting_chunks(self) -> List[str]:
        """Chunks written, in order, by ``GET /home/get``."""

        return [GREETING_PREFIX, GREETING]


__all__ = [
    "GREETING",
    "GREETING_PREFIX",
    "HomeService",
    "featured_movies",
    "read_visitor",
    "render_movies",
]
