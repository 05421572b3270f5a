"""HTTP entry point for the home service.

Two routes are registered on a FastAPI app and served by uvicorn.  Both
responses are streamed, so they go out with chunked transfer encoding, and
both carry an open CORS header.
"""

from typing import Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import StreamingResponse

from apps.home import HomeService, featured_movies, render_movies
from lib.config.home_loader import HomeConfig, load_home_config
from lib.telemetry.logger import configure_logging, get_logger

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"
HTML_CONTENT_TYPE = "text/html"

logger = get_logger(__name__)


def _headers(content_type: str) -> Dict[str, str]:
    # Passing Content-Type explicitly stops Starlette from appending a charset.
    return {
        "Content-Type": content_type,
        "Access-Control-Allow-Origin": "*",
    }


def create_app() -> FastAPI:
    """Build the FastAPI app with the two home routes."""

    service = HomeService()
    app = FastAPI(title="home")

    @app.post("/home/post")
    async def home_post(request: Request):
        """Log the request and answer with the featured movies as JSON."""

        await service.inspect(request)
        body = render_movies(featured_movies())
        return StreamingResponse(iter([body]), headers=_headers(JSON_CONTENT_TYPE))

    @app.get("/home/get")
    async def home_get(name: Optional[str] = None, age: Optional[str] = None):
        """Answer with a fixed greeting; ``name`` and ``age`` are only logged."""

        logger.info("name parameter is %s age is %s", name, age)
        return StreamingResponse(iter(service.greeting_chunks()), headers=_headers(HTML_CONTENT_TYPE))

    return app


app = create_app()


class HomeServer(uvicorn.Server):
    """uvicorn server that reports the bound address once it is listening."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return
        for server in self.servers:
            for sock in server.sockets or ():
                host, port = sock.getsockname()[:2]
                logger.info("home service listening on %s:%s", host, port)


def build_server(config: HomeConfig) -> HomeServer:
    return HomeServer(
        uvicorn.Config(create_app(), host=config.host, port=config.port, log_level=config.log_level.lower())
    )


def run(config_path: Optional[str] = None) -> None:
    """Load configuration and serve the app until interrupted.

    uvicorn logs listener failures itself and exits with a non-zero status;
    the listening line is only written after the socket is bound.
    """

    cfg = load_home_config(config_path)
    configure_logging(cfg.log_level)
    build_server(cfg).run()


if __name__ == "__main__":
    run()
