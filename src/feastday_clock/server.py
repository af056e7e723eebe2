"""aiohttp web server: ``GET /`` renders the clock page.

The page always comes back with status 200; upstream failures only degrade
its content. A single ``RequestContext`` is stored on the application so all
requests share the same caches.
"""

from __future__ import annotations

import logging

from aiohttp import web

from feastday_clock.flows.context import RequestContext, create_context
from feastday_clock.flows.page import render_page

logger = logging.getLogger(__name__)

CONTEXT_KEY: web.AppKey[RequestContext] = web.AppKey("context", RequestContext)


async def index(request: web.Request) -> web.Response:
    """Serve the rendered page."""
    html = await render_page(request.app[CONTEXT_KEY])
    return web.Response(text=html, content_type="text/html", charset="utf-8")


async def healthz(_request: web.Request) -> web.Response:
    return web.json_response({"status": "ok"})


async def _close_session(app: web.Application) -> None:
    app[CONTEXT_KEY].session.close()


def create_app(ctx: RequestContext | None = None) -> web.Application:
    """Build the aiohttp application around a request context."""
    app = web.Application()
    app[CONTEXT_KEY] = ctx or create_context()
    app.router.add_get("/", index)
    app.router.add_get("/healthz", healthz)
    app.on_cleanup.append(_close_session)
    return app


def run(host: str, port: int, ctx: RequestContext | None = None) -> None:
    """Run the server until interrupted."""
    app = create_app(ctx)
    logger.info("Clock app listening at http://%s:%d", host, port)
    web.run_app(app, host=host, port=port, print=None)
