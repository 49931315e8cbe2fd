"""CORS middleware with per-path opt-outs for routes that answer CORS themselves."""

from collections.abc import Iterable

from fastapi.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


class ScopedCORSMiddleware(CORSMiddleware):
    """Starlette's CORSMiddleware, bypassed for ``exempt_paths``.

    Requests to an exempt path (preflights included) go straight to the
    route handler, which is then responsible for its own CORS headers.
    """

    def __init__(self, app: ASGIApp, exempt_paths: Iterable[str] = (), **kwargs) -> None:
        super().__init__(app, **kwargs)
        self.exempt_paths = frozenset(p.rstrip("/") for p in exempt_paths)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["path"].rstrip("/") in self.exempt_paths:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)
