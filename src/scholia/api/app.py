"""FastAPI application for the scholia local JSON API."""

import logging
import secrets
from typing import Any, Literal

from fastapi import Depends, FastAPI, HTTPException, Security
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from .. import __version__
from ..adapters.tree_codec import to_dict
from ..core.model import Selection
from ..editor import (
    TOOLBAR_ACTIONS,
    SelectionError,
    UnknownActionError,
    check_selection,
    get_action,
    wrap_selection,
)
from ..format.render import plain_text

logger = logging.getLogger(__name__)


class RenderRequest(BaseModel):
    text: str
    format: Literal["tree", "html", "text"] = "tree"


class BlocksRequest(BaseModel):
    text: str


class WrapRequest(BaseModel):
    text: str
    start: int
    end: int
    action: str | None = None
    prefix: str = ""
    suffix: str = ""


def create_app(runtime: Any, token: str | None = None, enable_cors: bool = False) -> FastAPI:
    """
    Create FastAPI application with runtime injected.

    Args:
        runtime: Runtime instance with parser and renderer
        token: Bearer token for authentication (None to disable auth)
        enable_cors: Enable CORS middleware

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Scholia API",
        description="Render and edit forum post markup",
        version=__version__,
        docs_url="/docs" if token is None else None,
        redoc_url="/redoc" if token is None else None,
    )

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    if token:
        security_scheme = HTTPBearer(auto_error=False)

        async def verify_token(
            credentials: HTTPAuthorizationCredentials | None = Security(security_scheme),  # noqa: B008
        ) -> None:
            """Verify bearer token."""
            if credentials is None or credentials.credentials != token:
                raise HTTPException(status_code=401, detail="Invalid or missing token")
    else:

        async def verify_token() -> None:
            """No-op when auth is disabled."""
            return None

    @app.get("/health")
    async def health(auth: None = Depends(verify_token)) -> dict[str, Any]:
        return {"status": "ok", "version": __version__}

    @app.post("/render")
    async def render(req: RenderRequest, auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Render text as a node tree, HTML or plain text."""
        document = runtime.parse(req.text)
        if req.format == "html":
            return {"html": runtime.renderer.render_html(document)}
        if req.format == "text":
            return {"text": plain_text(document)}
        return to_dict(document)

    @app.post("/blocks")
    async def blocks(req: BlocksRequest, auth: None = Depends(verify_token)) -> list[dict[str, str]]:
        """Block classification only, one entry per line."""
        document = runtime.parse(req.text)
        return [{"kind": rb.kind, "text": rb.block.text} for rb in document.blocks]

    @app.post("/wrap")
    async def wrap(req: WrapRequest, auth: None = Depends(verify_token)) -> dict[str, Any]:
        """Wrap a selection with a toolbar action or an explicit prefix/suffix."""
        selection = Selection(req.start, req.end)
        try:
            check_selection(req.text, selection)
        except SelectionError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e

        prefix, suffix = req.prefix, req.suffix
        if req.action is not None:
            try:
                action = get_action(req.action)
            except UnknownActionError as e:
                raise HTTPException(status_code=404, detail=f"Unknown action {req.action}") from e
            prefix, suffix = action.prefix, action.suffix

        new_text, new_sel = wrap_selection(req.text, selection, prefix, suffix)
        logger.debug("wrapped %d..%d -> %d..%d", req.start, req.end, new_sel.start, new_sel.end)
        return {"text": new_text, "selection": {"start": new_sel.start, "end": new_sel.end}}

    @app.get("/actions")
    async def actions(auth: None = Depends(verify_token)) -> list[dict[str, str]]:
        return [
            {"name": a.name, "title": a.title, "prefix": a.prefix, "suffix": a.suffix}
            for a in TOOLBAR_ACTIONS.values()
        ]

    return app


def generate_token() -> str:
    """Generate a random bearer token."""
    return secrets.token_urlsafe(32)
