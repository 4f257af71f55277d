from __future__ import annotations

from fastapi import Request

from theme_preview.session import PreviewSession


def get_session(request: Request) -> PreviewSession:
    """Return the ``PreviewSession`` owned by the running application."""
    session: PreviewSession = request.app.state.session
    return session
