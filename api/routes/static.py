"""
Serving of the built frontend (single page app).

Registered last, and only when the build directory exists:
- existing files under the build directory are returned as is
- any other GET path returns `index.html` so client-side routing works
"""

from pathlib import Path

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse


def build_static_router(static_dir: Path) -> APIRouter:
    """
    Build a router serving `static_dir` with an `index.html` fallback.
    """
    root = static_dir.resolve()
    index = root / "index.html"
    router = APIRouter(tags=["static"])

    @router.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and candidate.is_relative_to(root):
            return FileResponse(candidate)
        if not index.is_file():
            raise HTTPException(status_code=404, detail="Not found")
        return FileResponse(index)

    return router
