"""Static assets from the public directory, with directory listings."""
import html
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse

from recordcrate.api.state import AppState, get_state

router = APIRouter()


def _resolve(public_dir: Path, path: str) -> Path:
    """Map a URL path to a file under public_dir; 404 if it escapes or does not exist."""
    root = public_dir.resolve()
    try:
        target = (root / path).resolve()
    except (ValueError, OSError):
        raise HTTPException(status_code=404, detail="Not found")
    if not target.is_relative_to(root) or not target.exists():
        raise HTTPException(status_code=404, detail="Not found")
    return target


def _listing(directory: Path, url_path: str) -> str:
    title = html.escape(f"Index of /{url_path}")
    items = []
    if url_path:
        items.append('<li><a href="../">../</a></li>')
    for entry in sorted(directory.iterdir(), key=lambda p: (not p.is_dir(), p.name)):
        name = entry.name + ("/" if entry.is_dir() else "")
        items.append(f'<li><a href="{html.escape(name, quote=True)}">{html.escape(name)}</a></li>')
    return (
        f"<!doctype html><html><head><title>{title}</title></head>"
        f"<body><h1>{title}</h1><ul>{''.join(items)}</ul></body></html>"
    )


@router.get("/{path:path}")
def serve_static(path: str, state: AppState = Depends(get_state)):
    """Serve a file, a directory's index.html, or a listing of the directory."""
    target = _resolve(state.public_dir, path)
    if target.is_file():
        return FileResponse(str(target))
    if path and not path.endswith("/"):
        return RedirectResponse(url=f"/{path}/", status_code=301)
    index = target / "index.html"
    if index.is_file():
        return FileResponse(str(index))
    return HTMLResponse(_listing(target, path))
