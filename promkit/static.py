"""A WSGI file server that sets content types for common web assets."""

from __future__ import annotations

import html
import mimetypes
import os
import posixpath
from collections.abc import Callable, Iterable
from http import HTTPStatus

MIME_TYPES = {
    ".js": "application/javascript",
    ".css": "text/css",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
}


def _status(code: int) -> str:
    return f"{code} {HTTPStatus(code).phrase}"


def _has_header(headers: list, name: str) -> bool:
    return any(key.lower() == name.lower() for key, _ in headers)


def serve_path(
    root: str,
    url_path: str,
    environ: dict,
    start_response: Callable,
    headers: list | None = None,
) -> Iterable[bytes]:
    """Serve ``url_path`` from the directory ``root``."""
    headers = list(headers or [])
    if not url_path.startswith("/"):
        url_path = "/" + url_path
    clean = posixpath.normpath(url_path)
    parts = [p for p in clean.split("/") if p]
    fs_path = os.path.join(root, *parts)
    head = environ.get("REQUEST_METHOD") == "HEAD"

    if not os.path.exists(fs_path):
        start_response(_status(404), [("Content-Type", "text/plain; charset=utf-8")])
        return [b"404 page not found\n"]

    if os.path.isdir(fs_path):
        if not url_path.endswith("/"):
            target = posixpath.basename(clean) + "/"
            start_response(_status(301), headers + [("Location", target)])
            return [b""]
        index = os.path.join(fs_path, "index.html")
        if os.path.isfile(index):
            fs_path = index
        else:
            entries = sorted(os.listdir(fs_path))
            links = "".join(
                f'<a href="{html.escape(name)}{"/" if os.path.isdir(os.path.join(fs_path, name)) else ""}">'
                f"{html.escape(name)}</a>\n"
                for name in entries
            )
            body = f"<pre>\n{links}</pre>\n".encode()
            if not _has_header(headers, "Content-Type"):
                headers.append(("Content-Type", "text/html; charset=utf-8"))
            start_response(_status(200), headers)
            return [b"" if head else body]

    with open(fs_path, "rb") as fh:
        body = fh.read()
    if not _has_header(headers, "Content-Type"):
        guessed, _ = mimetypes.guess_type(fs_path)
        headers.append(("Content-Type", guessed or "application/octet-stream"))
    headers.append(("Content-Length", str(len(body))))
    start_response(_status(200), headers)
    return [b"" if head else body]


def static_file_server(root: str) -> Callable:
    """Return a WSGI app serving files under ``root`` with known content types."""

    def app(environ: dict, start_response: Callable) -> Iterable[bytes]:
        path = environ.get("PATH_INFO") or "/"
        ext = posixpath.splitext(path)[1]
        headers = [("Content-Type", MIME_TYPES[ext])] if ext in MIME_TYPES else []
        return serve_path(root, path, environ, start_response, headers)

    return app