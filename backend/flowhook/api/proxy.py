"""Pass-through of unmatched requests to an optional upstream server."""

from __future__ import annotations

from http import HTTPStatus

import requests
from flask import Blueprint, Response, current_app, request

bp = Blueprint("proxy", __name__)

PROXY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_HOP_BY_HOP_HEADERS = {
    "connection",
    "keep-alive",
    "proxy-authenticate",
    "proxy-authorization",
    "te",
    "trailers",
    "transfer-encoding",
    "upgrade",
    "host",
    "content-length",
}

# requests has already decoded the upstream body
_DECODED_RESPONSE_HEADERS = {"content-encoding"}


def _filter_headers(headers, extra: set[str] | frozenset[str] = frozenset()) -> list[tuple[str, str]]:
    excluded = _HOP_BY_HOP_HEADERS | extra
    return [(name, value) for name, value in headers if name.lower() not in excluded]


def _not_found() -> tuple[Response, int]:
    return Response("Not Found", mimetype="text/plain"), HTTPStatus.NOT_FOUND


@bp.route("/", defaults={"path": ""}, methods=PROXY_METHODS)
@bp.route("/<path:path>", methods=PROXY_METHODS)
def forward(path: str):
    upstream = current_app.config.get("PROXY_UPSTREAM_URL")
    if not upstream:
        return _not_found()

    url = f"{upstream.rstrip('/')}/{path}"
    try:
        upstream_response = requests.request(
            request.method,
            url,
            params=list(request.args.items(multi=True)),
            data=request.get_data(),
            headers=_filter_headers(request.headers.items()),
            allow_redirects=False,
            timeout=float(current_app.config.get("PROXY_TIMEOUT", 30)),
        )
    except requests.RequestException as exc:
        current_app.logger.warning("Proxying %s %s failed: %s", request.method, url, exc)
        return Response("Bad Gateway", mimetype="text/plain"), HTTPStatus.BAD_GATEWAY

    return Response(
        upstream_response.content,
        status=upstream_response.status_code,
        headers=_filter_headers(
            upstream_response.headers.items(), _DECODED_RESPONSE_HEADERS
        ),
    )
