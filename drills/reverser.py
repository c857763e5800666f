"""A WSGI service that reverses the ``arg`` query parameter."""

from __future__ import annotations

import argparse
from urllib.parse import parse_qs
from wsgiref.simple_server import make_server


def reverse(s: str) -> str:
    return s[::-1]


def _arg(environ) -> str:
    return parse_qs(environ.get("QUERY_STRING", "")).get("arg", [""])[0]


def _respond(start_response, status: str, body: bytes, headers=()):
    start_response(status, [("Content-Type", "text/plain; charset=utf-8"), *headers])
    return [body]


def reverser(environ, start_response):
    return _respond(start_response, "200 OK", reverse(_arg(environ)).encode())


def arg_validator(next_app):
    """Answer 400 unless the request carries a non-empty ``arg``."""

    def app(environ, start_response):
        if not _arg(environ):
            return _respond(start_response, "400 Bad Request", b"arg is required")
        return next_app(environ, start_response)

    return app


def make_app():
    """Route ``GET /reverser`` to the validated reverser."""
    handler = arg_validator(reverser)

    def app(environ, start_response):
        if environ.get("PATH_INFO") != "/reverser":
            return _respond(start_response, "404 Not Found", b"404 page not found\n")
        method = environ.get("REQUEST_METHOD", "GET")
        if method not in ("GET", "HEAD"):
            return _respond(start_response, "405 Method Not Allowed",
                            b"Method Not Allowed\n", [("Allow", "GET, HEAD")])
        body = handler(environ, start_response)
        return [] if method == "HEAD" else body

    return app


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="drills-reverser")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    with make_server("", args.port, make_app()) as server:
        server.serve_forever()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())