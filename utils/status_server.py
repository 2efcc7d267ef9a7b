#!/usr/bin/env python3
"""
Local test server for trying the status checker without the internet.

The server answers with whatever the path asks for:
- /status/{code}: an empty response with that HTTP status code
- /slow/{seconds}: a 200 response after the given delay
- anything else: a 200 response with a random body

A URL list pointing at these paths is printed on startup, so that
`status-checker urls.txt -o results.json` can be run against it.
"""

import asyncio
import random
import string

from aiohttp import web

# Constants
PORT = 8080
HOST = "localhost"
RESPONSE_LENGTH = 100
MAX_DELAY_S = 60
SAMPLE_PATHS = (
    "/",
    "/status/403",
    "/status/404",
    "/status/418",
    "/status/500",
    "/slow/15",
    "/logo.png",
)


async def handle_status(request: web.Request) -> web.Response:
    """
    Respond with the status code given in the path.

    Args:
        request: The incoming HTTP request

    Returns:
        An empty response with the requested status code
    """
    code = int(request.match_info["code"])
    if not 200 <= code <= 599:
        raise web.HTTPBadRequest(text=f"Unsupported status code: {code}")
    return web.Response(status=code)


async def handle_slow(request: web.Request) -> web.Response:
    """
    Respond with 200 after the delay given in the path, capped at MAX_DELAY_S.

    Args:
        request: The incoming HTTP request

    Returns:
        A 200 response sent once the delay has elapsed
    """
    delay_s = min(int(request.match_info["seconds"]), MAX_DELAY_S)
    await asyncio.sleep(delay_s)
    return web.Response(text=f"slept {delay_s}s")


async def handle_default(request: web.Request) -> web.Response:
    response_content = "".join(
        random.choice(string.ascii_lowercase) for _ in range(RESPONSE_LENGTH)
    )
    return web.Response(text=response_content)


async def init_app() -> web.Application:
    """
    Initialize the web application.

    Returns:
        Configured aiohttp web Application
    """
    app = web.Application()
    app.add_routes(
        [
            web.get(r"/status/{code:\d{3}}", handle_status),
            web.get(r"/slow/{seconds:\d+}", handle_slow),
            web.get("/{tail:.*}", handle_default),
        ]
    )
    return app


def run_server() -> None:
    """Run the test server on HOST and PORT until interrupted."""
    web.run_app(init_app(), host=HOST, port=PORT)


if __name__ == "__main__":
    print(f"Starting status server at http://{HOST}:{PORT}")
    print("Sample URL list:")
    for path in SAMPLE_PATHS:
        print(f"http://{HOST}:{PORT}{path}")
    run_server()
