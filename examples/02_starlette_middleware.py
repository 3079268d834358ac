"""
Request Logging Middleware Example.

A small Starlette app with LoggingMiddleware. Serve it with any ASGI server
(``uvicorn examples.02_starlette_middleware:app``) or run this file, which
drives a few requests through Starlette's TestClient (requires httpx).
"""

from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.middleware import Middleware
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from http_logger import LoggingMiddleware


async def homepage(request):
    return PlainTextResponse("Hello, World!")


async def health(request):
    return PlainTextResponse("healthy")


async def get_user(request):
    user_id = request.path_params["user_id"]
    request.state.logger.debug(f"Looking up user {user_id}")
    if user_id > 100:
        raise HTTPException(status_code=404, detail="User not found")
    return JSONResponse({"id": user_id})


async def crash(request):
    raise RuntimeError("Database connection failed")


app = Starlette(
    routes=[
        Route("/", homepage),
        Route("/health", health),
        Route("/users/{user_id:int}", get_user),
        Route("/error", crash),
    ],
    middleware=[
        Middleware(
            LoggingMiddleware,
            level="debug",
            skip=["/health"],
            include_ip=True,
            use_global=True,
        )
    ],
)


if __name__ == "__main__":
    from starlette.testclient import TestClient

    client = TestClient(app, raise_server_exceptions=False)
    client.get("/")
    client.get("/health")  # skipped
    client.get("/users/7")
    client.get("/users/404", headers={"X-Forwarded-For": "192.0.2.100, 10.0.0.1"})
    client.get("/error")
