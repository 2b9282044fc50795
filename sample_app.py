from os import environ
from urllib.parse import urljoin

import uvicorn

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.utilities.logging import configure_logging
from starlette.middleware.authentication import AuthenticationMiddleware

from mcp_auth_validator.authentication import (
    AuthenticationService,
    AuthenticationValidator,
    ValidatorAuthenticationBackend,
)
from mcp_auth_validator.authentication.adapters import HttpBasicAdapter
from mcp_auth_validator.authentication.context import get_authenticated_username


configure_logging("DEBUG")

AAP_URL = environ.get("AAP_URL", "https://localhost")

validator = AuthenticationValidator(
    adapter=HttpBasicAdapter(urljoin(AAP_URL, "api/gateway/v1/me/"), verify_cert=False),
    # one service for the whole process: it only remembers the last identity
    # that logged in, request users come from the backend
    service=AuthenticationService(),
    identity="username",
)

mcp = FastMCP("Authenticated MCP")


@mcp.tool()
async def whoami() -> str:
    """return the name of the authenticated user"""
    return get_authenticated_username() or "anonymous"


app = mcp.sse_app()
app.add_middleware(
    AuthenticationMiddleware, backend=ValidatorAuthenticationBackend(validator)
)

if __name__ == "__main__":
    uvicorn.run(app, host="127.0.0.1", port=3180)
