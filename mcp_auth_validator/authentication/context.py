from contextvars import ContextVar

from mcp_auth_validator.authentication.auth_user import AuthenticatedUser

auth_context_var: ContextVar[AuthenticatedUser | None] = ContextVar(
    "auth_context_var", default=None
)


def get_authenticated_username() -> str | None:
    auth_user = auth_context_var.get()
    return auth_user.username if auth_user else None
