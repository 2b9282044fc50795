class AuthenticationException(Exception):
    pass


class AuthenticationRuntimeError(AuthenticationException, RuntimeError):
    """Raised when a component is used before it is fully configured."""


class InvalidArgumentError(AuthenticationException, ValueError):
    """Raised when an option or argument is malformed."""
