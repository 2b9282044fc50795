from .authentication import AuthenticationValidator
from .base import AbstractValidator

__all__ = ["AbstractValidator", "AuthenticationValidator"]
