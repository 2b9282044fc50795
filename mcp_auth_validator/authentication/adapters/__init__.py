from .base import BaseAdapter
from .callback import CallbackAdapter
from .http_basic import HttpBasicAdapter
from .jwt_token import JWTAdapter

__all__ = ["BaseAdapter", "CallbackAdapter", "HttpBasicAdapter", "JWTAdapter"]
