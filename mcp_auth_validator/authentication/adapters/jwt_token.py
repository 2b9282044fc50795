from typing import Any, Sequence, override

import cachetools
import httpx
import jwt

from mcp_auth_validator.authentication.adapters.base import BaseAdapter
from mcp_auth_validator.authentication.exceptions import InvalidArgumentError
from mcp_auth_validator.authentication.result import AuthenticationResult, ResultCode

from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


_cache = cachetools.TTLCache(maxsize=100, ttl=600)


class JWTAdapter(BaseAdapter):
    """Authenticates an identity whose credential is a signed JWT.

    The token must carry ``exp`` and the username claim, and the username
    claim must match the identity being validated.
    """

    def __init__(
        self,
        decryption_key: str | None = None,
        key_url: str | None = None,
        algorithms: Sequence[str] = ("RS256",),
        audience: str | None = None,
        issuer: str | None = None,
        username_claim: str = "user_data.username",
        verify_cert: bool = True,
        transport: httpx.BaseTransport | None = None,
        identity: str | None = None,
        credential: str | None = None,
    ):
        super().__init__(identity, credential)
        if decryption_key is None and key_url is None:
            raise InvalidArgumentError("either decryption_key or key_url is required")
        self._decryption_key = decryption_key
        self._key_url = key_url
        self._algorithms = list(algorithms)
        self._audience = audience
        self._issuer = issuer
        self._username_claim = username_claim.split(".")
        self._verify_cert = verify_cert
        self._transport = transport

    def _get_decryption_key(self) -> str:
        if self._decryption_key is not None:
            return self._decryption_key
        public_key = _cache.get(self._key_url)
        if public_key:
            return public_key
        logger.debug("fetching jwt key at url: %s", self._key_url)
        with httpx.Client(verify=self._verify_cert, transport=self._transport) as client:
            response = client.get(self._key_url)
            response.raise_for_status()
            public_key = response.text
            _cache[self._key_url] = public_key
            return public_key

    def decode_jwt_token(self, token: str, decryption_key: str) -> dict[str, Any]:
        options = {"require": [self._username_claim[0], "exp"]}
        return jwt.decode(
            token,
            decryption_key,
            audience=self._audience,
            issuer=self._issuer,
            options=options,
            algorithms=self._algorithms,
        )

    def _get_username(self, token_data: dict[str, Any]) -> Any:
        value: Any = token_data
        for part in self._username_claim:
            if not isinstance(value, dict):
                return None
            value = value.get(part)
        return value

    @override
    def authenticate(self) -> AuthenticationResult:
        try:
            decryption_key = self._get_decryption_key()
        except Exception as exp:
            logger.error("failed to get the jwt public key: %s", exp)
            return AuthenticationResult(
                ResultCode.FAILURE_UNCATEGORIZED,
                None,
                ["failed to get the jwt public key"],
            )

        try:
            token_data = self.decode_jwt_token(self._credential or "", decryption_key)
        except jwt.PyJWTError as exp:
            logger.debug("failed to decode jwt token: %s", exp)
            return AuthenticationResult(
                ResultCode.FAILURE_CREDENTIAL_INVALID, None, [str(exp)]
            )

        username = self._get_username(token_data)
        if username is None or username != self._identity:
            return AuthenticationResult(
                ResultCode.FAILURE_IDENTITY_NOT_FOUND,
                None,
                ["token does not belong to identity"],
            )
        return AuthenticationResult(ResultCode.SUCCESS, username)
