from typing import override

import httpx

from mcp_auth_validator.authentication.adapters.base import BaseAdapter
from mcp_auth_validator.authentication.result import AuthenticationResult, ResultCode

from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


_STATUS_CODES = {
    401: ResultCode.FAILURE_CREDENTIAL_INVALID,
    403: ResultCode.FAILURE,
    404: ResultCode.FAILURE_IDENTITY_NOT_FOUND,
}


class HttpBasicAdapter(BaseAdapter):
    """Checks identity and credential with one HTTP Basic request to ``url``."""

    def __init__(
        self,
        url: str,
        verify_cert: bool = True,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
        identity: str | None = None,
        credential: str | None = None,
    ):
        super().__init__(identity, credential)
        self._url = url
        self._verify_cert = verify_cert
        self._timeout = timeout
        self._transport = transport

    @override
    def authenticate(self) -> AuthenticationResult:
        logger.debug("calling authentication server at url: %s", self._url)
        try:
            # This is purposefully synchronous
            with httpx.Client(
                verify=self._verify_cert,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.get(
                    self._url, auth=(self._identity or "", self._credential or "")
                )
        except httpx.HTTPError as exp:
            logger.error("failed to reach authentication server: %s", exp)
            return AuthenticationResult(
                ResultCode.FAILURE_UNCATEGORIZED, None, [str(exp)]
            )

        if response.is_success:
            return AuthenticationResult(ResultCode.SUCCESS, self._identity)

        code = _STATUS_CODES.get(
            response.status_code, ResultCode.FAILURE_UNCATEGORIZED
        )
        if code == ResultCode.FAILURE_UNCATEGORIZED:
            logger.warning(
                "unexpected authentication server status: %s", response.status_code
            )
        return AuthenticationResult(
            code, None, [f"authentication server returned {response.status_code}"]
        )
