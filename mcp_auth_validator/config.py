import json
from typing import Any

import yaml

from mcp_auth_validator.authentication.exceptions import InvalidArgumentError
from mcp_auth_validator.authentication.validators.authentication import (
    AuthenticationValidator,
)

from mcp.server.fastmcp.utilities.logging import get_logger

logger = get_logger(__name__)


class FileOptionsLoader:
    """Loads validator options from a ``file://`` JSON or YAML document.

    Only plain options can be loaded this way: ``identity``, ``credential``,
    ``code_map`` and ``messages``. Adapters and services are passed in code.
    """

    def __init__(self, url: str):
        if not url.lower().startswith("file://"):
            raise RuntimeError("URL should begin with 'file://'.")
        self._url = url

    def fetch(self) -> str:
        logger.debug(f"Fetching validator options from file: {self._url}")
        try:
            with open(self._url[7:], "r") as f:
                return f.read()
        except OSError as e:
            raise RuntimeError(f"Failed to fetch options from {self._url}, {e}.")

    def load(self) -> dict[str, Any]:
        content = self.fetch()
        try:
            options = json.loads(content)
            logger.debug("Content parsed as JSON.")
        except json.JSONDecodeError:
            try:
                options = yaml.safe_load(content)
                logger.debug("Content parsed as YAML.")
            except yaml.YAMLError as ye:
                raise RuntimeError(f"YAML parsing failed: {ye}.")

        if options is None:
            return {}
        if not isinstance(options, dict):
            raise RuntimeError(f"Options in {self._url} must be a mapping.")

        # JSON object keys are always strings
        if options.get("code_map"):
            try:
                options["code_map"] = {
                    int(code): key for code, key in options["code_map"].items()
                }
            except (TypeError, ValueError):
                raise InvalidArgumentError(
                    "Result code in code_map option must be an integer"
                )
        return options


def load_validator_options(url: str) -> dict[str, Any]:
    return FileOptionsLoader(url).load()


def create_validator(url: str, **overrides: Any) -> AuthenticationValidator:
    options = load_validator_options(url)
    options.update(overrides)
    return AuthenticationValidator(options)
