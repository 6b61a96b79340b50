"""Payment API transport."""
import logging
from typing import Any, Dict, Optional

import requests

from config import PaymentApiConfig, app_config
from payclient.api.encoding import encode_params
from payclient.errors import AuthenticationError

logger = logging.getLogger(__name__)


class APIRequestor:
    """Client for the payment API."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_base: Optional[str] = None,
        config: Optional[PaymentApiConfig] = None,
    ):
        """
        Initialize requestor.

        Args:
            api_key: API key; falls back to the configured key at request time
            api_base: Base URL; falls back to the configured ``api_base``
            config: Payment API config; defaults to the global app config
        """
        self._config = config
        self.api_key = api_key
        self.api_base = api_base

    @property
    def config(self) -> PaymentApiConfig:
        """Current config (read on every call so runtime changes apply)."""
        return self._config or app_config.payment_api

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Send a request and return the decoded JSON body.

        Args:
            method: HTTP method (get, post, delete)
            path: API path (e.g. /v1/accounts/acct_123) or absolute URL
            params: Parameters, sent as query string for GET/DELETE and as
                form body otherwise

        Returns:
            Decoded response data

        Raises:
            AuthenticationError: If no API key is available
            requests.HTTPError: If the API answers with an error status
        """
        api_key = self.api_key or self.config.api_key
        if not api_key:
            raise AuthenticationError(
                "No API key provided. Set app_config.payment_api.api_key "
                "(or PAYMENT_API_KEY) or pass api_key explicitly."
            )

        method = method.upper()
        url = path if path.startswith("http") else f"{(self.api_base or self.config.api_base).rstrip('/')}{path}"

        headers = {
            "Authorization": f"Bearer {api_key}",
            "User-Agent": "payclient/0.1.0",
        }
        if self.config.api_version:
            headers["Stripe-Version"] = self.config.api_version

        encoded = encode_params(params)
        data = None
        if method in ("GET", "DELETE"):
            if encoded:
                url = f"{url}{'&' if '?' in url else '?'}{encoded}"
        else:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            data = encoded

        logger.debug(f"{method} {url}")

        with requests.Session() as session:
            response = session.request(
                method,
                url,
                headers=headers,
                data=data,
                timeout=self.config.timeout,
            )
        response.raise_for_status()

        logger.info(f"{method} {path} -> {response.status_code}")
        return response.json()
