"""
HTTP transport for the ExtraHop REST API v1.

Provides a small interface for sending authenticated JSON requests to an
appliance, including SSL context handling and response decoding.
"""

import json
import logging
import ssl
from http.client import HTTPException, InvalidURL
from typing import Any, Optional, Type, TypeVar
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from pydantic import BaseModel, ValidationError

from .errors import ApiStatusError, DecodeError, RequestBuildError, TransportError

logger = logging.getLogger("hopmetrics.http")

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class ExtraHopHttpClient:
    """HTTP client for communicating with an ExtraHop appliance."""

    def __init__(self, api_url: str, api_key: str, timeout: Optional[float] = None, verify_ssl: bool = True):
        """
        Initialize HTTP client.

        Args:
            api_url: Base URL of the appliance (e.g., https://extrahop.example.com)
            api_key: REST API key
            timeout: Request timeout in seconds, None for the library default
            verify_ssl: Verify the appliance certificate
        """
        self._api_url = api_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._ssl_context = self._create_ssl_context(verify_ssl)

    @property
    def api_url(self) -> str:
        return self._api_url

    @property
    def api_key(self) -> str:
        return self._api_key

    def _create_ssl_context(self, verify_ssl: bool) -> ssl.SSLContext:
        """Create SSL context for HTTPS, optionally trusting self-signed certificates."""
        ssl_context = ssl.create_default_context()
        if not verify_ssl:
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
        return ssl_context

    def _build_request(self, path: str, method: str, payload: Any) -> Request:
        url = f"{self._api_url}/api/v1/{path}"
        body = None
        if payload is not None:
            try:
                body = json.dumps(payload).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise RequestBuildError(f"cannot serialize payload for {path}: {e}") from e

        headers = {
            "Authorization": f"ExtraHop apikey={self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            return Request(url, data=body, headers=headers, method=method)
        except ValueError as e:
            raise RequestBuildError(f"invalid request URL {url}: {e}") from e

    def request(
        self,
        path: str,
        method: str,
        payload: Any = None,
        response_model: Optional[Type[ResponseT]] = None,
    ) -> Optional[ResponseT]:
        """
        Send a single request to /api/v1/{path}.

        Args:
            path: Resource path below /api/v1 (e.g., "metrics")
            method: HTTP method
            payload: JSON-serializable request body, or None for no body
            response_model: Pydantic model to decode a 200 response into;
                when None the body is not decoded

        Returns:
            Decoded response model, or None when no model was requested

        Raises:
            RequestBuildError: The request could not be built
            TransportError: On connection errors
            ApiStatusError: On any status other than 200
            DecodeError: If the body does not match response_model
        """
        req = self._build_request(path, method, payload)

        kwargs = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        # Use SSL context for HTTPS URLs
        if req.full_url.startswith("https://"):
            kwargs["context"] = self._ssl_context

        logger.debug(f"{method} {req.full_url}")
        try:
            with urlopen(req, **kwargs) as resp:
                status = resp.status
                raw = resp.read()
        except HTTPError as e:
            try:
                text = e.read().decode("utf-8", errors="replace")
            except (OSError, HTTPException) as read_error:
                raise TransportError(
                    f"{method} {req.full_url} failed with status {e.code}, body unreadable: {read_error}"
                ) from read_error
            finally:
                e.close()
            logger.warning(f"{method} {req.full_url} failed with status {e.code}")
            raise ApiStatusError(e.code, text) from e
        except InvalidURL as e:
            raise RequestBuildError(f"invalid request URL {req.full_url}: {e}") from e
        except (OSError, HTTPException) as e:
            # HTTPException covers broken status lines and bodies cut short
            raise TransportError(f"{method} {req.full_url} failed: {e}") from e

        if status != 200:
            logger.warning(f"{method} {req.full_url} failed with status {status}")
            raise ApiStatusError(status, raw.decode("utf-8", errors="replace"))

        if response_model is None:
            return None

        try:
            return response_model.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(f"cannot decode {response_model.__name__} from {path}: {e}") from e

    def post(
        self,
        path: str,
        payload: Any = None,
        response_model: Optional[Type[ResponseT]] = None,
    ) -> Optional[ResponseT]:
        """Make a POST request, see request()."""
        return self.request(path, "POST", payload, response_model)
