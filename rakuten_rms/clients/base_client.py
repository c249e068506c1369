"""
Base RMS WEB SERVICE client with the request/response envelope codec.

Every call is a single blocking request through a ``requests.Session``;
nothing is retried. Responses are decoded into pydantic envelopes and the
failure modes are mapped onto the client exception hierarchy.
"""

import base64
import logging
import time
from typing import Any, Dict, Optional, Type, TypeVar

import requests
from pydantic import ValidationError

from rakuten_rms.core.config import Settings, get_settings
from rakuten_rms.core.logging_config import log_api_call
from rakuten_rms.schemas.common import MessageEnvelope, RMSRequestModel
from rakuten_rms.utils.error_handler import (
    DecodeException,
    SemanticException,
    TransportException,
    UninitializedException,
    log_error,
)

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json; charset=utf-8"
CONTENT_TYPE_XML = "application/xml; charset=utf-8"

EnvelopeT = TypeVar("EnvelopeT", bound=MessageEnvelope)


def build_authorization(service_secret: str, license_key: str) -> str:
    """
    Build the ``Authorization`` header value.

    Args:
        service_secret: RMS service secret
        license_key: RMS license key

    Returns:
        str: ``ESA base64(service_secret:license_key)``
    """
    token = base64.b64encode(f"{service_secret}:{license_key}".encode("utf-8")).decode("ascii")
    return f"ESA {token}"


def _excerpt(response: requests.Response, limit: int = 200) -> str:
    return (response.content or b"")[:limit].decode("utf-8", errors="replace")


class BaseRMSClient:
    """
    Base client for RMS WEB SERVICE operations.

    Holds the credential, the HTTP session and the settings shared by the
    specialized clients. A client built without a credential is
    uninitialized: every call fails before touching the network.
    """

    def __init__(
        self,
        authorization: Optional[str] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the base client.

        Args:
            authorization: Precomputed ``Authorization`` header (see ``build_authorization``)
            session: HTTP session to use; one is created (and owned) if omitted
            settings: Client settings (default ``get_settings()``)
        """
        self.settings = settings or get_settings()
        self._authorization = authorization
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @property
    def is_initialized(self) -> bool:
        """True once a credential is set."""
        return bool(self._authorization)

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self.session is not None:
            self.session.close()
            logger.debug("RMS client session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _ensure_initialized(self) -> None:
        if not self.is_initialized:
            raise UninitializedException()

    def _headers(self, content_type: str) -> Dict[str, str]:
        return {
            "Authorization": self._authorization or "",
            "Content-Type": content_type,
            "User-Agent": self.settings.user_agent,
        }

    def _request(self, method: str, url: str, content_type: str, **kwargs: Any) -> requests.Response:
        """
        Perform exactly one HTTP request.

        Raises:
            TransportException: On network failure, or a non-2xx status without body
        """
        start_time = time.time()
        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(content_type),
                timeout=self.settings.REQUEST_TIMEOUT_SECONDS,
                **kwargs,
            )
        except requests.RequestException as e:
            log_error(e, {"method": method, "url": url}, level=logging.DEBUG)
            raise TransportException(f"Request to RMS failed: {e}", endpoint=url) from e

        log_api_call(method, url, response.status_code, time.time() - start_time)

        if not 200 <= response.status_code < 300 and not response.content:
            raise TransportException(
                f"RMS returned HTTP {response.status_code} without body",
                api_response_code=response.status_code,
                endpoint=url,
            )
        return response

    def send(self, endpoint: str, payload: RMSRequestModel, response_model: Type[EnvelopeT]) -> EnvelopeT:
        """
        POST a JSON request and decode the message envelope.

        Args:
            endpoint: Path relative to ``API_BASE_URL``
            payload: Request body; ``None`` fields are omitted
            response_model: Envelope type to decode into

        Returns:
            The decoded envelope. Its message list is non-empty; the caller
            inspects it for business-level success.

        Raises:
            UninitializedException: If the client has no credential
            TransportException: On network failure or an undecodable error status
            DecodeException: If a 2xx body does not match ``response_model``
            SemanticException: If the message list is empty
        """
        self._ensure_initialized()
        url = self.settings.endpoint_url(endpoint)

        response = self._request("POST", url, CONTENT_TYPE_JSON, json=payload.to_wire())

        try:
            envelope = response_model.model_validate_json(response.content)
        except ValidationError as e:
            if not 200 <= response.status_code < 300:
                raise TransportException(
                    f"RMS returned HTTP {response.status_code}",
                    api_response_code=response.status_code,
                    endpoint=url,
                ) from e
            raise DecodeException(
                f"Could not decode {response_model.__name__}: {e.error_count()} error(s)",
                endpoint=url,
                body_excerpt=_excerpt(response),
            ) from e

        if not envelope.message_model_list:
            # RMS answers with no messages when the credential is missing or rejected
            raise SemanticException("Uninitialized")

        leading = envelope.leading_message
        logger.debug(f"{endpoint}: {leading.message_type} {leading.message_code} {leading.message}")
        return envelope

    def fetch_xml(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> bytes:
        """
        GET an XML resource.

        Args:
            endpoint: Path relative to ``API_BASE_URL``
            params: Query parameters

        Returns:
            bytes: Raw response body

        Raises:
            UninitializedException: If the client has no credential
            TransportException: On network failure or a non-2xx status without body
        """
        self._ensure_initialized()
        url = self.settings.endpoint_url(endpoint)
        response = self._request("GET", url, CONTENT_TYPE_XML, params=params or {})
        return response.content
