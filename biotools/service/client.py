"""HTTP client for the optional remote sequence service, built on requests."""

import logging
from typing import Any, Dict, Optional

import requests

from biotools.config import BiotoolsConfig
from biotools.errors import ServiceError
from biotools.results import Result, parse_result

LOGGER = logging.getLogger(__name__)


class ServiceClient:
    """
    Minimal client for the sequence service.

    The service exposes GET /health and POST /sequence/<operation>, the
    latter taking {"sequence": ..., "sequence_type": "auto"} and answering
    with a result body or {"detail": <message>}.
    """

    def __init__(
        self,
        config: BiotoolsConfig,
        session: Optional[requests.Session] = None
    ) -> None:
        if not config.api_base_url:
            raise ValueError("api_base_url must be configured to use the service.")
        self._base_url = config.api_base_url.rstrip("/")
        self._timeout = config.timeout_sec
        self._session = session or requests.Session()

    def _url(self, endpoint: str) -> str:
        return f"{self._base_url}/{endpoint.lstrip('/')}"

    def is_available(self) -> bool:
        """Return True when the health endpoint answers with a 2xx status."""
        try:
            response = self._session.get(self._url("health"), timeout=self._timeout)
        except requests.RequestException as exc:
            LOGGER.warning("Sequence service unreachable at %s: %s", self._base_url, exc)
            return False
        return response.ok

    def run(self, operation_id: str, sequence: str) -> Result:
        """
        Run an operation on the service.

        Args:
            operation_id: Operation identifier, used as the endpoint name
            sequence: Raw sequence text

        Returns:
            OperationResult or StatsResult parsed from the response

        Raises:
            ServiceError: On transport failure, a non-2xx status or an
                unrecognised body
        """
        url = self._url(f"sequence/{operation_id}")
        payload = {"sequence": sequence, "sequence_type": "auto"}
        LOGGER.info("POST %s (%d characters)", url, len(sequence))

        try:
            response = self._session.post(url, json=payload, timeout=self._timeout)
        except requests.RequestException as exc:
            raise ServiceError(f"Sequence service request failed: {exc}") from exc

        if not response.ok:
            detail = _error_detail(response)
            LOGGER.warning("Sequence service returned %s: %s", response.status_code, detail)
            raise ServiceError(detail, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as exc:
            raise ServiceError("Sequence service returned invalid JSON") from exc
        return parse_result(body)


def _error_detail(response: requests.Response) -> str:
    try:
        body: Dict[str, Any] = response.json()
    except ValueError:
        body = {}
    if isinstance(body, dict) and body.get("detail"):
        return str(body["detail"])
    return f"HTTP {response.status_code}"
