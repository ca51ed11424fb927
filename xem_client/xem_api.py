"""XEM API Client."""

import logging
import requests
from pydantic import ValidationError
from typing import Dict, List, Optional, Type, TypeVar
from urllib.parse import urljoin
from . import config
from logging import Logger

from .exceptions import (
    XEMBodyReadError,
    XEMDecodeError,
    XEMHTTPError,
    XEMRequestError,
    XEMRequestFailedError,
)
from .models import AllEnvelope, AlternateName, Envelope, Mapping, NamesEnvelope

T = TypeVar('T')


class XEMAPI:
    """Client for the XEM episode mapping API (thexem.de).

    Every call is one blocking GET; nothing is retried or cached. Timeouts,
    proxies and TLS are left to the injected ``requests.Session``.
    """

    def __init__(self, session: Optional[requests.Session] = None, logger: Optional[Logger] = None):
        """Initializes the API client.

        Args:
            session: HTTP transport to use. A new ``requests.Session`` is created if None.
            logger: Optional logger instance.
        """
        self.logger = logger or logging.getLogger(__name__)
        self.session = session if session is not None else requests.Session()

        self.base_url: str = config.XEM_API_BASE_URL
        self.all_endpoint: str = config.XEM_ALL_ENDPOINT
        self.names_endpoint: str = config.XEM_NAMES_ENDPOINT
        self.user_agent: str = config.XEM_USER_AGENT
        self.timeout: Optional[float] = config.XEM_API_TIMEOUT

        self.logger.info(f"XEMAPI initialized: base_url={self.base_url}")

    def _make_request(
            self,
            endpoint: str,
            params: Dict[str, str],
            envelope_type: Type[Envelope[T]],
    ) -> Envelope[T]:
        """Makes a GET request and decodes the response envelope.

        Args:
            endpoint: Resource address, resolved against ``base_url``.
            params: Query parameters, sent with their keys sorted.
            envelope_type: Envelope model to validate the body against. Its
                payload is only validated when the result is "success".

        Returns:
            The decoded envelope.

        Raises:
            XEMRequestError: The URL could not be used to build a request.
            requests.exceptions.RequestException: Transport failure.
            XEMBodyReadError: The response body could not be read.
            XEMHTTPError: Status code outside 200-299.
            XEMDecodeError: Body is not valid JSON or not the expected shape.
        """
        url = urljoin(self.base_url, endpoint)
        req_params = sorted(params.items())
        # None drops the session's default python-requests agent
        headers = {'User-Agent': self.user_agent or None}
        self.logger.debug(f"Making API request: GET {url} with params {req_params}")

        try:
            response = self.session.get(
                url, params=req_params, headers=headers, timeout=self.timeout, stream=True)
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as url_err:
            self.logger.error(f"Unable to build request for {url}: {url_err}")
            raise XEMRequestError(f"invalid request URL {url}: {url_err}") from url_err
        except requests.exceptions.RequestException as req_err:
            self.logger.error(f"API request failed for {url}: {req_err}")
            raise

        with response:
            try:
                response.content  # drains the stream
            except (requests.exceptions.RequestException, OSError) as read_err:
                self.logger.error(f"Failed to read response body from {url}: {read_err}")
                raise XEMBodyReadError(read_err) from read_err
            body = response.text

            if response.status_code < 200 or response.status_code > 299:
                self.logger.error(f"API returned {response.status_code} for {response.url}")
                raise XEMHTTPError(response.url, response.status_code, body)

            try:
                return envelope_type.model_validate(response.json())
            except (requests.exceptions.JSONDecodeError, ValidationError) as json_err:
                self.logger.error(
                    f"Failed to decode JSON from {url}: {json_err}. Response text: {body[:200]}...")
                raise XEMDecodeError(json_err, body) from json_err

    def get_all(self, origin: str, show_id: str) -> List[Mapping]:
        """Fetches all episode mappings for a show.

        Args:
            origin: Namespace of ``show_id``, one of anidb, scene or tvdb.
            show_id: Identifier of the show in that namespace.

        Returns:
            One Mapping (origin name -> Episode) per episode, in service order.

        Raises:
            XEMRequestFailedError: The service reported a failure.
        """
        self.logger.info(f"Fetching all mappings for {origin} ID {show_id}.")
        envelope = self._make_request(self.all_endpoint, {'origin': origin, 'id': show_id}, AllEnvelope)
        if not envelope.ok:
            self.logger.error(f"Mapping request for {origin} ID {show_id} failed: {envelope.message}")
            raise XEMRequestFailedError(envelope.message)
        return envelope.data or []

    def get_all_names(self, origin: str, language: str) -> Dict[str, List[AlternateName]]:
        """Fetches the alternate names of every show known for an origin.

        Season numbers are always requested.
        """
        self.logger.info(f"Fetching all names for {origin} in language {language}.")
        params = {'origin': origin, 'seasonNumbers': '1', 'language': language}
        envelope = self._make_request(self.names_endpoint, params, NamesEnvelope)
        if not envelope.ok:
            self.logger.error(f"Names request for {origin} failed: {envelope.message}")
            raise XEMRequestFailedError(envelope.message)
        return envelope.data or {}
