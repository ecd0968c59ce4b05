"""
HTTP transport for the Moneybird REST API.

This module defines :class:`Transport`, the single component that talks
to the network.  It builds the request URL from the API endpoint, the
API version and the administration id, attaches the bearer token and
content type headers, executes the call over a reusable
:class:`requests.Session` and returns the raw response body.

The transport deliberately does not judge status codes.  A 404 or a
201 only means something in the context of a resource operation, so
interpreting them is left to :mod:`moneybird_api_client.resources`.
The status of the most recent call is recorded and can be inspected
through :attr:`Transport.last_status_code`.

Usage
-----

.. code-block:: python

    from moneybird_api_client.transport import Transport

    with Transport(access_token="token", administration_id="123") as transport:
        body = transport.perform_call("GET", "contacts", "?query=acme")
        print(transport.last_status_code, body)
"""

from __future__ import annotations

import logging
import warnings
from typing import Callable, Optional, Tuple, Union

import requests

from .exceptions import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

CLIENT_VERSION = "1.0.0"

API_ENDPOINT = "https://moneybird.com/api"
API_VERSION = "v2"
API_EXTENSION = ".json"

HTTP_GET = "GET"
HTTP_POST = "POST"
HTTP_PATCH = "PATCH"
HTTP_DELETE = "DELETE"
HTTP_METHODS = frozenset({HTTP_GET, HTTP_POST, HTTP_PATCH, HTTP_DELETE})

HTTP_OK = 200
HTTP_ENTITY_CREATED = 201
HTTP_ENTITY_DELETED = 204
HTTP_ENTITY_NOT_FOUND = 404

DEFAULT_TIMEOUT = 10

JSON_CONTENT_TYPE = "application/json"

# First matching path fragment wins.
CONTENT_TYPE_RULES: Tuple[Tuple[str, str], ...] = (
    ("attachments", "multipart/mixed"),
)


def content_type_for(resource_path: str) -> str:
    """Return the Content-Type header value for a resource path.

    Endpoints that receive attachments expect ``multipart/mixed``;
    everything else exchanges JSON.
    """
    for fragment, content_type in CONTENT_TYPE_RULES:
        if fragment in resource_path:
            return content_type
    return JSON_CONTENT_TYPE


class Transport:
    """Executes authenticated calls against the Moneybird API.

    Parameters
    ----------
    access_token : str, optional
        The API token generated in Moneybird.  It may also be supplied
        later through :meth:`set_access_token`, but must be present
        before the first call.
    administration_id : str, optional
        The administration (tenant) every request is scoped to.
    api_endpoint : str, optional
        Override the API endpoint.  Defaults to :data:`API_ENDPOINT`.
    timeout : float, optional
        Per call timeout in seconds.  Defaults to ten seconds.
    session_factory : callable, optional
        Zero argument callable returning the :class:`requests.Session`
        used as connection handle.  Defaults to :class:`requests.Session`.

    Notes
    -----
    A transport is meant for strictly sequential use: the session is
    reset and reused between calls, so two calls must never run on the
    same instance at the same time.  Use one transport per thread when
    calls need to run in parallel.
    """

    def __init__(
        self,
        *,
        access_token: Optional[str] = None,
        administration_id: Optional[str] = None,
        api_endpoint: str = API_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        if not api_endpoint:
            raise ValueError("api_endpoint must be provided")
        if timeout <= 0:
            raise ValueError("timeout must be positive, got %r" % timeout)

        self.api_endpoint = api_endpoint.rstrip("/")
        self.timeout = timeout
        self._session_factory = session_factory
        self._session: Optional[requests.Session] = None
        self._last_status_code: Optional[int] = None

        self.access_token = ""
        self.administration_id = ""
        if access_token is not None:
            self.set_access_token(access_token)
        if administration_id is not None:
            self.set_administration_id(administration_id)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_access_token(self, access_token: str) -> "Transport":
        """Set the API token, stripping surrounding whitespace.  Returns ``self``."""
        self.access_token = access_token.strip()
        return self

    def set_administration_id(self, administration_id: str) -> "Transport":
        """Set the administration every request is scoped to.  Returns ``self``."""
        self.administration_id = str(administration_id)
        return self

    # ------------------------------------------------------------------
    # Connection handle
    # ------------------------------------------------------------------
    def _acquire_session(self) -> requests.Session:
        """Return a clean session, creating one if none is open.

        A reused session keeps its pooled connections but loses any
        cookies collected by the previous call.
        """
        if self._session is None:
            self._session = self._session_factory()
        else:
            self._session.cookies.clear()
        return self._session

    def close(self) -> None:
        """Release the connection handle, if one is open."""
        if self._session is not None:
            self._session.close()
            self._session = None

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def build_url(
        self,
        resource_path: str,
        query_string: str = "",
        raw_path_mode: bool = False,
    ) -> str:
        """Build the full request URL.

        The URL has the form::

            <endpoint>/<version>/<administration id>/<resource path>[.json]<query string>

        In raw path mode the ``.json`` extension is left out and the
        query string, which may start with further path segments such as
        ``/123/download_pdf``, is appended verbatim.
        """
        url = "%s/%s/%s/%s" % (
            self.api_endpoint,
            API_VERSION,
            self.administration_id,
            resource_path,
        )
        if not raw_path_mode:
            url += API_EXTENSION
        return url + (query_string or "")

    def build_headers(self, resource_path: str) -> dict:
        """Return the request headers for a call to ``resource_path``."""
        return {
            "Accept": JSON_CONTENT_TYPE,
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": content_type_for(resource_path),
        }

    def perform_call(
        self,
        method: str,
        resource_path: str,
        query_string: str = "",
        body: Optional[Union[bytes, str]] = None,
        raw_path_mode: bool = False,
    ) -> bytes:
        """Perform one HTTP call and return the raw response body.

        Parameters
        ----------
        method : str
            One of ``"GET"``, ``"POST"``, ``"PATCH"`` or ``"DELETE"``.
        resource_path : str
            Path of the resource below the administration, e.g.
            ``"contacts"`` or ``"contacts/123"``.
        query_string : str, optional
            Appended verbatim after the resource path, including its
            leading ``?`` (or, in raw path mode, any extra path segments).
        body : bytes or str, optional
            Raw request payload.  Strings are sent UTF-8 encoded.
        raw_path_mode : bool, optional
            Skip the ``.json`` extension for endpoints that do not follow
            the ``<resource>.json`` convention.

        Returns
        -------
        bytes
            The response body, whatever the status code.  The status code
            itself is available as :attr:`last_status_code`.

        Raises
        ------
        ConfigurationError
            If no access token or administration id has been set.  No
            request is sent.
        TransportError
            If the request could not be completed (DNS, connect, TLS or
            timeout failure).  The session is closed before raising.
        """
        if not self.access_token:
            raise ConfigurationError(
                "You have not set an access token. "
                "Please use set_access_token() to set the access token."
            )
        if not self.administration_id:
            raise ConfigurationError(
                "You have not set an administration id. "
                "Please use set_administration_id() to set the administration id."
            )
        method = method.upper()
        if method not in HTTP_METHODS:
            raise ValueError("Unsupported HTTP method %r" % method)

        url = self.build_url(resource_path, query_string, raw_path_mode)
        headers = self.build_headers(resource_path)
        if isinstance(body, str):
            body = body.encode("utf-8")

        session = self._acquire_session()
        logger.debug("%s %s", method, url)
        try:
            response = session.request(
                method=method,
                url=url,
                data=body,
                headers=headers,
                timeout=self.timeout,
                verify=True,
            )
        except requests.RequestException as exc:
            code = type(exc).__name__
            message = f"Unable to communicate with Moneybird ({code}): {exc}."
            logger.warning("%s %s failed: %s", method, url, message)
            self.close()
            raise TransportError(code, message) from exc

        self._last_status_code = int(response.status_code)
        logger.debug("%s %s -> %d", method, url, self._last_status_code)
        return response.content

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    @property
    def last_status_code(self) -> Optional[int]:
        """HTTP status of the most recent call that received a response."""
        return self._last_status_code

    def get_last_http_response_status_code(self) -> Optional[int]:
        """Deprecated alias of :attr:`last_status_code`."""
        warnings.warn(
            "get_last_http_response_status_code() is deprecated, "
            "use the last_status_code property instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self._last_status_code
