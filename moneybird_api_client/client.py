"""
Client implementation for the Moneybird REST API.

This module defines the :class:`Client` class which holds the
configuration for one Moneybird administration, checks once that the
platform can make verified HTTPS calls, and exposes the RESTful
resources (contacts, sales invoices, products and ledger accounts)
on top of a shared :class:`~moneybird_api_client.transport.Transport`.

Usage
-----

.. code-block:: python

    from moneybird_api_client import Client, Contact

    with Client(access_token="abc123", administration_id="123456789") as client:
        contact = client.contacts.create(Contact(company_name="Acme B.V."))
        for invoice in client.sales_invoices.list({"filter": "state:open"}):
            print(invoice.invoice_id, invoice.total_price_incl_tax)

The client is not thread safe.  Create one client per thread when
calls have to run concurrently.
"""

from __future__ import annotations

import warnings
from typing import Callable, Dict, Optional, Type

import requests

from .compat import check_compatibility
from .exceptions import UnknownResourceError
from .resources import Contacts, LedgerAccounts, Products, ResourceBase, SalesInvoices
from .transport import API_ENDPOINT, DEFAULT_TIMEOUT, Transport


class Client:
    """A client for one Moneybird administration.

    Parameters
    ----------
    access_token : str, optional
        The access token generated in Moneybird.  Can also be set later
        with :meth:`set_access_token`; calls fail with
        :class:`~moneybird_api_client.exceptions.ConfigurationError`
        until it is.
    administration_id : str, optional
        ID of the administration all requests are scoped to.
    api_endpoint : str, optional
        Override the API endpoint.  Defaults to the public Moneybird API.
    timeout : float, optional
        Timeout in seconds for each HTTP call.  Defaults to ten seconds.
    session_factory : callable, optional
        Factory for the underlying :class:`requests.Session`.

    Raises
    ------
    IncompatiblePlatformError
        If the interpreter cannot make verified HTTPS calls.
    """

    RESOURCES: Dict[str, Type[ResourceBase]] = {
        "contacts": Contacts,
        "sales_invoices": SalesInvoices,
        "products": Products,
        "ledger_accounts": LedgerAccounts,
    }

    def __init__(
        self,
        access_token: Optional[str] = None,
        administration_id: Optional[str] = None,
        *,
        api_endpoint: str = API_ENDPOINT,
        timeout: float = DEFAULT_TIMEOUT,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        check_compatibility()

        self.transport = Transport(
            access_token=access_token,
            administration_id=administration_id,
            api_endpoint=api_endpoint,
            timeout=timeout,
            session_factory=session_factory,
        )

        self.contacts = Contacts(self.transport)
        self.sales_invoices = SalesInvoices(self.transport)
        self.products = Products(self.transport)
        self.ledger_accounts = LedgerAccounts(self.transport)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------
    def set_access_token(self, access_token: str) -> "Client":
        """Set the access token used for every call.  Returns ``self``."""
        self.transport.set_access_token(access_token)
        return self

    def set_administration_id(self, administration_id: str) -> "Client":
        """Scope subsequent calls to another administration.  Returns ``self``."""
        self.transport.set_administration_id(administration_id)
        return self

    @property
    def api_endpoint(self) -> str:
        return self.transport.api_endpoint

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    def resource(self, name: str) -> ResourceBase:
        """Return the resource registered under ``name``.

        Only the resources listed in :attr:`RESOURCES` exist; any other
        name raises :class:`UnknownResourceError`.
        """
        if name not in self.RESOURCES:
            raise UnknownResourceError(
                "Unknown resource %r, expected one of: %s"
                % (name, ", ".join(sorted(self.RESOURCES)))
            )
        return getattr(self, name)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Close the connection to the Moneybird API."""
        self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_last_http_response_status_code(self) -> Optional[int]:
        """Deprecated; use ``client.transport.last_status_code`` instead."""
        warnings.warn(
            "get_last_http_response_status_code() is deprecated, "
            "use client.transport.last_status_code instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.transport.last_status_code
