"""
Python client for interacting with the Moneybird REST API.

This package provides a :class:`Client` that authenticates with a
Moneybird access token, scopes every request to one administration
and exposes typed resources for contacts, sales invoices, products and
ledger accounts.

Examples
--------

```python
from moneybird_api_client import Client, Contact, NotFoundError

client = Client(access_token="YOUR_TOKEN", administration_id="123456789")

contact = client.contacts.create(Contact(company_name="Acme B.V."))

try:
    client.contacts.get("does-not-exist")
except NotFoundError:
    pass

client.close()
```

The client does not retry failed calls, rate limit itself or follow
pagination.  A failed call surfaces immediately and the caller decides
what to do next.

See Also
--------
The Moneybird developer documentation lists the available endpoints
and explains how to generate an API token.
"""

from .client import Client
from .exceptions import (
    ConfigurationError,
    IncompatiblePlatformError,
    MoneybirdError,
    NotFoundError,
    ResponseDecodeError,
    TransportError,
    UnexpectedStatusError,
    UnknownResourceError,
)
from .models import Contact, Entity, LedgerAccount, Product, SalesInvoice
from .transport import CLIENT_VERSION, Transport

__version__ = CLIENT_VERSION

__all__ = [
    "Client",
    "Transport",
    "Entity",
    "Contact",
    "SalesInvoice",
    "Product",
    "LedgerAccount",
    "MoneybirdError",
    "ConfigurationError",
    "IncompatiblePlatformError",
    "UnknownResourceError",
    "TransportError",
    "UnexpectedStatusError",
    "NotFoundError",
    "ResponseDecodeError",
]
