"""
RESTful resource facades.

Each resource wraps one family of Moneybird endpoints and turns the
raw bytes returned by :class:`~moneybird_api_client.transport.Transport`
into entity models.  The facades are where status codes acquire
meaning: ``get`` treats 404 as "not found", ``create`` expects 201 and
``delete`` expects 204.  Anything else raises
:class:`~moneybird_api_client.exceptions.UnexpectedStatusError`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from urllib.parse import quote, urlencode

from .exceptions import NotFoundError, ResponseDecodeError, UnexpectedStatusError
from .models import Contact, Entity, LedgerAccount, Product, SalesInvoice
from .transport import (
    HTTP_DELETE,
    HTTP_ENTITY_CREATED,
    HTTP_ENTITY_DELETED,
    HTTP_ENTITY_NOT_FOUND,
    HTTP_GET,
    HTTP_OK,
    HTTP_PATCH,
    HTTP_POST,
    Transport,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class ResourceBase(Generic[E]):
    """CRUD operations shared by every Moneybird resource.

    Subclasses set ``resource_path`` (the URL segment below the
    administration), ``entity_class`` and ``payload_key``, the name of
    the JSON envelope Moneybird expects around request bodies.
    """

    resource_path: str = ""
    entity_class: Type[Entity] = Entity
    payload_key: str = ""

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _item_path(self, entity_id: Any) -> str:
        return "%s/%s" % (self.resource_path, quote(str(entity_id), safe=""))

    def _encode(self, entity: Entity) -> bytes:
        return json.dumps({self.payload_key: entity.to_dict()}).encode("utf-8")

    def _decode(self, body: bytes) -> Any:
        try:
            return json.loads(body.decode("utf-8"))
        except ValueError as exc:
            raise ResponseDecodeError(
                body, f"Unable to decode {self.resource_path} response as JSON: {exc}"
            ) from exc

    def _to_entity(self, data: Any) -> E:
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                json.dumps(data).encode("utf-8"),
                f"Expected a JSON object for {self.resource_path}, got {type(data).__name__}",
            )
        return self.entity_class.from_dict(data)  # type: ignore[return-value]

    def _call(
        self,
        method: str,
        path: str,
        expected_status: int,
        *,
        query_string: str = "",
        body: Optional[bytes] = None,
        raw_path_mode: bool = False,
    ) -> bytes:
        response_body = self.transport.perform_call(
            method, path, query_string, body, raw_path_mode
        )
        status = self.transport.last_status_code
        if status == expected_status:
            return response_body
        logger.debug(
            "%s %s returned %s, expected %d", method, path, status, expected_status
        )
        if status == HTTP_ENTITY_NOT_FOUND:
            raise NotFoundError(
                status,
                response_body,
                f"{self.entity_class.__name__} not found at {path}",
            )
        raise UnexpectedStatusError(status or 0, response_body)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------
    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[E]:
        """Return all entities, optionally narrowed down by query parameters."""
        query_string = "?" + urlencode(filters, doseq=True) if filters else ""
        body = self._call(HTTP_GET, self.resource_path, HTTP_OK, query_string=query_string)
        data = self._decode(body)
        if not isinstance(data, list):
            raise ResponseDecodeError(
                body, f"Expected a JSON array for {self.resource_path}"
            )
        return [self._to_entity(item) for item in data]

    def get(self, entity_id: Any) -> E:
        """Return a single entity.

        Raises :class:`NotFoundError` when no entity has this id.
        """
        body = self._call(HTTP_GET, self._item_path(entity_id), HTTP_OK)
        return self._to_entity(self._decode(body))

    def create(self, entity: E) -> E:
        """Create an entity and return it as stored by Moneybird (HTTP 201)."""
        body = self._call(
            HTTP_POST, self.resource_path, HTTP_ENTITY_CREATED, body=self._encode(entity)
        )
        return self._to_entity(self._decode(body))

    def update(self, entity_id: Any, entity: E) -> E:
        """Update the given attributes of an entity and return the result."""
        body = self._call(
            HTTP_PATCH, self._item_path(entity_id), HTTP_OK, body=self._encode(entity)
        )
        return self._to_entity(self._decode(body))

    def delete(self, entity_id: Any) -> bool:
        """Delete an entity.  Returns ``True`` on HTTP 204."""
        self._call(HTTP_DELETE, self._item_path(entity_id), HTTP_ENTITY_DELETED)
        return True


class Contacts(ResourceBase[Contact]):
    resource_path = "contacts"
    entity_class = Contact
    payload_key = "contact"


class SalesInvoices(ResourceBase[SalesInvoice]):
    resource_path = "sales_invoices"
    entity_class = SalesInvoice
    payload_key = "sales_invoice"

    def download_pdf(self, invoice_id: Any) -> bytes:
        """Return the PDF rendition of an invoice as raw bytes."""
        return self._call(
            HTTP_GET,
            self.resource_path,
            HTTP_OK,
            query_string="/%s/download_pdf" % quote(str(invoice_id), safe=""),
            raw_path_mode=True,
        )


class Products(ResourceBase[Product]):
    resource_path = "products"
    entity_class = Product
    payload_key = "product"


class LedgerAccounts(ResourceBase[LedgerAccount]):
    resource_path = "ledger_accounts"
    entity_class = LedgerAccount
    payload_key = "ledger_account"
