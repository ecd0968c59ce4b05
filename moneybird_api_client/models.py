"""Entity models matching the JSON documents returned by the Moneybird API."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Type, TypeVar

E = TypeVar("E", bound="Entity")


@dataclass
class Entity:
    """Base class for Moneybird entities.

    Only a subset of each document's attributes is modelled explicitly.
    Keys the model does not know are kept in ``extra`` so that nothing
    returned by the API is lost and can be sent back unchanged.
    """

    id: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict, repr=False)

    # Keys the API sets itself; never sent in create/update payloads.
    _read_only = ("id",)

    @classmethod
    def _field_names(cls) -> List[str]:
        return [f.name for f in fields(cls) if f.name != "extra"]

    @classmethod
    def from_dict(cls: Type[E], data: Dict[str, Any]) -> E:
        names = cls._field_names()
        known = {key: value for key, value in data.items() if key in names}
        extra = {key: value for key, value in data.items() if key not in names}
        return cls(extra=extra, **known)

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload sent to the API for create and update calls."""
        payload = dict(self.extra)
        for name in self._field_names():
            if name in self._read_only:
                continue
            value = getattr(self, name)
            if value is not None:
                payload[name] = value
        for name in self._read_only:
            payload.pop(name, None)
        return payload


@dataclass
class Contact(Entity):
    company_name: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    zipcode: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    customer_id: Optional[str] = None
    tax_number: Optional[str] = None
    chamber_of_commerce: Optional[str] = None
    bank_account: Optional[str] = None


@dataclass
class SalesInvoice(Entity):
    contact_id: Optional[str] = None
    invoice_id: Optional[str] = None
    invoice_date: Optional[str] = None
    due_date: Optional[str] = None
    state: Optional[str] = None
    reference: Optional[str] = None
    currency: Optional[str] = None
    prices_are_incl_tax: Optional[bool] = None
    total_price_excl_tax: Optional[str] = None
    total_price_incl_tax: Optional[str] = None
    details_attributes: Optional[List[Dict[str, Any]]] = None
    details: Optional[List[Dict[str, Any]]] = None

    _read_only = ("id", "invoice_id", "state", "details")


@dataclass
class Product(Entity):
    description: Optional[str] = None
    title: Optional[str] = None
    identifier: Optional[str] = None
    price: Optional[str] = None
    currency: Optional[str] = None
    frequency: Optional[int] = None
    frequency_type: Optional[str] = None
    tax_rate_id: Optional[str] = None
    ledger_account_id: Optional[str] = None


@dataclass
class LedgerAccount(Entity):
    name: Optional[str] = None
    account_type: Optional[str] = None
    account_id: Optional[str] = None
    parent_id: Optional[str] = None
