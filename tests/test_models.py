"""Tests for the entity models."""

from __future__ import annotations

from moneybird_api_client.models import Contact, LedgerAccount, Product, SalesInvoice


def test_unknown_keys_are_kept():
    contact = Contact.from_dict({"id": "1", "company_name": "Acme", "version": 1700000000})
    assert contact.id == "1"
    assert contact.company_name == "Acme"
    assert contact.extra == {"version": 1700000000}


def test_payload_skips_id_and_unset_fields():
    contact = Contact(id="1", company_name="Acme", extra={"delivery_method": "Email"})
    assert contact.to_dict() == {"company_name": "Acme", "delivery_method": "Email"}


def test_id_in_extra_is_not_sent():
    product = Product.from_dict({"id": "5", "description": "Hour", "price": "75.0"})
    product.extra["id"] = "6"
    assert product.to_dict() == {"description": "Hour", "price": "75.0"}


def test_sales_invoice_read_only_fields():
    invoice = SalesInvoice.from_dict(
        {"id": "1", "invoice_id": "2026-0001", "state": "open", "reference": "PO-7", "details": []}
    )
    assert invoice.invoice_id == "2026-0001"
    assert invoice.to_dict() == {"reference": "PO-7"}


def test_ledger_account_round_trip_of_known_fields():
    account = LedgerAccount.from_dict({"id": "3", "name": "Sales", "account_type": "revenue"})
    assert LedgerAccount.from_dict(account.to_dict()) == LedgerAccount(name="Sales", account_type="revenue")
