import logging
from collections import OrderedDict
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, List, Optional

from constants import CURRENCY
from errors import InvalidPaymentTerms, MissingField
from invoice_renderer import render_invoice
from utils import as_utc, epoch_millis, parse_payment_terms, to_data_url, to_iso

logger = logging.getLogger(__name__)

INVOICE_ID_PREFIX = "INV-"


@dataclass(frozen=True)
class Invoice:
    id: str
    client_name: str
    client_email: Optional[str]
    client_address: Optional[str]
    services: List[dict]
    subtotal: Any
    tax: Any
    total: Any
    payment_terms: Any
    notes: Optional[str]
    created_date: datetime
    due_date: datetime
    status: str = "pending"
    currency: str = CURRENCY

    def to_record(self):
        return OrderedDict([
            ("id", self.id),
            ("clientName", self.client_name),
            ("clientEmail", self.client_email),
            ("services", self.services),
            ("subtotal", self.subtotal),
            ("tax", self.tax),
            ("total", self.total),
            ("paymentTerms", self.payment_terms),
            ("notes", self.notes),
            ("createdDate", to_iso(self.created_date)),
            ("dueDate", to_iso(self.due_date)),
            ("status", self.status),
            ("currency", self.currency),
        ])


def build_invoice(data, now):
    """Validate an invoice request and assemble the invoice record.

    Amounts are taken from the caller as given; subtotal + tax is not checked
    against total. The id only has millisecond resolution, so two invoices
    built in the same millisecond share an id.
    """
    client_name = data.get("clientName")
    services = data.get("services")

    if not client_name or not services:
        raise MissingField("Client name and services are required")

    created = as_utc(now)
    payment_terms = data.get("paymentTerms")
    try:
        due = created + timedelta(days=parse_payment_terms(payment_terms))
    except OverflowError:
        raise InvalidPaymentTerms("Payment terms must be a whole number of days") from None

    return Invoice(
        id=f"{INVOICE_ID_PREFIX}{epoch_millis(created)}",
        client_name=client_name,
        client_email=data.get("clientEmail"),
        client_address=data.get("clientAddress"),
        services=services,
        subtotal=data.get("subtotal"),
        tax=data.get("tax"),
        total=data.get("total"),
        payment_terms=payment_terms,
        notes=data.get("notes"),
        created_date=created,
        due_date=due,
    )


def handle_generate_invoice(data, now):
    invoice = build_invoice(data, now)
    document = render_invoice(invoice)

    logger.info("Generated invoice %s for %s", invoice.id, invoice.client_name)

    return OrderedDict([
        ("success", True),
        ("message", "Invoice generated successfully"),
        ("invoice", invoice.to_record()),
        ("invoiceUrl", to_data_url(document)),
        ("downloadUrl", f"/api/invoice/download/{invoice.id}"),
    ])
