from datetime import datetime, timezone

import pytest

import main

FIXED_NOW = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(main, "utc_now", lambda: FIXED_NOW)
    main.app.config["TESTING"] = True
    with main.app.test_client() as client:
        yield client


@pytest.fixture
def invoice_request():
    return {
        "clientName": "Acme Trading LLC",
        "clientEmail": "accounts@acme.ae",
        "clientAddress": "Office 12\nBusiness Bay\nDubai",
        "services": [
            {
                "service": "Trade License",
                "description": "Mainland trade license",
                "quantity": 1,
                "unitPrice": 7500,
                "total": 7500,
            },
            {
                "service": "VAT Registration",
                "description": "TRN application",
                "quantity": 2,
                "unitPrice": 750.5,
                "total": 1501,
            },
        ],
        "subtotal": 9001,
        "tax": 450.05,
        "total": 9451.05,
        "paymentTerms": "14",
        "notes": "Thank you.\nPlease quote the invoice number.",
    }
