from datetime import datetime, timezone

from invoice_renderer import render_invoice
from invoice_service import build_invoice

NOW = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)


def _render(data):
    return render_invoice(build_invoice(data, NOW))


def test_header_and_dates(invoice_request):
    html = _render(invoice_request)

    assert "SKV Global Business Services LLC" in html
    assert f"Invoice #: INV-{int(NOW.timestamp() * 1000)}" in html
    assert "Date: 10/19/2026" in html
    assert "Due: 11/2/2026" in html


def test_line_items_in_order_with_two_decimals(invoice_request):
    html = _render(invoice_request)

    first = html.index("<td>Trade License</td>")
    second = html.index("<td>VAT Registration</td>")
    assert first < second
    assert "<td>7500.00</td>" in html
    assert "<td>750.50</td>" in html
    assert "<td>1501.00</td>" in html
    assert "<td>2.00</td>" in html


def test_line_item_aliases(invoice_request):
    invoice_request["services"] = [
        {"serviceName": "Labor Card", "description": "", "quantity": 1,
         "unitPrice": 1200, "lineTotal": 1200},
    ]
    html = _render(invoice_request)

    assert "<td>Labor Card</td>" in html
    assert "<td>1200.00</td>" in html


def test_vat_label_shows_caller_tax(invoice_request):
    invoice_request.update(subtotal=100, tax=25, total=125)
    html = _render(invoice_request)

    assert "Subtotal: AED 100.00" in html
    assert "VAT (5%): AED 25.00" in html
    assert "Total: AED 125.00" in html


def test_vat_tie_rounds_up(invoice_request):
    invoice_request.update(subtotal=52.5, tax=2.625, total=55.125)
    html = _render(invoice_request)

    assert "VAT (5%): AED 2.63" in html
    assert "Total: AED 55.13" in html


def test_client_block(invoice_request):
    html = _render(invoice_request)

    assert "<strong>Acme Trading LLC</strong>" in html
    assert "Email: accounts@acme.ae<br>" in html
    assert "Office 12<br>Business Bay<br>Dubai" in html


def test_optional_blocks_omitted(invoice_request):
    for key in ("clientEmail", "clientAddress", "notes"):
        invoice_request.pop(key)
    html = _render(invoice_request)

    assert "Email: accounts@acme.ae" not in html
    assert "Notes:" not in html


def test_notes_keep_line_breaks(invoice_request):
    html = _render(invoice_request)

    assert "<h3>Notes:</h3>" in html
    assert "Thank you.<br>Please quote the invoice number." in html


def test_footer_contacts(invoice_request):
    html = _render(invoice_request)

    for email in ("mohit@skvbusiness.com", "sunil@skvbusiness.com",
                  "nikita@skvbusiness.com", "rahul@skvbusiness.com"):
        assert email in html
    assert "Thank you for choosing SKV Global Business Services LLC" in html
    assert "<strong>Payment Terms:</strong> 14 days" in html


def test_client_text_is_escaped(invoice_request):
    invoice_request["clientName"] = "<script>alert(1)</script>"
    html = _render(invoice_request)

    assert "<script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
