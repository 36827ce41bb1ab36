from jinja2 import Environment, StrictUndefined, select_autoescape

from constants import (
    COMPANY_EMAIL,
    COMPANY_LOCATION,
    COMPANY_NAME,
    COMPANY_WEBSITE,
    CURRENCY,
    DEPARTMENT_CONTACTS,
    PAYMENT_METHODS,
)
from utils import format_amount, short_date

jinja_env = Environment(
    undefined=StrictUndefined,
    autoescape=select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)

INVOICE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Invoice {{ invoice_number }}</title>
  <style>
    body { font-family: Arial, sans-serif; margin: 0; padding: 20px; color: #333; }
    .header { background: #1e3a8a; color: white; padding: 20px; margin: -20px -20px 30px -20px; }
    .company-info { display: flex; justify-content: space-between; align-items: center; }
    .logo { font-size: 24px; font-weight: bold; }
    .client-info { margin: 20px 0; background: #f8f9fa; padding: 15px; border-radius: 8px; }
    .services-table { width: 100%; border-collapse: collapse; margin: 20px 0; }
    .services-table th, .services-table td { border: 1px solid #ddd; padding: 12px; text-align: left; }
    .services-table th { background: #1e3a8a; color: white; }
    .totals { margin: 20px 0; text-align: right; }
    .total-line { margin: 5px 0; }
    .final-total { font-size: 18px; font-weight: bold; color: #1e3a8a; }
    .footer { margin-top: 40px; padding-top: 20px; border-top: 2px solid #1e3a8a; }
    .payment-info { background: #e3f2fd; padding: 15px; border-radius: 8px; margin: 20px 0; }
    .contacts { display: grid; grid-template-columns: repeat(2, 1fr); gap: 15px; }
  </style>
</head>
<body>
  <div class="header">
    <div class="company-info">
      <div>
        <div class="logo">{{ company.name }}</div>
        <div>{{ company.location }}</div>
        <div>Email: {{ company.email }}</div>
        <div>Website: {{ company.website }}</div>
      </div>
      <div>
        <h1 style="margin: 0;">INVOICE</h1>
        <div>Invoice #: {{ invoice_number }}</div>
        <div>Date: {{ issue_date }}</div>
        <div>Due: {{ due_date }}</div>
      </div>
    </div>
  </div>

  <div class="client-info">
    <h3>Bill To:</h3>
    <strong>{{ client_name }}</strong><br>
    {% if client_email %}
    Email: {{ client_email }}<br>
    {% endif %}
    {% for line in address_lines %}{{ line }}{% if not loop.last %}<br>{% endif %}{% endfor %}

  </div>

  <table class="services-table">
    <thead>
      <tr>
        <th>Service</th>
        <th>Description</th>
        <th>Qty</th>
        <th>Unit Price ({{ currency }})</th>
        <th>Total ({{ currency }})</th>
      </tr>
    </thead>
    <tbody>
      {% for item in items %}
      <tr>
        <td>{{ item.service }}</td>
        <td>{{ item.description }}</td>
        <td>{{ item.quantity }}</td>
        <td>{{ item.unit_price }}</td>
        <td>{{ item.total }}</td>
      </tr>
      {% endfor %}
    </tbody>
  </table>

  <div class="totals">
    <div class="total-line">Subtotal: {{ currency }} {{ subtotal }}</div>
    <div class="total-line">VAT (5%): {{ currency }} {{ tax }}</div>
    <div class="total-line final-total">Total: {{ currency }} {{ total }}</div>
  </div>

  <div class="payment-info">
    <h3>Payment Information</h3>
    <p><strong>Payment Terms:</strong> {{ payment_terms }} days</p>
    <p><strong>Accepted Payment Methods:</strong></p>
    <ul>
      {% for method in payment_methods %}
      <li>{{ method }}</li>
      {% endfor %}
    </ul>
  </div>

  {% if note_lines %}
  <div class="payment-info">
    <h3>Notes:</h3>
    <p>{% for line in note_lines %}{{ line }}{% if not loop.last %}<br>{% endif %}{% endfor %}</p>
  </div>
  {% endif %}

  <div class="footer">
    <h3>Department Contacts:</h3>
    <div class="contacts">
      {% for department, email in contacts %}
      <div>
        <strong>{{ department }}:</strong><br>
        {{ email }}
      </div>
      {% endfor %}
    </div>
    <p style="text-align: center; margin-top: 20px; color: #666;">
      Thank you for choosing {{ company.name }}
    </p>
  </div>
</body>
</html>
"""

invoice_template = jinja_env.from_string(INVOICE_TEMPLATE)


def _line_item(service):
    return {
        "service": service.get("service", service.get("serviceName", "")),
        "description": service.get("description", ""),
        "quantity": format_amount(service.get("quantity")),
        "unit_price": format_amount(service.get("unitPrice")),
        "total": format_amount(service.get("total", service.get("lineTotal"))),
    }


def _lines(text):
    return text.split("\n") if text else []


def render_invoice(invoice):
    return invoice_template.render(
        company={
            "name": COMPANY_NAME,
            "location": COMPANY_LOCATION,
            "email": COMPANY_EMAIL,
            "website": COMPANY_WEBSITE,
        },
        currency=CURRENCY,
        invoice_number=invoice.id,
        issue_date=short_date(invoice.created_date),
        due_date=short_date(invoice.due_date),
        client_name=invoice.client_name,
        client_email=invoice.client_email,
        address_lines=_lines(invoice.client_address),
        items=[_line_item(service) for service in invoice.services],
        subtotal=format_amount(invoice.subtotal),
        tax=format_amount(invoice.tax),
        total=format_amount(invoice.total),
        payment_terms=invoice.payment_terms,
        payment_methods=PAYMENT_METHODS,
        note_lines=_lines(invoice.notes),
        contacts=DEPARTMENT_CONTACTS,
    )
