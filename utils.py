import base64
import re
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal

from errors import InvalidPaymentTerms

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
WHOLE_DAYS = re.compile(r"-?[0-9]+")
CENTS = Decimal("0.01")


def utc_now():
    return datetime.now(timezone.utc)


def as_utc(moment):
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def bullet_list(items):
    return "\n".join(f"• {item}" for item in items)


def to_iso(moment):
    """ISO-8601 in UTC with millisecond precision, e.g. 2026-10-19T08:30:00.000Z"""
    moment = as_utc(moment)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def short_date(moment):
    return f"{moment.month}/{moment.day}/{moment.year}"


def epoch_millis(moment):
    return (as_utc(moment) - EPOCH) // timedelta(milliseconds=1)


def format_amount(value):
    # str() first so floats keep the digits they were written with; ties round up
    return f"{Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)}"


def parse_payment_terms(value):
    if isinstance(value, bool):
        raise InvalidPaymentTerms("Payment terms must be a whole number of days")

    if isinstance(value, int):
        return value

    if isinstance(value, float) and value.is_integer():
        return int(value)

    if isinstance(value, str) and WHOLE_DAYS.fullmatch(value.strip()):
        return int(value.strip())

    raise InvalidPaymentTerms("Payment terms must be a whole number of days")


def to_data_url(document, mime_type="text/html"):
    encoded = base64.b64encode(document.encode("utf-8")).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"
