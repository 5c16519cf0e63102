import logging
from decimal import Decimal
from typing import Dict, List

import config
from tax_calc import LineItem, money, quantize, to_number

logger = logging.getLogger(__name__)

# symbol, fraction digits (en-US display)
CURRENCY_SYMBOLS = {
    "USD": ("$", 2),
    "EUR": ("€", 2),
    "GBP": ("£", 2),
    "JPY": ("¥", 0),
    "AUD": ("A$", 2),
    "CAD": ("CA$", 2),
}


def _indian_grouping(digits: str) -> str:
    """12345678 -> 1,23,45,678"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount, currency=None) -> str:
    """Display string for an amount; INR uses lakh/crore digit grouping."""
    currency = (currency or config.DEFAULT_CURRENCY).upper()
    num = to_number(amount, "amount", strict=False)

    if currency == "INR":
        value = money(num)
        sign = "-" if value < 0 else ""
        whole, frac = f"{abs(value):.2f}".split(".")
        return "₹" + sign + _indian_grouping(whole) + "." + frac

    symbol, places = CURRENCY_SYMBOLS.get(currency, (currency + " ", 2))
    value = quantize(num, Decimal(1).scaleb(-places))
    sign = "-" if value < 0 else ""
    return sign + symbol + f"{abs(value):,.{places}f}"


def autofill_hsn(items: List[Dict], hsn_lookup, min_score=None) -> List[Dict]:
    """Fill missing hsn_sac / gst_rate on raw item dicts from the best HSN suggestion."""
    if min_score is None:
        min_score = config.HSN_MIN_SCORE
    normalized = []
    for it in items:
        line = LineItem.from_mapping(it)
        out = dict(it)
        out["hsn_sac"] = line.hsn_sac or ""
        out["gst_rate"] = line.gst_rate

        if not line.hsn_sac:
            desc = line.description or line.name or ""
            sugg = hsn_lookup.suggest(desc, limit=1)
            if sugg and sugg[0]["score"] >= min_score:
                entry = sugg[0]["entry"]
                out["hsn_sac"] = entry.code
                if line.gst_rate is None:
                    out["gst_rate"] = entry.default_rate
                logger.debug("HSN %s (score %.1f) for %r", entry.code, sugg[0]["score"], desc)
        elif line.gst_rate is None:
            out["gst_rate"] = hsn_lookup.default_rate(line.hsn_sac)

        if out["gst_rate"] is None:
            out["gst_rate"] = 0
        normalized.append(out)
    return normalized
