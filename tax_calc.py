import logging
from dataclasses import dataclass, field
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP
from types import MappingProxyType
from typing import Any, Mapping, Optional

import config
from errors import InvalidNumberError

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def quantize(val: Decimal, exp: Decimal) -> Decimal:
    """Half-away-from-zero quantize with enough precision for any magnitude."""
    prec = max(28, val.adjusted() - exp.adjusted() + 2)
    return val.quantize(exp, context=Context(prec=prec, rounding=ROUND_HALF_UP))


def money(val) -> Decimal:
    """Round to 2 decimals, half away from zero, for money values."""
    if not isinstance(val, Decimal):
        val = Decimal(str(val))
    return quantize(val, CENT)


def to_number(val, field_name="value", strict=None) -> Decimal:
    """
    Coerce user input to a Decimal.
    Absent values are 0. Malformed values are 0 too, unless strict mode
    is on, in which case InvalidNumberError is raised.
    """
    if strict is None:
        strict = config.STRICT_NUMBERS
    if val is None:
        return ZERO
    if isinstance(val, bool):
        return Decimal(int(val))
    try:
        if isinstance(val, Decimal):
            num = val
        elif isinstance(val, (int, float)):
            num = Decimal(str(val))
        elif isinstance(val, str):
            if not val.strip():
                return ZERO
            num = Decimal(val.strip())
        else:
            raise InvalidOperation(val)
    except InvalidOperation:
        num = None

    if num is None or not num.is_finite():
        if strict:
            raise InvalidNumberError(field_name, val)
        logger.warning("Non-numeric %s %r treated as 0", field_name, val)
        return ZERO
    return num


@dataclass(frozen=True)
class LineTaxResult:
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_tax: Decimal
    total_with_tax: Decimal

    def to_dict(self):
        return {
            "cgst": self.cgst,
            "sgst": self.sgst,
            "igst": self.igst,
            "totalTax": self.total_tax,
            "totalWithTax": self.total_with_tax,
        }


def calculate_line_item_gst(is_intra_state, taxable_amount, gst_rate, strict=None) -> LineTaxResult:
    """
    Compute tax breakdown for one taxable amount.
    Intra-state → CGST + SGST (half the rate each)
    Inter-state → IGST
    """
    amount = to_number(taxable_amount, "taxable_amount", strict)
    rate = to_number(gst_rate, "gst_rate", strict)

    if rate == 0 or amount == 0:
        return LineTaxResult(ZERO, ZERO, ZERO, ZERO, amount)

    if is_intra_state:
        half = money(amount * (rate / 2) / HUNDRED)
        cgst = sgst = half
        igst = ZERO
    else:
        cgst = sgst = ZERO
        igst = money(amount * rate / HUNDRED)

    total_tax = cgst + sgst + igst
    return LineTaxResult(cgst, sgst, igst, total_tax, amount + total_tax)


# Accepted spellings for each line-item field, first match wins.
_FIELD_KEYS = {
    "quantity": ("quantity", "qty"),
    "unit_price": ("unit_price", "unitPrice", "price"),
    "discount": ("discount", "discountPercent", "discount_percent"),
    "gst_rate": ("gst_rate", "gstRate", "gstRatePercent", "rate"),
    "hsn_sac": ("hsn_sac", "hsnSac", "hsn"),
    "name": ("name",),
    "description": ("description", "Description"),
}
_KNOWN_KEYS = frozenset(k for keys in _FIELD_KEYS.values() for k in keys)


def _pick(data, field_name):
    for key in _FIELD_KEYS[field_name]:
        if key in data:
            return data[key]
    return None


@dataclass(frozen=True)
class LineItem:
    quantity: Any = 0
    unit_price: Any = 0
    discount: Any = 0
    gst_rate: Any = 0
    hsn_sac: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, data) -> "LineItem":
        if isinstance(data, cls):
            return data
        return cls(
            quantity=_pick(data, "quantity"),
            unit_price=_pick(data, "unit_price"),
            discount=_pick(data, "discount"),
            gst_rate=_pick(data, "gst_rate"),
            hsn_sac=_pick(data, "hsn_sac"),
            name=_pick(data, "name"),
            description=_pick(data, "description"),
            extra=MappingProxyType({k: v for k, v in data.items() if k not in _KNOWN_KEYS}),
        )


@dataclass(frozen=True)
class ComputedLineItem:
    item: LineItem
    line_subtotal: Decimal
    discount_amount: Decimal
    taxable_amount: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_tax: Decimal
    line_total: Decimal

    def to_dict(self):
        item = self.item
        out = dict(item.extra)
        out.update({
            "name": item.name,
            "description": item.description,
            "hsnSac": item.hsn_sac,
            "quantity": item.quantity,
            "unitPrice": item.unit_price,
            "discount": item.discount,
            "gstRate": item.gst_rate,
            "lineSubtotal": self.line_subtotal,
            "discountAmount": self.discount_amount,
            "taxableAmount": self.taxable_amount,
            "cgst": self.cgst,
            "sgst": self.sgst,
            "igst": self.igst,
            "totalTax": self.total_tax,
            "lineTotal": self.line_total,
        })
        return out


def compute_line(item, is_intra_state, is_gst=True, strict=None) -> ComputedLineItem:
    """Discount, taxable base and tax split for one invoice row."""
    item = LineItem.from_mapping(item)
    qty = to_number(item.quantity, "quantity", strict)
    unit_price = to_number(item.unit_price, "unit_price", strict)
    discount = to_number(item.discount, "discount", strict)

    line_subtotal = money(qty * unit_price)
    discount_amount = money(line_subtotal * discount / HUNDRED)
    taxable = money(line_subtotal - discount_amount)

    if is_gst:
        tax = calculate_line_item_gst(is_intra_state, taxable, item.gst_rate, strict)
    else:
        tax = LineTaxResult(ZERO, ZERO, ZERO, ZERO, taxable)

    return ComputedLineItem(
        item=item,
        line_subtotal=line_subtotal,
        discount_amount=discount_amount,
        taxable_amount=taxable,
        cgst=tax.cgst,
        sgst=tax.sgst,
        igst=tax.igst,
        total_tax=tax.total_tax,
        line_total=tax.total_with_tax,
    )
