import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple

import config
from place_of_supply import get_place_of_supply
from tax_calc import ZERO, ComputedLineItem, compute_line, money, quantize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvoiceTotals:
    line_items: Tuple[ComputedLineItem, ...]
    subtotal: Decimal
    cgst: Decimal
    sgst: Decimal
    igst: Decimal
    total_tax: Decimal
    total_before_round: Decimal
    round_off: Decimal
    grand_total: Decimal
    is_intra_state: bool
    place_of_supply: str
    place_of_supply_code: Optional[str]

    def to_dict(self):
        return {
            "lineItems": [line.to_dict() for line in self.line_items],
            "subtotal": self.subtotal,
            "cgst": self.cgst,
            "sgst": self.sgst,
            "igst": self.igst,
            "totalTax": self.total_tax,
            "roundOff": self.round_off,
            "grandTotal": self.grand_total,
            "isIntraState": self.is_intra_state,
            "placeOfSupply": self.place_of_supply,
            "placeOfSupplyCode": self.place_of_supply_code,
        }


def round_to_rupee(val: Decimal) -> Decimal:
    return quantize(val, Decimal("1"))


def calculate_invoice_totals(line_items, business_gstin=None, client_gstin=None,
                             business_state=None, client_state=None,
                             is_gst=None, round_off=None, strict=None) -> InvoiceTotals:
    """
    Fold invoice rows into subtotal, tax and grand total.

    Place of supply is resolved once and shared by every row. With
    ``round_off`` the grand total goes to the nearest rupee and the
    residue is reported as ``round_off``.
    """
    if is_gst is None:
        is_gst = config.DEFAULT_IS_GST
    if round_off is None:
        round_off = config.DEFAULT_ROUND_OFF

    pos = get_place_of_supply(business_gstin, client_gstin, business_state, client_state)

    computed = tuple(
        compute_line(item, pos.is_intra_state, is_gst=is_gst, strict=strict)
        for item in (line_items or ())
    )

    subtotal = money(sum((c.taxable_amount for c in computed), ZERO))
    cgst = money(sum((c.cgst for c in computed), ZERO))
    sgst = money(sum((c.sgst for c in computed), ZERO))
    igst = money(sum((c.igst for c in computed), ZERO))

    total_tax = money(cgst + sgst + igst)
    total_before_round = money(subtotal + total_tax)

    if round_off:
        grand_total = round_to_rupee(total_before_round)
        round_off_amount = money(grand_total - total_before_round)
    else:
        grand_total = total_before_round
        round_off_amount = money(ZERO)

    logger.debug("invoice of %d lines: subtotal=%s tax=%s grand_total=%s",
                 len(computed), subtotal, total_tax, grand_total)

    return InvoiceTotals(
        line_items=computed,
        subtotal=subtotal,
        cgst=cgst,
        sgst=sgst,
        igst=igst,
        total_tax=total_tax,
        total_before_round=total_before_round,
        round_off=round_off_amount,
        grand_total=grand_total,
        is_intra_state=pos.is_intra_state,
        place_of_supply=pos.place_of_supply,
        place_of_supply_code=pos.place_of_supply_code,
    )
