"""Tests for invoice export."""

import io

import pandas as pd
import pytest

from invoice_generator import (
    generate_invoice_csv_bytes,
    generate_invoice_pdf,
    generate_invoice_xlsx_bytes,
)
from invoice_totals import calculate_invoice_totals


@pytest.fixture
def invoice(two_line_items, maharashtra_gstin, karnataka_gstin):
    return {
        "invoice_number": "INV-001",
        "date": "2025-01-15",
        "seller": {"name": "Acme Pvt Ltd", "gstin": maharashtra_gstin},
        "buyer": {"name": "Beta Traders", "gstin": karnataka_gstin},
        "totals": calculate_invoice_totals(
            two_line_items, business_gstin=maharashtra_gstin, client_gstin=karnataka_gstin,
            round_off=True,
        ),
    }


class TestExports:

    def test_pdf(self, invoice):
        data = generate_invoice_pdf(invoice)
        assert data.startswith(b"%PDF")

    def test_pdf_intra_state_many_rows(self, invoice):
        rows = [{"name": f"Item {i}", "quantity": 1, "unitPrice": 10, "gstRate": 5} for i in range(60)]
        invoice["totals"] = calculate_invoice_totals(rows, business_state="Goa", client_state="Goa")
        assert generate_invoice_pdf(invoice).startswith(b"%PDF")

    def test_csv(self, invoice):
        df = pd.read_csv(io.BytesIO(generate_invoice_csv_bytes(invoice)))
        assert len(df) == 2
        assert list(df["igst"]) == [180.0, 153.0]
        assert list(df["taxable"]) == [1000.0, 850.0]

    def test_xlsx(self, invoice):
        data = generate_invoice_xlsx_bytes(invoice)
        totals = pd.read_excel(io.BytesIO(data), sheet_name="Totals")
        assert totals.loc[0, "grand_total"] == 2183
        assert totals.loc[0, "place_of_supply"] == "Karnataka"
        assert totals.loc[0, "amount_in_words"] == "Two Thousand One Hundred and Eighty Three Rupees Only"
        items = pd.read_excel(io.BytesIO(data), sheet_name="Items")
        assert len(items) == 2
