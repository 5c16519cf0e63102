from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from io import BytesIO
import pandas as pd

from amount_words import number_to_words
from utils import format_currency


def _items_frame(totals):
    rows = []
    for sr, line in enumerate(totals.line_items, start=1):
        item = line.item
        rows.append({
            "sr": sr,
            "description": item.description or item.name or "",
            "hsn_sac": item.hsn_sac or "",
            "qty": str(item.quantity if item.quantity is not None else ""),
            "unit_price": str(item.unit_price if item.unit_price is not None else ""),
            "discount_pct": str(item.discount or 0),
            "gst_rate": str(item.gst_rate or 0),
            "taxable": float(line.taxable_amount),
            "cgst": float(line.cgst),
            "sgst": float(line.sgst),
            "igst": float(line.igst),
            "line_total": float(line.line_total),
        })
    columns = ["sr", "description", "hsn_sac", "qty", "unit_price", "discount_pct", "gst_rate",
               "taxable", "cgst", "sgst", "igst", "line_total"]
    return pd.DataFrame(rows, columns=columns)


def _totals_frame(totals):
    return pd.DataFrame([{
        "subtotal": float(totals.subtotal),
        "cgst": float(totals.cgst),
        "sgst": float(totals.sgst),
        "igst": float(totals.igst),
        "total_tax": float(totals.total_tax),
        "round_off": float(totals.round_off),
        "grand_total": float(totals.grand_total),
        "place_of_supply": totals.place_of_supply,
        "place_of_supply_code": totals.place_of_supply_code or "",
        "amount_in_words": number_to_words(totals.grand_total),
    }])


def generate_invoice_pdf(invoice_dict):
    totals = invoice_dict['totals']
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4

    # Set initial coordinates
    x, y = 40, height - 40

    # Header Section
    c.setFont("Helvetica-Bold", 14)
    c.drawCentredString(width/2, y, "TAX INVOICE")
    y -= 30

    # Invoice Details
    c.setFont("Helvetica", 10)
    c.drawString(x, y, f"Invoice: {invoice_dict['invoice_number']}")
    c.drawString(width/2, y, f"Date: {invoice_dict['date']}")
    y -= 20

    # Seller Information
    c.drawString(x, y, f"Seller: {invoice_dict['seller']['name']}")
    c.drawString(width/2, y, f"GSTIN: {invoice_dict['seller'].get('gstin', '')}")
    y -= 20

    # Buyer Information
    c.drawString(x, y, f"Buyer: {invoice_dict['buyer'].get('name', '')}")
    c.drawString(width/2, y, f"GSTIN: {invoice_dict['buyer'].get('gstin', '')}")
    y -= 15
    pos_code = f" ({totals.place_of_supply_code})" if totals.place_of_supply_code else ""
    c.drawString(x, y, f"Place of Supply: {totals.place_of_supply}{pos_code}")
    y -= 30

    # Table Header
    c.setFont("Helvetica-Bold", 9)
    if totals.is_intra_state:
        headers = ["Sr", "Description", "HSN/SAC", "Qty", "Rate", "Taxable", "CGST", "SGST", "Total"]
    else:
        headers = ["Sr", "Description", "HSN/SAC", "Qty", "Rate", "Taxable", "IGST", "", "Total"]
    positions = [x, x+25, x+185, x+240, x+275, x+320, x+380, x+430, x+480]

    for header, pos in zip(headers, positions):
        c.drawString(pos, y, header)
    y -= 20

    # Table Items
    c.setFont("Helvetica", 8)
    for _, row in _items_frame(totals).iterrows():
        tax_cols = ([row['cgst'], row['sgst']] if totals.is_intra_state else [row['igst'], None])
        cells = [str(row['sr']), str(row['description'])[:30], row['hsn_sac'], row['qty'],
                 f"{row['gst_rate']}%", f"{row['taxable']:.2f}"]
        cells += [f"{v:.2f}" if v is not None else "" for v in tax_cols]
        cells.append(f"{row['line_total']:.2f}")
        for cell, pos in zip(cells, positions):
            c.drawString(pos, y, cell)
        y -= 15

        # Page break if needed
        if y < 160:
            c.showPage()
            y = height - 40
            c.setFont("Helvetica", 8)

    # Summary
    y -= 10
    c.setFont("Helvetica", 10)
    summary = [("Taxable Value", totals.subtotal)]
    if totals.is_intra_state:
        summary += [("CGST", totals.cgst), ("SGST", totals.sgst)]
    else:
        summary.append(("IGST", totals.igst))
    summary.append(("Round Off", totals.round_off))
    for label, value in summary:
        c.drawString(positions[5], y, f"{label}:")
        c.drawRightString(width - 40, y, f"{value:.2f}")
        y -= 15

    # Grand Total
    c.setFont("Helvetica-Bold", 10)
    c.drawString(positions[5], y, "Grand Total:")
    c.drawRightString(width - 40, y, format_currency(totals.grand_total, "INR").replace("₹", "Rs. "))
    y -= 25

    c.setFont("Helvetica-Oblique", 9)
    c.drawString(x, y, f"Amount in words: {number_to_words(totals.grand_total)}")

    c.showPage()
    c.save()
    buffer.seek(0)
    return buffer.read()


def generate_invoice_xlsx_bytes(invoice_dict):
    df = _items_frame(invoice_dict['totals'])
    buffer = BytesIO()

    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Items")
        _totals_frame(invoice_dict['totals']).to_excel(writer, index=False, sheet_name="Totals")

    buffer.seek(0)
    return buffer.getvalue()


def generate_invoice_csv_bytes(invoice_dict):
    df = _items_frame(invoice_dict['totals'])
    buffer = BytesIO()
    buffer.write(df.to_csv(index=False).encode('utf-8'))
    buffer.seek(0)
    return buffer.getvalue()
