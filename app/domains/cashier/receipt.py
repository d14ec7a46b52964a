# app/domains/cashier/receipt.py

import html
import textwrap
from typing import List, Optional
from app.config.setting import settings
from app.shared.dates import to_local
from app.shared.money import format_rupiah

TERMS = [
    "Garansi ATK 1x24 Jam",
    "Garansi Cetak 3x24 Jam",
    "Barang dapat ditukar selama garansi",
    "Barang tidak dapat dikembalikan",
    "Bawa Struk ini saat Penukaran",
]


def _center(text: str, width: int) -> List[str]:
    return [line.center(width).rstrip() for line in textwrap.wrap(text, width) or [""]]


def _row(label: str, amount: str, width: int) -> List[str]:
    """Label on the left, amount flush right; spills onto two lines when too long."""
    if len(label) + len(amount) + 1 <= width:
        return [label + amount.rjust(width - len(label))]
    return textwrap.wrap(label, width) + [amount.rjust(width)]


def render_receipt_text(transaction: dict, items: List[dict], width: Optional[int] = None) -> str:
    """
    Render a stored sale as a fixed-width receipt for a 58mm roll.

    ``transaction`` carries id, transaction_date, total_amount, payment_amount
    and change_amount; each item carries product_name, quantity, price and
    subtotal.
    """
    width = width or settings.receipt_width
    separator = "-" * width
    lines = []

    lines += _center(settings.shop_name, width)
    lines += _center(f"Telp {settings.shop_phone}", width)
    lines += _center(settings.shop_address, width)
    lines.append(separator)
    lines.append(f"ID: {str(transaction['id'])[:8]}")
    lines.append(to_local(transaction["transaction_date"]).strftime("%d/%m/%Y %H:%M"))
    lines.append(separator)

    for item in items:
        lines += textwrap.wrap(item["product_name"], width) or [""]
        lines += _row(
            f"{item['quantity']}x {format_rupiah(item['price'])}",
            format_rupiah(item["subtotal"]),
            width,
        )

    lines.append(separator)
    lines += _row("TOTAL:", format_rupiah(transaction["total_amount"]), width)
    lines += _row("Bayar:", format_rupiah(transaction["payment_amount"]), width)
    lines += _row("Kembalian:", format_rupiah(transaction["change_amount"]), width)
    lines.append(separator)

    lines.append("KETENTUAN")
    for term in TERMS:
        lines += textwrap.wrap(f"- {term}", width, subsequent_indent="  ")
    lines.append(separator)

    # Ruang tanda tangan
    lines += ["", "", ""]
    lines += _center("TANDA OWNER", width)
    lines.append(separator)
    lines.append("")
    lines += _center("Terima Kasih", width)
    lines += _center("Selamat Datang Kembali", width)
    return "\n".join(lines) + "\n"


def render_receipt_html(receipt_text: str) -> str:
    """Wrap a text receipt in a page that opens the print dialog and closes itself."""
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>Struk</title>
<style>
  @page {{ size: 58mm auto; margin: 0; }}
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{ width: 48mm; padding: 0.5mm 0; }}
  pre {{ font-family: 'Courier New', monospace; font-size: 9px; white-space: pre-wrap; }}
</style>
</head>
<body>
<pre>{html.escape(receipt_text)}</pre>
<script>
  window.onload = function() {{
    window.print();
    setTimeout(function() {{ window.close(); }}, 100);
  }};
</script>
</body>
</html>
"""
