"""
PDF cut list generator.

Uses fpdf2 (pure Python, no system dependencies).

Sections:
1. Header (shop name, date, blade width)
2. Cut list table
3. Total board count
"""

from datetime import datetime

from fpdf import FPDF

from .config import CutSettings
from .sizing import Lumber


def _fmt_in(value: float) -> str:
    """Format inches as 1.5\" (no trailing zeros)."""
    return f'{value:g}"'


def _fmt_ft(value: float) -> str:
    return f"{value:g}'"


def _safe(text: str) -> str:
    """Replace chars the built-in PDF fonts (latin-1) can't render."""
    if not text:
        return ""
    return (
        text
        .replace("\u2014", " - ")  # em dash
        .replace("\u2013", "-")    # en dash
        .replace("\u201c", '"')    # left double quote
        .replace("\u201d", '"')    # right double quote
        .replace("\u2018", "'")    # left single quote
        .replace("\u2019", "'")    # right single quote
        .encode("latin-1", errors="replace")
        .decode("latin-1")
    )


class CutListPDF(FPDF):
    def __init__(self, shop_name=""):
        super().__init__()
        self.shop_name = shop_name
        self.set_auto_page_break(auto=True, margin=20)

    def header(self):
        if self.page_no() != 1:
            return
        self.set_font("Helvetica", "B", 20)
        self.cell(0, 10, _safe(self.shop_name), new_x="LMARGIN", new_y="NEXT")

    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(150, 150, 150)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="C")

    def section_header(self, title):
        self.set_font("Helvetica", "B", 11)
        self.set_fill_color(45, 55, 72)
        self.set_text_color(255, 255, 255)
        self.cell(0, 8, f"  {title}", fill=True, new_x="LMARGIN", new_y="NEXT")
        self.set_text_color(0, 0, 0)
        self.ln(2)

    def table_header(self, cols):
        """cols: [(label, width), ...]"""
        self.set_font("Helvetica", "B", 8)
        self.set_fill_color(240, 240, 240)
        for label, width in cols:
            align = "R" if label == "Qty" else "L"
            self.cell(width, 6, label, border="B", fill=True, align=align)
        self.ln()

    def table_row(self, values, widths):
        self.set_font("Helvetica", "", 8)
        for i, (val, width) in enumerate(zip(values, widths)):
            align = "R" if i == len(widths) - 1 else "L"
            self.cell(width, 5.5, str(val), align=align)
        self.ln()


def generate_cut_list_pdf(
    entries: list[tuple[Lumber, int]],
    settings: CutSettings,
    shop_name: str = "Cut List",
) -> bytes:
    """
    Render a cut list as PDF.

    Args:
        entries: (board, quantity) pairs, already in display order
        settings: the list's CutSettings (blade width is printed, not applied)
        shop_name: title line

    Returns:
        PDF bytes
    """
    pdf = CutListPDF(shop_name=shop_name)
    pdf.alias_nb_pages()
    pdf.add_page()

    # ── SECTION 1: Header (title comes from CutListPDF.header) ──
    pdf.set_font("Helvetica", "", 10)
    pdf.cell(0, 5, f"Date: {datetime.now().strftime('%B %d, %Y')}", new_x="LMARGIN", new_y="NEXT")
    pdf.cell(0, 5, f"Blade width: {_fmt_in(settings.blade_width_inches)}", new_x="LMARGIN", new_y="NEXT")
    pdf.ln(4)

    # ── SECTION 2: Cut List ──
    pdf.section_header("CUT LIST")
    cols = [("Board", 60), ("Width", 25), ("Height", 25), ("Length", 25), ("Type", 30), ("Qty", 25)]
    widths = [c[1] for c in cols]
    pdf.table_header(cols)

    total = 0
    for lumber, count in entries:
        total += count
        pdf.table_row([
            _safe(lumber.get_identifier_string()),
            _fmt_in(lumber.get_width_in_inches()),
            _fmt_in(lumber.get_height_in_inches()),
            _fmt_ft(lumber.get_length_in_feet()),
            "Nominal" if lumber.is_nominal else "Actual",
            str(count),
        ], widths)

    if not entries:
        pdf.set_font("Helvetica", "I", 8)
        pdf.cell(0, 6, "No boards.", new_x="LMARGIN", new_y="NEXT")

    # ── SECTION 3: Total ──
    pdf.ln(2)
    pdf.set_font("Helvetica", "B", 9)
    pdf.cell(sum(widths) - 25, 6, "TOTAL BOARDS", align="R", border="T")
    pdf.cell(25, 6, str(total), align="R", border="T")
    pdf.ln(8)

    return bytes(pdf.output())
