"""
PDF generator tests.
"""

from ripsaw.config import CutSettings
from ripsaw.pdf_generator import CutListPDF, _safe, generate_cut_list_pdf
from ripsaw.sizing import CutList, Lumber


def test_pdf_renders_cut_list():
    cut_list = CutList()
    cut_list.add(Lumber.create_nominal(2, 4, 8))
    cut_list.add(Lumber.create_actual(0.75, 5.5, 6))
    pdf = generate_cut_list_pdf(list(cut_list.entries()), cut_list.settings, shop_name="Garage")
    assert isinstance(pdf, bytes)
    assert pdf.startswith(b"%PDF-")


def test_pdf_renders_empty_list():
    pdf = generate_cut_list_pdf([], CutSettings())
    assert pdf.startswith(b"%PDF-")


def test_safe_replaces_unicode_quotes():
    assert _safe("“2x4” — pine") == '"2x4"  -  pine'
    assert _safe("") == ""


def test_title_drawn_on_first_page_only():
    pdf = CutListPDF(shop_name="Garage Build")
    pdf.set_compression(False)
    pdf.add_page()
    pdf.add_page()
    data = bytes(pdf.output())
    assert data.count(b"(Garage Build)") == 1
