import pytest

from docpatterns.documents import DisplayVisitor, DOCXDocument, PDFDocument, TXTDocument
from docpatterns.utils.testing import output_lines


@pytest.mark.parametrize("document, expected", [
    (PDFDocument(), "[Visitor] Displaying PDF content."),
    (TXTDocument(), "[Visitor] Displaying TXT content."),
    (DOCXDocument(), "[Visitor] Displaying DOCX content."),
])
def test_DisplayVisitor(capsys, document, expected):
    document.accept(DisplayVisitor())
    assert output_lines(capsys) == [expected]


def test_DisplayVisitor_methods(capsys):
    visitor = DisplayVisitor()
    visitor.visit_txt(TXTDocument())
    visitor.visit_pdf(PDFDocument())
    assert output_lines(capsys) == [
        "[Visitor] Displaying TXT content.",
        "[Visitor] Displaying PDF content.",
    ]
