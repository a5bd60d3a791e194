from docpatterns.patterns.visitor import Visitor


class DisplayVisitor(Visitor):
    """Visitor displaying the content of each document"""

    def visit_pdf(self, document) -> None:
        print("[Visitor] Displaying PDF content.")

    def visit_txt(self, document) -> None:
        print("[Visitor] Displaying TXT content.")

    def visit_docx(self, document) -> None:
        print("[Visitor] Displaying DOCX content.")
