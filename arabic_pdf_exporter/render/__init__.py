"""
Drawing of laid-out pages.
"""


def __getattr__(name: str):
    if name == "PDFRenderer":
        from arabic_pdf_exporter.render.pdf_renderer import PDFRenderer
        return PDFRenderer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["PDFRenderer"]
