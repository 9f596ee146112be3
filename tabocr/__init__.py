"""Table cell text extraction on top of Tesseract.

Packages:
- tabocr.geometry: Rectangle algebra (intersection, major overlap)
- tabocr.tables: Table model, ruled table detection, word-to-cell assignment
- tabocr.ocr: pytesseract word data and the engine object
- tabocr.pipeline: High-level orchestration and report formatting
- tabocr.render: Debug overlay drawing
"""
