import pytesseract

import main
from tabocr.geometry import Rect
from tabocr.ocr import EngineInitError
from tabocr.tables import Table, Word


class _StubEngine:
    def __init__(self):
        self.tables = [
            Table(
                bounding_box=Rect(0, 0, 100, 40),
                rows=[Rect(0, 0, 100, 40)],
                columns=[Rect(0, 0, 50, 40), Rect(50, 0, 100, 40)],
            )
        ]

    def recognized_text(self):
        return "Qty 5\n"

    def table_count(self):
        return len(self.tables)

    def table_bounding_box(self, index):
        return self.tables[index].bounding_box

    def table_rows(self, index):
        return self.tables[index].rows

    def table_columns(self, index):
        return self.tables[index].columns

    def word_iterator(self):
        return iter([
            Word("Qty", Rect(5, 5, 40, 30)),
            Word("5", Rect(60, 5, 70, 30), last_in_line=True),
        ])


def test_cli_exits_1_when_tesseract_cannot_start(monkeypatch, capsys):
    def failing(**kwargs):
        raise EngineInitError("no eng.traineddata")

    monkeypatch.setattr(main, "run_recognition", failing)
    assert main._cli(["cells", "-f", "page.png"]) == 1
    assert "Could not initialize tesseract." in capsys.readouterr().err


def test_cli_missing_image_exits_2(monkeypatch, capsys):
    def missing(**kwargs):
        raise FileNotFoundError("Image file not found: page.png")

    monkeypatch.setattr(main, "run_recognition", missing)
    assert main._cli(["structure", "-f", "page.png"]) == 2


def test_cli_prints_cells(monkeypatch, capsys):
    monkeypatch.setattr(main, "run_recognition", lambda **kwargs: _StubEngine())
    assert main._cli(["cells", "-f", "page.png", "--strategy", "cached"]) == 0
    out = capsys.readouterr().out
    assert "OCR output:\nQty 5" in out
    assert "table BoundingBox: 1 x 2 pos: 0, 0, 100, 40;" in out
    assert 'Table 0, row 0, col 0, text "Qty"' in out
    assert 'Table 0, row 0, col 1, text "5"' in out


def test_cli_prints_structure(monkeypatch, capsys):
    monkeypatch.setattr(main, "run_recognition", lambda **kwargs: _StubEngine())
    assert main._cli(["structure", "-f", "page.png", "-l", "eng"]) == 0
    out = capsys.readouterr().out
    assert "row: 0, 0, 100, 40;" in out
    assert "col: 50, 0, 100, 40;" in out


def test_cli_survives_page_recognition_failure(monkeypatch, capsys):
    engine = _StubEngine()

    def failing():
        raise pytesseract.TesseractError(1, "page failed")

    engine.recognized_text = failing
    monkeypatch.setattr(main, "run_recognition", lambda **kwargs: engine)
    assert main._cli(["cells", "-f", "page.png"]) == 0
    out = capsys.readouterr().out
    assert "Warning: page recognition failed" in out
    assert "OCR output:\n" in out
    assert 'Table 0, row 0, col 0, text "Qty"' in out
