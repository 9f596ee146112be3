import numpy as np

from tabocr.geometry import Rect
from tabocr.render.draw import TABLE_COLOR, draw_tables
from tabocr.tables import Table


def test_draw_tables_marks_outline_and_keeps_input():
    img = np.full((100, 200, 3), 255, dtype=np.uint8)
    table = Table(
        bounding_box=Rect(20, 20, 180, 80),
        rows=[Rect(20, 20, 180, 50), Rect(20, 50, 180, 80)],
        columns=[Rect(20, 20, 100, 80), Rect(100, 20, 180, 80)],
    )
    out = draw_tables(img, [table])
    assert out.shape == img.shape
    assert tuple(out[20, 100]) == TABLE_COLOR
    # interior away from the bands is untouched
    assert tuple(out[35, 60]) == (255, 255, 255)
    # input image not modified
    assert (img == 255).all()


def test_draw_tables_accepts_grayscale():
    img = np.full((50, 50), 255, dtype=np.uint8)
    out = draw_tables(img, [])
    assert out.shape == (50, 50, 3)
