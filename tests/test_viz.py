from PIL import Image

from gridpath import Pathfinder, draw_grid_png, format_costs


def test_png_layout(tmp_path):
    pf = Pathfinder(3, 2)
    pf.set_walkable(0, 0, False)
    out = tmp_path / "snap" / "grid.png"
    draw_grid_png(pf, None, str(out), cell=10)

    img = Image.open(out)
    assert img.size == (30, 20)
    # grid y=0 is the bottom image row
    assert img.getpixel((5, 15)) == (0, 0, 0)
    assert img.getpixel((5, 5)) == (240, 240, 240)


def test_png_marks_path_and_endpoints(tmp_path):
    pf = Pathfinder(4, 1)
    path = pf.find_path(0, 0, 3, 0)
    out = tmp_path / "path.png"
    draw_grid_png(pf, path, str(out), start=(0, 0), goal=(3, 0), cell=4)

    img = Image.open(out)
    assert img.getpixel((1, 1)) == (100, 220, 120)
    assert img.getpixel((5, 1)) == (160, 190, 255)
    assert img.getpixel((13, 1)) == (255, 170, 80)


def test_format_costs_rows_top_down():
    pf = Pathfinder(3, 2)
    pf.set_walkable(1, 1, False)
    pf.find_path(0, 0, 2, 0)

    lines = format_costs(pf).splitlines()
    assert len(lines) == 2
    assert "*" in lines[0]
    assert "0 + 20 = 20" in lines[1]
    assert "20 + 0 = 20" in lines[1]
