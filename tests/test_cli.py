import csv

from gridpath import MapSpec
from gridpath.cli import main


def _write_open_map(path, width=5, height=5):
    MapSpec(width, height, [[False] * width for _ in range(height)],
            (0, 0), (width - 1, height - 1)).save(str(path))


def test_gen_writes_maps(tmp_path, capsys):
    out = tmp_path / "maps"
    rc = main(["gen", "--count", "3", "--width", "8", "--height", "6", "--seed", "1", "--out", str(out)])
    assert rc == 0
    files = sorted(p.name for p in out.iterdir())
    assert files == ["grid_000.txt", "grid_001.txt", "grid_002.txt"]
    assert MapSpec.load(str(out / "grid_001.txt")) == MapSpec.random(8, 6, 0.30, seed=2)


def test_gen_rejects_empty_dimensions(tmp_path, capsys):
    rc = main(["gen", "--count", "1", "--width", "0", "--height", "3", "--out", str(tmp_path / "maps")])
    assert rc == 2
    assert "positive" in capsys.readouterr().err


def test_find_reports_path(tmp_path, capsys):
    m = tmp_path / "open.txt"
    _write_open_map(m)
    png = tmp_path / "out.png"
    rc = main(["find", "--map", str(m), "--png", str(png), "--costs"])
    out = capsys.readouterr().out

    assert rc == 0
    assert "found=True" in out
    assert "cost=    56" in out
    assert "(0,0) -> (1,1) -> (2,2) -> (3,3) -> (4,4)" in out
    assert png.exists()


def test_find_no_path_exit_code(tmp_path, capsys):
    m = tmp_path / "walled.txt"
    blocked = [[x == 2 for x in range(5)] for _ in range(5)]
    MapSpec(5, 5, blocked, (0, 0), (4, 4)).save(str(m))
    assert main(["find", "--map", str(m)]) == 1
    assert "found=False" in capsys.readouterr().out


def test_find_invalid_endpoint(tmp_path, capsys):
    m = tmp_path / "open.txt"
    _write_open_map(m)
    rc = main(["find", "--map", str(m), "--goal", "9", "9"])
    assert rc == 2
    assert "outside" in capsys.readouterr().err


def test_bench_writes_csv(tmp_path, capsys):
    mapdir = tmp_path / "maps"
    mapdir.mkdir()
    _write_open_map(mapdir / "a.txt")
    _write_open_map(mapdir / "b.txt", width=3, height=2)
    csv_path = tmp_path / "bench.csv"
    rc = main(["bench", "--mapdir", str(mapdir), "--csv", str(csv_path), "--out", str(tmp_path / "png")])
    assert rc == 0

    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [r["map"] for r in rows] == ["a.txt", "b.txt"]
    assert rows[0]["cost"] == "56"
    assert rows[1]["cost"] == "24"
    assert (tmp_path / "png" / "a.png").exists()
