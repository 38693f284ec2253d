"""Headless tests for the pygame editor (SDL dummy video driver)."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from gridpath import MapSpec  # noqa: E402
from gridpath.viewer import Colors, Viewer  # noqa: E402


@pytest.fixture
def viewer(tmp_path):
    pygame.init()
    spec = MapSpec(4, 3, [[False] * 4 for _ in range(3)], (0, 0), (3, 2))
    map_path = tmp_path / "edit.txt"
    spec.save(str(map_path))
    yield Viewer(spec, cell_size=10, map_path=str(map_path))
    pygame.quit()


def _shown(viewer, rgb):
    # colour as stored by the display surface, whatever its depth
    return viewer.screen.unmap_rgb(viewer.screen.map_rgb(rgb))


def test_draw_repaints_and_clears_dirty_cells(viewer):
    assert viewer.dirty == set(viewer.pf.grid.coords())
    viewer.draw()
    assert viewer.dirty == set()
    # goal (3, 2) sits in the top-right cell of the window
    assert viewer.screen.get_at((35, 5)) == _shown(viewer, Colors.GOAL)


def test_toggle_wall_marks_cell_dirty(viewer):
    viewer.draw()
    viewer.toggle_wall(1, 1)
    assert viewer.dirty == {(1, 1)}
    assert viewer.pf.get_node(1, 1).walkable is False
    viewer.draw()
    assert viewer.screen.get_at((15, 15)) == _shown(viewer, Colors.WALL)


def test_cell_at_flips_screen_rows(viewer):
    assert viewer._cell_at((5, 25)) == (0, 0)
    assert viewer._cell_at((35, 5)) == (3, 2)
    assert viewer._cell_at((500, 500)) == (3, 0)  # clamped into the grid


def test_plan_sets_path_and_redraws_it(viewer, capsys):
    viewer.draw()
    viewer.plan()
    assert viewer.path[0].coord == (0, 0)
    assert viewer.path[-1].coord == (3, 2)
    assert len(viewer.path) == 4
    assert {n.coord for n in viewer.path} <= viewer.dirty
    assert "cost 38" in capsys.readouterr().out


def test_plan_without_route_clears_path(viewer, capsys):
    viewer.plan()
    for y in range(3):
        viewer.pf.set_walkable(2, y, False)
    viewer.plan()
    assert viewer.path == []
    assert "no path" in capsys.readouterr().out


def test_clear_walls(viewer):
    viewer.toggle_wall(0, 1)
    viewer.toggle_wall(2, 2)
    viewer.clear_walls()
    assert all(node.walkable for node in viewer.pf.grid)


def test_save_writes_edited_walls(viewer):
    viewer.toggle_wall(2, 1)
    viewer.save()
    saved = MapSpec.load(viewer.map_path)
    assert saved.blocked[1][2] is True
    assert sum(row.count(True) for row in saved.blocked) == 1
    assert (saved.start, saved.goal) == ((0, 0), (3, 2))


def test_save_without_map_file(tmp_path, capsys):
    pygame.init()
    try:
        v = Viewer(MapSpec.random(3, 3, 0.0, seed=1), cell_size=10)
        v.save()
        assert "nothing to save" in capsys.readouterr().out
        assert list(tmp_path.iterdir()) == []
    finally:
        pygame.quit()
