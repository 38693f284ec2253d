# gridpath/cli.py
from __future__ import annotations
import argparse, csv, logging, os, os.path, sys
from typing import List, Optional, Tuple

from .errors import OutOfGridError
from .maps import MapSpec
from .node import PathNode
from .pathfinding import Pathfinder, SearchStats
from .viz import draw_grid_png, format_costs

def format_stats(name: str, path: Optional[List[PathNode]], s: SearchStats) -> str:
    cost = "-" if s.cost is None else str(s.cost)
    length = len(path) if path else 0
    return (f"{name:20s} | found={s.found!s:5s} | cost={cost:>6s} | "
            f"length={length:4d} | expanded={len(s.expanded):6d} | "
            f"time={s.elapsed_sec*1000:7.1f} ms")

def run_search(spec: MapSpec, start: Tuple[int, int], goal: Tuple[int, int]) -> Tuple[Pathfinder, Optional[List[PathNode]]]:
    pf = spec.to_pathfinder()
    path = pf.find_path(start[0], start[1], goal[0], goal[1])
    return pf, path

# -------- subcommands --------

def cmd_gen(args: argparse.Namespace) -> int:
    os.makedirs(args.out, exist_ok=True)
    for i in range(args.count):
        spec = MapSpec.random(width=args.width, height=args.height, p_blocked=args.p,
                              seed=(args.seed + i) if args.seed is not None else None)
        path = os.path.join(args.out, f"grid_{i:03d}.txt")
        spec.save(path)
        print("wrote", path)
    return 0

def cmd_find(args: argparse.Namespace) -> int:
    spec = MapSpec.load(args.map)
    start = tuple(args.start) if args.start else spec.start
    goal = tuple(args.goal) if args.goal else spec.goal
    pf, path = run_search(spec, start, goal)
    print(format_stats(os.path.basename(args.map), path, pf.last_stats))
    if path:
        print(" -> ".join(f"({n.x},{n.y})" for n in path))
    if args.costs:
        print(format_costs(pf))
    if args.png:
        draw_grid_png(pf, path, args.png, start=start, goal=goal)
        print("wrote", args.png)
    return 0 if path else 1

def cmd_bench(args: argparse.Namespace) -> int:
    maps = sorted(p for p in os.listdir(args.mapdir) if p.endswith(".txt"))
    if args.out:
        os.makedirs(args.out, exist_ok=True)
    rows = []
    for fname in maps:
        spec = MapSpec.load(os.path.join(args.mapdir, fname))
        pf, path = run_search(spec, spec.start, spec.goal)
        st = pf.last_stats
        print(format_stats(fname, path, st))
        if args.out:
            png = os.path.join(args.out, os.path.splitext(fname)[0] + ".png")
            draw_grid_png(pf, path, png, start=spec.start, goal=spec.goal)
        rows.append({
            "map": fname,
            "found": st.found,
            "cost": st.cost,
            "length": len(path) if path else 0,
            "expanded": len(st.expanded),
            "time_sec": round(st.elapsed_sec, 6),
        })
    if args.csv and rows:
        with open(args.csv, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            writer.writerows(rows)
        print("wrote CSV:", args.csv)
    return 0

def cmd_view(args: argparse.Namespace) -> int:
    from .viewer import run_viewer  # pygame is only needed here

    if args.map:
        spec = MapSpec.load(args.map)
    else:
        spec = MapSpec.random(width=args.width, height=args.height, p_blocked=args.p, seed=args.seed)
    run_viewer(spec, cell_size=args.cell, fps=args.fps, map_path=args.map)
    return 0

def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="A* pathfinding on walkability grids")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("gen", help="generate random map files")
    g.add_argument("--count", type=int, default=10)
    g.add_argument("--width", type=int, default=32)
    g.add_argument("--height", type=int, default=32)
    g.add_argument("--p", type=float, default=0.30)
    g.add_argument("--out", type=str, default="maps")
    g.add_argument("--seed", type=int, default=None)
    g.set_defaults(func=cmd_gen)

    f = sub.add_parser("find", help="search one map and report the path")
    f.add_argument("--map", type=str, required=True)
    f.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), default=None)
    f.add_argument("--goal", type=int, nargs=2, metavar=("X", "Y"), default=None)
    f.add_argument("--png", type=str, default="")
    f.add_argument("--costs", action="store_true", help="print per-node g + h = f after the search")
    f.set_defaults(func=cmd_find)

    b = sub.add_parser("bench", help="search every .txt map in a folder")
    b.add_argument("--mapdir", type=str, required=True)
    b.add_argument("--out", type=str, default="", help="folder for PNG snapshots")
    b.add_argument("--csv", type=str, default="")
    b.set_defaults(func=cmd_bench)

    v = sub.add_parser("view", help="interactive editor (needs a display)")
    v.add_argument("--map", type=str, default=None)
    v.add_argument("--width", type=int, default=32)
    v.add_argument("--height", type=int, default=24)
    v.add_argument("--p", type=float, default=0.25)
    v.add_argument("--seed", type=int, default=None)
    v.add_argument("--cell", type=int, default=24, help="Cell size in pixels")
    v.add_argument("--fps", type=int, default=60)
    v.set_defaults(func=cmd_view)

    return p

def main(argv: Optional[List[str]] = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    except (OutOfGridError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
