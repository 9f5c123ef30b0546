#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import math
import statistics as stats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from tictactoe.board import Board, CellValue
from tictactoe.search import Player
from tictactoe.tracking import log_artifact, log_metrics, log_params, maybe_mlflow_run

POSITIONS: Dict[str, str] = {
    "empty": ".........",
    "opening": "X...O....",
    "midgame": "X.O.O...X",
}


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 5
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = Path("runs")
    out: Path = Path("benchmarks.json")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Time choose_move on fixed positions")
    ap.add_argument("--repeats", type=int, default=Config.repeats)
    ap.add_argument("--tracking", choices=["none", "mlflow"], default=Config.tracking)
    ap.add_argument("--log-dir", type=Path, default=Config.log_dir)
    ap.add_argument("--out", type=Path, default=Config.out, help="Summary JSON path")
    ns = ap.parse_args(argv)
    cfg = Config(repeats=ns.repeats, tracking=ns.tracking, log_dir=ns.log_dir, out=ns.out)

    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="benchmarks", log_dir=cfg.log_dir):
        log_params({"repeats": cfg.repeats})
        metrics: Dict[str, float] = {}
        for name, raw in POSITIONS.items():
            board = Board.from_string(raw)
            player = Player()
            times: List[float] = []
            for _ in range(cfg.repeats):
                t0 = time.perf_counter()
                player.choose_move(board, board.side_to_move() is CellValue.X)
                times.append(time.perf_counter() - t0)
            m, h = ci95(times)
            metrics[f"{name}_mean_s"] = m
            metrics[f"{name}_ci95_half_s"] = h
            metrics[f"{name}_nodes"] = float(player.nodes_evaluated)
            print(f"{name}: mean={m:.4f}s ± {h:.4f}s (95% CI) nodes={player.nodes_evaluated}")
        log_metrics(metrics)
        cfg.out.write_text(json.dumps({"repeats": cfg.repeats, "metrics": metrics}, indent=2))
        log_artifact(cfg.out)
        print(f"Wrote summary to {cfg.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
