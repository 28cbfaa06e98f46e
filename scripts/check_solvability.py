import argparse
import csv
import os
import sys
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path

import numpy as np
import yaml

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lightsgame.algebra import build_A, gf2_rank, gf2_solve  # noqa: E402
from lightsgame.board import BoardState  # noqa: E402
from lightsgame.strategies import RandomPress  # noqa: E402

FIELDNAMES = [
    "n",
    "board_id",
    "shuffle_presses",
    "initial_on",
    "solvable",
    "verified",
    "presses",
    "time_ms",
]


def _task_seed(base_seed: int, *coords: int) -> int:
    """Generate deterministic seed for each task."""
    ss = np.random.SeedSequence([int(base_seed)] + [int(c) for c in coords])

    return int(
        ss.generate_state(1, dtype=np.uint64)[0] & np.uint64((1 << 63) - 1)
    )


def make_jobs(sizes, n_samples, shuffle_factor, base_seed, batch_size):
    """One job per (size, batch of board ids)."""
    for n in sizes:
        for lo in range(0, n_samples, batch_size):
            yield {
                "n": int(n),
                "idx_lo": lo,
                "idx_hi": min(lo + batch_size, n_samples),
                "shuffle_presses": int(shuffle_factor) * n * n,
                "base_seed": base_seed,
            }


def _run_batch(job):
    """Shuffle, solve and verify one batch of boards."""
    n = job["n"]
    A = build_A(n)
    rows = []
    for board_id in range(job["idx_lo"], job["idx_hi"]):
        rng = np.random.default_rng(_task_seed(job["base_seed"], n, board_id))
        shuffler = RandomPress(rng)
        shuffler.reset(n)
        board = BoardState(n)
        shuffler.shuffle(board, job["shuffle_presses"])

        start_time = time.perf_counter()
        x, ok = gf2_solve(A, board.to_flat().astype(np.uint8))
        time_ms = (time.perf_counter() - start_time) * 1000

        verified = False
        if ok:
            replay = board.copy()
            replay.apply_presses(x)
            verified = replay.is_solved()

        rows.append(
            {
                "n": n,
                "board_id": board_id,
                "shuffle_presses": job["shuffle_presses"],
                "initial_on": board.count_on(),
                "solvable": int(ok),
                "verified": int(verified),
                "presses": int(x.sum()) if ok else "",
                "time_ms": time_ms,
            }
        )
    return rows


def main():
    n_cpus = os.cpu_count() or 1
    default_workers = max(n_cpus - 1, 1)

    ap = argparse.ArgumentParser(
        description="Verify that shuffled boards are always solvable."
    )
    ap.add_argument(
        "--config",
        default=str(ROOT / "configs" / "solvability.yaml"),
    )
    ap.add_argument("--out", default=None, help="Output CSV path")
    ap.add_argument(
        "--workers", type=int, default=default_workers, help="Number of workers"
    )
    ap.add_argument(
        "--batch-size", type=int, default=200, help="Boards per batch"
    )
    args = ap.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)["sweep"]

    sizes = [int(n) for n in cfg["sizes"]]
    n_samples = int(cfg["n_samples"])
    shuffle_factor = int(cfg.get("shuffle_factor", 3))
    base_seed = int(cfg.get("seed", 0))
    out_dir = Path(cfg.get("output_dir", "results"))
    out_dir.mkdir(parents=True, exist_ok=True)
    out_csv = args.out or str(out_dir / "solvability.csv")

    for n in sizes:
        N = n * n
        rank = gf2_rank(build_A(n))
        print(f"[matrix] n={n}: rank {rank}/{N}, kernel dimension {N - rank}")

    jobs = list(
        make_jobs(sizes, n_samples, shuffle_factor, base_seed, args.batch_size)
    )
    print(
        f"\nChecking {len(sizes) * n_samples:,} boards in {len(jobs):,} batches "
        f"with {args.workers} workers...\n"
    )

    failures = {n: 0 for n in sizes}
    totals = {n: 0 for n in sizes}
    start_time = time.time()
    with open(out_csv, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        with ProcessPoolExecutor(max_workers=args.workers) as ex:
            futures = [ex.submit(_run_batch, j) for j in jobs]
            for done, fut in enumerate(as_completed(futures), start=1):
                rows = fut.result()
                writer.writerows(rows)
                for row in rows:
                    totals[row["n"]] += 1
                    if not row["verified"]:
                        failures[row["n"]] += 1
                print(
                    f"\r[progress] {done}/{len(jobs)} batches ({done / len(jobs):>6.1%})",
                    end="",
                    flush=True,
                )
    print()

    for n in sizes:
        print(f"[summary] n={n}: {totals[n] - failures[n]}/{totals[n]} verified")

    elapsed = time.time() - start_time
    print(f"\nDone in {int(elapsed/60)}m {int(elapsed%60)}s")
    print(f"Output: {out_csv}\n")
    if any(failures.values()):
        sys.exit(1)


if __name__ == "__main__":
    main()
