import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lightsgame.config import GameConfig  # noqa: E402
from lightsgame.session import GameSession  # noqa: E402
from lightsgame.viz import show_board, show_plan  # noqa: E402


def main():
    ap = argparse.ArgumentParser(
        description="Shuffle a board and save a picture of it with the hint."
    )
    ap.add_argument("--config", default=str(ROOT / "configs" / "game.yaml"))
    ap.add_argument("--size", type=int, default=None)
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--plan", action="store_true", help="Also draw the full press plan")
    ap.add_argument("--out", default="hint.png")
    args = ap.parse_args()

    config = GameConfig.load(args.config)
    if args.seed is not None:
        config.seed = args.seed
    with GameSession(config) as session:
        session.new_game(args.size)
        cell = session.request_hint()
        snap = session.snapshot()
        print(session.board)
        print(f"hint: {cell}" if cell is not None else "hint: none")

        if args.plan:
            plan = session.hinter.solve(session.board)
            show_plan(session.board, plan)
        else:
            show_board(snap, title=f"{snap.size}x{snap.size}, hint {cell}")
    plt.savefig(args.out, dpi=120)
    print(f"Output: {args.out}")


if __name__ == "__main__":
    main()
