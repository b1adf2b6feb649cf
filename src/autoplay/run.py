# src/autoplay/run.py
from __future__ import annotations
import argparse
import csv
import logging
import os
import random
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np  # type: ignore

from src.snake.config import Config, CFG
from src.snake.session import (
    Ended, new_session, handle_direction_input, advance,
)
from src.autoplay.policies import policy_random, policy_greedy

logger = logging.getLogger(__name__)

POLICIES: Dict[str, Callable] = {
    "random": policy_random,
    "greedy": policy_greedy,
}


@dataclass
class EpisodeResult:
    steps: int
    score: int
    reason: Optional[str]   # None if max_steps was reached first


def get_policy(name: str) -> Callable:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown policy: {name}") from None


# --------------------------
# Episode loop
# --------------------------
def run_episode(
    policy: str,
    seed: Optional[int] = None,
    max_steps: int = 10_000,
    cfg: Config = CFG,
) -> EpisodeResult:
    """
    Play one game headlessly. The clock is synthetic: it jumps forward by
    exactly one tick period per step, so every advance() moves the snake.
    """
    choose = get_policy(policy)
    rng = np.random.default_rng(seed)
    now = 0
    session = new_session(now, cfg, random.Random(seed))
    steps = 0

    while steps < max_steps:
        heading = choose(session.state, rng)
        session = handle_direction_input(session, heading)
        now += max(cfg.move_every_ms, 1)
        session = advance(session, now)
        steps += 1
        if isinstance(session, Ended):
            logger.debug("Episode ended after %d steps: %s", steps, session.reason)
            return EpisodeResult(steps, session.final_score, session.reason)

    return EpisodeResult(steps, session.state.score, None)


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run snake games headlessly with a fixed policy.")
    parser.add_argument("--episodes", type=int, default=50)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=sorted(POLICIES),
    )
    parser.add_argument("--seed", type=int, default=0, help="seed of the first episode")
    parser.add_argument("--max-steps", type=int, default=10_000)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autoplay_{args.policy}.csv")

    print(f"Running {args.episodes} episode(s) with policy={args.policy}")
    print("ep,steps,score,reason")

    rows = [("ep", "steps", "score", "reason")]
    for ep in range(1, args.episodes + 1):
        result = run_episode(args.policy, args.seed + ep - 1, args.max_steps)
        reason = result.reason or "max_steps"
        print(f"{ep},{result.steps},{result.score},{reason}")
        rows.append((ep, result.steps, result.score, reason))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\nSaved results → {out_csv}")
    return out_csv


if __name__ == "__main__":
    main()
