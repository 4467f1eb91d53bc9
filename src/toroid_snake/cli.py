"""CLI launcher for headless toroid-snake runs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

import numpy as np

from toroid_snake.config import GameConfig
from toroid_snake.engine import GameEngine
from toroid_snake.grid import CellType
from toroid_snake.snake import Direction

logger = logging.getLogger(__name__)

_GLYPHS = {
    CellType.EMPTY: ".",
    CellType.SNAKE: "o",
    CellType.FOOD: "*",
    CellType.HEAD: "@",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toroid-snake",
        description="Headless snake simulation on a wrapping grid.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run the game with a random autopilot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    sim_p.add_argument("--seconds", type=float, default=10.0)
    sim_p.add_argument("--fps", type=int, default=60)
    sim_p.add_argument(
        "--turn-chance", type=float, default=0.05,
        help="Probability per frame that the autopilot presses a key.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--grid-width", type=int, default=None)
    sim_p.add_argument("--grid-height", type=int, default=None)
    sim_p.add_argument(
        "--json", action="store_true",
        help="Print the final state as JSON instead of a board.",
    )

    # --- config ---
    cfg_p = sub.add_parser("config", help="Write a config file.")
    cfg_p.add_argument("output", help="Path for the JSON config.")
    cfg_p.add_argument("--grid-width", type=int, default=None)
    cfg_p.add_argument("--grid-height", type=int, default=None)
    cfg_p.add_argument("--seed", type=int, default=None)

    return parser


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    path = getattr(args, "config", None)
    config = GameConfig.load(path) if path else GameConfig()

    overrides: dict = {}
    for name in ("grid_width", "grid_height", "seed"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    return replace(config, **overrides) if overrides else config


def render_board(board: np.ndarray) -> str:
    """Draw a board array as text with ``y`` growing upwards."""
    return "\n".join(
        "".join(_GLYPHS[CellType(int(c))] for c in row) for row in board[::-1]
    )


def _run_simulate(args: argparse.Namespace) -> int:
    if args.fps <= 0:
        logger.error("--fps must be positive.")
        return 2
    config = _config_from_args(args)
    engine = GameEngine(config)
    pilot = np.random.default_rng(config.seed)
    keys = list(Direction)
    dt = 1.0 / args.fps

    for _ in range(int(args.seconds * args.fps)):
        pressed: tuple[Direction, ...] = ()
        if pilot.random() < args.turn_chance:
            pressed = (keys[int(pilot.integers(len(keys)))],)
        engine.update(dt, pressed)

    logger.info(
        "Simulated %d movement ticks, %d resets, final length %d.",
        engine.ticks, engine.resets, engine.length,
    )
    if args.json:
        print(json.dumps(engine.get_state()))  # noqa: T201
    else:
        print(render_board(engine.board()))  # noqa: T201
        print(  # noqa: T201
            f"ticks={engine.ticks} resets={engine.resets} "
            f"length={engine.length} food={len(engine.food_positions())}"
        )
    return 0


def _run_config(args: argparse.Namespace) -> int:
    _config_from_args(args).save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``toroid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
