"""Command-line entry point for headless play and benchmarking."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Headless grid snake: scripted play and benchmarks.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser(
        "play", help="Run a game from a move or key script.",
    )
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; other flags override it.",
    )
    play_p.add_argument("--grid-size", type=int, default=None)
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--tick-seconds", type=float, default=None)
    play_p.add_argument(
        "--food-avoids-snake", action="store_true", default=None,
        help="Only place food on free cells.",
    )
    script = play_p.add_mutually_exclusive_group()
    script.add_argument(
        "--moves", type=str, default="",
        help="One character per tick: u/d/l/r, or '.' for no input.",
    )
    script.add_argument(
        "--keys", type=str, default=None,
        help=(
            "Held keys per tick, e.g. 'up;up,right;;escape'. "
            "Escape ends the game."
        ),
    )
    play_p.add_argument(
        "--ticks", type=int, default=None,
        help="Ticks to run (defaults to the script length).",
    )
    play_p.add_argument(
        "--realtime", action="store_true",
        help="Sleep tick_seconds between ticks.",
    )
    play_p.add_argument(
        "--quiet", action="store_true", help="Only print the summary.",
    )
    play_p.add_argument(
        "--verbose", action="store_true",
        help="Also print the head's world coordinates each frame.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser(
        "benchmark", help="Measure simulation throughput.",
    )
    bench_p.add_argument("--ticks", type=int, default=10_000)
    bench_p.add_argument("--grid-size", type=int, default=20)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _load_config(args: argparse.Namespace):
    from grid_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()

    flag_map = {
        "grid_size": "grid_size",
        "seed": "seed",
        "tick_seconds": "tick_seconds",
        "food_avoids_snake": "food_avoids_snake",
    }
    overrides = {
        cfg_name: getattr(args, cli_name)
        for cli_name, cfg_name in flag_map.items()
        if getattr(args, cli_name, None) is not None
    }
    if overrides:
        d = config.to_dict()
        d.update(overrides)
        config = GameConfig(**d)
    return config


_EXIT = object()


def _tick_script(args: argparse.Namespace) -> list:
    """Per-tick inputs: a direction, ``None`` for no input, or ``_EXIT``."""
    from grid_snake.controls import (
        direction_from_keys,
        is_exit_key,
        parse_key_script,
        parse_move_script,
    )

    if args.keys is None:
        return parse_move_script(args.moves)
    script = []
    for held in parse_key_script(args.keys):
        if any(is_exit_key(k) for k in held):
            script.append(_EXIT)
        else:
            script.append(direction_from_keys(held))
    return script


def _run_play(args: argparse.Namespace) -> int:
    from grid_snake.driver import TickDriver
    from grid_snake.engine import GameEngine
    from grid_snake.render import Layout, render_ascii

    try:
        config = _load_config(args)
        script = _tick_script(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)  # noqa: T201
        return 2

    ticks = args.ticks if args.ticks is not None else len(script)
    engine = GameEngine.from_config(config)
    layout = Layout.from_config(config)

    def show(snapshot) -> None:
        if args.quiet:
            return
        print(f"tick {snapshot.tick}")  # noqa: T201
        if args.verbose:
            wx, wy = layout.to_world(snapshot.head)
            print(  # noqa: T201
                f"head {tuple(snapshot.head)} at world ({wx:.1f}, {wy:.1f})",
            )
        print(render_ascii(snapshot, config.grid_size))  # noqa: T201

    driver = TickDriver(engine, config.tick_seconds, on_frame=show)
    cursor = 0

    def feed() -> bool:
        """Send the input for the next tick; ``False`` means stop."""
        nonlocal cursor
        if cursor < len(script):
            entry = script[cursor]
            if entry is _EXIT:
                logger.info("Exit key at tick %d.", engine.tick)
                return False
            if entry is not None:
                driver.submit(entry)
        cursor += 1
        return True

    if args.realtime:
        def after_tick(_outcome) -> None:
            if not feed():
                driver.stop()

        if feed():
            driver.on_outcome = after_tick
            asyncio.run(driver.run(max_ticks=ticks))
    else:
        driver.publish_frame()
        for _ in range(ticks):
            if not feed():
                break
            driver.tick()

    print(  # noqa: T201
        f"Finished: {engine.tick} ticks, {engine.food_eaten} food, "
        f"{engine.deaths} deaths.",
    )
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from grid_snake.benchmark import benchmark_throughput

    if args.ticks < 1:
        print("error: --ticks must be at least 1", file=sys.stderr)  # noqa: T201
        return 2
    result = benchmark_throughput(
        ticks=args.ticks, grid_size=args.grid_size, seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
