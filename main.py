"""Entry point for the dino runner."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import replace

from dino_runner import (
    GameConfig,
    KeyboardInput,
    NullCuePlayer,
    RunnerApp,
    SocketInput,
    SocketInputConfig,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the dino runner.")
    parser.add_argument(
        "--seed",
        type=int,
        help="Optional random seed for deterministic obstacle patterns.",
    )
    parser.add_argument(
        "--fps",
        type=int,
        help="Override the target frame rate (default: config value).",
    )
    parser.add_argument(
        "--mute",
        action="store_true",
        help="Disable sound cues.",
    )
    parser.add_argument(
        "--socket-input",
        action="store_true",
        help="Enable JSON-over-TCP control interface for external pipelines.",
    )
    parser.add_argument(
        "--socket-host",
        help="Override socket input bind host (default: config value).",
    )
    parser.add_argument(
        "--socket-port",
        type=int,
        help="Override socket input port (default: config value).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    rng = random.Random(args.seed)
    config = GameConfig()
    if args.fps is not None:
        config = replace(config, target_fps=args.fps)

    socket_cfg: SocketInputConfig = config.socket_input
    socket_overrides = {}
    if args.socket_host:
        socket_overrides["host"] = args.socket_host
    if args.socket_port is not None:
        socket_overrides["port"] = args.socket_port

    if socket_overrides:
        socket_cfg = replace(socket_cfg, **socket_overrides)
        config = replace(config, socket_input=socket_cfg)

    input_provider = KeyboardInput()
    if args.socket_input:
        input_provider = SocketInput(base=input_provider, config=socket_cfg)

    cues = NullCuePlayer() if args.mute else None
    app = RunnerApp(config=config, input_provider=input_provider, cues=cues, rng=rng)
    app.run()


if __name__ == "__main__":
    main()
