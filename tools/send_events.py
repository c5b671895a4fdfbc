"""Send logical input events to a game started with ``--socket-input``."""

from __future__ import annotations

import argparse
import json
import socket
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dino_runner.config import SocketInputConfig
from dino_runner.input import INPUT_EVENTS

DEFAULTS = SocketInputConfig()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drive the dino runner over its socket input.")
    parser.add_argument("--game-host", default=DEFAULTS.host, help="Game socket host.")
    parser.add_argument("--game-port", type=int, default=DEFAULTS.port, help="Game socket port.")
    parser.add_argument(
        "--jump-every",
        type=float,
        help="Send a jump every N seconds instead of reading events from stdin.",
    )
    parser.add_argument("--count", type=int, default=0, help="Stop after this many scripted jumps (0 = forever).")
    parser.add_argument("--verbose", action="store_true", help="Print each payload sent to the game.")
    return parser.parse_args()


def encode(event: str) -> bytes:
    return json.dumps({"event": event}).encode("utf-8") + b"\n"


class EventSender:
    def __init__(self, game_host: str, game_port: int, verbose: bool) -> None:
        self.game_host = game_host
        self.game_port = game_port
        self.verbose = verbose

    def _send(self, sock: socket.socket, event: str) -> None:
        sock.sendall(encode(event))
        if self.verbose:
            print(f"[STATE] {event}")

    def run(self, jump_every: float | None, count: int) -> int:
        print(f"[INFO] Connecting to game socket {self.game_host}:{self.game_port} ...")
        try:
            sock = socket.create_connection((self.game_host, self.game_port))
        except OSError as exc:
            print(f"[ERROR] Unable to connect to game socket: {exc}. Did you run main.py --socket-input ?")
            return 1

        try:
            with sock:
                if jump_every is not None:
                    print("[INFO] Sending scripted jumps. Press Ctrl+C to stop.")
                    sent = 0
                    while not count or sent < count:
                        self._send(sock, "jump")
                        sent += 1
                        time.sleep(jump_every)
                else:
                    print(f"[INFO] Type one of {', '.join(INPUT_EVENTS)} per line. Ctrl+D to stop.")
                    for line in sys.stdin:
                        event = line.strip()
                        if not event:
                            continue
                        if event not in INPUT_EVENTS:
                            print(f"[WARN] Unknown event {event!r}")
                            continue
                        self._send(sock, event)
        except KeyboardInterrupt:
            print("\n[INFO] Stopping sender...")
        except OSError as exc:
            print(f"[ERROR] Connection lost: {exc}")
            return 1
        return 0


def main() -> None:
    args = parse_args()
    sender = EventSender(args.game_host, args.game_port, args.verbose)
    sys.exit(sender.run(args.jump_every, args.count))


if __name__ == "__main__":
    main()
