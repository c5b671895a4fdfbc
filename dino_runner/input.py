"""Input sources that turn raw device activity into logical game events."""

from __future__ import annotations

import json
import logging
import socket
import threading
from collections import deque
from typing import Deque, Optional, Protocol

import pygame

from .config import SocketInputConfig

logger = logging.getLogger(__name__)

INPUT_EVENTS = ("jump", "duck", "stop-duck")


class InputProvider(Protocol):
    """Interface for supplying logical events to the game loop."""

    def poll(self, events: list[pygame.event.Event]) -> list[str]:
        """Return the logical events (``jump``, ``duck``, ``stop-duck``) since the last poll."""


class KeyboardInput(InputProvider):
    """Space/Up or a left click to jump, Down held to duck."""

    jump_keys = (pygame.K_SPACE, pygame.K_UP)
    duck_keys = (pygame.K_DOWN,)

    def __init__(self) -> None:
        self._held: set[int] = set()

    def poll(self, events: list[pygame.event.Event]) -> list[str]:
        logical: list[str] = []
        for event in events:
            if event.type == pygame.KEYDOWN:
                # held keys repeat KEYDOWN when key repeat is enabled
                if event.key in self._held:
                    continue
                self._held.add(event.key)
                if event.key in self.jump_keys:
                    logical.append("jump")
                elif event.key in self.duck_keys:
                    logical.append("duck")
            elif event.type == pygame.KEYUP:
                self._held.discard(event.key)
                if event.key in self.duck_keys:
                    logical.append("stop-duck")
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                logical.append("jump")
        return logical

    def reset(self) -> None:
        """Forget which keys are held."""
        self._held.clear()


class SocketInput(InputProvider):
    """Listens for JSON control messages over TCP to drive the game.

    One JSON object per line: ``{"event": "jump"}``, ``{"jump": true}`` or
    ``{"duck": true}`` / ``{"duck": false}``.
    """

    def __init__(
        self,
        base: Optional[InputProvider] = None,
        config: Optional[SocketInputConfig] = None,
        autostart: bool = True,
    ) -> None:
        self.base = base or KeyboardInput()
        self.cfg = config or SocketInputConfig()
        self._lock = threading.Lock()
        self._pending: Deque[str] = deque()
        self._running = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.listening = False
        if autostart:
            self.start()

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._running.set()
        self._thread = threading.Thread(target=self._run_server, name="SocketInput", daemon=True)
        self._thread.start()

    def poll(self, events: list[pygame.event.Event]) -> list[str]:
        logical = self.base.poll(events)
        with self._lock:
            logical.extend(self._pending)
            self._pending.clear()
        return logical

    def reset(self) -> None:
        if hasattr(self.base, "reset"):
            self.base.reset()  # type: ignore[attr-defined]
        with self._lock:
            self._pending.clear()

    def shutdown(self) -> None:
        self._running.clear()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=1.5)
        if hasattr(self.base, "shutdown"):
            self.base.shutdown()  # type: ignore[attr-defined]

    @property
    def status_text(self) -> str:
        state = "listening" if self.listening else "offline"
        return f"socket {self.cfg.host}:{self.cfg.port} {state}"

    def _run_server(self) -> None:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
            server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                server.bind((self.cfg.host, self.cfg.port))
                server.listen(self.cfg.backlog)
                server.settimeout(1.0)
            except OSError as exc:
                logger.warning("Socket input unavailable on %s:%d: %s", self.cfg.host, self.cfg.port, exc)
                return

            self.listening = True
            logger.info("Socket input listening on %s:%d", self.cfg.host, self.cfg.port)
            while self._running.is_set():
                try:
                    client, address = server.accept()
                    client.settimeout(self.cfg.read_timeout)
                except socket.timeout:
                    continue
                except OSError:
                    break
                logger.info("Socket input client connected from %s:%d", *address[:2])
                threading.Thread(
                    target=self._handle_client,
                    args=(client,),
                    daemon=True,
                ).start()
            self.listening = False

    def _handle_client(self, client: socket.socket) -> None:
        with client:
            buffer = bytearray()
            while self._running.is_set():
                try:
                    data = client.recv(4096)
                except socket.timeout:
                    continue
                except OSError:
                    break
                if not data:
                    break
                buffer.extend(data)
                while b"\n" in buffer:
                    line, _, remainder = buffer.partition(b"\n")
                    buffer = bytearray(remainder)
                    self._process_line(line.strip())

    def _process_line(self, raw: bytes) -> None:
        if not raw:
            return
        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            logger.debug("Dropping malformed control line %r", raw[:80])
            return
        if not isinstance(payload, dict):
            return

        logical: list[str] = []
        event = payload.get("event")
        if event in INPUT_EVENTS:
            logical.append(event)
        if payload.get("jump"):
            logical.append("jump")
        if "duck" in payload:
            logical.append("duck" if payload["duck"] else "stop-duck")

        if logical:
            with self._lock:
                self._pending.extend(logical)
