from __future__ import annotations

import pygame
import pytest

from dino_runner.input import KeyboardInput, SocketInput


def key(event_type: int, key_code: int) -> pygame.event.Event:
    return pygame.event.Event(event_type, key=key_code)


def test_space_and_up_jump():
    keyboard = KeyboardInput()
    events = [
        key(pygame.KEYDOWN, pygame.K_SPACE),
        key(pygame.KEYUP, pygame.K_SPACE),
        key(pygame.KEYDOWN, pygame.K_UP),
    ]
    assert keyboard.poll(events) == ["jump", "jump"]


def test_held_key_repeat_is_suppressed():
    keyboard = KeyboardInput()
    assert keyboard.poll([key(pygame.KEYDOWN, pygame.K_SPACE)]) == ["jump"]
    assert keyboard.poll([key(pygame.KEYDOWN, pygame.K_SPACE)]) == []
    keyboard.poll([key(pygame.KEYUP, pygame.K_SPACE)])
    assert keyboard.poll([key(pygame.KEYDOWN, pygame.K_SPACE)]) == ["jump"]


def test_down_ducks_until_released():
    keyboard = KeyboardInput()
    assert keyboard.poll([key(pygame.KEYDOWN, pygame.K_DOWN)]) == ["duck"]
    assert keyboard.poll([key(pygame.KEYUP, pygame.K_DOWN)]) == ["stop-duck"]


def test_left_click_jumps_and_other_keys_are_ignored():
    keyboard = KeyboardInput()
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)),
        key(pygame.KEYDOWN, pygame.K_a),
    ]
    assert keyboard.poll(events) == ["jump"]


def test_reset_forgets_held_keys():
    keyboard = KeyboardInput()
    keyboard.poll([key(pygame.KEYDOWN, pygame.K_SPACE)])
    keyboard.reset()
    assert keyboard.poll([key(pygame.KEYDOWN, pygame.K_SPACE)]) == ["jump"]


@pytest.fixture
def socket_input():
    return SocketInput(base=KeyboardInput(), autostart=False)


@pytest.mark.parametrize(
    "line, expected",
    [
        (b'{"event": "jump"}', ["jump"]),
        (b'{"event": "stop-duck"}', ["stop-duck"]),
        (b'{"jump": true}', ["jump"]),
        (b'{"jump": false}', []),
        (b'{"duck": true}', ["duck"]),
        (b'{"duck": false}', ["stop-duck"]),
        (b'{"event": "fly"}', []),
        (b"[1, 2]", []),
        (b"not json", []),
        (b"", []),
    ],
)
def test_socket_lines_become_events(socket_input, line, expected):
    socket_input._process_line(line)
    assert socket_input.poll([]) == expected


def test_socket_events_follow_keyboard_and_drain(socket_input):
    socket_input._process_line(b'{"event": "duck"}')
    assert socket_input.poll([key(pygame.KEYDOWN, pygame.K_SPACE)]) == ["jump", "duck"]
    assert socket_input.poll([]) == []


def test_socket_reset_drops_pending(socket_input):
    socket_input._process_line(b'{"event": "jump"}')
    socket_input.reset()
    assert socket_input.poll([]) == []
    assert "offline" in socket_input.status_text
