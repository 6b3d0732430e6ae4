from typing import Dict, FrozenSet, List, NamedTuple, Set, Tuple

import pygame

# Held intents
LEFT = "left"
RIGHT = "right"
# Discrete actions
JUMP = "jump"
RESTART = "restart"

HELD_BINDINGS: Dict[int, str] = {
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

ACTION_BINDINGS: Dict[int, str] = {
    pygame.K_SPACE: JUMP,
    pygame.K_UP: JUMP,
    pygame.K_w: JUMP,
    pygame.K_r: RESTART,
}


class InputSnapshot(NamedTuple):
    held: FrozenSet[str]
    actions: Tuple[str, ...]


class InputCollector:
    """Turns key presses into held intents plus one-shot actions.

    The host feeds `press`/`release` from its event queue and calls
    `snapshot()` once per frame. Keys without a binding are ignored.
    """

    def __init__(self):
        self._down: Set[int] = set()
        self._actions: List[str] = []

    def press(self, key: int) -> None:
        if key in HELD_BINDINGS:
            self._down.add(key)
        action = ACTION_BINDINGS.get(key)
        if action:
            self._actions.append(action)

    def release(self, key: int) -> None:
        self._down.discard(key)

    @property
    def held(self) -> FrozenSet[str]:
        # an intent stays held while any of its keys is still down
        return frozenset(HELD_BINDINGS[k] for k in self._down)

    def snapshot(self) -> InputSnapshot:
        snap = InputSnapshot(self.held, tuple(self._actions))
        self._actions.clear()
        return snap

    def clear(self) -> None:
        self._down.clear()
        self._actions.clear()
