"""Key and timer events to actions"""
import logging
from typing import Iterable, List, Optional

import pygame

from tetris_config import CONFIG
from tetris_state import DOWN, DROP, HOLD, MOVE_LEFT, MOVE_RIGHT, ROTATE, TICK, Action

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1

KEYMAP = {
    pygame.K_a: MOVE_LEFT, pygame.K_LEFT: MOVE_LEFT,
    pygame.K_d: MOVE_RIGHT, pygame.K_RIGHT: MOVE_RIGHT,
    pygame.K_s: DOWN, pygame.K_DOWN: DOWN,
    pygame.K_w: ROTATE, pygame.K_UP: ROTATE,
    pygame.K_SPACE: DROP,
    pygame.K_c: HOLD,
}


def actions_from_events(events: Iterable[pygame.event.Event], max_ticks: Optional[int] = None) -> List[Action]:
    """Map a drained batch of events to actions, keeping arrival order.

    Ticks past ``max_ticks`` in one batch are stale and dropped; key
    presses are always kept.
    """
    if max_ticks is None:
        max_ticks = CONFIG["MAX_TICK_BACKLOG"]
    out: List[Action] = []
    ticks = dropped = 0
    for e in events:
        if e.type == TICK_EVENT:
            ticks += 1
            if ticks > max_ticks:
                dropped += 1
                continue
            out.append(TICK)
        elif e.type == pygame.KEYDOWN and e.key in KEYMAP:
            out.append(KEYMAP[e.key])
    if dropped:
        log.debug("dropped %d stale ticks", dropped)
    return out


def key_repeat():
    """(delay, interval) in ms for ``pygame.key.set_repeat``: held keys resend KEYDOWN."""
    return CONFIG["DAS_MS"], CONFIG["ARR_MS"]
