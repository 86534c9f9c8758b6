import pygame

from tetris_config import CONFIG
from tetris_input import TICK_EVENT, actions_from_events, key_repeat
from tetris_state import DOWN, DROP, HOLD, MOVE_LEFT, MOVE_RIGHT, ROTATE, TICK


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def tick():
    return pygame.event.Event(TICK_EVENT)


def test_keys_map_to_actions():
    events = [key(pygame.K_a), key(pygame.K_d), key(pygame.K_s), key(pygame.K_w),
              key(pygame.K_SPACE), key(pygame.K_c), key(pygame.K_LEFT), key(pygame.K_UP)]
    assert actions_from_events(events) == [MOVE_LEFT, MOVE_RIGHT, DOWN, ROTATE, DROP, HOLD, MOVE_LEFT, ROTATE]


def test_unmapped_events_ignored():
    events = [key(pygame.K_q), pygame.event.Event(pygame.KEYUP, key=pygame.K_a), tick()]
    assert actions_from_events(events) == [TICK]


def test_arrival_order_kept():
    events = [tick(), key(pygame.K_a), tick(), key(pygame.K_SPACE)]
    assert actions_from_events(events) == [TICK, MOVE_LEFT, TICK, DROP]


def test_stale_ticks_dropped_but_keys_kept():
    events = [tick(), key(pygame.K_a), tick(), tick(), tick(), key(pygame.K_SPACE), tick()]
    assert actions_from_events(events, max_ticks=2) == [TICK, MOVE_LEFT, TICK, DROP]


def test_held_key_repeats_map_to_repeated_actions():
    # with key repeat on, a held key arrives as a run of KEYDOWN events
    events = [key(pygame.K_a)] * 3 + [tick(), key(pygame.K_s), key(pygame.K_s)]
    assert actions_from_events(events) == [MOVE_LEFT, MOVE_LEFT, MOVE_LEFT, TICK, DOWN, DOWN]


def test_key_repeat_uses_configured_delay_and_interval():
    assert key_repeat() == (CONFIG["DAS_MS"], CONFIG["ARR_MS"])
    delay, interval = key_repeat()
    assert delay > 0 and interval > 0
