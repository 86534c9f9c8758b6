import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_input import TICK_EVENT, actions_from_events, key_repeat
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_rng import clock_seed
from tetris_state import initial_state, run_actions

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def step(state, events, draw):
    """Fold a drained event batch into the state, drawing after every fold."""
    for state in run_actions(state, actions_from_events(events)):
        draw(state)
    return state


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])
    pygame.key.set_repeat(*key_repeat())

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    seed = CONFIG["RNG_SEED"]
    if seed is None:
        seed = clock_seed()
    log.info("starting with seed %d", seed)
    state = initial_state(seed)
    render.render(screen, state)
    pygame.display.flip()

    # Ticks at a fixed cadence regardless of how long a fold takes
    pygame.time.set_timer(TICK_EVENT, CONFIG["TICK_RATE_MS"] // 10)

    while True:
        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                log.info("quit with score %d, high score %d", state.score, max(state.score, state.high_score))
                pygame.quit(); sys.exit()

        folded = step(state, events, lambda s: render.render(screen, s))
        if folded is not state:
            state = folded
            pygame.display.flip()

        clock.tick(60)


if __name__ == '__main__':
    main()
