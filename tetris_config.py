CONFIG = {
    "TICK_RATE_MS": 500,
    "GRID_WIDTH": 10,
    "GRID_HEIGHT": 20,
    "CELL_SIZE": 20,
    "START_X": 4,
    "START_Y": 0,
    "MULTIPLIER": 10,
    "MIN_SPEED_MULTIPLIER": 1,
    "PREVIEW_X": 2.5,
    "PREVIEW_Y": 1,
    "HOLD_X": 2.5,
    "HOLD_Y": 1.5,
    "RNG_SEED": None,
    "MAX_TICK_BACKLOG": 4,
    "DAS_MS": 170,
    "ARR_MS": 30,
    "LOG_LEVEL": "INFO",
}
