
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 30,
    "NORMAL_DROP_MS": 500,
    "FAST_DROP_MS": 75,
    "CLEAR_TOP_ROW": False,
    "SEED": None,
    "FPS": 60,
    "KEY_REPEAT_DELAY_MS": 170,
    "KEY_REPEAT_MS": 50,
    "MUSIC_FILE": None,
    "LOG_LEVEL": "INFO",
}
