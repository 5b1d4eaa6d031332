
CONFIG = {
    "CELL_SIZE": 30,
    "TARGET_FPS": 60,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
