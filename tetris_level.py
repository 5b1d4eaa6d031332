"""Level progression, line-clear scoring and gravity timing"""

LINES_PER_LEVEL = 10
POINTS_PER_LINE = 100

BASE_DROP_MS = 1000   # level 1
DROP_STEP_MS = 100    # faster per level
MIN_DROP_MS = 100


def level_for_lines(lines: int) -> int:
    return lines // LINES_PER_LEVEL + 1


def line_clear_score(cleared: int, level: int) -> int:
    """Points for a clear, using the level in effect before the clear."""
    return cleared * POINTS_PER_LINE * level


def drop_interval_ms(level: int) -> int:
    """Milliseconds between automatic drops at ``level``."""
    return max(MIN_DROP_MS, BASE_DROP_MS - (level - 1) * DROP_STEP_MS)
