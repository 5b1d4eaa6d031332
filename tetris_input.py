"""Key bindings: pygame key events -> game commands"""
from typing import Optional
import pygame
from tetris_game import Command

KEY_BINDINGS = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESET,
}

QUIT_KEYS = (pygame.K_ESCAPE,)


def command_for_event(e) -> Optional[Command]:
    if e.type != pygame.KEYDOWN:
        return None
    return KEY_BINDINGS.get(e.key)


def is_quit_event(e) -> bool:
    return e.type == pygame.QUIT or (e.type == pygame.KEYDOWN and e.key in QUIT_KEYS)
