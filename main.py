import logging
import sys

import pygame
from tetris_config import CONFIG
from tetris_game import Game, Command
from tetris_input import command_for_event, is_quit_event
from tetris_layout import compute_dims
from tetris_overlay import Banner
from tetris_render import RenderAssets
from tetris_rng import PieceGenerator
from tetris_scheduler import DropTimer

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    banner = Banner(big_font, font)
    board_rect = pygame.Rect(dims.board_x, dims.board_y, dims.board_w, dims.board_h)
    clock = pygame.time.Clock()

    game = Game(PieceGenerator(seed=CONFIG["SEED"]))
    # gravity re-arms itself whenever the level changes the interval
    timer = DropTimer(lambda: game.drop_interval_ms)
    log.info("starting: seed=%s cell=%d", CONFIG["SEED"], dims.cell)

    while True:
        dt = clock.tick(CONFIG["TARGET_FPS"])

        for e in pygame.event.get():
            if is_quit_event(e):
                log.info("quit: score=%d", game.state.score)
                pygame.quit(); sys.exit()
            cmd = command_for_event(e)
            if cmd is None:
                continue
            game.apply(cmd)
            if cmd in (Command.RESET, Command.TOGGLE_PAUSE):
                timer.cancel()

        if game.state.paused or game.state.game_over:
            timer.cancel()
        else:
            for _ in range(timer.advance(dt)):
                game.apply(Command.TICK)

        snap = game.snapshot()
        render.draw(screen, snap)
        banner.draw(screen, snap, board_rect)
        pygame.display.flip()


if __name__ == '__main__':
    main()
