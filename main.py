
import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_engine import Command, Game, GameState
from tetris_input import MUSIC_KEY, enable_key_repeat, soft_drop_sync, translate
from tetris_audio import MusicToggle
from tetris_log import setup_logging
from tetris_overlay import Overlay
from tetris_render import RenderAssets

logger = logging.getLogger("tetris.main")


def recreate_window(size, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode(size, flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode(size, flags)


def main():
    setup_logging(CONFIG["LOG_LEVEL"])
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, pygame.MOUSEBUTTONDOWN])

    logger.info("Starting, seed=%s", CONFIG["SEED"])
    game = Game()
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(font, game.cols, game.rows, int(CONFIG["CELL_SIZE"]))
    screen = recreate_window(render.size)
    pygame.display.set_caption("Tetris")
    enable_key_repeat()
    overlay = Overlay(render.board_rect, big_font)
    music = MusicToggle(CONFIG["MUSIC_FILE"])
    clock = pygame.time.Clock()

    snap = game.snapshot()
    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                logger.info("Quit with score %d.", game.score)
                pygame.quit(); sys.exit()
            if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if overlay.hit(e.pos):
                    snap = game.handle_command(Command.RESET)
                continue
            if e.type == pygame.KEYDOWN and e.key == MUSIC_KEY:
                music.toggle(); continue
            cmd = translate(e)
            if cmd is None: continue
            was_paused = game.state is GameState.PAUSED
            snap = game.handle_command(cmd)
            if was_paused and game.state is GameState.RUNNING:
                # DOWN may have been pressed or released while paused
                keys = pygame.key.get_pressed()
                snap = game.handle_command(soft_drop_sync(keys[pygame.K_DOWN]))

        if game.state is GameState.RUNNING:
            snap = game.tick(dt)

        render.draw_frame(screen, snap)
        overlay.draw(screen, snap.state)
        pygame.display.flip()


if __name__ == '__main__':
    main()
