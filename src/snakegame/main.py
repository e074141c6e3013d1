# main.py
import logging
import os

import pygame  # type: ignore

from .config import CFG, WIDTH, HEIGHT, FPS
from .controls import Controls
from .game import Game
from .render import PygameRenderer
from .storage import FileScoreStore

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    level = os.environ.get("SNAKEGAME_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

def main():
    setup_logging()
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    store = FileScoreStore(CFG.best_score_path)
    game = Game(CFG, store=store)
    controls = Controls(WIDTH, HEIGHT)
    renderer = PygameRenderer(screen)
    logger.info("Best score file: %s (best %d)", store.path, game.best_score)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if not controls.handle_event(game, event):
                running = False
                break
        if not running:
            break

        # 2) update; clock.tick returns the ms elapsed since the last frame
        game.advance(clock.tick(FPS))

        # 3) render
        renderer.render(game)
        pygame.display.flip()

    pygame.quit()

if __name__ == "__main__":
    main()
