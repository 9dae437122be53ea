# __main__.py - entry point for the pygame table
import logging
import os
import pygame

from klondike import table as T
from klondike.engine import KlondikeEngine
from klondike.settings import load_settings

logger = logging.getLogger(__name__)


def _configure_logging():
    level_name = os.environ.get("KLONDIKE_LOG_LEVEL", "WARNING").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _seed_from_env():
    seed = os.environ.get("KLONDIKE_SEED", "").strip()
    if not seed:
        return None
    if not seed.isdigit():
        logger.warning(f"Ignoring KLONDIKE_SEED={seed!r}: expected a non-negative integer")
        return None
    return int(seed)


def main():
    _configure_logging()
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()

    screen = pygame.display.set_mode((T.SCREEN_W, T.SCREEN_H))
    pygame.display.set_caption("Klondike")
    T.setup_fonts()
    clock = pygame.time.Clock()

    # Developer options via environment
    T.load_card_images(os.environ.get("KLONDIKE_CARD_IMAGES", "").strip())

    engine = KlondikeEngine(load_settings(), seed=_seed_from_env())
    scene = T.TableScene(engine)

    running = True
    while running:
        clock.tick(60)
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
                continue
            scene.handle_event(e)
        if scene.quit_requested:
            running = False
        scene.draw(screen)
        pygame.display.flip()
    pygame.quit()


if __name__ == "__main__":
    main()
