# main.py
import argparse
import logging
from typing import List, Optional

import pygame  # type: ignore

from .config import Config, WIDTH, HEIGHT, CELL_SIZE, DEFAULT_TICK_MS
from .controller import SnakeGame
from .controls import InputMapper, build_widgets
from .render import draw_frame, load_fonts

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="gridsnake",
        description="Grid snake: arrows/WASD or swipe to steer, space to pause.",
    )
    parser.add_argument("--width", type=int, default=WIDTH, help="board width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="board height in pixels")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per grid cell")
    parser.add_argument(
        "--speed",
        type=int,
        default=DEFAULT_TICK_MS,
        help="initial tick interval in ms (smaller is faster)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser, parser.parse_args(argv)


def build_config(parser: argparse.ArgumentParser, args) -> Config:
    try:
        return Config(
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            tick_ms=args.speed,
            seed=args.seed,
        )
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> None:
    parser, args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = build_config(parser, args)

    pygame.init()
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    fonts = load_fonts()

    game = SnakeGame(cfg)
    widgets = build_widgets(game)

    def render(g: SnakeGame) -> None:
        draw_frame(screen, g, widgets, fonts)
        pygame.display.flip()

    game.on_render = render
    mapper = InputMapper(game, widgets, cfg.window_size)
    logger.info(
        "Board %dx%d cells of %d px, tick %d ms",
        cfg.grid_w, cfg.grid_h, cfg.cell_size, game.tick_ms,
    )

    game.render()
    running = True
    while running:
        # Ticks arrive as events, so input and updates never interleave
        for event in pygame.event.get():
            if not mapper.handle_event(event):
                running = False
                break
        clock.tick(cfg.fps)

    game.scheduler.stop()
    pygame.quit()


if __name__ == "__main__":
    main()
