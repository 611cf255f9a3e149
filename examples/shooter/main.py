"""Arcade Shooter - pygame host for the tick-shooter simulation core.

Controls:
  WASD / Arrows   Move
  Space           Fire (hold)
  R               Restart after game over
  Esc             Quit
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import pygame

from tick_shooter import JsonHighScoreStore, ShooterConfig, ShooterGame, signals

from ui.constants import BINDINGS, BOUND_KEYS, FPS
from ui.renderer import draw_frame

logger = logging.getLogger("shooter")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Arcade shooter demo")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with ShooterConfig overrides",
    )
    parser.add_argument(
        "--highscore",
        type=Path,
        default=Path.home() / ".tick-shooter" / "highscore.json",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> ShooterConfig:
    data: dict = {}
    if args.config is not None:
        data = json.loads(args.config.read_text(encoding="utf-8"))
    data.setdefault("width", args.width)
    data.setdefault("height", args.height)
    data.setdefault(
        "bindings", {action.value: list(keys) for action, keys in BINDINGS.items()}
    )
    return ShooterConfig.from_mapping(data)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config(args)

    pygame.init()
    screen = pygame.display.set_mode((int(config.width), int(config.height)))
    pygame.display.set_caption("Arcade Shooter")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 18)

    game = ShooterGame(
        config,
        JsonHighScoreStore(args.highscore),
        now_ms=pygame.time.get_ticks(),
        seed=args.seed,
    )
    logger.info("Seed %d, high score %d", game.seed, game.session.high_score)
    game.subscribe(
        signals.GAME_OVER,
        lambda name, data: logger.info("Run ended with %d points", data["score"]),
    )
    # Stop key event delivery once the simulation is torn down.
    game.on_stop(lambda: pygame.event.set_blocked([pygame.KEYDOWN, pygame.KEYUP]))

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in BOUND_KEYS:
                    game.press(event.key)
            elif event.type == pygame.KEYUP and event.key in BOUND_KEYS:
                game.release(event.key)

        # --- Tick ---
        snap = game.tick(pygame.time.get_ticks())

        # --- Render ---
        draw_frame(screen, snap, font)
        pygame.display.flip()

    game.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
