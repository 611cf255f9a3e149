"""Key bindings and color definitions."""

import pygame

from tick_shooter import Action

FPS = 60

# Logical action -> physical keys. WASD and the arrow keys both steer, and
# each key is tracked on its own so releasing one keeps the other held.
BINDINGS = {
    Action.MOVE_UP: (pygame.K_w, pygame.K_UP),
    Action.MOVE_DOWN: (pygame.K_s, pygame.K_DOWN),
    Action.MOVE_LEFT: (pygame.K_a, pygame.K_LEFT),
    Action.MOVE_RIGHT: (pygame.K_d, pygame.K_RIGHT),
    Action.FIRE: (pygame.K_SPACE,),
    Action.RESTART: (pygame.K_r,),
}

BOUND_KEYS = frozenset(key for keys in BINDINGS.values() for key in keys)

# Colors
BG_COLOR = (26, 26, 26)
PLAYER_COLOR = (0, 255, 255)
PROJECTILE_COLOR = (255, 255, 0)
TEXT_COLOR = (255, 255, 255)
TEXT_DIM = (160, 160, 170)
OVERLAY_COLOR = (0, 0, 0, 170)

ENEMY_COLORS = {
    "regular": (255, 68, 68),
    "zigzag": (255, 170, 0),
    "fast": (255, 0, 255),
}
