from typing import Dict, List, Tuple


# World width in pixels and the top edge of the ground.
WORLD_WIDTH = 3200
GROUND_Y = 470

# Height of the single ground strip under the whole level.
GROUND_DEPTH = 120

# Floating platforms as (x, y, w); they are all 20 px thick.
FLOATING = [
    (260, 400, 120),
    (460, 340, 140),
    (690, 280, 160),
    (1040, 380, 130),
    (1260, 310, 130),
    (1500, 250, 180),
    (1790, 360, 150),
    (2150, 300, 170),
    (2500, 360, 180),
    (2860, 300, 120),
]
PLATFORM_THICKNESS = 20

COIN_RADIUS = 11
ARC_COINS = 12

ENEMY_W, ENEMY_H = 36, 32


def make_default_level() -> Dict[str, list]:
    """Builds the one level of the game as plain tuples.

    The simulation turns these into entities; every call returns fresh
    lists so a world never shares state with another one.
    """

    platforms: List[Tuple] = [(0, GROUND_Y, WORLD_WIDTH, GROUND_DEPTH, "ground")]
    for x, y, w in FLOATING:
        platforms.append((x, y, w, PLATFORM_THICKNESS, "floating"))

    # coin arc over the whole level, three rows high
    coins = [(290 + i * 230, 220 + (i % 3) * 35, COIN_RADIUS) for i in range(ARC_COINS)]
    # bonus coins above the harder jumps
    coins += [
        (500, 300, COIN_RADIUS),
        (1530, 200, COIN_RADIUS),
        (2890, 250, COIN_RADIUS),
    ]

    # (x, y, w, h, patrol min, patrol max, direction, speed)
    enemy_y = GROUND_Y - ENEMY_H
    enemies = [
        (750, enemy_y, ENEMY_W, ENEMY_H, 700, 920, 1, 1.5),
        (1380, enemy_y, ENEMY_W, ENEMY_H, 1300, 1640, -1, 1.8),
        (2320, enemy_y, ENEMY_W, ENEMY_H, 2260, 2600, 1, 1.6),
    ]

    goal = (3090, 390, 24, 80)

    return {
        "platforms": platforms,
        "coins": coins,
        "enemies": enemies,
        "goal": goal,
    }
