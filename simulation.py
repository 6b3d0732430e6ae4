import logging
import math
import time
from typing import NamedTuple

from controls import LEFT, RIGHT, JUMP, RESTART
from level import GROUND_Y, WORLD_WIDTH, make_default_level

logger = logging.getLogger(__name__)

# =========================
# Simulation step (no pygame in here)
# =========================

# --- View / camera ---
VIEW_WIDTH, VIEW_HEIGHT = 960, 540
CAMERA_LEAD = 0.35

# --- Run ---
TIME_BUDGET = 120          # seconds
START_LIVES = 3
SPAWN_X, SPAWN_Y = 60, 350
RESPAWN_INVINCIBLE = 120   # frames
FALL_MARGIN = 200

# --- Player movement (per frame) ---
ACCEL = 0.8
FRICTION = 0.82
MAX_VX = 6.2
GRAVITY = 0.65
MAX_FALL = 16

# --- Stomp ---
STOMP_MIN_VY = 2
STOMP_MARGIN = 18
STOMP_BOUNCE = -9

# --- Score ---
COIN_SCORE = 50
STOMP_SCORE = 120
TIME_BONUS = 5


# ------------- Utilities -------------
def clamp(v, a, b):
    return a if v < a else b if v > b else v

def intersects(a, b):
    """Open-interval AABB overlap; touching edges don't count."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y

def camera_x(player):
    return clamp(player.x - VIEW_WIDTH * CAMERA_LEAD, 0, WORLD_WIDTH - VIEW_WIDTH)


# ------------- Entities -------------
class Box(NamedTuple):
    x: float
    y: float
    w: float
    h: float


class Platform(NamedTuple):
    x: float
    y: float
    w: float
    h: float
    kind: str = "floating"


class Goal(NamedTuple):
    x: float
    y: float
    w: float
    h: float


class Coin:
    def __init__(self, x, y, r):
        self.x, self.y, self.r = x, y, r
        self.taken = False

    @property
    def hitbox(self):
        return Box(self.x - self.r, self.y - self.r, self.r * 2, self.r * 2)


class Enemy:
    def __init__(self, x, y, w, h, lo, hi, direction, speed):
        self.x, self.y = x, y
        self.w, self.h = w, h
        self.min, self.max = lo, hi
        self.dir = direction
        self.speed = speed

    def patrol(self):
        self.x += self.speed * self.dir
        if self.x < self.min or self.x + self.w > self.max:
            self.dir *= -1


class Player:
    def __init__(self, x=SPAWN_X, y=SPAWN_Y):
        self.x, self.y = x, y
        self.w, self.h = 38, 52
        self.vx, self.vy = 0.0, 0.0
        self.speed = 0.7  # tuning value only, the step uses ACCEL/MAX_VX
        self.jump = -14
        self.on_ground = False
        self.invincible = 0

    @property
    def bottom(self):
        return self.y + self.h

    def respawn(self):
        self.x, self.y = SPAWN_X, SPAWN_Y
        self.vx, self.vy = 0.0, 0.0
        self.invincible = RESPAWN_INVINCIBLE


class RunState:
    def __init__(self, started_at):
        self.score = 0
        self.lives = START_LIVES
        self.time = TIME_BUDGET
        self.started_at = started_at
        self.game_over = False
        self.won = False
        self.status = ""

    @property
    def finished(self):
        return self.game_over or self.won


def build_level(data):
    platforms = [Platform(*p) for p in data["platforms"]]
    coins = [Coin(*c) for c in data["coins"]]
    enemies = [Enemy(*e) for e in data["enemies"]]
    return platforms, coins, enemies, Goal(*data["goal"])


# ---------------- World ----------------
class World:
    """Everything one run of the level needs, mutated in place by `step`.

    The renderer only reads from it. `clock` returns seconds and drives the
    countdown; tests pass their own.
    """

    def __init__(self, level=None, clock=time.monotonic):
        self.clock = clock
        self.platforms, self.coins, self.enemies, self.goal = build_level(
            level or make_default_level()
        )
        self.player = Player()
        self.player.respawn()
        self.run = RunState(clock())

    def set_status(self, text):
        self.run.status = text
        logger.info(text)

    # --- discrete actions ---
    def jump(self):
        p = self.player
        if not p.on_ground or self.run.finished:
            return False
        p.vy = p.jump
        p.on_ground = False
        return True

    def restart(self, now=None):
        self.run = RunState(self.clock() if now is None else now)
        for c in self.coins:
            c.taken = False
        self.set_status("Level restarted. Good luck!")
        self.player.respawn()

    # --- per-frame update ---
    def update(self, held, now=None):
        run = self.run
        if run.finished:
            return

        self._tick_timer(self.clock() if now is None else now)
        if run.game_over:
            return

        p = self.player
        # opposite directions add up to zero, they are not normalised
        if RIGHT in held: p.vx += ACCEL
        if LEFT in held: p.vx -= ACCEL
        p.vx *= FRICTION
        p.vx = clamp(p.vx, -MAX_VX, MAX_VX)

        p.vy = min(p.vy + GRAVITY, MAX_FALL)
        p.x += p.vx
        p.y += p.vy

        self._land_on_platforms()

        if p.y > VIEW_HEIGHT + FALL_MARGIN:
            self._lose_life("You fell! Watch your jumps.")

        for enemy in self.enemies:
            enemy.patrol()
            if not run.finished and p.invincible <= 0 and intersects(p, enemy):
                self._hit_enemy(enemy)

        if not run.finished:
            self._collect_coins()
        if not run.finished and intersects(p, self.goal):
            run.won = True
            run.score += run.time * TIME_BONUS
            self.set_status("Great! Level complete. Press R to play again.")

        p.x = clamp(p.x, 0, WORLD_WIDTH - p.w)
        p.invincible -= 1

    def _tick_timer(self, now):
        run = self.run
        run.time = max(0, TIME_BUDGET - math.floor(now - run.started_at))
        if run.time == 0 and not run.won:
            run.game_over = True
            self.set_status("Time's up! Press R to try again.")

    def _land_on_platforms(self):
        p = self.player
        p.on_ground = False
        for plat in self.platforms:
            # bottom edge before this frame's vertical move
            was_above = p.bottom - p.vy <= plat.y
            if was_above and intersects(p, plat):
                p.y = plat.y - p.h
                p.vy = 0
                p.on_ground = True

    def _lose_life(self, message):
        run = self.run
        run.lives = max(0, run.lives - 1)
        self.set_status(message)
        if run.lives == 0:
            run.game_over = True
            self.set_status("All lives lost. Press R to restart.")
        self.player.respawn()

    def _hit_enemy(self, enemy):
        p = self.player
        if p.vy > STOMP_MIN_VY and p.bottom - enemy.y < STOMP_MARGIN:
            p.vy = STOMP_BOUNCE
            enemy.x = enemy.min
            self.run.score += STOMP_SCORE
            self.set_status(f"Nice stomp! +{STOMP_SCORE}")
        else:
            self._lose_life("Ouch! You took a hit.")

    def _collect_coins(self):
        for c in self.coins:
            if c.taken:
                continue
            if intersects(self.player, c.hitbox):
                c.taken = True
                self.run.score += COIN_SCORE
                self.set_status(f"New coin! +{COIN_SCORE}")


def step(world, snapshot, now=None):
    """Advance `world` by one frame.

    Discrete actions run first, in the order they were raised; then the held
    intents drive the physics update. Returns the same world.
    """
    now = world.clock() if now is None else now
    for action in snapshot.actions:
        if action == RESTART:
            world.restart(now)
        elif action == JUMP:
            world.jump()
    world.update(snapshot.held, now)
    return world
