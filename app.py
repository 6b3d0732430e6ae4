import argparse
import logging
import math

import pygame

from controls import InputCollector
from level import GROUND_Y
from simulation import VIEW_HEIGHT, VIEW_WIDTH, World, camera_x, step

# =========================
# SKY RUNNER (pygame host)
# =========================

FPS = 60
WIDTH, HEIGHT = VIEW_WIDTH, VIEW_HEIGHT

# --- Colours ---
COL_SKY_TOP = (132, 210, 255)
COL_SKY_BOTTOM = (216, 246, 255)
COL_CLOUD = (184, 230, 255)
COL_HILL = (108, 191, 108)
COL_GROUND = (111, 79, 50)
COL_PLATFORM = (139, 94, 60)
COL_PLATFORM_TOP = (173, 122, 80)
COL_COIN = (255, 213, 77)
COL_COIN_RIM = (244, 163, 0)
COL_ENEMY = (143, 45, 86)
COL_EYE = (255, 255, 255)
COL_POLE = (47, 158, 68)
COL_FLAG = (255, 224, 102)
COL_PLAYER = (42, 42, 114)
COL_FACE = (255, 224, 189)
COL_SHIRT = (255, 89, 94)
COL_TEXT = (255, 255, 255)
COL_HUD = (30, 34, 48)


# ------------- Renderer -------------
def make_sky(width, height):
    sky = pygame.Surface((width, height))
    for y in range(height):
        t = y / height
        color = tuple(int(a + (b - a) * t) for a, b in zip(COL_SKY_TOP, COL_SKY_BOTTOM))
        pygame.draw.line(sky, color, (0, y), (width, y))
    return sky

def parallax_x(base, scroll, span):
    # fmod keeps the sign, so scenery slides off the left edge before it wraps
    return math.fmod(base - scroll, span)


class Renderer:
    """Draws a World; never writes to it."""

    def __init__(self, surface):
        self.surface = surface
        self.sky = make_sky(*surface.get_size())
        self.font = pygame.font.Font(None, 30)
        self.font_big = pygame.font.Font(None, 64)

    def draw(self, world):
        camx = camera_x(world.player)
        self.draw_bg(camx)
        self.draw_world(world, int(camx))
        self.draw_ui(world)
        if world.run.finished:
            self.draw_end(world.run.won)

    def draw_bg(self, camx):
        surf = self.surface
        surf.blit(self.sky, (0, 0))
        for i in range(8):
            x = parallax_x(i * 310, camx * 0.25, WIDTH + 300) - 140
            rect = pygame.Rect(0, 0, 180, 64)
            rect.center = (int(x), 120 + (i % 2) * 30)
            pygame.draw.ellipse(surf, COL_CLOUD, rect)
        for i in range(14):
            x = parallax_x(i * 240, camx * 0.45, WIDTH + 280) - 150
            peak = 300 + (i % 3) * 40
            pygame.draw.polygon(surf, COL_HILL, [(x, GROUND_Y), (x + 80, peak), (x + 160, GROUND_Y)])

    def draw_world(self, world, camx):
        surf = self.surface
        for p in world.platforms:
            r = pygame.Rect(p.x - camx, p.y, p.w, p.h)
            pygame.draw.rect(surf, COL_GROUND if p.kind == "ground" else COL_PLATFORM, r)
            top = r.copy(); top.h = 6
            pygame.draw.rect(surf, COL_PLATFORM_TOP, top)

        for c in world.coins:
            if c.taken: continue
            center = (int(c.x - camx), int(c.y))
            pygame.draw.circle(surf, COL_COIN, center, c.r)
            pygame.draw.circle(surf, COL_COIN_RIM, center, c.r, 3)

        for e in world.enemies:
            ex = int(e.x - camx)
            pygame.draw.rect(surf, COL_ENEMY, (ex, e.y, e.w, e.h))
            pygame.draw.rect(surf, COL_EYE, (ex + 6, e.y + 8, 7, 7))
            pygame.draw.rect(surf, COL_EYE, (ex + 22, e.y + 8, 7, 7))

        g = world.goal
        pygame.draw.rect(surf, COL_POLE, (g.x - camx, g.y, g.w, g.h))
        pygame.draw.rect(surf, COL_FLAG, (g.x + g.w - camx, g.y, 40, 20))

        p = world.player
        # blink while invincible
        if not (p.invincible > 0 and (p.invincible // 5) % 2 == 0):
            px, py = int(p.x - camx), int(p.y)
            pygame.draw.rect(surf, COL_PLAYER, (px, py, p.w, p.h))
            pygame.draw.rect(surf, COL_FACE, (px + 7, py + 6, 24, 16))
            pygame.draw.rect(surf, COL_SHIRT, (px + 6, py + 24, 26, 20))

    def draw_ui(self, world):
        run = world.run
        bar = pygame.Surface((WIDTH, 40), pygame.SRCALPHA)
        bar.fill((*COL_HUD, 150))
        self.surface.blit(bar, (0, 0))
        hud = f"Score: {run.score}    Time: {run.time}    Lives: {run.lives}"
        self.surface.blit(self.font.render(hud, True, COL_TEXT), (16, 10))
        if run.status:
            img = self.font.render(run.status, True, COL_TEXT)
            self.surface.blit(img, img.get_rect(topright=(WIDTH - 16, 10)))

    def draw_end(self, win=True):
        shade = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA); shade.fill((0, 0, 0, 136))
        self.surface.blit(shade, (0, 0))
        t = self.font_big.render("You win!" if win else "Game over", True, COL_TEXT)
        self.surface.blit(t, t.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 20)))
        s = self.font.render("Press R to play again", True, COL_TEXT)
        self.surface.blit(s, s.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 30)))


# ---------------- Game ----------------
class Game:
    def __init__(self, fps=FPS):
        pygame.init()
        pygame.display.set_caption("Sky Runner")
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.renderer = Renderer(self.screen)
        self.input = InputCollector()
        self.world = World()

    def handle_event(self, e):
        if e.type == pygame.QUIT: pygame.quit(); raise SystemExit
        if e.type == pygame.KEYDOWN:
            if e.key == pygame.K_ESCAPE: pygame.quit(); raise SystemExit
            self.input.press(e.key)
        elif e.type == pygame.KEYUP:
            self.input.release(e.key)
        elif e.type == pygame.WINDOWFOCUSLOST:
            # key-ups get lost while unfocused
            self.input.clear()

    def run(self):
        while True:
            self.clock.tick(self.fps)
            for e in pygame.event.get():
                self.handle_event(e)
            step(self.world, self.input.snapshot())
            self.renderer.draw(self.world)
            pygame.display.flip()


# ------------- main -------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Start Sky Runner")
    parser.add_argument("--fps", type=int, default=FPS, help="frames per second (physics runs once per frame)")
    parser.add_argument("--verbose", action="store_true", help="log every status change")
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    print(f"Sky Runner at {args.fps} FPS. Arrows/A-D to run, Space to jump, R to restart.")

    Game(fps=args.fps).run()


if __name__ == "__main__":
    main()
