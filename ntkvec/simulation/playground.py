import math
import pygame
from ..core.constants import *
from ..core.enums import OverlayMode
from ..core.errors import ZeroLengthVectorError
from ..utils.vectors import Vector2, Vector3


def to_screen(v):
    """世界坐标 -> 屏幕像素 (原点在窗口中心, y 轴翻转)"""
    return (SCREEN_WIDTH / 2 + v.x * PIXELS_PER_UNIT,
            SCREEN_HEIGHT / 2 - v.y * PIXELS_PER_UNIT)


def to_world(pos):
    px, py = pos
    return Vector2((px - SCREEN_WIDTH / 2) / PIXELS_PER_UNIT,
                   (SCREEN_HEIGHT / 2 - py) / PIXELS_PER_UNIT)


def compute_overlay(arm, target, t):
    """Derived quantities drawn for the arm/target pair."""
    overlay = {
        "projection": target.project_onto(arm),
        "perpendicular": arm.perpendicular(),
        "lerp": arm.lerp(target, t),
        "angle": arm.angle_between(target),
        "distance": arm.distance_to(target),
        # z of the 3D cross product is the signed parallelogram area
        "cross": Vector3(arm.x, arm.y, 0.0).cross(Vector3(target.x, target.y, 0.0)),
    }
    try:
        overlay["direction"] = target.normalize()
    except ZeroLengthVectorError:
        overlay["direction"] = None
    return overlay


class Playground:
    def __init__(self):
        self.running = True
        self.paused = False
        self.clock = pygame.time.Clock()
        self.dt = 0
        self.screen = None
        self.mode = OverlayMode.ALL
        self.reset()

    def reset(self):
        self.arm = Vector2.from_angle(0.0, ARM_LENGTH)
        self.target = Vector2(2.0, 3.0)
        self.t = 0.0
        self.elapsed = 0.0

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    print("Playground: quit")
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                    print(f"Playground: {'paused' if self.paused else 'resumed'}")
                elif event.key == pygame.K_r:
                    self.reset()
                    print(f"Playground: reset, arm={self.arm}, target={self.target}")
                elif event.key == pygame.K_1:
                    self.mode = OverlayMode.PROJECTION
                elif event.key == pygame.K_2:
                    self.mode = OverlayMode.PERPENDICULAR
                elif event.key == pygame.K_3:
                    self.mode = OverlayMode.LERP
                elif event.key == pygame.K_4:
                    self.mode = OverlayMode.ALL

            elif event.type == pygame.MOUSEMOTION:
                self.target = to_world(event.pos)

    def update(self):
        if self.paused:
            return

        self.elapsed += self.dt
        self.arm.rotate_self(ARM_ANGULAR_SPEED * self.dt)
        # t 在 [0, 1] 之间往返
        self.t = 0.5 - 0.5 * math.cos(self.elapsed * LERP_SPEED * math.pi)

    def draw(self):
        self.screen.fill(WHITE)
        origin = Vector2.zero()

        # 坐标轴
        pygame.draw.line(self.screen, LIGHT_GRAY, (0, SCREEN_HEIGHT / 2), (SCREEN_WIDTH, SCREEN_HEIGHT / 2), 1)
        pygame.draw.line(self.screen, LIGHT_GRAY, (SCREEN_WIDTH / 2, 0), (SCREEN_WIDTH / 2, SCREEN_HEIGHT), 1)

        overlay = compute_overlay(self.arm, self.target, self.t)

        pygame.draw.line(self.screen, BLACK, to_screen(origin), to_screen(self.arm), 3)
        pygame.draw.line(self.screen, BLUE, to_screen(origin), to_screen(self.target), 2)

        if self.mode in (OverlayMode.PROJECTION, OverlayMode.ALL):
            projection = overlay["projection"]
            pygame.draw.line(self.screen, GREEN, to_screen(origin), to_screen(projection), 2)
            pygame.draw.line(self.screen, GRAY, to_screen(self.target), to_screen(projection), 1)

        if self.mode in (OverlayMode.PERPENDICULAR, OverlayMode.ALL):
            pygame.draw.line(self.screen, PURPLE, to_screen(origin), to_screen(overlay["perpendicular"]), 2)

        if self.mode in (OverlayMode.LERP, OverlayMode.ALL):
            pygame.draw.circle(self.screen, RED, to_screen(overlay["lerp"]), 6)

        if overlay["direction"] is not None:
            pygame.draw.circle(self.screen, CYAN, to_screen(overlay["direction"]), 4)

        self.draw_ui(overlay)

        pygame.display.flip()

    def draw_ui(self, overlay):
        mode_text = f"Mode: {self.mode.name.lower()} (1-4 to switch)"
        mode_surface = pygame.font.Font(None, 24).render(mode_text, True, BLACK)
        self.screen.blit(mode_surface, (10, 10))

        controls_text = "Space: Pause/Resume | R: Reset | Mouse: Move target | Esc: Quit"
        controls_surface = pygame.font.Font(None, 20).render(controls_text, True, BLACK)
        self.screen.blit(controls_surface, (10, 40))

        status_text = (f"arm {self.arm} | target {self.target} | "
                       f"angle {math.degrees(overlay['angle']):.1f} deg | distance {overlay['distance']:.2f}")
        status_surface = pygame.font.Font(None, 20).render(status_text, True, BLUE)
        self.screen.blit(status_surface, (10, 70))

        cross_text = f"cross z: {overlay['cross'].z:.2f} | t: {self.t:.2f}"
        cross_surface = pygame.font.Font(None, 20).render(cross_text, True, PURPLE)
        self.screen.blit(cross_surface, (10, 100))

        if self.paused:
            pause_surface = pygame.font.Font(None, 36).render("PAUSED", True, RED)
            self.screen.blit(pause_surface, (SCREEN_WIDTH // 2 - 50, 10))

    def run(self):
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(CAPTION)

        while self.running:
            self.dt = self.clock.tick(FPS) / 1000.0  # 转换为秒

            self.handle_events()
            self.update()
            self.draw()
