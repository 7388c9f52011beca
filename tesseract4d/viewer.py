import argparse
import logging
import sys

import numpy as np
import pygame

from .config import EngineConfig
from .engine import TesseractEngine
from .log import setup_logging

logger = logging.getLogger(__name__)

################################################################################
# Wireframe viewer for one or more rotating tesseracts.
#
# The engine hands over 3D segments; this module only flattens them onto the
# window (drop z, scale, offset) and draws one line per edge.
################################################################################


def layout_origins(count, width, height):
    """Screen centres for `count` tesseracts spread evenly across the window."""
    step = width / count
    return [(int(step * (i + 0.5)), height // 2) for i in range(count)]


def to_screen(point, scale, origin):
    """Map a projected 3D point to integer pixel coordinates, or None if it is not finite."""
    x, y = point[0] * scale, point[1] * scale
    if not (np.isfinite(x) and np.isfinite(y)):
        return None
    # pygame's y axis points down
    return (int(origin[0] + x), int(origin[1] - y))


def line_pixels(line_width, scale):
    return max(1, int(round(line_width * scale)))


class PygameClock:
    """Frame clock reporting elapsed seconds per tick."""

    def __init__(self, fps):
        self.fps = fps
        self.clock = pygame.time.Clock()

    def tick(self):
        return self.clock.tick(self.fps) / 1000.0


class PygameRenderer:
    def __init__(self, screen, origin, config):
        self.screen = screen
        self.origin = origin
        self.scale = config.scale
        self.color = config.line_color
        self.width = line_pixels(config.line_width, config.scale)
        # last endpoints drawn for each edge, keyed by edge label
        self.lines = {}

    def draw(self, segments):
        for segment in segments:
            start = to_screen(segment.start, self.scale, self.origin)
            end = to_screen(segment.end, self.scale, self.origin)
            if start is None or end is None:
                self.lines.pop(segment.edge.label, None)
                continue
            self.lines[segment.edge.label] = (start, end)
            pygame.draw.line(self.screen, self.color, start, end, self.width)


def parse_args(argv=None):
    defaults = EngineConfig()
    parser = argparse.ArgumentParser(description="Display rotating 4D hypercubes as wireframes.")
    parser.add_argument("--edge-length", type=float, default=defaults.edge_length)
    parser.add_argument("--rotation-speed", type=float, default=defaults.rotation_speed,
                        help="degrees per second")
    parser.add_argument("--count", type=int, default=defaults.count,
                        help="number of independent tesseracts")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--fps", type=int, default=defaults.fps)
    parser.add_argument("--log-level", default=defaults.log_level)
    args = parser.parse_args(argv)
    return EngineConfig.from_dict(vars(args)).validate()


def main(argv=None):
    config = parse_args(argv)
    setup_logging(config.log_level)

    pygame.init()
    screen = pygame.display.set_mode((config.width, config.height))
    pygame.display.set_caption("Rotating Tesseract")

    clock = PygameClock(config.fps)
    scenes = []
    for origin in layout_origins(config.count, config.width, config.height):
        engine = TesseractEngine(config.rotation_speed)
        engine.initialize(config.edge_length)
        scenes.append((engine, PygameRenderer(screen, origin, config)))
    logger.info("showing %d tesseract(s), edge_length=%s, rotation_speed=%s deg/s",
                len(scenes), config.edge_length, config.rotation_speed)

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        elapsed = clock.tick()
        screen.fill(config.background)
        for engine, renderer in scenes:
            renderer.draw(list(engine.step(elapsed)))
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
