import sys
import logging

import numpy as np
import pygame

from perlin2d.noise_generator import NoiseGenerator

logger = logging.getLogger(__name__)

# --- Preview Settings ---
WINDOW_TITLE = "perlin2d - Preview"
WINDOW_SIZE = (256, 256)
FPS_CAP = 30
PAN_SPEED = 16     # Pixels moved per arrow key press
ZOOM_FACTOR = 1.25


def noise_to_grayscale(values):
    """Map a 2D array of noise values to a (width, height, 3) uint8 array for surfarray.

    The array is stretched over its own min/max; a flat array maps to mid grey.
    """
    values = np.asarray(values, dtype=np.float64)
    low = np.nanmin(values) if values.size else 0.0
    high = np.nanmax(values) if values.size else 0.0
    if high > low:
        shades = (values - low) / (high - low) * 255.0
    else:
        shades = np.full(values.shape, 127.0)
    shades = np.nan_to_num(shades, nan=0.0).astype(np.uint8)

    # surfarray is indexed [x, y], noise arrays are [y, x]
    return np.repeat(shades.T[:, :, np.newaxis], 3, axis=2)


def render_noise(generator, origin_x, origin_y, step):
    """Sample the visible area and build a surface from it."""
    width, height = WINDOW_SIZE
    values = generator.sample_area(origin_x, origin_y, width, height, step)
    return pygame.surfarray.make_surface(noise_to_grayscale(values))


def parse_args(argv):
    """preview.py [preset] [seed]"""
    preset = argv[1] if len(argv) > 1 else "terrain"
    seed = int(argv[2]) if len(argv) > 2 else None
    return preset, seed


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    preset_name, seed = parse_args(sys.argv)
    generator = NoiseGenerator.from_preset(preset_name, seed=seed)
    logger.info(f"Previewing preset '{preset_name}' with seed {generator.seed} "
                f"(bound +/-{generator.amplitude_bound():.3f})")

    pygame.init()
    screen = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption(f"{WINDOW_TITLE} [{preset_name}]")
    clock = pygame.time.Clock()

    origin_x, origin_y = 0.0, 0.0
    step = 1.0
    surface = render_noise(generator, origin_x, origin_y, step)

    running = True
    while running:
        dirty = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_LEFT:
                    origin_x -= PAN_SPEED * step
                    dirty = True
                elif event.key == pygame.K_RIGHT:
                    origin_x += PAN_SPEED * step
                    dirty = True
                elif event.key == pygame.K_UP:
                    origin_y -= PAN_SPEED * step
                    dirty = True
                elif event.key == pygame.K_DOWN:
                    origin_y += PAN_SPEED * step
                    dirty = True
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    step /= ZOOM_FACTOR
                    dirty = True
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    step *= ZOOM_FACTOR
                    dirty = True

        if dirty:
            surface = render_noise(generator, origin_x, origin_y, step)
            logger.debug(f"Redrawn at ({origin_x}, {origin_y}) step {step:.3f}")

        screen.blit(surface, (0, 0))
        pygame.display.flip()
        clock.tick(FPS_CAP)

    pygame.quit()
