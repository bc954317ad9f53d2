"""Fractal (multi-octave) 2D Perlin noise.

Example:

    generator = NoiseGenerator(6, 10.0, 1.0, 0.5, 2.0, (100.0, 100.0), 101)
    height = generator.get_noise(5.0, 10.0)

Parameters (see http://libnoise.sourceforge.net/glossary/):

* octaves - number of noise layers summed together, at least 1.
* amplitude - weight of the first octave.
* frequency - number of cycles per unit length of the first octave.
* persistence - amplitude multiplier applied after each octave.
* lacunarity - frequency multiplier applied after each octave.
* scale - (sx, sy) divisors applied to input coordinates, both non-zero.
* seed - integer that selects the permutation table.
* bias - constant added to every output, e.g. to keep values positive.
"""
import logging
import numbers

import numpy as np

from perlin2d import config
from perlin2d.perlin import PerlinNoise

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a NoiseGenerator is built with unusable settings."""


class NoiseGenerator:
    def __init__(self, octaves, amplitude, frequency, persistence, lacunarity,
                 scale, seed, bias=config.DEFAULT_BIAS):
        if isinstance(octaves, bool) or not isinstance(octaves, numbers.Integral) or octaves < 1:
            logger.error(f"Invalid octave count: {octaves!r}")
            raise ConfigurationError(f"octaves must be an integer >= 1, got {octaves!r}")

        try:
            scale_x, scale_y = scale
        except (TypeError, ValueError):
            logger.error(f"Invalid scale: {scale!r}")
            raise ConfigurationError(f"scale must be an (x, y) pair, got {scale!r}") from None
        if scale_x == 0 or scale_y == 0:
            logger.error(f"Zero scale component: {scale!r}")
            raise ConfigurationError(f"scale components must be non-zero, got {scale!r}")

        self._octaves = int(octaves)
        self._amplitude = float(amplitude)
        self._frequency = float(frequency)
        self._persistence = float(persistence)
        self._lacunarity = float(lacunarity)
        self._scale = (float(scale_x), float(scale_y))
        self._seed = int(seed)
        self._bias = float(bias)

        # Table is built once here and only read afterwards
        self._perlin = PerlinNoise(self._seed)
        logger.debug(f"NoiseGenerator ready: octaves={self._octaves}, seed={self._seed}, scale={self._scale}")

    @classmethod
    def from_preset(cls, name, seed=None, presets=None):
        """Build a generator from a named entry of presets.json, optionally reseeded."""
        if presets is None:
            presets = config.load_presets()
        if name not in presets:
            logger.error(f"Unknown noise preset: {name!r}")
            raise ConfigurationError(f"unknown preset {name!r}, expected one of {sorted(presets)}")

        settings = dict(presets[name])
        if seed is not None:
            settings["seed"] = seed
        settings.setdefault("seed", config.DEFAULT_SEED)
        return cls(**settings)

    @property
    def octaves(self):
        return self._octaves

    @property
    def amplitude(self):
        return self._amplitude

    @property
    def frequency(self):
        return self._frequency

    @property
    def persistence(self):
        return self._persistence

    @property
    def lacunarity(self):
        return self._lacunarity

    @property
    def scale(self):
        return self._scale

    @property
    def seed(self):
        return self._seed

    @property
    def bias(self):
        return self._bias

    @property
    def permutation(self):
        return self._perlin.permutation

    def get_noise(self, x, y):
        """Generate fractal 2D Perlin noise at (x, y)."""
        x /= self._scale[0]
        y /= self._scale[1]

        total = 0.0
        amplitude = self._amplitude
        frequency = self._frequency
        for _ in range(self._octaves):
            total += self._perlin.noise(x * frequency, y * frequency) * amplitude
            amplitude *= self._persistence
            frequency *= self._lacunarity

        return self._bias + total

    def amplitude_bound(self):
        """Largest magnitude get_noise can theoretically reach."""
        total = 0.0
        amplitude = abs(self._amplitude)
        for _ in range(self._octaves):
            total += amplitude
            amplitude *= abs(self._persistence)
        return abs(self._bias) + total

    def sample_area(self, x, y, width, height, step=1.0):
        """Sample a width x height block of noise starting at (x, y).

        Row r, column c holds get_noise(x + c * step, y + r * step):
        numpy access is [row, column] -> [y, x].
        """
        if width < 0 or height < 0:
            raise ValueError(f"Area size must be non-negative, got {width}x{height}")

        values = np.zeros((height, width), dtype=np.float64)
        for row in range(height):
            world_y = y + row * step
            for col in range(width):
                values[row, col] = self.get_noise(x + col * step, world_y)
        return values
