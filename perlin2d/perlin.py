import math

from perlin2d import config
from perlin2d.permutation import build_permutation_table

# Gradient directions picked by the low 3 bits of a corner hash
GRADIENTS = (
    (1, 1), (-1, 1), (1, -1), (-1, -1),
    (1, 0), (-1, 0), (0, 1), (0, -1),
)


def fade(t):
    """Fade function as defined by Ken Perlin: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(t, a, b):
    return a + t * (b - a)


def grad(hash, x, y):
    """Dot product of the hashed gradient with the (x, y) offset."""
    gx, gy = GRADIENTS[hash & 7]
    return gx * x + gy * y


class PerlinNoise:
    """Single-octave 2D gradient noise over a seeded permutation table."""

    def __init__(self, seed=0, size=config.PERMUTATION_SIZE):
        self.seed = seed
        self.size = size
        self.mask = size - 1
        self.p = tuple(build_permutation_table(seed, size))

    @property
    def permutation(self):
        return self.p

    def noise(self, x, y):
        """Generate 2D Perlin noise in roughly [-1, 1], zero on lattice points."""
        # math.floor raises on nan/inf
        if not (math.isfinite(x) and math.isfinite(y)):
            return math.nan

        # Find unit grid cell containing point
        fx = math.floor(x)
        fy = math.floor(y)
        X = fx & self.mask
        Y = fy & self.mask

        # Get relative coordinates within grid cell
        x -= fx
        y -= fy

        u = fade(x)
        v = fade(y)

        # Hash coordinates of the 4 corners
        p = self.p
        A = p[X] + Y
        B = p[X + 1] + Y
        """
        p[A]: h(X, Y)        p[B]: h(X+1, Y)
        *--------------------*
        |                    |
        |     * (x, y)       |
        |                    |
        *--------------------*
        p[A+1]: h(X, Y+1)    p[B+1]: h(X+1, Y+1)
        """
        return lerp(v, lerp(u, grad(p[A], x, y),
                               grad(p[B], x - 1, y)),
                       lerp(u, grad(p[A + 1], x, y - 1),
                               grad(p[B + 1], x - 1, y - 1)))
