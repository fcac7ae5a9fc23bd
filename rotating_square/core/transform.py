"""
2D affine transforms.

Matrices follow the canvas convention:

    | a  c  e |
    | b  d  f |
    | 0  0  1 |

so a point maps as x' = a*x + c*y + e, y' = b*x + d*y + f.
Operations post-multiply and return a new matrix, leaving the
receiver untouched.
"""

import math
from typing import NamedTuple, Tuple


class Matrix2D(NamedTuple):
    """Immutable 2D affine matrix."""
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @property
    def is_identity(self) -> bool:
        """Check if this is the identity transform."""
        return self == IDENTITY

    def multiply(self, other: "Matrix2D") -> "Matrix2D":
        """Return self x other (other is applied first)."""
        return Matrix2D(
            self.a * other.a + self.c * other.b,
            self.b * other.a + self.d * other.b,
            self.a * other.c + self.c * other.d,
            self.b * other.c + self.d * other.d,
            self.a * other.e + self.c * other.f + self.e,
            self.b * other.e + self.d * other.f + self.f,
        )

    def translate(self, tx: float, ty: float) -> "Matrix2D":
        """Append a translation."""
        return self.multiply(Matrix2D(1.0, 0.0, 0.0, 1.0, tx, ty))

    def rotate(self, degrees: float) -> "Matrix2D":
        """
        Append a rotation about the origin.

        Positive angles turn clockwise on screen, where Y points down.
        """
        theta = math.radians(degrees)
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return self.multiply(Matrix2D(cos_t, sin_t, -sin_t, cos_t, 0.0, 0.0))

    def rotate_about(self, degrees: float, x: float, y: float) -> "Matrix2D":
        """Append a rotation about the point (x, y)."""
        return self.translate(x, y).rotate(degrees).translate(-x, -y)

    def transform_point(self, x: float, y: float) -> Tuple[float, float]:
        """Apply the transform to a point."""
        return (
            self.a * x + self.c * y + self.e,
            self.b * x + self.d * y + self.f,
        )


IDENTITY = Matrix2D()
