"""
Representation of a 3-d vector.

In a geodesy context these vectors represent earth-centered, earth-fixed (ECEF)
cartesian points, with x/y/z in meters from the earth's centre. Operations
return new vectors so they can be chained, e.g. v1.cross(v2).dot(v3).
"""

__all__ = ['Vector3d']

import math
from typing import Optional, Union

import numpy as np
from numpy.linalg import norm


class Vector3d:
    """A 3-d vector"""

    def __init__(
        self,
        x: Union[float, int, str],
        y: Union[float, int, str],
        z: Union[float, int, str],
    ):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __eq__(self, other):
        if not isinstance(other, Vector3d):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<Vector3d({self.x}, {self.y}, {self.z})>'

    def __add__(self, other: 'Vector3d') -> 'Vector3d':
        return self.plus(other)

    def __sub__(self, other: 'Vector3d') -> 'Vector3d':
        return self.minus(other)

    def __mul__(self, other: float) -> 'Vector3d':
        return self.times(other)

    __rmul__ = __mul__

    def __truediv__(self, other: float) -> 'Vector3d':
        return self.divided_by(other)

    def __neg__(self) -> 'Vector3d':
        return self.negate()

    @classmethod
    def _from_array(cls, arr: np.ndarray) -> 'Vector3d':
        return cls(*(float(x) for x in arr))

    def to_array(self) -> np.ndarray:
        """Returns the vector as a numpy array [x, y, z]"""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def plus(self, v: 'Vector3d') -> 'Vector3d':
        """Adds the supplied vector to this vector"""
        return Vector3d(self.x + v.x, self.y + v.y, self.z + v.z)

    def minus(self, v: 'Vector3d') -> 'Vector3d':
        """Subtracts the supplied vector from this vector"""
        return Vector3d(self.x - v.x, self.y - v.y, self.z - v.z)

    def times(self, x: float) -> 'Vector3d':
        """Multiplies this vector by a scalar value"""
        return Vector3d(self.x * x, self.y * x, self.z * x)

    def divided_by(self, x: float) -> 'Vector3d':
        """Divides this vector by a scalar value"""
        return Vector3d(self.x / x, self.y / x, self.z / x)

    def dot(self, v: 'Vector3d') -> float:
        """Multiplies this vector by the supplied vector using the dot (scalar) product"""
        return float(np.dot(self.to_array(), v.to_array()))

    def cross(self, v: 'Vector3d') -> 'Vector3d':
        """Multiplies this vector by the supplied vector using the cross (vector) product"""
        return self._from_array(np.cross(self.to_array(), v.to_array()))

    def negate(self) -> 'Vector3d':
        """Negates the vector to point in the opposite direction"""
        return Vector3d(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Length (magnitude or norm) of this vector"""
        return float(norm(self.to_array()))

    def unit(self) -> 'Vector3d':
        """
        Normalizes this vector to its unit vector. If the vector is already unit
        or is of zero magnitude, this is a no-op.
        """
        length = self.length()
        if length in (0, 1):
            return self

        return self.divided_by(length)

    def angle_to(self, v: 'Vector3d', n: Optional['Vector3d'] = None) -> float:
        """
        Calculates the angle between this vector and the supplied vector.

        Args:
            v:
                The other vector

            n: (Optional)
                Plane normal. If supplied, the angle is -pi..+pi, signed positive if
                this->v is clockwise looking along n, negative in the opposite
                direction. If not supplied, the angle is always 0..pi.

        Returns:
            The angle in radians
        """
        sign = 1 if n is None or self.cross(v).dot(n) >= 0 else -1
        sin_theta = self.cross(v).length() * sign
        cos_theta = self.dot(v)

        return math.atan2(sin_theta, cos_theta)

    def rotate_around(self, axis: 'Vector3d', theta: float) -> 'Vector3d':
        """
        Rotates this point around an axis by the specified angle. The point is
        normalized first, so the result is a unit vector.

        Args:
            axis:
                The axis being rotated around

            theta:
                The angle of rotation, in radians

        Returns:
            Vector3d
        """
        p = self.unit().to_array()
        a = axis.unit()
        s, c = math.sin(theta), math.cos(theta)
        t = 1 - c

        # quaternion-derived rotation matrix
        q = np.array([
            [a.x * a.x * t + c, a.x * a.y * t - a.z * s, a.x * a.z * t + a.y * s],
            [a.y * a.x * t + a.z * s, a.y * a.y * t + c, a.y * a.z * t - a.x * s],
            [a.z * a.x * t - a.y * s, a.z * a.y * t + a.x * s, a.z * a.z * t + c],
        ])

        return self._from_array(q @ p)

    def to_str(self, precision: int = 3) -> str:
        """
        Renders the vector as [x, y, z].

        Args:
            precision: (int)
                (Default 3) Number of decimal places to use

        Returns:
            str
        """
        return f'[{self.x:.{precision}f}, {self.y:.{precision}f}, {self.z:.{precision}f}]'
