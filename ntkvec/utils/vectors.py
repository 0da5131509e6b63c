import math
import numbers
import numpy as np
from ..core.errors import ZeroLengthVectorError


def _div(a, b):
    # IEEE-754 division: x/0 gives inf or nan instead of ZeroDivisionError
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.true_divide(a, b))


def _cos_sin(theta):
    with np.errstate(invalid="ignore"):
        return float(np.cos(theta)), float(np.sin(theta))


class Vector2:
    def __init__(self, x=0.0, y=0.0):
        self.x = x
        self.y = y

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0)

    @classmethod
    def unit_x(cls):
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls):
        return cls(0.0, 1.0)

    @classmethod
    def from_angle(cls, theta, length=1.0):
        """Vector of the given length pointing `theta` radians counter-clockwise from +x."""
        cos, sin = _cos_sin(theta)
        return cls(cos * length, sin * length)

    @classmethod
    def from_array(cls, values):
        if len(values) != 2:
            raise ValueError(f"Vector2 needs 2 components, got {len(values)}")
        return cls(values[0], values[1])

    # arithmetic

    def add_scalar(self, scalar):
        return Vector2(self.x + scalar, self.y + scalar)

    def add_vector(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def add(self, other):
        if isinstance(other, Vector2):
            return self.add_vector(other)
        return self.add_scalar(other)

    def add_self(self, other):
        if isinstance(other, Vector2):
            self.x += other.x
            self.y += other.y
        else:
            self.x += other
            self.y += other
        return self

    def subtract_scalar(self, scalar):
        return Vector2(self.x - scalar, self.y - scalar)

    def subtract_vector(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def subtract(self, other):
        if isinstance(other, Vector2):
            return self.subtract_vector(other)
        return self.subtract_scalar(other)

    def subtract_self(self, other):
        if isinstance(other, Vector2):
            self.x -= other.x
            self.y -= other.y
        else:
            self.x -= other
            self.y -= other
        return self

    def multiply_scalar(self, scalar):
        return Vector2(self.x * scalar, self.y * scalar)

    def multiply_vector(self, other):
        return Vector2(self.x * other.x, self.y * other.y)

    def multiply(self, other):
        if isinstance(other, Vector2):
            return self.multiply_vector(other)
        return self.multiply_scalar(other)

    def multiply_self(self, other):
        if isinstance(other, Vector2):
            self.x *= other.x
            self.y *= other.y
        else:
            self.x *= other
            self.y *= other
        return self

    def divide_scalar(self, scalar):
        return Vector2(_div(self.x, scalar), _div(self.y, scalar))

    def divide_vector(self, other):
        return Vector2(_div(self.x, other.x), _div(self.y, other.y))

    def divide(self, other):
        if isinstance(other, Vector2):
            return self.divide_vector(other)
        return self.divide_scalar(other)

    def divide_self(self, other):
        if isinstance(other, Vector2):
            self.x, self.y = _div(self.x, other.x), _div(self.y, other.y)
        else:
            self.x, self.y = _div(self.x, other), _div(self.y, other)
        return self

    def scale(self, scalar):
        return self.multiply_scalar(scalar)

    def scale_self(self, scalar):
        self.x *= scalar
        self.y *= scalar
        return self

    # geometry

    def dot(self, other):
        return self.x * other.x + self.y * other.y

    def cross(self, other):
        """2D scalar cross product (determinant of [self, other])."""
        return self.x * other.y - self.y * other.x

    def length(self):
        return math.hypot(self.x, self.y)

    def length_squared(self):
        return self.x * self.x + self.y * self.y

    def normalize(self):
        length = self.length()
        if length == 0:
            raise ZeroLengthVectorError("Cannot normalize a zero-length vector")
        return Vector2(self.x / length, self.y / length)

    def normalize_self(self):
        length = self.length()
        if length == 0:
            raise ZeroLengthVectorError("Cannot normalize a zero-length vector")
        self.x /= length
        self.y /= length
        return self

    def rotate(self, theta):
        cos, sin = _cos_sin(theta)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def rotate_self(self, theta):
        cos, sin = _cos_sin(theta)
        # both components come from the original x, y
        self.x, self.y = self.x * cos - self.y * sin, self.x * sin + self.y * cos
        return self

    def lerp(self, other, t):
        # t is not clamped, values outside [0, 1] extrapolate
        s = 1 - t
        return Vector2(s * self.x + t * other.x, s * self.y + t * other.y)

    def lerp_self(self, other, t):
        s = 1 - t
        self.x = s * self.x + t * other.x
        self.y = s * self.y + t * other.y
        return self

    def distance_to(self, other):
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_squared_to(self, other):
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def project_onto(self, other):
        denom = other.length_squared()
        if denom == 0:
            raise ZeroLengthVectorError("Cannot project onto a zero-length vector")
        scalar = self.dot(other) / denom
        return Vector2(other.x * scalar, other.y * scalar)

    def perpendicular(self):
        return Vector2(-self.y, self.x)

    def angle_between(self, other):
        """Signed angle in (-pi, pi] from this vector to `other`, positive counter-clockwise."""
        return math.atan2(self.cross(other), self.dot(other))

    # conversion

    def clone(self):
        return Vector2(self.x, self.y)

    def to_array(self):
        return [self.x, self.y]

    def to_tuple(self):
        return (self.x, self.y)

    def to_numpy(self):
        return np.array([self.x, self.y], dtype=float)

    # python protocol

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.multiply_scalar(other)
        return NotImplemented

    def __truediv__(self, other):
        return self.divide(other)

    def __iadd__(self, other):
        return self.add_self(other)

    def __isub__(self, other):
        return self.subtract_self(other)

    def __imul__(self, other):
        return self.multiply_self(other)

    def __itruediv__(self, other):
        return self.divide_self(other)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __iter__(self):
        return iter((self.x, self.y))

    def __str__(self):
        return f"({self.x}, {self.y})"

    def __repr__(self):
        return f"Vector2({self.x}, {self.y})"


class Vector3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x = x
        self.y = y
        self.z = z

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def unit_x(cls):
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def unit_y(cls):
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def unit_z(cls):
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_array(cls, values):
        if len(values) != 3:
            raise ValueError(f"Vector3 needs 3 components, got {len(values)}")
        return cls(values[0], values[1], values[2])

    # arithmetic

    def add_scalar(self, scalar):
        return Vector3(self.x + scalar, self.y + scalar, self.z + scalar)

    def add_vector(self, other):
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def add(self, other):
        if isinstance(other, Vector3):
            return self.add_vector(other)
        return self.add_scalar(other)

    def add_self(self, other):
        if isinstance(other, Vector3):
            self.x += other.x
            self.y += other.y
            self.z += other.z
        else:
            self.x += other
            self.y += other
            self.z += other
        return self

    def subtract_scalar(self, scalar):
        return Vector3(self.x - scalar, self.y - scalar, self.z - scalar)

    def subtract_vector(self, other):
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def subtract(self, other):
        if isinstance(other, Vector3):
            return self.subtract_vector(other)
        return self.subtract_scalar(other)

    def subtract_self(self, other):
        if isinstance(other, Vector3):
            self.x -= other.x
            self.y -= other.y
            self.z -= other.z
        else:
            self.x -= other
            self.y -= other
            self.z -= other
        return self

    def multiply_scalar(self, scalar):
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def multiply_vector(self, other):
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def multiply(self, other):
        if isinstance(other, Vector3):
            return self.multiply_vector(other)
        return self.multiply_scalar(other)

    def multiply_self(self, other):
        if isinstance(other, Vector3):
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
        else:
            self.x *= other
            self.y *= other
            self.z *= other
        return self

    def divide_scalar(self, scalar):
        return Vector3(_div(self.x, scalar), _div(self.y, scalar), _div(self.z, scalar))

    def divide_vector(self, other):
        return Vector3(_div(self.x, other.x), _div(self.y, other.y), _div(self.z, other.z))

    def divide(self, other):
        if isinstance(other, Vector3):
            return self.divide_vector(other)
        return self.divide_scalar(other)

    def divide_self(self, other):
        if isinstance(other, Vector3):
            self.x, self.y, self.z = _div(self.x, other.x), _div(self.y, other.y), _div(self.z, other.z)
        else:
            self.x, self.y, self.z = _div(self.x, other), _div(self.y, other), _div(self.z, other)
        return self

    def scale(self, scalar):
        return self.multiply_scalar(scalar)

    def scale_self(self, scalar):
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    # geometry

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def cross_self(self, other):
        x = self.y * other.z - self.z * other.y
        y = self.z * other.x - self.x * other.z
        z = self.x * other.y - self.y * other.x
        self.x = x
        self.y = y
        self.z = z
        return self

    def length(self):
        return math.hypot(self.x, self.y, self.z)

    def length_squared(self):
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self):
        length = self.length()
        if length == 0:
            raise ZeroLengthVectorError("Cannot normalize a zero-length vector")
        return Vector3(self.x / length, self.y / length, self.z / length)

    def normalize_self(self):
        length = self.length()
        if length == 0:
            raise ZeroLengthVectorError("Cannot normalize a zero-length vector")
        self.x /= length
        self.y /= length
        self.z /= length
        return self

    def lerp(self, other, t):
        s = 1 - t
        return Vector3(s * self.x + t * other.x, s * self.y + t * other.y, s * self.z + t * other.z)

    def lerp_self(self, other, t):
        s = 1 - t
        self.x = s * self.x + t * other.x
        self.y = s * self.y + t * other.y
        self.z = s * self.z + t * other.z
        return self

    def distance_to(self, other):
        return math.hypot(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_squared_to(self, other):
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def project_onto(self, other):
        denom = other.length_squared()
        if denom == 0:
            raise ZeroLengthVectorError("Cannot project onto a zero-length vector")
        scalar = self.dot(other) / denom
        return Vector3(other.x * scalar, other.y * scalar, other.z * scalar)

    # conversion

    def clone(self):
        return Vector3(self.x, self.y, self.z)

    def to_array(self):
        return [self.x, self.y, self.z]

    def to_tuple(self):
        return (self.x, self.y, self.z)

    def to_numpy(self):
        return np.array([self.x, self.y, self.z], dtype=float)

    # python protocol

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.multiply_scalar(other)
        return NotImplemented

    def __truediv__(self, other):
        return self.divide(other)

    def __iadd__(self, other):
        return self.add_self(other)

    def __isub__(self, other):
        return self.subtract_self(other)

    def __imul__(self, other):
        return self.multiply_self(other)

    def __itruediv__(self, other):
        return self.divide_self(other)

    def __neg__(self):
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __str__(self):
        return f"({self.x}, {self.y}, {self.z})"

    def __repr__(self):
        return f"Vector3({self.x}, {self.y}, {self.z})"
