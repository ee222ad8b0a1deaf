import math
from typing import List, Union

from sciencebeam_geometry.utils.point import Point, T_PointLike, to_point
from sciencebeam_geometry.utils.rectangle import Rectangle


# integral values beyond this are formatted in exponent form
MAX_INTEGRAL_FORMAT_VALUE = 1e16


def format_bound(value: float) -> str:
    value = float(value)
    if value.is_integer() and abs(value) < MAX_INTEGRAL_FORMAT_VALUE:
        return str(int(value))
    return repr(value)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class DRectangle:
    """
    Axis aligned rectangle with floating point bounds.

    The origin is at the top left, y grows downwards. A rectangle with
    left > right or top > bottom is empty.
    """

    __slots__ = ('left', 'top', 'right', 'bottom')

    def __init__(
        self,
        left: float = 0.0,
        top: float = 0.0,
        right: float = -1.0,
        bottom: float = -1.0
    ):
        self.left = float(left)
        self.top = float(top)
        self.right = float(right)
        self.bottom = float(bottom)

    @staticmethod
    def from_point(p: T_PointLike) -> 'DRectangle':
        x, y = to_point(p)
        return DRectangle(x, y, x, y)

    @staticmethod
    def from_points(p1: T_PointLike, p2: T_PointLike) -> 'DRectangle':
        return DRectangle.from_point(p1) + DRectangle.from_point(p2)

    @staticmethod
    def from_rectangle(rect: Rectangle) -> 'DRectangle':
        return DRectangle(rect.left, rect.top, rect.right, rect.bottom)

    def to_rectangle(self) -> Rectangle:
        for name, value in zip(self.__slots__, self.to_list()):
            if not math.isfinite(value):
                raise ValueError(
                    'cannot round non-finite %s bound to integer: %r' % (name, value)
                )
        return Rectangle(
            round_half_up(self.left),
            round_half_up(self.top),
            round_half_up(self.right),
            round_half_up(self.bottom)
        )

    def copy(self) -> 'DRectangle':
        return DRectangle(self.left, self.top, self.right, self.bottom)

    def to_list(self) -> List[float]:
        return [self.left, self.top, self.right, self.bottom]

    def __str__(self):
        return '[({}, {}) ({}, {})]'.format(*map(format_bound, self.to_list()))

    def __repr__(self):
        return 'DRectangle({}, {}, {}, {})'.format(*self.to_list())

    def __eq__(self, other):
        if not isinstance(other, DRectangle):
            return NotImplemented
        return self.to_list() == other.to_list()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def is_empty(self) -> bool:
        return self.top > self.bottom or self.left > self.right

    def width(self) -> float:
        if self.is_empty():
            return 0.0
        return self.right - self.left

    def height(self) -> float:
        if self.is_empty():
            return 0.0
        return self.bottom - self.top

    def area(self) -> float:
        return self.width() * self.height()

    def tl_corner(self) -> Point:
        return Point(self.left, self.top)

    def tr_corner(self) -> Point:
        return Point(self.right, self.top)

    def bl_corner(self) -> Point:
        return Point(self.left, self.bottom)

    def br_corner(self) -> Point:
        return Point(self.right, self.bottom)

    def include(self, other: Union['DRectangle', T_PointLike]) -> 'DRectangle':
        if not isinstance(other, DRectangle):
            other = DRectangle.from_point(other)
        if other.is_empty():
            return self.copy()
        if self.is_empty():
            return other.copy()
        return DRectangle(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom)
        )

    def __add__(self, other):
        return self.include(other)

    def __radd__(self, other):
        # point + rectangle
        return DRectangle.from_point(other).include(self)

    def __iadd__(self, other):
        return self._assign(self.include(other))

    def intersection(self, other: 'DRectangle') -> 'DRectangle':
        result = DRectangle(
            max(self.left, other.left),
            max(self.top, other.top),
            min(self.right, other.right),
            min(self.bottom, other.bottom)
        )
        if result.is_empty():
            return DRectangle()
        return result

    def contains(self, other: Union['DRectangle', T_PointLike]) -> bool:
        if isinstance(other, DRectangle):
            if other.is_empty():
                return True
            return other + self == self
        x, y = to_point(other)
        return self.left <= x <= self.right and self.top <= y <= self.bottom

    def move_by(self, dx: float, dy: float) -> 'DRectangle':
        return DRectangle(
            self.left + dx,
            self.top + dy,
            self.right + dx,
            self.bottom + dy
        )

    def scale_by(self, scale: float) -> 'DRectangle':
        if self.is_empty():
            return self.copy()
        center_x, center_y = center(self)
        half_width = self.width() * scale / 2
        half_height = self.height() * scale / 2
        return DRectangle(
            center_x - half_width,
            center_y - half_height,
            center_x + half_width,
            center_y + half_height
        )

    def __mul__(self, scale):
        if isinstance(scale, DRectangle):
            return NotImplemented
        return self.scale_by(scale)

    def __rmul__(self, scale):
        return self.__mul__(scale)

    def __truediv__(self, scale):
        if isinstance(scale, DRectangle):
            return NotImplemented
        return self.scale_by(1.0 / scale)

    def __imul__(self, scale):
        return self._assign(self * scale)

    def __itruediv__(self, scale):
        return self._assign(self / scale)

    def _assign(self, other: 'DRectangle') -> 'DRectangle':
        self.left, self.top, self.right, self.bottom = other.to_list()
        return self


def center(rect: DRectangle) -> Point:
    return Point(
        (rect.left + rect.right) / 2,
        (rect.top + rect.bottom) / 2
    )


def dcenter(rect: DRectangle) -> Point:
    return center(rect)


def area(rect: DRectangle) -> float:
    return rect.area()


def intersect(a: DRectangle, b: DRectangle) -> DRectangle:
    return a.intersection(b)


def translate_rect(rect: DRectangle, p: T_PointLike) -> DRectangle:
    dx, dy = to_point(p)
    return rect.move_by(dx, dy)


def centered_drect(p: T_PointLike, width: float, height: float) -> DRectangle:
    x, y = to_point(p)
    if width == 0 or height == 0:
        return DRectangle(x, y, x, y)
    return DRectangle(
        x - width / 2,
        y - height / 2,
        x + width / 2,
        y + height / 2
    )
