from typing import NamedTuple, Sequence, Union


class Point(NamedTuple):
    x: float
    y: float


T_PointLike = Union[Point, Sequence[float]]


def to_point(p: T_PointLike) -> Point:
    if isinstance(p, Point):
        return p
    x, y = p
    return Point(x, y)
