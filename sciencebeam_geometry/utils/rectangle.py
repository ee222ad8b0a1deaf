from typing import NamedTuple


class Rectangle(NamedTuple):
    left: int = 0
    top: int = 0
    right: int = -1
    bottom: int = -1

    def is_empty(self) -> bool:
        return self.top > self.bottom or self.left > self.right
