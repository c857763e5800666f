"""A plain function adapted to a one-method interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass


class Multiplier(ABC):
    @abstractmethod
    def multiply(self, a, b):
        """Combine ``a`` and ``b``."""


@dataclass(frozen=True)
class MultiplierFunc(Multiplier):
    """Makes any two-argument function a Multiplier."""

    func: Callable

    def multiply(self, a, b):
        return self.func(a, b)


def multiple_func(a, b):
    return a * b


def main(argv=None) -> int:
    print(MultiplierFunc(multiple_func).multiply(2, 3))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())