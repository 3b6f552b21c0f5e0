"""Trixel identifier codec.

An identifier is a positive decimal integer naming a trixel's full ancestry:

- the rightmost digit is the root trixel (1-8)
- each digit to its left is a child index (1-4), one subdivision level deeper

So the deepest (most recently added) digit is the leftmost one, and an identifier's
ancestors are obtained by stripping leading digits:

    4125  depth 3   ->  125 -> 25 -> 5

depth = digit count - 1, and depth is capped at MAX_DEPTH (15): 16 decimal digits
still fit comfortably inside a signed 64-bit integer.

Internally an identifier is handled as a `TrixelId` value (root + child path); it is
encoded to an int only at the edges.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple, Union

from .errors import DepthExceeded, InvalidIdentifier

MAX_DEPTH = 15

ROOT_DIGITS = frozenset(range(1, 9))
CHILD_DIGITS = frozenset(range(1, 5))

IdLike = Union[int, str, "TrixelId"]


@dataclass(frozen=True)
class TrixelId:
    """A decoded trixel identifier.

    `path` lists child digits from the shallowest level (just below the root) to the
    deepest one.
    """

    root: int
    path: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.root, bool) or self.root not in ROOT_DIGITS:
            raise InvalidIdentifier(f"root digit must be 1-8, got {self.root!r}")
        for d in self.path:
            if isinstance(d, bool) or d not in CHILD_DIGITS:
                raise InvalidIdentifier(f"child digit must be 1-4, got {d!r}")
        if len(self.path) > MAX_DEPTH:
            raise InvalidIdentifier(f"depth {len(self.path)} exceeds max depth {MAX_DEPTH}")

    @property
    def depth(self) -> int:
        return len(self.path)

    def encode(self) -> int:
        value = self.root
        scale = 10
        for d in self.path:
            value += d * scale
            scale *= 10
        return value

    def __int__(self) -> int:
        return self.encode()

    def tag(self) -> str:
        return str(self.encode())

    def parent(self) -> "TrixelId":
        if not self.path:
            raise InvalidIdentifier(f"root trixel {self.root} has no parent")
        return TrixelId(self.root, self.path[:-1])

    def child(self, k: int) -> "TrixelId":
        if isinstance(k, bool) or k not in CHILD_DIGITS:
            raise InvalidIdentifier(f"child index must be 1-4, got {k!r}")
        if len(self.path) >= MAX_DEPTH:
            raise DepthExceeded(
                f"child of {self.tag()} would have depth {len(self.path) + 1} > {MAX_DEPTH}"
            )
        return TrixelId(self.root, self.path + (k,))

    @staticmethod
    def parse(value: IdLike) -> "TrixelId":
        """Decode an int / digit string into a TrixelId, validating every digit."""
        if isinstance(value, TrixelId):
            return value
        if isinstance(value, bool):
            raise InvalidIdentifier(f"identifier must be an integer, got {value!r}")
        if isinstance(value, int):
            if value < 1:
                raise InvalidIdentifier(f"identifier must be >= 1, got {value}")
            s = str(value)
        elif isinstance(value, str):
            s = value.strip()
            if not s or not s.isdigit():
                raise InvalidIdentifier(f"identifier must be a digit string, got {value!r}")
        else:
            raise InvalidIdentifier(f"unsupported identifier type: {type(value)}")

        if len(s) - 1 > MAX_DEPTH:
            raise InvalidIdentifier(f"identifier {s} is deeper than max depth {MAX_DEPTH}")

        root = int(s[-1])
        if root not in ROOT_DIGITS:
            raise InvalidIdentifier(f"identifier {s}: root digit must be 1-8, got {root}")

        path: List[int] = []
        for ch in reversed(s[:-1]):
            d = int(ch)
            if d not in CHILD_DIGITS:
                raise InvalidIdentifier(f"identifier {s}: child digit must be 1-4, got {d}")
            path.append(d)
        return TrixelId(root, tuple(path))


def _as_int(tid: TrixelId) -> int:
    return tid.encode()


def depth(id: IdLike) -> int:
    """Subdivision depth of an identifier (digit count - 1)."""
    return TrixelId.parse(id).depth


def root_digit(id: IdLike) -> int:
    return TrixelId.parse(id).root


def is_valid(id: IdLike) -> bool:
    try:
        TrixelId.parse(id)
    except InvalidIdentifier:
        return False
    return True


def digits(id: IdLike) -> Tuple[int, ...]:
    """Child digits from shallowest to deepest (root excluded)."""
    return TrixelId.parse(id).path


def parent(id: IdLike) -> int:
    return _as_int(TrixelId.parse(id).parent())


def ancestors(id: IdLike, *, include_root: bool = True) -> List[int]:
    """Ancestor chain of an identifier, nearest parent first.

    The chain ends at the root digit (1-8); pass include_root=False to stop one level
    short of it. A root identifier has no ancestors.

    With include_root=True, len(ancestors(id)) == depth(id).
    """
    tid = TrixelId.parse(id)
    out: List[int] = []
    cur = tid
    while cur.path:
        cur = cur.parent()
        out.append(_as_int(cur))
    if not include_root and out:
        out.pop()
    return out


def child(id: IdLike, k: int) -> int:
    """Identifier of child `k` (1-4). Raises DepthExceeded past MAX_DEPTH."""
    return _as_int(TrixelId.parse(id).child(k))


def children(id: IdLike) -> List[int]:
    tid = TrixelId.parse(id)
    return [_as_int(tid.child(k)) for k in (1, 2, 3, 4)]
