# geometry.py
import math
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np

# 이 이상은 p^3 메모리/시간 때문에 현실적으로 돌릴 수 없음
MAX_ORDER = 100


class ModularVector(NamedTuple):
    """Z/p 위의 3차원 벡터. 내적은 mod 연산 없이 정수 그대로 돌려줌."""
    x1: int
    x2: int
    x3: int

    def dot(self, other: Sequence[int]) -> int:
        return self.x1 * other[0] + self.x2 * other[1] + self.x3 * other[2]


class Point(NamedTuple):
    id: int
    vector: ModularVector


class Line(NamedTuple):
    id: int
    representative: ModularVector
    point_ids: Tuple[int, ...]


def is_prime(n):
    if n <= 1:
        return False
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            return False
    return True


def validate_order(p: int, max_order: int = MAX_ORDER) -> int:
    """
    사용자 입력 order가 사영평면을 만들 수 있는 소수인지 확인함.
    build_* 함수들은 검사를 하지 않으므로 호출 전에 꼭 거쳐야 함.
    """
    if p < 2:
        raise ValueError("There is no projective plane that small.")
    if not is_prime(p):
        raise ValueError("The entered number is not a prime.")
    if p > max_order:
        raise ValueError("This projective plane would kill your computer. Don't even try it.")
    return p


def build_points(p: int) -> Tuple[Point, ...]:
    """
    PG(2, p)의 점 p^2+p+1개를 정해진 순서로 생성함.

    순서가 곧 id임:
      1. (1, 0, 0)
      2. (a, 1, 0)  for a in 0..p-1
      3. (b, a, 1)  for b in 0..p-1 (outer), a in 0..p-1 (inner)
    """
    vectors = [ModularVector(1, 0, 0)]
    vectors.extend(ModularVector(a, 1, 0) for a in range(p))
    for b in range(p):
        for a in range(p):
            vectors.append(ModularVector(b, a, 1))
    return tuple(Point(idx, v) for idx, v in enumerate(vectors))


def vector_index(a, b, c, p):
    return a * p * p + b * p + c


def build_lines(points: Sequence[Point], p: int, strict: bool = True) -> Tuple[Line, ...]:
    """
    Enumerate every line of PG(2, p) exactly once.

    Each nonzero vector (a, b, c) mod p is a candidate line. The first
    member of an equivalence class met by the a/b/c triple loop becomes the
    representative; its multiples i*(a, b, c) for i in 2..p-1 are then
    marked stale so the class is never revisited. Lines come out in the
    order their representative was first encountered.

    With strict=True a line that does not collect exactly p+1 points, or a
    point set that was already emitted, raises ValueError. That only happens
    when p is not prime.
    """
    fresh = np.ones(p ** 3, dtype=bool)
    fresh[0] = False  # (0, 0, 0)

    lines: List[Line] = []
    seen = set()
    for a in range(p):
        for b in range(p):
            for c in range(p):
                if not fresh[vector_index(a, b, c, p)]:
                    continue

                rep = ModularVector(a, b, c)
                found = []
                for point in points:
                    if point.vector.dot(rep) % p == 0:
                        found.append(point.id)
                        if len(found) == p + 1:
                            break
                found = tuple(found)

                if strict:
                    if len(found) != p + 1:
                        raise ValueError(
                            f"Line {rep} has {len(found)} points, expected {p + 1}. "
                            f"Is p={p} a prime?"
                        )
                    if found in seen:
                        raise ValueError(f"Line {rep} duplicates an already emitted line (p={p}).")
                    seen.add(found)

                lines.append(Line(len(lines), rep, found))
                for i in range(2, p):
                    fresh[vector_index(i * a % p, i * b % p, i * c % p, p)] = False

    return tuple(lines)


class IncidenceResult:
    """
    Points and lines of one projective plane, read-only.

    point_ids and lines are what the graph writer walks; the rest are
    conveniences for the checker and the dataset export.
    """

    def __init__(self, order: int, points: Sequence[Point], lines: Sequence[Line]):
        self._order = order
        self._points = tuple(points)
        self._lines = tuple(lines)

    @property
    def order(self):
        return self._order

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def line_records(self) -> Tuple[Line, ...]:
        return self._lines

    @property
    def point_ids(self) -> Tuple[int, ...]:
        return tuple(pt.id for pt in self._points)

    @property
    def lines(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(line.point_ids for line in self._lines)

    @property
    def num_points(self):
        return len(self._points)

    @property
    def num_lines(self):
        return len(self._lines)

    def lines_through(self, point_id):
        return [line.id for line in self._lines if point_id in line.point_ids]

    def incidence_matrix(self) -> np.ndarray:
        """Rows: lines, Cols: points. 1 if the point lies on the line."""
        matrix = np.zeros((self.num_lines, self.num_points), dtype=np.int8)
        for line in self._lines:
            matrix[line.id, list(line.point_ids)] = 1
        return matrix

    def __repr__(self):
        return f"IncidenceResult(order={self._order}, points={self.num_points}, lines={self.num_lines})"


def build_projective_plane(p: int, strict: bool = True) -> IncidenceResult:
    points = build_points(p)
    lines = build_lines(points, p, strict=strict)
    return IncidenceResult(p, points, lines)
