# checker.py
from typing import Dict

import galois
import numpy as np

from geometry import IncidenceResult


def _all_off_diagonal_one(gram):
    n = gram.shape[0]
    off_diagonal = ~np.eye(n, dtype=bool)
    return bool(np.all(gram[off_diagonal] == 1))


def verify_plane(result: IncidenceResult) -> Dict[str, str]:
    """
    만들어진 구조가 실제로 order p 사영평면의 공리를 만족하는지 검사함.

    예외를 던지지 않고 검사 항목별 PASS/FAIL 딕셔너리를 돌려줌.
    (p가 소수라면 이론적으로 항상 전부 PASS여야 함)
    """
    p = result.order
    expected = p * p + p + 1
    checks = {}

    # int8 그대로 곱하면 p가 클 때 오버플로우 나므로 int32로 올림
    matrix = result.incidence_matrix().astype(np.int32)

    checks["Point_Count"] = result.num_points == expected
    checks["Line_Count"] = result.num_lines == expected

    # 모든 직선 위에 점 p+1개, 모든 점을 지나는 직선 p+1개
    checks["Line_Size"] = bool(np.all(matrix.sum(axis=1) == p + 1))
    checks["Point_Degree"] = bool(np.all(matrix.sum(axis=0) == p + 1))

    # 서로 다른 두 점은 정확히 한 직선을 공유, 서로 다른 두 직선은 정확히 한 점에서 만남
    checks["Point_Pairs"] = _all_off_diagonal_one(matrix.T @ matrix)
    checks["Line_Pairs"] = _all_off_diagonal_one(matrix @ matrix.T)

    lines = result.lines
    checks["No_Duplicate_Lines"] = len(set(lines)) == len(lines)

    return {name: "PASS" if ok else "FAIL" for name, ok in checks.items()}


def failed_checks(report):
    return [name for name, status in report.items() if status != "PASS"]


def assert_valid_plane(result):
    failed = failed_checks(verify_plane(result))
    if failed:
        raise ValueError(f"PG(2, {result.order}) failed checks: {', '.join(failed)}")


def cross_check_with_galois(result: IncidenceResult) -> bool:
    """
    Rebuild the line/point incidence matrix with galois' vectorised GF(p)
    arithmetic and compare it to the one found by the line enumerator.

    galois.GF raises ValueError when the order is not a prime power.
    """
    GF = galois.GF(result.order)
    points_gf = GF(np.array([list(pt.vector) for pt in result.points], dtype=int))
    reps_gf = GF(np.array([list(line.representative) for line in result.line_records], dtype=int))

    expected = (reps_gf @ points_gf.T == 0).astype(np.int8)
    return bool(np.array_equal(expected, result.incidence_matrix()))


def print_report(report):
    print("\n=== Projective plane integrity report ===")
    for test, status in report.items():
        print(f"{test.ljust(25)}: {status}")
