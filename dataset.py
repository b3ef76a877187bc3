# dataset.py
import json
import os
from typing import Dict

import numpy as np
import pandas as pd

from geometry import IncidenceResult


def _vector_str(vector):
    return ",".join(str(x) for x in vector)


def export_dataset(result: IncidenceResult, output_dir: str) -> Dict[str, str]:
    """
    PG(2, p) 구조를 다른 스크립트에서 다시 읽을 수 있도록 파일로 저장함.

    Args:
        result: build_projective_plane 결과.
        output_dir: 저장할 폴더. 없으면 새로 만듦.

    Returns:
        dict: 파일 종류별 저장 경로.
    """
    print(f"  > Exporting PG(2, {result.order}) dataset to {os.path.abspath(output_dir)}")
    if not os.path.exists(output_dir):
        os.makedirs(output_dir)

    paths = {
        "points": os.path.join(output_dir, "points.csv"),
        "lines": os.path.join(output_dir, "lines.csv"),
        "incidence": os.path.join(output_dir, "incidence_packed.npy"),
        "config": os.path.join(output_dir, "config.json"),
    }

    points_df = pd.DataFrame({
        "id": [pt.id for pt in result.points],
        "v_p": [_vector_str(pt.vector) for pt in result.points],
    })
    points_df.to_csv(paths["points"], index=False)

    lines_df = pd.DataFrame({
        "id": [line.id for line in result.line_records],
        "representative": [_vector_str(line.representative) for line in result.line_records],
        "point_ids": ["-".join(str(pid) for pid in line.point_ids) for line in result.line_records],
    })
    lines_df.to_csv(paths["lines"], index=False)

    # 공간 절약을 위해 불리언 행렬을 비트 단위로 압축
    packed = np.packbits(result.incidence_matrix().astype(bool), axis=1)
    np.save(paths["incidence"], packed)

    config = {
        "p": result.order,
        "num_points": result.num_points,
        "num_lines": result.num_lines,
        "points_per_line": result.order + 1,
    }
    with open(paths["config"], "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4, ensure_ascii=False)

    print(f"  > Saved {len(points_df)} points, {len(lines_df)} lines, packed matrix {packed.shape}")
    return paths


def load_config(output_dir):
    with open(os.path.join(output_dir, "config.json"), "r", encoding="utf-8") as f:
        return json.load(f)


def load_incidence(output_dir: str) -> np.ndarray:
    """Unpack incidence_packed.npy back to (num_lines, num_points)."""
    config = load_config(output_dir)
    packed = np.load(os.path.join(output_dir, "incidence_packed.npy"))
    # packbits는 8비트 단위로 패딩되므로 실제 점 개수만큼 잘라냄
    unpacked = np.unpackbits(packed, axis=1)
    return unpacked[:, :config["num_points"]]
