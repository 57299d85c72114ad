"""Tests for the estimation entry point and CLI."""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

import pytest

from shogi_piece_values.config.types import EstimationConfig
from shogi_piece_values.domain.directions import Direction
from shogi_piece_values.domain.faces import Face, Move, MoveKind
from shogi_piece_values.estimate import estimate_aggregate, main, run_estimation
from shogi_piece_values.io.persistence import read_aggregate, read_value_assignment
from shogi_piece_values.valuation import HalfPoints


class TestRunEstimation:
    def test_pawn_pinned_to_one_point(self, small_config: EstimationConfig) -> None:
        assignment = run_estimation(3, config=small_config, parallel=False)
        assert assignment["Pawn"] == HalfPoints(2)
        assert assignment["Rook"].value >= assignment["Pawn"].value

    def test_custom_faces(self, small_config: EstimationConfig) -> None:
        wazir = tuple(Move(MoveKind.STEP, d, 1) for d in Direction if d.is_orthogonal())
        faces = [Face("Wazir", wazir)]
        assignment = run_estimation(2, config=small_config, faces=faces, parallel=False)
        assert assignment.as_dict() == {"Wazir": 4.0}

    def test_parallel_and_sequential_agree(self, small_config: EstimationConfig) -> None:
        sequential = estimate_aggregate(4, config=small_config, parallel=False)
        parallel = estimate_aggregate(4, config=replace(small_config, workers=1))
        assert sequential.isclose(parallel)

    def test_rejects_zero_trials(self, small_config: EstimationConfig) -> None:
        with pytest.raises(ValueError):
            run_estimation(0, config=small_config)


class TestMain:
    def test_prints_summary_and_writes_artifacts(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--trials", "1", "--sequential", "--seed", "7", "--out-dir", str(tmp_path)])
        summary = json.loads(capsys.readouterr().out)
        assert summary["trials"] == 1
        assert summary["seed"] == 7
        assert summary["values"]["Pawn"] == "1"
        assert summary["pinned_unit"] > 0

        aggregate, trials = read_aggregate(tmp_path / "mobility_aggregate.parquet")
        assert trials == 1
        assert aggregate.pawn() == pytest.approx(summary["pinned_unit"])
        assert read_value_assignment(tmp_path / "face_values.parquet")["Pawn"] == 1.0

    def test_rejects_non_positive_trials(self) -> None:
        with pytest.raises(SystemExit):
            main(["--trials", "0"])
