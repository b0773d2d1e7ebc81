"""Test that API functions return typed results without raising."""

import json

from lagrange_pkg.api import evaluate, interpolate_file, interpolate_points, rationalise
from lagrange_pkg.types import InterpolationResult


class TestInterpolatePoints:
    """Test interpolate_points() results."""

    def test_returns_interpolation_result(self):
        result = interpolate_points([1, 2, 3, 4, 5], [1, 2, 3, 4, 98756], target=5)
        assert isinstance(result, InterpolationResult)
        assert result.ok is True
        assert result.name == "ip"
        assert result.degree == 4
        assert len(result.coefficients) == 5
        assert abs(result.value - 98756) < 1e-6
        assert result.elapsed_us >= 0

    def test_without_target(self):
        result = interpolate_points([0, 1], [1, 3])
        assert result.ok is True
        assert result.target is None
        assert result.value is None
        assert "value" not in result.to_dict()

    def test_rational_coefficients(self):
        result = interpolate_points([0, 1], [0.5, 1], rational=True)
        assert result.ok is True
        assert result.rational == ["1/2", "1/2"]
        assert result.expression == "x/2 + 1/2"

    def test_rational_off_by_default(self):
        result = interpolate_points([0, 1], [0.5, 1])
        assert result.rational is None

    def test_duplicate_abscissa_error(self):
        result = interpolate_points([1, 1], [5, 9])
        assert result.ok is False
        assert result.code == "DUPLICATE_ABSCISSA"
        assert "1" in result.error

    def test_insufficient_points_error(self):
        result = interpolate_points([1], [5])
        assert result.ok is False
        assert result.code == "INSUFFICIENT_POINTS"

    def test_invalid_denominator_bound(self):
        result = interpolate_points([0, 1], [0.5, 1], rational=True, max_denominator=0)
        assert result.ok is False
        assert result.code == "VALIDATION_ERROR"

    def test_to_dict_is_json_serializable(self):
        result = interpolate_points([0, 1, 2], [1, 2, 5], target=3)
        data = json.loads(json.dumps(result.to_dict()))
        assert data["ok"] is True
        assert data["degree"] == 2
        assert abs(data["value"] - 10) < 1e-9

    def test_error_to_dict(self):
        data = interpolate_points([], []).to_dict()
        assert set(data) == {"ok", "error", "code"}
        assert data["code"] == "INSUFFICIENT_POINTS"

    def test_repr(self):
        assert "ok=False" in repr(interpolate_points([1], [1]))
        assert "degree=1" in repr(interpolate_points([0, 1], [0, 1]))


class TestInterpolateFile:
    """Test interpolate_file() results."""

    def test_target_from_file(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_text("0 1\n1 2\n2 5\n3\n", encoding="utf-8")
        result = interpolate_file(str(path))
        assert result.ok is True
        assert result.target == 3
        assert abs(result.value - 10) < 1e-9

    def test_explicit_target_overrides_file(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_text("0 1\n1 2\n2 5\n3\n", encoding="utf-8")
        result = interpolate_file(str(path), target=-1)
        assert abs(result.value - 2) < 1e-9

    def test_missing_file(self, tmp_path):
        result = interpolate_file(str(tmp_path / "nope.txt"))
        assert result.ok is False
        assert result.code == "FILE_ERROR"

    def test_unparseable_file(self, tmp_path):
        path = tmp_path / "points.txt"
        path.write_text("0 1\n1 banana\n", encoding="utf-8")
        result = interpolate_file(str(path))
        assert result.ok is False
        assert result.code == "NOT_NUMERIC"


class TestHelpers:
    """Test evaluate() and rationalise() wrappers."""

    def test_evaluate(self):
        assert evaluate([1, 0, 1], 3) == 10.0
        assert evaluate([], 3) == 0

    def test_rationalise(self):
        assert rationalise(0.333333, 1000) == "1/3"
        assert rationalise(3.0) == "3"
