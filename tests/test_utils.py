import pytest

from weighted_randomizer.utils import total_weight, weighted_pick


def test_total_weight_sums_in_order():
    assert total_weight([1.0, 2.5, 0.5, 4.3]) == 1.0 + 2.5 + 0.5 + 4.3
    assert total_weight([]) == 0.0


@pytest.mark.parametrize(
    "threshold, expected",
    [(0.0, "a"), (1.0, "a"), (1.01, "b"), (3.5, "b"), (3.6, "c"), (4.0, "c")],
)
def test_weighted_pick_uses_cumulative_intervals(threshold, expected):
    assert weighted_pick(["a", "b", "c"], [1.0, 2.5, 0.5], threshold) == expected


def test_weighted_pick_skips_zero_weights():
    assert weighted_pick(["zero", "one"], [0.0, 1.0], 0.0) == "one"


def test_weighted_pick_falls_back_to_last_weighted_item():
    assert weighted_pick(["a", "b", "zero"], [1.0, 1.0, 0.0], 2.5) == "b"


def test_weighted_pick_validates_arguments():
    with pytest.raises(ValueError):
        weighted_pick([], [], 0.0)
    with pytest.raises(ValueError):
        weighted_pick(["a"], [1.0, 2.0], 0.0)
    with pytest.raises(ValueError):
        weighted_pick(["a"], [0.0], 0.0)
