import os
import joblib
import pytest

from . import training
from .conftest import make_observation
from .features import encode_dataset
from .training import score_accuracy, split_records, train_and_score


def mixed_records(n):
    """Weak hands fold, strong hands raise, everything else calls."""
    records = []
    for i in range(n):
        strength = (i % 10) / 10
        if strength < 0.3:
            decision = "fold"
        elif strength > 0.6:
            decision = "raise"
        else:
            decision = "call"
        records.append(
            make_observation(hand_strength=strength, position=i % 9, decision=decision)
        )
    return records


@pytest.mark.parametrize("n", [21, 25, 37, 100, 500])
def test_split_sizes(n):
    samples, labels = encode_dataset(mixed_records(n))

    train_x, train_y, test_x, test_y = split_records(samples, labels)

    assert len(train_x) == len(train_y) == n * 4 // 5
    assert len(test_x) == len(test_y) == n - n * 4 // 5


def test_split_preserves_order():
    samples = [[float(i)] for i in range(10)]
    labels = [str(i) for i in range(10)]

    train_x, train_y, test_x, test_y = split_records(samples, labels)

    assert train_y == [str(i) for i in range(8)]
    assert test_y == ["8", "9"]
    assert test_x == [[8.0], [9.0]]


def test_score_accuracy_rounds_to_two_decimals():
    assert score_accuracy(["call", "fold", "raise"], ["call", "call", "call"]) == 33.33
    assert score_accuracy(["call", "fold", "raise"], ["call", "fold", "call"]) == 66.67
    assert score_accuracy(["call"], ["call"]) == 100.0


def test_score_accuracy_empty_test_set():
    assert score_accuracy([], []) == 0.0


def test_skips_training_at_twenty_records(monkeypatch, model_file):
    class Boom:
        def __init__(self):
            raise AssertionError("training must not run")

    monkeypatch.setattr(training, "DecisionClassifier", Boom)

    assert train_and_score(mixed_records(20), model_file) == 0.0
    assert not os.path.exists(model_file)


def test_identical_call_records_score_100(model_file):
    records = [make_observation(decision="call") for _ in range(25)]

    assert train_and_score(records, model_file) == 100.0


def test_accuracy_is_bounded_and_rounded(model_file):
    accuracy = train_and_score(mixed_records(60), model_file)

    assert 0.0 <= accuracy <= 100.0
    assert round(accuracy, 2) == accuracy


def test_model_is_persisted_and_loadable(model_file):
    train_and_score(mixed_records(21), model_file)

    assert os.path.exists(model_file)
    model = joblib.load(model_file)
    assert str(model.predict([[0.9, 10.0, 3.0, 6.0, 40.0, 200.0, 1.0]])[0]) in {
        "call",
        "fold",
        "raise",
    }
