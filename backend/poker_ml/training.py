# poker_ml/training.py
import logging
from typing import List, Sequence, Tuple
from sklearn.metrics import accuracy_score
from .classifier import DecisionClassifier
from .config import TRAIN_MIN_RECORDS, TRAIN_RATIO
from .features import encode_dataset
from .models_entity import Observation

logger = logging.getLogger(__name__)


def split_records(
    samples: List[List[float]], labels: List[str], ratio: float = TRAIN_RATIO
) -> Tuple[List[List[float]], List[str], List[List[float]], List[str]]:
    """Ordered split: the first ``int(n * ratio)`` rows train, the rest test.

    No shuffling and no stratification.
    """
    split = int(len(samples) * ratio)
    return samples[:split], labels[:split], samples[split:], labels[split:]


def score_accuracy(expected: Sequence[str], predicted: Sequence[str]) -> float:
    if len(predicted) == 0:
        return 0.0
    return round(float(accuracy_score(expected, predicted)) * 100, 2)


def train_and_score(records: Sequence[Observation], model_file: str) -> float:
    """
    Retrain on the stored records and return the hold-out accuracy in percent.

    Returns 0.0 without fitting anything while the store holds
    TRAIN_MIN_RECORDS records or fewer. Otherwise the fitted model is
    written to ``model_file``.
    """
    if len(records) <= TRAIN_MIN_RECORDS:
        logger.info(
            f"Skipping training: {len(records)} records, need more than {TRAIN_MIN_RECORDS}"
        )
        return 0.0

    samples, labels = encode_dataset(records)
    train_x, train_y, test_x, test_y = split_records(samples, labels)

    model = DecisionClassifier()
    model.train(train_x, train_y)

    predicted = model.predict_many(test_x) if test_x else []
    accuracy = score_accuracy(test_y, predicted)
    logger.info(
        f"Trained on {len(train_x)} records, tested on {len(test_x)}: accuracy {accuracy}%"
    )

    model.save(model_file)
    return accuracy
