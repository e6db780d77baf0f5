# poker_ml/poker_service.py
import logging
from typing import Dict, List, Optional
from .classifier import DecisionClassifier
from .config import PREDICT_MIN_RECORDS
from .features import encode_dataset, encode_features
from .models_entity import Observation
from .repository import ObservationRepository
from .schemas import GameStateIn
from .training import train_and_score

logger = logging.getLogger(__name__)


def record_and_retrain(
    repo: ObservationRepository, observation: Observation, model_file: str
) -> float:
    """
    Store one observation and retrain on the resulting dataset.

    Returns the accuracy reported by the training pipeline (0.0 while there
    is not enough data to train).
    """
    records = repo.append(observation)
    logger.info(
        f"Saved {observation.decision} on {observation.street}, store now holds {len(records)} records"
    )
    return train_and_score(records, model_file)


def predict_decision(repo: ObservationRepository, state: GameStateIn) -> Optional[str]:
    """
    Suggest a decision for ``state``, or None when the store is too small.

    A fresh classifier is fitted on the whole store for every call; the model
    file written by the training pipeline is not read here.
    """
    records = repo.load()
    if len(records) < PREDICT_MIN_RECORDS:
        logger.info(
            f"Prediction refused: {len(records)} records, need {PREDICT_MIN_RECORDS}"
        )
        return None

    samples, labels = encode_dataset(records)
    model = DecisionClassifier()
    model.train(samples, labels)

    prediction = model.predict(encode_features(state))
    logger.info(f"Predicted {prediction} from {len(records)} records")
    return prediction


def decision_stats(records: List[Observation]) -> Dict[str, Dict[str, float]]:
    """Per-decision counts and summed results, keyed in first-seen order."""
    frequency: Dict[str, int] = {}
    total_result: Dict[str, float] = {}
    for r in records:
        frequency[r.decision] = frequency.get(r.decision, 0) + 1
        total_result[r.decision] = total_result.get(r.decision, 0.0) + r.result
    return {"frequency": frequency, "total_result": total_result}


def format_accuracy(value: float) -> str:
    # 100.0 -> "100", 66.67 -> "66.67", 0.0 -> "0"
    return f"{value:g}"
