# poker_ml/classifier.py
import os
import logging
from typing import List
import joblib
import numpy as np
from sklearn.neighbors import KNeighborsClassifier

logger = logging.getLogger(__name__)


class DecisionClassifier:
    """k-nearest-neighbors over encoded game states, library defaults throughout."""

    def __init__(self):
        self.model = KNeighborsClassifier()
        self.trained = False

    def train(self, samples: List[List[float]], labels: List[str]):
        X = np.array(samples, dtype=float)
        y = np.array(labels)
        self.model.fit(X, y)
        self.trained = True
        logger.debug(f"KNN fitted on {len(y)} samples")

    def predict_many(self, samples: List[List[float]]) -> List[str]:
        if not self.trained:
            raise RuntimeError("classifier has not been trained")
        X = np.array(samples, dtype=float)
        return [str(label) for label in self.model.predict(X)]

    def predict(self, sample: List[float]) -> str:
        return self.predict_many([sample])[0]

    def save(self, path: str):
        if not self.trained:
            raise RuntimeError("refusing to save an untrained classifier")
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        joblib.dump(self.model, path)
        logger.info(f"Model saved to {path}")
