# poker_ml/features.py
from typing import List, Sequence, Tuple
from .models_entity import Observation

# preflop deliberately shares the river code
STREET_CODES = {"flop": 1, "turn": 2}
DEFAULT_STREET_CODE = 3


def encode_street(street: str) -> int:
    return STREET_CODES.get(street, DEFAULT_STREET_CODE)


def encode_features(state) -> List[float]:
    """
    Numeric feature vector for an Observation or a GameStateIn.

    Order: hand_strength, opponent_bet, position, num_players, pot, stack,
    street code. The decision and result fields are never inputs.
    """
    return [
        float(state.hand_strength),
        float(state.opponent_bet),
        float(state.position),
        float(state.num_players),
        float(state.pot),
        float(state.stack),
        float(encode_street(state.street)),
    ]


def encode(observation: Observation) -> Tuple[List[float], str]:
    return encode_features(observation), observation.decision


def encode_dataset(
    records: Sequence[Observation],
) -> Tuple[List[List[float]], List[str]]:
    samples = []
    labels = []
    for r in records:
        features, label = encode(r)
        samples.append(features)
        labels.append(label)
    return samples, labels
