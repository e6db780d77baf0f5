import pytest

from .models_entity import Observation
from .repository import ObservationRepository


def make_observation(**overrides) -> Observation:
    fields = {
        "hand_strength": 0.5,
        "opponent_bet": 10.0,
        "position": 3,
        "num_players": 6,
        "pot": 40.0,
        "stack": 200.0,
        "street": "flop",
        "decision": "call",
        "result": 0.0,
    }
    fields.update(overrides)
    return Observation(**fields)


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "poker_data.json")


@pytest.fixture
def model_file(tmp_path):
    return str(tmp_path / "models" / "poker_model.joblib")


@pytest.fixture
def repo(data_file):
    return ObservationRepository(data_file=data_file)
