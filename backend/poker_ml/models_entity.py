# poker_ml/models_entity.py
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Observation:
    hand_strength: float
    opponent_bet: float
    position: int
    num_players: int
    pot: float
    stack: float
    street: str
    decision: str
    result: float

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Observation":
        return cls(
            hand_strength=float(data["hand_strength"]),
            opponent_bet=float(data["opponent_bet"]),
            position=int(data["position"]),
            num_players=int(data["num_players"]),
            pot=float(data["pot"]),
            stack=float(data["stack"]),
            street=data["street"],
            decision=data["decision"],
            result=float(data["result"]),
        )
