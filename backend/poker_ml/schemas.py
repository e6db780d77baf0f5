# poker_ml/schemas.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Literal

from .models_entity import Observation

Street = Literal["preflop", "flop", "turn", "river"]
Decision = Literal["call", "fold", "raise"]


# each field also accepts its legacy French form name
class GameStateIn(BaseModel):
    # finite numbers only
    model_config = ConfigDict(allow_inf_nan=False)

    hand_strength: float = Field(
        ..., ge=0, le=1, validation_alias=AliasChoices("hand_strength", "main")
    )
    opponent_bet: float = Field(
        ..., ge=0, validation_alias=AliasChoices("opponent_bet", "mise")
    )
    position: int = Field(..., ge=0, validation_alias=AliasChoices("position", "pos"))
    num_players: int = Field(
        ..., ge=1, validation_alias=AliasChoices("num_players", "joueurs")
    )
    pot: float = Field(..., ge=0)
    stack: float = Field(..., ge=0)
    street: Street = Field(..., validation_alias=AliasChoices("street", "tour"))


class ObservationIn(GameStateIn):
    decision: Decision
    result: float = Field(..., validation_alias=AliasChoices("result", "resultat"))

    def to_entity(self) -> Observation:
        return Observation(**self.model_dump())
