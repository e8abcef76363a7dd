from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...dynamic.scenario import BET, CALL, CHECK, FOLD, PREFLOP, RAISE, ActionEvent, ScenarioState, VillainInfo

__all__ = [
    "USER_ACTIONS",
    "ActionEventPayload",
    "ActionRequest",
    "ActionReviewPayload",
    "ScenarioPayload",
    "VillainInfoPayload",
]

USER_ACTIONS: frozenset[str] = frozenset({FOLD, CHECK, CALL, BET, RAISE})
_SIZED_ACTIONS: frozenset[str] = frozenset({BET, RAISE})


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ActionEventPayload(_APIModel):
    street: str = PREFLOP
    player: str
    action: str
    amount: float | None = None


class VillainInfoPayload(_APIModel):
    position: str
    hole_cards: list[str]


class ScenarioPayload(_APIModel):
    scenario_type: str
    num_players: int
    hero_position: str
    hero_hole_cards: list[str]
    villain_info: VillainInfoPayload | None = None
    stacks: dict[str, float]
    community_cards: list[str] = Field(default_factory=list)
    pot: float
    action_history: list[ActionEventPayload] = Field(default_factory=list)
    next_to_act: str

    @classmethod
    def from_state(cls, state: ScenarioState) -> ScenarioPayload:
        return cls.model_validate(state.to_dict())

    def to_state(self) -> ScenarioState:
        """Rebuild the snapshot; raises ``ValueError`` when an invariant fails."""

        villain = (
            VillainInfo(position=self.villain_info.position, hole_cards=tuple(self.villain_info.hole_cards))
            if self.villain_info is not None
            else None
        )
        return ScenarioState(
            scenario_type=self.scenario_type,
            num_players=self.num_players,
            hero_position=self.hero_position,
            hero_hole_cards=tuple(self.hero_hole_cards),
            villain_info=villain,
            stacks=dict(self.stacks),
            community_cards=tuple(self.community_cards),
            pot=self.pot,
            action_history=tuple(
                ActionEvent(player=e.player, action=e.action, amount=e.amount, street=e.street)
                for e in self.action_history
            ),
            next_to_act=self.next_to_act,
        )


class ActionRequest(_APIModel):
    scenario: ScenarioPayload
    # Older clients post camelCase "userAction".
    user_action: str = Field(alias="userAction")
    amount: float | None = None

    @model_validator(mode="after")
    def _check_action(self) -> ActionRequest:
        action = self.user_action.strip().lower()
        if action not in USER_ACTIONS:
            raise ValueError(f"user_action must be one of {', '.join(sorted(USER_ACTIONS))}")
        if action in _SIZED_ACTIONS:
            if self.amount is None or self.amount <= 0:
                raise ValueError(f"'{action}' requires a positive amount")
        else:
            self.amount = None
        self.user_action = action
        return self


class ActionReviewPayload(_APIModel):
    message: str
    your_action: str
    your_amount: float | None = None
    gto_advice: str | None = None
    gto_details: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None
