"""Swap, split and combine table tokens with declarative consume/produce rules.

A rule reads "consume N of X, produce M of Y".  Names are the short
handles in :data:`NAME_TO_NSID`; a ``$COLOR`` handle stands for a plastic
unit of the acting player's color.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ti4rules.interfaces.host import GameObject, Player, World

from .enums import ObjectType
from .namespace import try_parse

logger = logging.getLogger(__name__)

COLOR_TOKEN = "$COLOR"

NAME_TO_NSID: dict[str, str] = {
    "fighter_x1": "token:base/fighter_1",
    "fighter_x3": "token:base/fighter_3",
    "infantry_x1": "token:base/infantry_1",
    "infantry_x3": "token:base/infantry_3",
    "tradegood_commodity_x1": "token:base/tradegood_commodity_1",
    "tradegood_commodity_x3": "token:base/tradegood_commodity_3",
    f"fighter {COLOR_TOKEN}": "unit:base/fighter",
    f"infantry {COLOR_TOKEN}": "unit:base/infantry",
}
NSID_TO_NAME: dict[str, str] = {nsid: name for name, nsid in NAME_TO_NSID.items()}


class Consume(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    names: list[str] | None = None
    count: int = Field(default=1, ge=1)

    @model_validator(mode="after")
    def _require_name(self) -> Consume:
        if not self.name and not self.names:
            raise ValueError("consume needs 'name' or 'names'")
        return self

    def accepts(self, name: str) -> bool:
        return name == self.name or (self.names is not None and name in self.names)


class Produce(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    count: int = Field(default=1, ge=1)

    @field_validator("name")
    @classmethod
    def _known_name(cls, value: str) -> str:
        if value not in NAME_TO_NSID:
            raise ValueError(f"unknown produce name '{value}'")
        return value


class ConsumeProduceRule(BaseModel):
    """One declarative rule; ``face_up``/``face_down`` restrict consumables."""

    model_config = ConfigDict(extra="forbid")

    face_up: bool = False
    face_down: bool = False
    repeat: bool = False
    consume: Consume
    produce: Produce | None = None


@dataclass(slots=True)
class ProduceResult:
    id: str
    count: int
    color: str | None = None


@dataclass(slots=True)
class RuleResult:
    consume: list[GameObject]
    produce: ProduceResult


def candidate_name(obj: GameObject) -> str | None:
    return NSID_TO_NAME.get(obj.nsid)


def is_consumable(obj: GameObject, rule: ConsumeProduceRule) -> bool:
    """Name matches the rule and the face constraint (if any) holds."""

    name = candidate_name(obj)
    if name is None or not rule.consume.accepts(name):
        return False
    if rule.face_up and not obj.is_face_up:
        return False
    if rule.face_down and obj.is_face_up:
        return False
    return True


def _saved_color(obj: GameObject) -> str | None:
    if not obj.saved_data:
        return None
    try:
        data = json.loads(obj.saved_data)
    except json.JSONDecodeError:
        logger.warning("unreadable saved data on %s", obj.nsid)
        return None
    if not isinstance(data, dict):
        return None
    return data.get("_color")


def is_color(obj: GameObject, color_name: str) -> bool:
    """Units must carry ``color_name``; anonymous tokens match every color."""

    parsed = try_parse(obj.nsid)
    if parsed is None or parsed.type != ObjectType.UNIT:
        return True
    return _saved_color(obj) == color_name


def apply_rule(
    candidates: Sequence[GameObject], rule: ConsumeProduceRule, color: str | None = None
) -> RuleResult:
    """Decide what ``rule`` consumes from ``candidates`` and what it produces.

    Without ``repeat`` the rule fires at most once and only if at least
    ``consume.count`` candidates match.  With ``repeat`` it fires
    ``matches // consume.count`` times.  No match yields an empty consume
    list and a zero produce count.
    """
    if rule.produce is None:
        raise ValueError("rule has nothing to produce")

    consumable = [obj for obj in candidates if is_consumable(obj, rule)]
    per_application = rule.consume.count
    if rule.repeat:
        times = len(consumable) // per_application
    else:
        times = 1 if len(consumable) >= per_application else 0

    produce_name = rule.produce.name
    return RuleResult(
        consume=consumable[: times * per_application],
        produce=ProduceResult(
            id=NAME_TO_NSID[produce_name],
            count=times * rule.produce.count,
            color=color if COLOR_TOKEN in produce_name else None,
        ),
    )


def _rule(**raw: object) -> ConsumeProduceRule:
    return ConsumeProduceRule.model_validate(raw)


RULES: list[ConsumeProduceRule] = [
    _rule(consume={"name": "fighter_x1", "count": 3}, produce={"name": "fighter_x3"}),
    _rule(consume={"name": "fighter_x3"}, produce={"name": "fighter_x1", "count": 3}),
    _rule(consume={"name": "infantry_x1", "count": 3}, produce={"name": "infantry_x3"}),
    _rule(consume={"name": "infantry_x3"}, produce={"name": "infantry_x1", "count": 3}),
    _rule(
        consume={"name": f"fighter {COLOR_TOKEN}", "count": 3},
        produce={"name": "fighter_x3"},
    ),
    _rule(
        consume={"name": f"infantry {COLOR_TOKEN}", "count": 3},
        produce={"name": "infantry_x3"},
    ),
    _rule(
        face_up=True,
        consume={"name": "tradegood_commodity_x1", "count": 3},
        produce={"name": "tradegood_commodity_x3"},
    ),
    _rule(
        face_up=True,
        consume={"name": "tradegood_commodity_x3"},
        produce={"name": "tradegood_commodity_x1", "count": 3},
    ),
]


def on_r(
    obj: GameObject,
    player: Player,
    world: World,
    rules: Sequence[ConsumeProduceRule] = RULES,
) -> RuleResult | None:
    """Apply the first rule ``obj`` takes part in that produces something.

    Candidates are the objects sharing ``obj``'s context, with units limited
    to the player's color.  Consumed objects are removed and produced ones
    spawned next to ``obj`` through ``world``.
    """
    if candidate_name(obj) is None or not is_color(obj, player.color_name):
        return None

    candidates = [obj] + [
        other
        for other in world.objects_in_context(obj)
        if other is not obj and is_color(other, player.color_name)
    ]
    for rule in rules:
        if not is_consumable(obj, rule):
            continue
        result = apply_rule(candidates, rule, color=player.color_name)
        if result.produce.count == 0:
            continue
        world.destroy_objects(result.consume)
        world.spawn_objects(
            result.produce.id,
            result.produce.count,
            near=obj.position,
            color_name=result.produce.color,
            owner_slot=player.slot if result.produce.color else -1,
        )
        logger.info(
            "%s replaced %d object(s) with %d x %s",
            player.name,
            len(result.consume),
            result.produce.count,
            result.produce.id,
        )
        return result
    return None
