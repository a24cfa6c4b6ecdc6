"""
Status effect application and per-turn ticking

A battler holds at most one instance of each status kind. Re-applying a kind
it already has resets the remaining duration to the configured maximum.
Ticks run once per turn before any move executes: HP change, skip-turn roll,
then duration decrement, with expired statuses removed at the end.
"""

import logging
from typing import NamedTuple

from pet_battle.enums import BattleEventType, StatusEffectKind
from pet_battle.schema.battle_data import BattleData
from pet_battle.schema.battle_state import BattleEvent
from pet_battle.schema.battler import Battler
from pet_battle.schema.status_effect import ActiveStatus
from pet_battle.utils import rng

logger = logging.getLogger(__name__)


class StatusTickResult(NamedTuple):
    battler: Battler
    events: list[BattleEvent]
    can_act: bool


class StatusEffectProcessor:
    def __init__(self, data: BattleData, random_source: rng.RandomSource):
        self.data = data
        self.random_source = random_source

    def apply_status(self, target: Battler, kind: StatusEffectKind) -> tuple[Battler, list[BattleEvent]]:
        """Attach a status to a battler, or refresh its duration if already active"""
        existing = target.get_status(kind)
        if existing is not None:
            statuses = tuple(s.refreshed() if s.kind == kind else s for s in target.active_statuses)
            logger.debug("%s: refreshed %s to %d turns", target.name, kind.value, existing.data.duration)
            return target.with_statuses(statuses), []

        data = self.data.get_status_data(kind)
        status = ActiveStatus(kind=kind, data=data, turns_remaining=data.duration)
        event = BattleEvent(
            type=BattleEventType.STATUS_APPLIED,
            battler_id=target.id,
            status=kind,
            message=f"{target.name} is now {data.name.lower()}!",
        )
        return target.with_statuses(target.active_statuses + (status,)), [event]

    def tick(self, battler: Battler) -> StatusTickResult:
        """
        Run one turn of every active status on a battler

        Returns:
            StatusTickResult with the updated battler, the narrated events and
            whether the battler may act this turn
        """
        events: list[BattleEvent] = []
        can_act = True
        hp = battler.hp
        ticked: list[ActiveStatus] = []

        for status in battler.active_statuses:
            name = status.data.name
            amount = abs(status.data.damage_per_turn)

            match status.data.damage_per_turn:
                case 0:
                    pass
                case dpt if dpt > 0:
                    hp = max(0, hp - amount)
                    events.append(
                        BattleEvent(
                            type=BattleEventType.STATUS_TICK,
                            battler_id=battler.id,
                            status=status.kind,
                            damage=amount,
                            message=f"{battler.name} took {amount} damage from {name}!",
                        )
                    )
                case _:
                    hp = min(battler.max_hp, hp + amount)
                    events.append(
                        BattleEvent(
                            type=BattleEventType.STATUS_TICK,
                            battler_id=battler.id,
                            status=status.kind,
                            healing=amount,
                            message=f"{battler.name} recovered {amount} HP from {name}!",
                        )
                    )

            if status.data.skip_turn_chance > 0 and rng.chance(self.random_source, status.data.skip_turn_chance):
                can_act = False
                events.append(
                    BattleEvent(
                        type=BattleEventType.STATUS_TICK,
                        battler_id=battler.id,
                        status=status.kind,
                        message=f"{battler.name} is too {name.lower()} to move!",
                    )
                )

            ticked.append(status.tick())

        remaining = []
        for status in ticked:
            if status.expired:
                events.append(
                    BattleEvent(
                        type=BattleEventType.STATUS_REMOVED,
                        battler_id=battler.id,
                        status=status.kind,
                        message=f"{battler.name} is no longer {status.data.name.lower()}.",
                    )
                )
            else:
                remaining.append(status)

        updated = battler.with_hp(hp).with_statuses(tuple(remaining))
        return StatusTickResult(battler=updated, events=events, can_act=can_act)
