from pet_battle.enums import StatusEffectKind
from pet_battle.schema.status_effect import StatModifiers, StatusEffectData

STATUS_EFFECTS: dict[StatusEffectKind, StatusEffectData] = {
    StatusEffectKind.BURNED: StatusEffectData(
        name="Burned",
        description="Taking fire damage each turn",
        duration=3,
        damage_per_turn=8,
        stat_modifiers=StatModifiers(attack=-0.1),
    ),
    StatusEffectKind.SOAKED: StatusEffectData(
        name="Soaked",
        description="Movement slowed",
        duration=3,
        stat_modifiers=StatModifiers(speed=-0.3),
    ),
    StatusEffectKind.ROOTED: StatusEffectData(
        name="Rooted",
        description="Held in place by roots",
        duration=4,
        stat_modifiers=StatModifiers(speed=-0.2, defense=0.1),
    ),
    StatusEffectKind.DAZED: StatusEffectData(
        name="Dazed",
        description="Seeing stars...",
        duration=2,
        stat_modifiers=StatModifiers(accuracy=-0.25),
    ),
    StatusEffectKind.ENLIGHTENED: StatusEffectData(
        name="Enlightened",
        description="+30% crit chance, +10% accuracy. Your attacks hit harder and more reliably!",
        duration=3,
        stat_modifiers=StatModifiers(crit_rate=0.3, accuracy=0.1),
    ),
    StatusEffectKind.MELLOW: StatusEffectData(
        name="Mellow",
        description="Heals 5 HP/turn but -15% attack. Trade offense for sustainability.",
        duration=4,
        damage_per_turn=-5,
        stat_modifiers=StatModifiers(attack=-0.15, defense=0.1),
    ),
    StatusEffectKind.VIBING: StatusEffectData(
        name="Vibing",
        description="+25% defense, +10% speed. You're in the zone - harder to hit and moving faster!",
        duration=3,
        stat_modifiers=StatModifiers(defense=0.25, speed=0.1),
    ),
    StatusEffectKind.STONED: StatusEffectData(
        name="Stoned",
        description="Too baked to move sometimes",
        duration=3,
        skip_turn_chance=0.25,
        stat_modifiers=StatModifiers(defense=0.2, speed=-0.2),
    ),
    StatusEffectKind.BLAZED: StatusEffectData(
        name="Blazed",
        description="Special powers amplified",
        duration=3,
        stat_modifiers=StatModifiers(attack=0.3, defense=-0.1),
    ),
}
