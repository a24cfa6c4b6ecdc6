from pet_battle.enums import ElementType, MoveAnimation, MoveCategory, StatusEffectKind, StatusTarget
from pet_battle.schema.battle_move import BattleMove, StatusApplication

PHYSICAL = MoveCategory.PHYSICAL
SPECIAL = MoveCategory.SPECIAL
STATUS = MoveCategory.STATUS

_MOVES = [
    # =================================================================
    # BASIC MOVES (all pets) - high PP
    # =================================================================
    BattleMove(id="tackle", name="Tackle", description="A basic body slam attack.", category=PHYSICAL, element=ElementType.EARTH, power=40, accuracy=100, crit_rate=0.05, priority=0, max_pp=35, animation=MoveAnimation.ATTACK),
    BattleMove(id="scratch", name="Scratch", description="Sharp claws or appendages swipe at the foe.", category=PHYSICAL, element=ElementType.AIR, power=35, accuracy=100, crit_rate=0.1, priority=0, max_pp=35, animation=MoveAnimation.ATTACK),
    BattleMove(
        id="glare",
        name="Glare",
        description="An intimidating stare that might daze.",
        category=STATUS,
        element=ElementType.SPIRIT,
        power=0,
        accuracy=90,
        crit_rate=0.0,
        priority=0,
        max_pp=20,
        status_effect=StatusApplication(effect=StatusEffectKind.DAZED, chance=0.6, target=StatusTarget.ENEMY),
        animation=MoveAnimation.STATUS,
    ),
    BattleMove(id="rest", name="Rest", description="Take a breather and recover HP.", category=STATUS, element=ElementType.AIR, power=0, accuracy=100, crit_rate=0.0, priority=-1, max_pp=10, healing=30, animation=MoveAnimation.STATUS),
    # =================================================================
    # FIRE
    # =================================================================
    BattleMove(
        id="emberBlast",
        name="Ember Blast",
        description="A burst of flames engulfs the target.",
        category=SPECIAL,
        element=ElementType.FIRE,
        power=55,
        accuracy=95,
        crit_rate=0.1,
        max_pp=25,
        status_effect=StatusApplication(effect=StatusEffectKind.BURNED, chance=0.2, target=StatusTarget.ENEMY),
        animation=MoveAnimation.SPECIAL,
        visual_effect="fire-burst",
    ),
    BattleMove(
        id="hotboxHaze",
        name="Hotbox Haze",
        description="Fill the air with smoky fire. May stone the target.",
        category=SPECIAL,
        element=ElementType.FIRE,
        power=45,
        accuracy=85,
        crit_rate=0.05,
        max_pp=20,
        status_effect=StatusApplication(effect=StatusEffectKind.STONED, chance=0.35, target=StatusTarget.ENEMY),
        animation=MoveAnimation.SPECIAL,
        visual_effect="smoke-cloud",
    ),
    BattleMove(
        id="blazeUp",
        name="Blaze Up",
        description="Ignite your inner fire for massive power.",
        category=STATUS,
        element=ElementType.FIRE,
        power=0,
        accuracy=100,
        crit_rate=0.0,
        max_pp=15,
        status_effect=StatusApplication(effect=StatusEffectKind.BLAZED, chance=1.0, target=StatusTarget.SELF),
        animation=MoveAnimation.STATUS,
        visual_effect="power-up",
    ),
    BattleMove(
        id="infernoRush",
        name="Inferno Rush",
        description="An all-out blazing assault. Causes recoil.",
        category=PHYSICAL,
        element=ElementType.FIRE,
        power=90,
        accuracy=85,
        crit_rate=0.15,
        max_pp=8,
        recoil=0.2,
        status_effect=StatusApplication(effect=StatusEffectKind.BURNED, chance=0.3, target=StatusTarget.ENEMY),
        animation=MoveAnimation.ATTACK,
        visual_effect="fire-rush",
    ),
    # =================================================================
    # WATER
    # =================================================================
    BattleMove(
        id="splashWave",
        name="Splash Wave",
        description="A refreshing wave crashes into the target.",
        category=SPECIAL,
        element=ElementType.WATER,
        power=50,
        accuracy=100,
        crit_rate=0.05,
        max_pp=25,
        status_effect=StatusApplication(effect=StatusEffectKind.SOAKED, chance=0.25, target=StatusTarget.ENEMY),
        animation=MoveAnimation.SPECIAL,
        visual_effect="water-splash",
    ),
    BattleMove(
        id="mellowTide",
        name="Mellow Tide",
        description="Calming waters that heal over time.",
        category=STATUS,
        element=ElementType.WATER,
        power=0,
        accuracy=100,
        crit_rate=0.0,
        max_pp=10,
        status_effect=StatusApplication(effect=StatusEffectKind.MELLOW, chance=1.0, target=StatusTarget.SELF),
        animation=MoveAnimation.STATUS,
        visual_effect="healing-wave",
    ),
    BattleMove(
        id="tidalCrush",
        name="Tidal Crush",
        description="A massive wave that overwhelms the target.",
        category=SPECIAL,
        element=ElementType.WATER,
        power=65,
        accuracy=75,
        crit_rate=0.1,
        max_pp=8,
        status_effect=StatusApplication(effect=StatusEffectKind.SOAKED, chance=0.3, target=StatusTarget.ENEMY),
        animation=MoveAnimation.SPECIAL,
        visual_effect="tidal-wave",
    ),
    BattleMove(
        id="drenchSoak",
        name="Drench & Soak",
        description="Completely douse the enemy, slowing them.",
        category=STATUS,
        element=ElementType.WATER,
        power=0,
        accuracy=95,
        crit_rate=0.0,
        priority=1,
        max_pp=15,
        status_effect=StatusApplication(effect=StatusEffectKind.SOAKED, chance=1.0, target=StatusTarget.ENEMY),
        animation=MoveAnimation.STATUS,
    ),
    # =================================================================
    # EARTH
    # =================================================================
    BattleMove(
        id="rootSlam",
        name="Root Slam",
        description="Vines and roots strike from below.",
        category=PHYSICAL,
        element=ElementType.EARTH,
        power=55,
        accuracy=90,
        crit_rate=0.1,
        max_pp=20,
        status_effect=StatusApplication(effect=StatusEffectKind.ROOTED, chance=0.2, target=StatusTarget.ENEMY),
        animation=MoveAnimation.ATTACK,
        visual_effect="root-attack",
    ),
    BattleMove(
        id="earthenGuard",
        name="Earthen Guard",
        description="Encase yourself in protective earth.",
        category=STATUS,
        element=ElementType.EARTH,
        power=0,
        accuracy=100,
        crit_rate=0.0,
        max_pp=15,
        status_effect=StatusApplication(effect=StatusEffectKind.VIBING, chance=1.0, target=StatusTarget.SELF),
        animation=MoveAnimation.STATUS,
        visual_effect="earth-shield",
    ),
    BattleMove(
        id="boulderBash",
        name="Boulder Bash",
        description="Hurl a massive rock at the enemy.",
        category=PHYSICAL,
        element=ElementType.EARTH,
        power=80,
        accuracy=75,
        crit_rate=0.15,
        priority=-1,
        max_pp=10,
        animation=MoveAnimation.ATTACK,
        visual_effect="rock-throw",
    ),
    BattleMove(
        id="naturesBind",
        name="Nature's Bind",
        description="Trap the enemy in living vines.",
        category=STATUS,
        element=ElementType.EARTH,
        power=0,
        accuracy=85,
        crit_rate=0.0,
        max_pp=15,
        status_effect=StatusApplication(effect=StatusEffectKind.ROOTED, chance=1.0, target=StatusTarget.ENEMY),
        animation=MoveAnimation.STATUS,
        visual_effect="vine-trap",
    ),
    # =================================================================
    # AIR
    # =================================================================
    BattleMove(
        id="gustSlash",
        name="Gust Slash",
        description="Sharp wind blades cut through the air.",
        category=SPECIAL,
        element=ElementType.AIR,
        power=50,
        accuracy=95,
        crit_rate=0.15,
        priority=1,
        max_pp=25,
        animation=MoveAnimation.SPECIAL,
        visual_effect="wind-slash",
    ),
    BattleMove(
        id="cloudNine",
        name="Cloud Nine",
        description="Float on clouds, entering a chill state.",
        category=STATUS,
        element=ElementType.AIR,
        power=0,
        accuracy=100,
        crit_rate=0.0,
        max_pp=10,
        status_effect=StatusApplication(effect=StatusEffectKind.MELLOW, chance=1.0, target=StatusTarget.SELF),
        healing=15,
        animation=MoveAnimation.STATUS,
        visual_effect="cloud-float",
    ),
    BattleMove(
        id="tornadoSpin",
        name="Tornado Spin",
        description="Become a whirlwind of destruction.",
        category=PHYSICAL,
        element=ElementType.AIR,
        power=75,
        accuracy=85,
        crit_rate=0.1,
        max_pp=12,
        status_effect=StatusApplication(effect=StatusEffectKind.DAZED, chance=0.3, target=StatusTarget.ENEMY),
        animation=MoveAnimation.ATTACK,
        visual_effect="tornado",
    ),
    BattleMove(
        id="zephyrDash",
        name="Zephyr Dash",
        description="Lightning-fast wind attack. Always goes first.",
        category=PHYSICAL,
        element=ElementType.AIR,
        power=40,
        accuracy=100,
        crit_rate=0.2,
        priority=2,
        max_pp=20,
        animation=MoveAnimation.ATTACK,
        visual_effect="speed-lines",
    ),
    # =================================================================
    # SPIRIT
    # =================================================================
    BattleMove(
        id="cosmicBeam",
        name="Cosmic Beam",
        description="Channel the energy of the cosmos.",
        category=SPECIAL,
        element=ElementType.SPIRIT,
        power=70,
        accuracy=90,
        crit_rate=0.15,
        max_pp=15,
        animation=MoveAnimation.SPECIAL,
        visual_effect="cosmic-ray",
    ),
    BattleMove(
        id="thirdEye",
        name="Third Eye",
        description="Open your mind to enlightenment.",
        category=STATUS,
        element=ElementType.SPIRIT,
        power=0,
        accuracy=100,
        crit_rate=0.0,
        max_pp=15,
        status_effect=StatusApplication(effect=StatusEffectKind.ENLIGHTENED, chance=1.0, target=StatusTarget.SELF),
        animation=MoveAnimation.STATUS,
        visual_effect="eye-glow",
    ),
    BattleMove(
        id="astralPunch",
        name="Astral Punch",
        description="Strike with otherworldly force.",
        category=PHYSICAL,
        element=ElementType.SPIRIT,
        power=65,
        accuracy=95,
        crit_rate=0.2,
        max_pp=20,
        animation=MoveAnimation.ATTACK,
        visual_effect="spirit-fist",
    ),
    BattleMove(
        id="dimensionRift",
        name="Dimension Rift",
        description="Tear reality. Devastating but inaccurate.",
        category=SPECIAL,
        element=ElementType.SPIRIT,
        power=110,
        accuracy=65,
        crit_rate=0.25,
        priority=-1,
        max_pp=5,
        recoil=0.15,
        animation=MoveAnimation.SPECIAL,
        visual_effect="reality-tear",
    ),
    BattleMove(
        id="vibeCheck",
        name="Vibe Check",
        description="Judge the enemy's vibes. High crit if they're not chill.",
        category=PHYSICAL,
        element=ElementType.SPIRIT,
        power=45,
        accuracy=100,
        crit_rate=0.35,
        max_pp=20,
        animation=MoveAnimation.ATTACK,
        visual_effect="vibe-wave",
    ),
]

BATTLE_MOVES: dict[str, BattleMove] = {move.id: move for move in _MOVES}
