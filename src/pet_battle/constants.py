from pet_battle.enums import Difficulty

# =============================================================================
# LEVELS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 50

# Evolution stage thresholds (level at which the stage starts)
TEEN_LEVEL = 15
ADULT_LEVEL = 30
ELDER_LEVEL = 45

# =============================================================================
# BASE STATS
# =============================================================================
BASE_ACCURACY = 100  # percent
BASE_CRIT_RATE = 0.05  # fraction

# Personality traits are 1-100, 50 is neutral. A trait of 100 gives +5%, 1 gives ~-5%.
MIN_TRAIT = 1
MAX_TRAIT = 100
NEUTRAL_TRAIT = 50
TRAIT_INFLUENCE = 0.05

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_SUPER_EFFECTIVE = 1.5
TYPE_MUL_NORMAL = 1.0
TYPE_MUL_NOT_EFFECTIVE = 0.75

# =============================================================================
# DAMAGE FORMULA
# =============================================================================
MIN_DAMAGE = 1
STAB_MULTIPLIER = 1.2  # same-element attack bonus
CRITICAL_MULTIPLIER = 1.5
SPECIAL_ATTACK_BOOST = 1.1
DAMAGE_VARIANCE_MIN = 0.85
DAMAGE_VARIANCE_MAX = 1.0

# =============================================================================
# FLEE
# =============================================================================
BASE_FLEE_CHANCE = 0.5
FLEE_SPEED_RATIO_WEIGHT = 0.25
MAX_FLEE_CHANCE = 0.95

# =============================================================================
# NPC GENERATION
# =============================================================================
LEGENDARY_ENCOUNTER_CHANCE = 0.05
LEGENDARY_MIN_PLAYER_LEVEL = 10

# Inclusive level offsets relative to the player, per difficulty
NPC_LEVEL_OFFSETS = {
    Difficulty.EASY: (-3, 0),
    Difficulty.NORMAL: (-1, 2),
    Difficulty.HARD: (1, 4),
}

# =============================================================================
# AI SCORING
# =============================================================================
AI_EFFECTIVENESS_WEIGHT = 30
AI_POWER_WEIGHT = 0.5
AI_LOW_HP_THRESHOLD = 0.4
AI_HEAL_BONUS = 50
AI_ENEMY_STATUS_BONUS = 20
AI_HIGH_HP_THRESHOLD = 0.6
AI_SELF_BUFF_BONUS = 15
AI_PP_WEIGHT = 5
AI_NOISE = 10  # uniform noise in [-AI_NOISE, AI_NOISE]

# =============================================================================
# REWARDS
# =============================================================================
BASE_XP = 75
XP_LEVEL_DIFF_WEIGHT = 0.1
XP_BONUS_MIN = -0.5
XP_BONUS_MAX = 1.5

BASE_COINS = 15
COIN_LEVEL_DIFF_WEIGHT = 0.15
COIN_BONUS_MIN = -0.3
COIN_BONUS_MAX = 2.0
CONSOLATION_COIN_FRACTION = 0.2  # paid even when the battle is lost
