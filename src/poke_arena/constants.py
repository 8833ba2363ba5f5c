# =============================================================================
# BATTLER STATS - fixed values and random ranges used when building battlers
# =============================================================================
BASE_HP = 100
BASE_CRIT_CHANCE = 0.2
BASE_MISS_CHANCE = 0.08

# Inclusive random ranges (production path)
DEFENSE_MIN = 6
DEFENSE_MAX = 11
SPEED_MIN = 30
SPEED_MAX = 50
ATTACK_MIN = 18
ATTACK_MAX = 26

# Fixed stats (legacy/test path, no random source)
DEFAULT_DEFENSE = 10
DEFAULT_SPEED = 50
DEFAULT_ATTACK = 25

# Measurement units embedded in catalog strings ("6.9 kg", "0.7 m")
WEIGHT_UNIT = "kg"
HEIGHT_UNIT = "m"

# =============================================================================
# RARITY & EVOLUTION FACTORS
# =============================================================================
RARITY_VERY_RARE_THRESHOLD = 0.05  # spawn_chance below this is very rare
RARITY_RARE_THRESHOLD = 0.2  # spawn_chance below this is rare
RARITY_FACTOR_VERY_RARE = 1.3
RARITY_FACTOR_RARE = 1.15
RARITY_FACTOR_COMMON = 1.0
DEFAULT_POWER_MULTIPLIER = 1.0

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0  # x0.0 (immune)
TYPE_MUL_NOT_EFFECTIVE = 0.5  # x0.5 (resisted)
TYPE_MUL_NORMAL = 1.0  # x1.0 (neutral, absent from chart)
TYPE_MUL_SUPER_EFFECTIVE = 2.0  # x2.0 (super effective)
WEAKNESS_BONUS = 1.2  # per attacker type listed in the defender's weaknesses

# =============================================================================
# DAMAGE CALCULATION CONSTANTS
# =============================================================================
ATTACK_SCALE = 0.7  # attack * 0.7
BASE_DAMAGE_BONUS = 5  # + 5 + floor(r * 5)
BASE_DAMAGE_BONUS_RANGE = 5

HEAVY_WEIGHT_KG = 80  # attackers heavier than this are clumsier
HEAVY_MISS_PENALTY = 0.05

MAX_WEIGHT_FACTOR = 1.4
MIN_WEIGHT_DIVISOR = 1
HEIGHT_ADVANTAGE_FACTOR = 1.05
HEIGHT_DISADVANTAGE_FACTOR = 0.95

DEFENSE_SCALE = 0.8  # damage -= defense * 0.8
MIN_DAMAGE = 1  # damage floor before variance and crit

DAMAGE_VARIANCE_MIN = 0.9  # 0.9 + r * 0.2, i.e. +/-10%
DAMAGE_VARIANCE_RANGE = 0.2

CRITICAL_MULTIPLIER = 1.4

# =============================================================================
# TURN ENGINE CONSTANTS
# =============================================================================
MAX_TURNS = 12
HEAL_CHANCE = 0.03
HEAL_MIN = 8
HEAL_MAX = 15

# =============================================================================
# CATALOG
# =============================================================================
CATALOG_CACHE_SECONDS = 60 * 60  # 1 hour
POKEDEX_URL = "https://raw.githubusercontent.com/Biuni/PokemonGO-Pokedex/master/pokedex.json"

# =============================================================================
# BATTLE MESSAGES
# =============================================================================
# Type effectiveness annotations appended to hit messages
MSG_NO_EFFECT = "But it had no effect!"
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_CRITICAL_HIT = "Critical hit!"

MSG_TURN_HEADER = "--- Turn {turn} ---"
MSG_HEAL = "{name} heals for {amount} HP! ({hp}/{max_hp})"
MSG_MISS = "{attacker} attacks {defender} but missed!"
MSG_HIT = "{attacker} hits {defender} for {damage} damage."
MSG_HP_LEFT = "({hp}/{max_hp} HP left)"
MSG_FAINTED = "{name} fainted!"

MSG_USER_WINS = "Opponent team has all fainted! You win! 🎉"
MSG_USER_LOSES = "Your team has all fainted! You lose! 💀"
MSG_MAX_TURNS = "Reached max turns ({max_turns}). Determining winner by HP..."
MSG_USER_WINS_BY_HP = "Battle ends! You win by HP advantage! 🎉"
MSG_OPPONENT_WINS_BY_HP = "Battle ends! Opponents win by HP advantage! 💀"
MSG_DRAW = "Battle ends in a draw!"

MSG_BATTLE_STARTED = "Battle started!"

# Request boundary errors
MSG_MISSING_TEAMS = "Missing teams"
MSG_BATTLE_FAILED = "Battle simulation failed"
MSG_CATALOG_FAILED = "Failed to retrieve Pokémon data."
