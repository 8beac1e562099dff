"""Central configuration defaults and constants for DiceSim."""

import os

# Dice Defaults
DEFAULT_SIDE_COUNT = int(os.getenv("DICESIM_SIDE_COUNT", "6"))
DEFAULT_DICE_VARIANT = os.getenv("DICESIM_DICE_VARIANT", "fair").lower()  # "fair" or "fixed"
# Seed for the fair die's generator; unset means seeded from system entropy
_rng_seed_env = os.getenv("DICESIM_RNG_SEED")
DEFAULT_RNG_SEED = int(_rng_seed_env) if _rng_seed_env else None

# Console Defaults
DEFAULT_MAX_INPUT_LENGTH = int(os.getenv("DICESIM_MAX_INPUT_LENGTH", "1000"))
DEFAULT_PARSE_FAILURE_POLICY = os.getenv("DICESIM_PARSE_FAILURE_POLICY", "reprompt").lower()  # "reprompt" or "fail"

# Logging Defaults
DEFAULT_LOG_LEVEL = os.getenv("DICESIM_LOG_LEVEL", "WARNING").upper()
DEFAULT_LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"
