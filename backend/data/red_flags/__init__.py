from data.red_flags.scope import SCOPE_CATEGORIES, SCOPE_RED_FLAGS, CONTRACT_INDICATORS
