# Indices / constants used across modules (keep ints for JIT friendliness)

# subject table columns (float)
SUBJ_WEIGHT   = 0 # Multiplier applied to the learning score of the subject.
SUBJ_MIN_TIME = 1 # Hours below which a session yields nothing.
SUBJ_PLATEAU  = 2 # Hours past which productivity drops sharply.
F_SUBJ        = 3 # 3 features

# calendar
N_DAYS = 7

# acceptance outcomes recorded in the progress log
STATUS_BEST    = "BEST"
STATUS_IMPROVE = "IMPROVE"
STATUS_ACCEPT  = "ACCEPT"
STATUS_REJECT  = "REJECT"
