# Loop
TICKS_PER_SECOND = 10              # logical ticks (update + draw) per second

# Targets
TARGET_RADIUS = 25                 # px
EDGE_PADDING = 1                   # keep targets this far off the edges (px)
TARGETS_LIMIT = 1                  # live targets at a time

# Difficulty: ticks a new target lives for
START_TICKS = 20                   # initial time-to-die (ticks)
MIN_TICKS = 5                      # never spawn a target that dies faster than this
TICKS_DECAY_PER_TICK = 0.02        # max time-to-die shrinks by this every tick

# Lives
START_LIVES = 3

# Input
PAUSE_KEY = "space"

# UX
TARGET_COLOR = (220, 70, 60)
RING_COLOR = (235, 235, 235)
HUD_COLOR = (230, 230, 230)
HEART_COLOR = (220, 60, 80)
DEAD_COLOR = (150, 150, 150)
HUD_FONT_SIZE = 26
BIG_FONT_SIZE = 40
