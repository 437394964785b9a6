"""
Central Configuration
Default options and option metadata in one place
"""

# === SIMULATION ===
# sight_range is compared against the SQUARED distance between two boids
DEFAULT_SIGHT_RANGE = 10
DEFAULT_MAX_VELOCITY = 2
DEFAULT_FLOCK_SIZE = 30
DEFAULT_TICK_PERIOD_MS = 100

# Random speed-up / slow-down applied to each velocity component per tick
PERTURBATION = 0.1

# Agent ids are drawn from [0, MAX_AGENT_ID]
MAX_AGENT_ID = 1000000

# === OPTIONS ===
# Every key here is a recognized option; user options are merged over these.
# All of them except 'seed' must end up non-null.
DEFAULT_OPTIONS = {
    'sight_range': DEFAULT_SIGHT_RANGE,
    'max_velocity': DEFAULT_MAX_VELOCITY,
    'flock_size': DEFAULT_FLOCK_SIZE,
    'tick_period_ms': DEFAULT_TICK_PERIOD_MS,
    'click_adds_boid': True,
    'boid_size': 20,
    'boid_stroke_color': '#ffffff',
    'boid_fill_color': '#222222',
    'trail_stroke_color': '#444444',
    'trail_fill_color': '#999999',
    'draw_trail': True,
    'draw_dotted': False,
    'seed': None,
}

# Options allowed to stay None ('seed' None = pick a fresh seed)
NULLABLE_OPTIONS = frozenset({'seed'})

NUMERIC_OPTIONS = ('sight_range', 'max_velocity', 'tick_period_ms', 'boid_size')
BOOL_OPTIONS = ('click_adds_boid', 'draw_trail', 'draw_dotted')
COLOR_OPTIONS = (
    'boid_stroke_color',
    'boid_fill_color',
    'trail_stroke_color',
    'trail_fill_color',
)

# === GUI ===
WINDOW_TITLE = "Flocking"
DEFAULT_WINDOW_SIZE = (1024, 768)
BACKGROUND_COLOR = '#000000'

# Log a tick summary every N ticks
TICK_LOG_INTERVAL = 50
