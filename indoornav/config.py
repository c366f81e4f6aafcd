"""Global configuration: routing constants and display settings."""

# Nominal walking speed in floor-plan distance units per minute.
# All route times in the package are expressed in minutes.
WALKING_SPEED_UNITS_PER_MINUTE = 80.0

# Route analyzer heuristics
ANALYZER_MINUTES_PER_STEP = 3
ANALYZER_DISTANCE_DIVISOR = 10
SIMPLE_ROUTE_MAX_STEPS = 5
MODERATE_ROUTE_MAX_STEPS = 10

# Gate used as the primary routing node of a room
PRIMARY_GATE_INDEX = 0

# Shown to users whenever a query cannot be routed
NO_ROUTE_MESSAGE = "No route available"
