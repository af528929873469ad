CANVAS_WIDTH = 600
CANVAS_HEIGHT = 800

# Plants line up left to right along the bottom edge of the canvas.
PLANT_COUNT = 6
PLANT_WIDTH = 80
PLANT_GAP = 10
PLANT_MARGIN = 30
PETALS_PER_PLANT = 5

# Cloud geometry; y is the cloud centre and never changes after spawn.
CLOUD_START_Y = 100
CLOUD_WIDTH = 100
CLOUD_HEIGHT = 60
CLOUD_SPEED = 8

# Rain drops spawn just below the cloud centre and fall a fixed amount per step.
RAIN_FALL_SPEED = 6
RAIN_SPAWN_OFFSET_Y = 40
RAIN_JITTER_X = 30

# Simulation runs on fixed steps; the window caps catch-up work per frame.
STEPS_PER_SECOND = 60
MAX_STEPS_PER_FRAME = 5

# Holding a direction moves once immediately, then once per interval.
MOVE_REPEAT_INTERVAL = 0.1
