FPS = 60
GAME_TITLE = "Highway Rush"

SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800

# Frame timing
MAX_DELTA_TIME = 0.1  # seconds, longer stalls are clamped

# Road
LANES = 3
LINE_WIDTH = 10
LINE_HEIGHT = 50
LINE_GAP = 30
EDGE_WIDTH = 5
BUILDING_COUNT = 15
BUILDING_SPEED = 0.7
BUILDING_WIDTH_RANGE = (50, 100)
BUILDING_HEIGHT_RANGE = (100, 300)
BACKGROUND_LAYERS = [
    {"speed": 0.1, "offset": 0.0, "color": (135, 206, 235)},  # sky
    {"speed": 0.3, "offset": 0.3, "color": (34, 139, 34)},    # far trees
    {"speed": 0.5, "offset": 0.5, "color": (0, 100, 0)},      # near trees
]

# Cars
CAR_WIDTH = 50
CAR_HEIGHT = 100
COLLISION_MARGIN = 5
PLAYER_ANCHOR = 0.8  # fraction of screen height
PLAYER_STATS = {
    "max_speed": 300.0,
    "acceleration": 80.0,
    "max_turn_speed": 150.0,
    "turn_acceleration": 300.0,
    "turn_friction": 0.9,
    "max_wheel_angle": 30.0,
}
ENEMY_SPEED_RANGE = (150, 220)
ENEMY_TYPES = {
    "enemy-car1": (CAR_WIDTH, CAR_HEIGHT),
    "enemy-car2": (CAR_WIDTH, CAR_HEIGHT),
    "enemy-car3": (CAR_WIDTH, CAR_HEIGHT),
    "sports-car": (CAR_WIDTH, CAR_HEIGHT),
    "suv": (CAR_WIDTH, CAR_HEIGHT),
    "truck": (60, 120),
    "police-car": (CAR_WIDTH, CAR_HEIGHT),
    "taxi": (CAR_WIDTH, CAR_HEIGHT),
}
PLAYER_COLOR = (52, 152, 219)
ENEMY_COLORS = [
    (231, 76, 60),
    (46, 204, 113),
    (243, 156, 18),
    (155, 89, 182),
    (26, 188, 156),
]
BUILDING_COLORS = [(85, 85, 85), (102, 102, 102), (119, 119, 119), (136, 136, 136), (153, 153, 153)]

# Session
START_MAX_SPEED = 300.0
SESSION_ACCELERATION = 20.0
BOOST_FACTOR = 1.5
SPEED_DECAY = 0.95  # per tick, braking or crashed
DISTANCE_PER_POINT = 10.0

# Traffic
SPAWN_INTERVAL = 1.5
MIN_SPAWN_INTERVAL = 0.5
SPAWN_INTERVAL_FACTOR = 0.95
DIFFICULTY_INTERVAL = 10.0
MAX_SPEED_STEP = 10.0

# Explosion
EXPLOSION_PARTICLES = 50
EXPLOSION_COLOR = (255, 85, 0)
EXPLOSION_SPREAD = 200.0
EXPLOSION_LIFETIME = 1.0
EXPLOSION_PARTICLE_SIZE = 5.0
EXPLOSION_SPRITE_SIZE = 100.0
EXPLOSION_SPRITE_GROWTH = 100.0

# Input
MAX_STEERING_ANGLE = 60.0
STEERING_DRAG_RATIO = 0.5  # degrees per pixel dragged
STEERING_RETURN = 0.8
STEERING_RETURN_STEP = 0.05  # seconds between spring-back steps

# Asset mapping
ASSET_DIR = "assets"
IMAGE_ASSETS = {
    "player": "car.png",
    "enemy-car1": "enemy-car1.png",
    "enemy-car2": "enemy-car2.png",
    "enemy-car3": "enemy-car3.png",
    "sports-car": "sports-car.png",
    "suv": "suv.png",
    "truck": "truck.png",
    "police-car": "police-car.png",
    "taxi": "taxi.png",
    "explosion": "explosion.png",
    "steering-wheel": "ui/steering-wheel.png",
}
SOUND_ASSETS = {
    "engine": "sounds/engine.ogg",
    "crash": "sounds/crash.ogg",
    "horn": "sounds/horn.ogg",
    "music": "sounds/background.ogg",
}

# HUD
HUD_COLOR = (240, 240, 240)
HUD_ACCENT = (241, 196, 15)
