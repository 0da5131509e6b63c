from enum import Enum

class OverlayMode(Enum):
    PROJECTION = 0
    PERPENDICULAR = 1
    LERP = 2
    ALL = 3
