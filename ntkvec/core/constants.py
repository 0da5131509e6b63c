# 窗口
SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 700
FPS = 60
CAPTION = "ntkvec playground"

# 世界坐标: 原点在窗口中心, y 轴向上
PIXELS_PER_UNIT = 50
ARM_LENGTH = 4.0
ARM_ANGULAR_SPEED = 0.6  # rad/s
LERP_SPEED = 0.5  # 插值参数 t 每秒的变化量

# 颜色
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (128, 128, 128)
LIGHT_GRAY = (220, 220, 220)
RED = (255, 0, 0)
GREEN = (0, 160, 0)
BLUE = (0, 0, 255)
PURPLE = (128, 0, 128)
CYAN = (0, 170, 170)
