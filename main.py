import sys
import pygame
from ntkvec.simulation.playground import Playground

def main():
    pygame.init()
    pygame.font.init()

    # run() owns the frame loop and returns once the window is closed
    Playground().run()

    pygame.quit()
    sys.exit()

if __name__ == "__main__":
    main()
