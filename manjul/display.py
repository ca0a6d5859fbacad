"""
Pygame window used as display surface and key source.

Image buffers are (width, height, 3) indexed [x, y], with x the plane-x
pixel. They are shown with that axis running down the window, which is the
orientation the up/down keys refer to.
"""

import logging

import pygame


logger = logging.getLogger(__name__)

WINDOW_NAME = "FRAKTALE"


class PygameDisplay:
    """
    Minimal display: show an RGB buffer, set a title, wait for a key.

    Usage:
        display = PygameDisplay(800, 800)
        display.open()
        display.show(image)
        display.set_title("...")
        key = display.wait_key()
        display.close()
    """

    def __init__(self, width, height, caption=WINDOW_NAME):
        self.width = width
        self.height = height
        self.caption = caption
        self.screen = None

    def open(self):
        """Initialize pygame and create the window."""
        pygame.init()
        # Rows of the image are plane-x pixels, so the window is height x width
        self.screen = pygame.display.set_mode((self.height, self.width))
        pygame.display.set_caption(self.caption)
        logger.info("Opened %dx%d window", self.width, self.height)

    def show(self, image):
        """Blit an RGB buffer to the window."""
        surface = pygame.surfarray.make_surface(image.swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def set_title(self, text):
        pygame.display.set_caption(text)

    def wait_key(self):
        """
        Block until a key is pressed and return its code.

        Closing the window counts as pressing Escape.
        """
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return pygame.K_ESCAPE
            if event.type == pygame.KEYDOWN:
                return event.key

    def close(self):
        if self.screen is not None:
            self.screen = None
            pygame.quit()
            logger.info("Window closed")
