"""
Input handling abstraction to decouple Pygame input from the viewer loop.
"""

from __future__ import annotations
import pygame


class InputHandler:
    """
    Abstraction for gathering input state. Processes Pygame events and
    provides action queries for the current frame.
    """

    def __init__(self) -> None:
        self._quit = False
        # Request for a fresh set of random walls (R key)
        self._regenerate = False

    def process_events(self) -> None:
        """
        Poll Pygame events and update internal state for quit and
        regenerate actions.
        """
        self._quit = False
        self._regenerate = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_x, pygame.K_ESCAPE):
                    self._quit = True
                elif event.key == pygame.K_r:
                    self._regenerate = True

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def regenerate_pressed(self) -> bool:
        """Return True if R was pressed this frame."""
        return self._regenerate
