# -*- coding: utf-8 -*-

import pygame

from bowling.events import ResetKind

PIN_COUNT = 10

class PinArea:
    def __init__(self, pos=(1680, 620), spacing=52):
        self.pos = pos
        self.spacing = spacing
        self.pin_radius = 18

        # True once knocked this rack; removed pins are off the deck
        self.pins_down = [False] * PIN_COUNT
        self.pins_removed = [False] * PIN_COUNT

        # Layout: classic triangle seen from the bowler, head pin at the front
        rows = [[6, 7, 8, 9], [3, 4, 5], [1, 2], [0]]
        self.pin_positions = [None] * PIN_COUNT
        for row_index, row in enumerate(rows):
            offset = row_index * spacing // 2
            for col, pin in enumerate(row):
                self.pin_positions[pin] = (offset + col * spacing, row_index * spacing)

    def standing(self):
        """Indices of pins still standing on the deck"""
        return [i for i in range(PIN_COUNT) if not self.pins_down[i] and not self.pins_removed[i]]

    def knock(self, indices):
        """Mark pins as knocked; returns how many of them were newly down"""
        newly = 0
        for i in indices:
            if not self.pins_down[i] and not self.pins_removed[i]:
                self.pins_down[i] = True
                newly += 1
        return newly

    def remove_knocked(self):
        """Sweep the fallen pins away, leaving the standing ones in place"""
        for i in range(PIN_COUNT):
            if self.pins_down[i]:
                self.pins_removed[i] = True
                self.pins_down[i] = False

    def reset_pins(self):
        """Reset all pins to standing (up) state"""
        self.pins_down = [False] * PIN_COUNT
        self.pins_removed = [False] * PIN_COUNT

    def apply(self, directive):
        if directive.kind is ResetKind.PARTIAL:
            self.remove_knocked()
        else:
            self.reset_pins()

    def draw(self, surface):
        """Draw all pins"""
        for i, (dx, dy) in enumerate(self.pin_positions):
            if self.pins_removed[i]:
                continue
            center = (self.pos[0] + dx, self.pos[1] + dy)
            color = (110, 110, 110) if self.pins_down[i] else (240, 240, 240)
            pygame.draw.circle(surface, color, center, self.pin_radius)
            pygame.draw.circle(surface, (200, 30, 30), center, self.pin_radius // 3)
