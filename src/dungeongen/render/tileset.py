# src/dungeongen/render/tileset.py
from __future__ import annotations

from typing import Dict, Tuple

import pygame

from .palette import color_for

class Tileset:
    """
    Per-instance cache of tile surfaces:
      - one solid-colour pygame.Surface per tile value at the base size
      - view() adds scaled copies, keyed by (tile, size)
    Needs no display, so it also works headless.
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size
        self._base: Dict[int, pygame.Surface] = {}
        self._scaled: Dict[Tuple[int, int], pygame.Surface] = {}

    def get(self, tile_id: int) -> pygame.Surface:
        img = self._base.get(tile_id)
        if img is None:
            img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
            img.fill(color_for(tile_id))
            self._base[tile_id] = img
        return img

    def view(self, tile_id: int, size: int) -> pygame.Surface:
        if size == self.tile_size:
            return self.get(tile_id)
        key = (tile_id, size)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.scale(self.get(tile_id), (size, size))
        return self._scaled[key]
