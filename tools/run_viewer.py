#!/usr/bin/env python3
# Minimal interactive viewer for generated dungeons.
# - R: new random seed, Right/Left: seed +1/-1
# - O: toggle room outlines (acceptance order shown in the caption)
# - 60 Hz fixed loop

import argparse
import logging

import pygame

from dungeongen.catalog import DEFAULT_CATALOG
from dungeongen.config import GeneratorConfig
from dungeongen.dungeon import DungeonMap
from dungeongen.errors import DungeonError
from dungeongen.render.tileset import Tileset

logger = logging.getLogger("run_viewer")

def build(width, height, seed, config, catalog):
    m = DungeonMap(width, height, seed, catalog=catalog, config=config)
    try:
        m.generate()
    except DungeonError as e:
        # Keep showing whatever was placed before the budget ran out.
        logger.warning("seed %d: %s", m.seed, e)
    return m

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=50)
    ap.add_argument("--height", type=int, default=50)
    ap.add_argument("--seed", type=int, default=None, help="Omit for a random seed")
    ap.add_argument("--rooms", type=int, default=10)
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--fit-catalog", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    config = GeneratorConfig(room_count=args.rooms)
    catalog = DEFAULT_CATALOG.fitting(args.width, args.height) if args.fit_catalog else DEFAULT_CATALOG

    pygame.init()
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.width * args.tile, args.height * args.tile))
    tiles = Tileset(args.tile)

    m = build(args.width, args.height, args.seed, config, catalog)
    outlines = False
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_r:
                    m = build(args.width, args.height, None, config, catalog)
                elif ev.key == pygame.K_RIGHT:
                    m = build(args.width, args.height, m.seed + 1, config, catalog)
                elif ev.key == pygame.K_LEFT:
                    m = build(args.width, args.height, m.seed - 1, config, catalog)
                elif ev.key == pygame.K_o:
                    outlines = not outlines

        screen.fill((0, 0, 0))
        for y, row in enumerate(m.grid):
            for x, tid in enumerate(row):
                screen.blit(tiles.view(tid, args.tile), (x * args.tile, y * args.tile))
        if outlines:
            for r in m.rooms:
                rect = pygame.Rect(r.x * args.tile, r.y * args.tile, r.width * args.tile, r.height * args.tile)
                pygame.draw.rect(screen, (255, 200, 0), rect, 1)

        pygame.display.set_caption(f"dungeongen viewer  seed {m.seed}  rooms {len(m.rooms)}")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
