# bake_cases.py

"""
================================================================================
OFFLINE CASE BAKER SCRIPT
================================================================================
This script is a command-line tool for rendering every configured viewport
case to disk without opening a window. For each case it saves the
intermediate buffer and the composed viewport as PNG images, and writes a
manifest.json describing the clipping decisions that produced them.

Usage:
    python bake_cases.py [--config path/to/config.json] [--output DIR] [--tileset image.png]
================================================================================
"""
import os
import sys
import json
import logging
import argparse
import time

# Surfaces are created off-screen; never open a real window.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
from tqdm import tqdm

# Add project root to Python path to allow importing from tile_viewport
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from tile_viewport import config as DEFAULTS
from tile_viewport.cases import load_cases, map_origin_from
from tile_viewport.planner import ViewportConfig
from tile_viewport.runtime import TileMapRenderer
from tile_viewport.tileset import array_to_image, load_tileset, make_checker_tileset


def load_scene(config_path: str | None) -> dict:
    """Loads a scene config, or returns an empty dict so every default applies."""
    if config_path is None:
        return {}
    with open(config_path, 'r') as f:
        return json.load(f)


def save_surface(surface: pygame.Surface, file_path: str):
    """Saves a pygame surface as a PNG using Pillow."""
    array_to_image(pygame.surfarray.array3d(surface)).save(file_path, 'PNG')


def describe_plan(plan) -> dict:
    """A JSON-serialisable summary of a render plan."""
    return {
        "category": plan.category.value,
        "map_rect": list(plan.map_rect),
        "tiles_drawn": len(plan.draws),
        "buffer_offset": list(plan.buffer_offset),
        "read_rect": list(plan.read_rect),
        "dest_offset": list(plan.dest_offset),
    }


def bake_cases(config_path: str | None = None, output_dir: str = "baked_cases",
               tileset_path: str | None = None) -> dict:
    """
    Renders every case in the scene config and saves the results under
    `output_dir`. Returns the manifest that was written.
    """
    logger = logging.getLogger("CaseBaker")

    # 1. --- Load Configuration ---
    logger.info(f"Loading configuration from: {config_path or '<defaults>'}")
    scene = load_scene(config_path)
    viewport_config = ViewportConfig.from_dict(scene.get("viewport", {}))
    map_origin = map_origin_from(scene)
    cases = load_cases(scene)

    # 2. --- Prepare the Tileset ---
    tileset_params = scene.get("tileset", {})
    tileset_path = tileset_path or tileset_params.get("path")
    if tileset_path:
        color_array = load_tileset(tileset_path)
    else:
        color_array = make_checker_tileset(
            viewport_config.map_size_tiles,
            viewport_config.tile_size,
            seed=tileset_params.get("seed", DEFAULTS.DEFAULT_TILESET_SEED),
        )
    tileset = pygame.surfarray.make_surface(color_array)
    renderer = TileMapRenderer(tileset, viewport_config)

    # 3. --- Render Each Case ---
    os.makedirs(output_dir, exist_ok=True)
    manifest = {
        "tile_size": viewport_config.tile_size,
        "map_size_px": list(viewport_config.map_size_px),
        "viewport_size_px": list(viewport_config.viewport_size_px),
        "cases": {},
    }

    start_time = time.perf_counter()
    for case in tqdm(cases, desc="Baking Cases"):
        plan, viewport_surface = renderer.render_viewport(case.relative_to(map_origin))

        save_surface(renderer.buffer, os.path.join(output_dir, f"{case.name}_buffer.png"))
        save_surface(viewport_surface, os.path.join(output_dir, f"{case.name}_viewport.png"))

        manifest["cases"][case.name] = {
            "relative_top_left": list(case.relative_to(map_origin)),
            **describe_plan(plan),
        }

    # --- Finalization ---
    manifest_path = os.path.join(output_dir, "manifest.json")
    with open(manifest_path, 'w') as f:
        json.dump(manifest, f, indent=2)

    end_time = time.perf_counter()
    logger.info(f"Baked {len(cases)} cases in {end_time - start_time:.2f} seconds.")
    logger.info(f"Images and manifest.json saved to: {output_dir}")
    return manifest


def main(argv=None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )

    parser = argparse.ArgumentParser(description="Offline renderer for the viewport intersection cases.")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON scene config. Built-in defaults are used when omitted."
    )
    parser.add_argument(
        "--output",
        type=str,
        default="baked_cases",
        help="Directory the PNG images and manifest.json are written to."
    )
    parser.add_argument(
        "--tileset",
        type=str,
        default=None,
        help="Optional tileset image. A procedural tileset is generated when omitted."
    )
    args = parser.parse_args(argv)

    try:
        bake_cases(args.config, args.output, args.tileset)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logging.critical(f"Failed to load input: {e}")
        return 1
    return 0


# --- Command-Line Interface ---
if __name__ == "__main__":
    sys.exit(main())
