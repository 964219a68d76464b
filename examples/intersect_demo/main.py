# examples/intersect_demo/main.py

"""
================================================================================
VIEWPORT INTERSECTION DEMO
================================================================================
Draws the whole tile map on screen, outlines ten fixed viewports around it
(one per intersection case) plus one that follows the mouse, and for each
viewport shows:

  - its intermediate buffer (cyan where no tile was drawn), and
  - the composed viewport (orange "sky" where the map does not reach).

Controls:
- Move the mouse to drag the free viewport around.
- Quit: ESC or close window
================================================================================
"""
import sys
import os
import json
import logging
import logging.config
import pygame

# To import from the project root, we add it to the Python path.
# This is necessary because 'examples' is not in the same package as 'tile_viewport'.
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from tile_viewport import config as DEFAULTS
from tile_viewport.cases import DemoCase, load_cases, map_origin_from
from tile_viewport.geometry import Point
from tile_viewport.intersect import IntersectionCategory
from tile_viewport.planner import ViewportConfig
from tile_viewport.runtime import TileMapRenderer
from tile_viewport.tileset import load_tileset, make_checker_tileset

DEMO_DIR = os.path.dirname(os.path.abspath(__file__))


class Application:
    """The main application class for the intersection demo."""

    def __init__(self):
        self._setup_logging()
        self.logger.info("Application starting.")

        self.config = self._load_config()
        self._setup_pygame()

        # --- Scene ---
        self.viewport_config = ViewportConfig.from_dict(self.config.get('viewport', {}))
        self.map_origin = map_origin_from(self.config)
        self.cases = load_cases(self.config)
        self.mouse_position = Point(0, 0)

        self.map_surface = self._create_tileset_surface()
        self.renderer = TileMapRenderer(self.map_surface, self.viewport_config)

        # One buffer/viewport surface pair per case so every panel can be
        # shown at once; the renderer's own buffer is only used transiently.
        buffer_size = tuple(self.viewport_config.buffer_size_px)
        viewport_size = tuple(self.viewport_config.viewport_size_px)
        self._panels = {
            case.name: (pygame.Surface(buffer_size), pygame.Surface(viewport_size))
            for case in self.cases + [self._mouse_case()]
        }

        self.is_running = True

    def _setup_logging(self):
        """Initializes the logging system from a config file."""
        log_config_path = os.path.join(DEMO_DIR, 'logging_config.json')
        log_dir = 'logs'

        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        with open(log_config_path, 'rt') as f:
            log_config = json.load(f)

        # Tell the logger where to create its file, overriding the JSON path.
        log_config['handlers']['file']['filename'] = os.path.join(log_dir, 'intersect_demo.log')

        logging.config.dictConfig(log_config)
        self.logger = logging.getLogger(__name__)

    def _load_config(self) -> dict:
        """Loads scene parameters from the config file."""
        config_path = os.path.join(DEMO_DIR, 'config.json')
        self.logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, 'r') as f:
                return json.load(f)
        except FileNotFoundError:
            self.logger.critical(f"Configuration file not found at {config_path}. Exiting.")
            sys.exit(1)
        except json.JSONDecodeError:
            self.logger.critical(f"Error decoding JSON from {config_path}. Exiting.")
            sys.exit(1)

    def _setup_pygame(self):
        """Initializes Pygame and the display window."""
        pygame.init()
        display_config = self.config.get('display', {})
        self.screen_width = display_config.get('screen_width', DEFAULTS.DEFAULT_SCREEN_SIZE[0])
        self.screen_height = display_config.get('screen_height', DEFAULTS.DEFAULT_SCREEN_SIZE[1])
        self.tick_rate = display_config.get('clock_tick_rate', DEFAULTS.CLOCK_TICK_RATE)

        self.logger.info(f"Initializing display in Windowed mode ({self.screen_width}x{self.screen_height}).")
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption("A wild map intersect test program appears!")
        self.clock = pygame.time.Clock()

        try:
            self.ui_font = pygame.font.SysFont("monospace", 14)
        except pygame.error:
            self.ui_font = pygame.font.Font(None, 18) # Fallback to default font

        self.logger.info("Pygame initialized successfully.")

    def _create_tileset_surface(self) -> pygame.Surface:
        """Loads the configured tileset image, or generates one."""
        tileset_config = self.config.get('tileset', {})
        path = tileset_config.get('path')
        if path:
            try:
                color_array = load_tileset(os.path.join(DEMO_DIR, path))
            except FileNotFoundError:
                self.logger.critical("Make sure the tileset path in config.json is relative to the demo folder.")
                pygame.quit()
                sys.exit(1)
        else:
            color_array = make_checker_tileset(
                self.viewport_config.map_size_tiles,
                self.viewport_config.tile_size,
                seed=tileset_config.get('seed', DEFAULTS.DEFAULT_TILESET_SEED),
            )
        return pygame.surfarray.make_surface(color_array).convert()

    def _mouse_case(self) -> DemoCase:
        return DemoCase(
            name="mouse",
            region=self.mouse_position,
            buffer_at=Point(*DEFAULTS.MOUSE_CASE_BUFFER_AT),
            screen_at=Point(*DEFAULTS.MOUSE_CASE_SCREEN_AT),
        )

    def run(self):
        """The main application loop."""
        self.logger.info("Entering main loop.")
        try:
            while self.is_running:
                self.clock.tick(self.tick_rate)
                self._handle_events()
                self._draw()
        except Exception:
            self.logger.critical("An unhandled exception occurred!", exc_info=True)
        finally:
            self.logger.info("Exiting application.")
            pygame.quit()
            sys.exit()

    def _handle_events(self):
        """Processes user input and other events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.is_running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.is_running = False
            elif event.type == pygame.MOUSEMOTION:
                self.mouse_position = Point(*event.pos)

    def _draw(self):
        """Renders the scene."""
        self.screen.fill(DEFAULTS.COLOR_BACKGROUND)

        # Draw the whole map (would not be done in a real game)
        self.screen.blit(self.map_surface, tuple(self.map_origin))

        viewport_size = self.viewport_config.viewport_size_px
        for case in self.cases + [self._mouse_case()]:
            outline = pygame.Rect(tuple(case.region), tuple(viewport_size))
            pygame.draw.rect(self.screen, DEFAULTS.COLOR_OUTLINE, outline, 1)
            self._draw_case(case)

        # Report the free viewport's classification in the corner.
        mouse_plan = self.renderer.plan(self._mouse_case().relative_to(self.map_origin))
        text_surface = self.ui_font.render(f"Mouse viewport: {mouse_plan.category.value}", True, (255, 255, 255))
        self.screen.blit(text_surface, (10, 10))

        pygame.display.flip()

    def _draw_case(self, case: DemoCase):
        """Renders what one viewport sees and shows its buffer and result panels."""
        buffer, viewport = self._panels[case.name]
        plan = self.renderer.plan(case.relative_to(self.map_origin))

        self.renderer.render_to_buffer(plan, buffer)
        self.renderer.compose(plan, buffer, viewport)

        self.screen.blit(buffer, tuple(case.buffer_at))
        self.screen.blit(viewport, tuple(case.screen_at))

        # Outline the viewport inside the buffer panel; meaningless when nothing was drawn.
        if plan.category is not IntersectionCategory.TOTALLY_OUT:
            inner = pygame.Rect(tuple(case.buffer_at + plan.buffer_offset), tuple(self.viewport_config.viewport_size_px))
            pygame.draw.rect(self.screen, DEFAULTS.COLOR_OUTLINE, inner, 1)


if __name__ == '__main__':
    app = Application()
    app.run()
