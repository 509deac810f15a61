import argparse
import logging

import pygame
from map_explorer.settings import WINDOW_TITLE
from map_explorer.config import build_config, load_config
from map_explorer.controller import ViewportController
from map_explorer.keys import bindings_from_config, poll_actions
from map_explorer.maps import load_maps
from map_explorer.renderer import Renderer

logger = logging.getLogger(__name__)


class Viewer:
    def __init__(self, config):
        self.config = config
        self.screen = pygame.display.set_mode(
            (config.screen_width, config.screen_height), pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.bindings = bindings_from_config(config.keys)
        generated, alternate = load_maps(config)
        self.controller = ViewportController(
            generated, alternate, self.screen.get_size(),
            minimap_visible=config.minimap_visible,
        )
        self.renderer = Renderer(config.minimap_width, config.minimap_margin)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                return
            if event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.get_surface()

    def update(self):
        actions = poll_actions(self.bindings)
        self.controller.update(actions, self.screen.get_size())
        if self.controller.quit_requested:
            self.running = False

    def draw(self):
        self.renderer.draw(self.screen, self.controller)
        pygame.display.flip()

    def run(self):
        while self.running:
            self.clock.tick(self.config.fps)
            self.handle_events()
            if not self.running:
                break
            self.update()
            self.draw()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="map-explorer",
        description="Pan and zoom around a large map with a minimap overlay.",
    )
    parser.add_argument("--width", dest="screen_width", type=int, help="window width in pixels")
    parser.add_argument("--height", dest="screen_height", type=int, help="window height in pixels")
    parser.add_argument("--fps", type=int, help="frame rate cap")
    parser.add_argument(
        "--map", dest="map_path",
        help="alternate map image (.png, .jpg, .tmx); defaults to assets/map.png, "
             "which `generate-assets` writes in a source checkout. Without it a "
             "second generated map is used",
    )
    parser.add_argument("--seed", type=int, help="seed for the generated tile map")
    parser.add_argument("--map-size", type=int, help="generated map size in pixels")
    parser.add_argument("--tile-size", type=int, help="generated tile size in pixels")
    parser.add_argument("--hide-minimap", dest="minimap_visible", action="store_const",
                        const=False, default=None, help="start with the minimap hidden")
    parser.add_argument("--config", dest="config_file", help="path to a config.json")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    positive = {
        "screen_width": "--width",
        "screen_height": "--height",
        "fps": "--fps",
        "map_size": "--map-size",
        "tile_size": "--tile-size",
    }
    for name, flag in positive.items():
        value = getattr(args, name)
        if value is not None and value <= 0:
            parser.error(f"{flag} must be positive")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides = {
        name: getattr(args, name)
        for name in ("screen_width", "screen_height", "fps", "map_path",
                     "seed", "map_size", "tile_size", "minimap_visible")
    }
    config = build_config(load_config(args.config_file), overrides)

    pygame.init()
    viewer = Viewer(config)
    viewer.run()
    pygame.quit()


if __name__ == "__main__":
    main()
