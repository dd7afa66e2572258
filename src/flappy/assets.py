"""
assets.py: Image provider. Loads every sprite concurrently and joins on all of them
before the loop may start.

No sprites ship with the package. The folder comes from --assets or the
FLAPPY_ASSET_DIR environment variable; without one every key gets a placeholder.
"""

import asyncio
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

import pygame

from .constants import ASSET_DIR_ENV, ASSET_FILES, ASSET_PLACEHOLDERS


def default_asset_dir() -> Optional[Path]:
    value = os.environ.get(ASSET_DIR_ENV)
    return Path(value) if value else None


def placeholder(key: str) -> pygame.Surface:
    """A flat-coloured surface with the asset's logical size."""
    size, color = ASSET_PLACEHOLDERS[key]
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill(color)
    return surface


class ImageProvider:
    """
    Maps logical keys (flyer, background, ground, obstacle) to drawable surfaces.
    `sprites` is empty until load_all() completes; then it holds every key.
    """

    def __init__(self, asset_dir: Optional[Path] = None,
                 files: Mapping[str, str] = ASSET_FILES):
        self.asset_dir = Path(asset_dir) if asset_dir is not None else default_asset_dir()
        self.files = dict(files)
        self.sprites: Dict[str, pygame.Surface] = {}

    @property
    def ready(self) -> bool:
        return len(self.sprites) == len(self.files)

    def _load(self, key: str) -> pygame.Surface:
        path = self.asset_dir / self.files[key]
        try:
            image = pygame.image.load(path.as_posix())
        except (OSError, pygame.error) as e:
            print(f"Asset '{key}' unavailable ({e}). Using placeholder.")
            return placeholder(key)
        print(f"Loaded asset '{key}' from {path}")
        return image

    async def load_all(self) -> Dict[str, pygame.Surface]:
        """Completion barrier: returns once every key has a surface."""
        keys = list(self.files)
        if self.asset_dir is None or not self.asset_dir.is_dir():
            where = self.asset_dir if self.asset_dir is not None else f"--assets or {ASSET_DIR_ENV}"
            print(f"No asset folder ({where}). Using placeholders for all sprites.")
            images = [placeholder(key) for key in keys]
        else:
            images = await asyncio.gather(
                *(asyncio.to_thread(self._load, key) for key in keys))
        # Pixel-format conversion needs a display mode; skip it when headless.
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            images = [image.convert_alpha() for image in images]
        self.sprites = dict(zip(keys, images))
        print(f"All {len(keys)} assets ready. Starting loop.")
        return self.sprites

    def __getitem__(self, key: str) -> pygame.Surface:
        return self.sprites[key]
