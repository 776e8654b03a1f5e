"""Cached loading of image files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pygame


class TextureError(RuntimeError):
    """Raised when an image file cannot be loaded."""


def _load_image(path: Path) -> pygame.Surface:
    return pygame.image.load(str(path))


class TextureManager:
    """Loads each image once, relative to an assets directory."""

    def __init__(
        self,
        root: str | Path = ".",
        loader: Callable[[Path], Any] | None = None,
    ) -> None:
        self.root = Path(root)
        self._loader = loader or _load_image
        self._cache: dict[str, Any] = {}

    def get(self, filename: str) -> Any:
        if filename not in self._cache:
            try:
                self._cache[filename] = self._loader(self.root / filename)
            except (OSError, pygame.error) as exc:
                raise TextureError(f"failed to load texture: {filename}") from exc
        return self._cache[filename]

    def clear(self) -> None:
        self._cache.clear()

    def __contains__(self, filename: object) -> bool:
        return filename in self._cache

    def __len__(self) -> int:
        return len(self._cache)