from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional

import pygame


class TileSet:
    """Ordered collection of tile images; a tilemap stores indices into it."""

    def __init__(self, images: Optional[Iterable[pygame.Surface]] = None) -> None:
        self.images: List[pygame.Surface] = list(images or [])

    def __len__(self) -> int:
        return len(self.images)

    def __iter__(self) -> Iterator[pygame.Surface]:
        return iter(self.images)

    def index_of(self, image: pygame.Surface) -> Optional[int]:
        # Surfaces compare by identity; two equal-looking images are different tiles.
        for index, existing in enumerate(self.images):
            if existing is image:
                return index
        return None

    def get_image(self, index: int) -> Optional[pygame.Surface]:
        if 0 <= index < len(self.images):
            return self.images[index]
        return None

    def add_tile(self, image: pygame.Surface) -> int:
        existing = self.index_of(image)
        if existing is not None:
            return existing
        self.images.append(image)
        return len(self.images) - 1

    def copy(self) -> "TileSet":
        """New tileset list sharing the same image objects."""
        return TileSet(self.images)

    @classmethod
    def from_images(cls, images: Iterable[pygame.Surface]) -> "TileSet":
        return cls(images)

    @classmethod
    def from_files(
        cls,
        paths: Iterable[str],
        *,
        loader: Callable[[str], pygame.Surface] = pygame.image.load,
    ) -> "TileSet":
        return cls(loader(path) for path in paths)
