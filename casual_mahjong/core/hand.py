"""Hand management - tiles in hand, discard pool, last drawn tile."""

from typing import List, Optional

from .tile import Tile


class Hand:
    """Manages a player's hand state during a game.

    Attributes:
        tiles: Tiles in hand, kept in display order
        discard_pool: Tiles discarded (in order, append-only)
        draw_tile: The most recently drawn tile (for display highlight)
    """

    def __init__(self, tiles: Optional[List[Tile]] = None):
        self.tiles: List[Tile] = list(tiles or [])
        self.discard_pool: List[Tile] = []
        self.draw_tile: Optional[Tile] = None
        self.sort_tiles()

    def draw(self, tile: Tile):
        """Add a drawn tile and re-sort."""
        self.tiles.append(tile)
        self.sort_tiles()
        self.draw_tile = tile

    def find(self, tile_id: str) -> Optional[Tile]:
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        return None

    def discard(self, tile_id: str) -> Optional[Tile]:
        """Move the first tile with ``tile_id`` to the discard pool.

        Returns the discarded tile, or None (and changes nothing) when the
        id is not in hand.
        """
        for i, tile in enumerate(self.tiles):
            if tile.id == tile_id:
                del self.tiles[i]
                self.discard_pool.append(tile)
                self.draw_tile = None
                return tile
        return None

    def sort_tiles(self):
        """Sort by suit rank then value."""
        self.tiles.sort()

    def __len__(self):
        return len(self.tiles)

    def __contains__(self, tile_id: str):
        return self.find(tile_id) is not None

