"""Board renderer, HUD and Game Over screen"""

import os

import pygame

from escapegame.constants import (
    TILE_SIZE, GRID_HEIGHT, HUD_PADDING, TEXT_COLOR, BG_COLOR, HEALTH_BAR_HEIGHT,
    TILE_COLORS, PLAYER_COLOR, SEEKER_COLOR, CHASER_COLOR, FUEL_COLOR, POTION_COLOR,
    GHOST_COLOR, TILE_SPRITE_DIR,
)
from escapegame.models import Tile


class BoardRenderer:
    """
    Read-only consumer of engine state.

    ``update`` is called by the engine once per turn and only keeps
    references; ``draw`` paints the latest snapshot every frame.
    """

    def __init__(self) -> None:
        self.grid = None
        self.player = None
        self.seekers = []
        self.chasers = []
        self.fuel = None
        self.potion = None
        self.ghost = None
        self.tile_sprites = self.load_tile_sprites()

    def load_tile_sprites(self) -> dict:
        """Load one sprite per tile kind from assets, if present."""
        sprites = {}
        for tile in Tile:
            path = os.path.join(TILE_SPRITE_DIR, f"{tile.name.lower()}.png")
            if not os.path.exists(path):
                continue
            try:
                img = pygame.image.load(path).convert()
                sprites[tile] = pygame.transform.scale(img, (TILE_SIZE, TILE_SIZE))
            except pygame.error as e:
                print(f"Failed to load tile sprite {path}: {e}")
        return sprites

    def update(self, grid, player, seekers, chasers, fuel, potion, ghost) -> None:
        self.grid = grid
        self.player = player
        self.seekers = seekers
        self.chasers = chasers
        self.fuel = fuel
        self.potion = potion
        self.ghost = ghost

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        return pygame.Rect(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, TILE_SIZE)

    def draw(self, surf: pygame.Surface) -> None:
        surf.fill(BG_COLOR)
        if self.grid is None:
            return

        for pos in self.grid.positions():
            tile = self.grid[pos]
            rect = self.cell_rect(pos.x, pos.y)
            sprite = self.tile_sprites.get(tile)
            if sprite:
                surf.blit(sprite, rect)
            else:
                pygame.draw.rect(surf, TILE_COLORS[tile.name], rect)

        for item, color in ((self.fuel, FUEL_COLOR), (self.potion, POTION_COLOR), (self.ghost, GHOST_COLOR)):
            if item is not None:
                pygame.draw.rect(surf, color, self.cell_rect(item.x, item.y).inflate(-14, -14))

        for monster in self.seekers:
            pygame.draw.circle(surf, SEEKER_COLOR, self.cell_rect(monster.x, monster.y).center, TILE_SIZE // 3)
        for monster in self.chasers:
            pygame.draw.circle(surf, CHASER_COLOR, self.cell_rect(monster.x, monster.y).center, TILE_SIZE // 3)

        if self.player is not None:
            rect = self.cell_rect(self.player.x, self.player.y)
            pygame.draw.circle(surf, PLAYER_COLOR, rect.center, TILE_SIZE // 3)
            self.draw_health_bar(surf, rect)

    def draw_health_bar(self, surf: pygame.Surface, rect: pygame.Rect) -> None:
        """Thin bar above the player; turns gold while above max health."""
        player = self.player
        progress = max(0.0, min(1.0, player.health / player.max_health))
        if player.health > player.max_health:
            color = (255, 215, 0)
        elif progress > 0.6:
            color = (0, 255, 0)
        elif progress > 0.3:
            color = (255, 255, 0)
        else:
            color = (255, 0, 0)
        pygame.draw.rect(surf, (50, 50, 50), (rect.x, rect.y, rect.width, HEALTH_BAR_HEIGHT))
        filled_width = int(rect.width * progress)
        if filled_width > 0:
            pygame.draw.rect(surf, color, (rect.x, rect.y, filled_width, HEALTH_BAR_HEIGHT))


class HUD:
    """Status strip under the map."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font

    def draw(self, surf: pygame.Surface, health: int, max_health: int, cleared: int, turn: int,
             fuel_collected: bool, ghost: bool, muted: bool = False) -> None:
        top = GRID_HEIGHT * TILE_SIZE + HUD_PADDING
        items = [
            f"Health: {health}/{max_health}",
            f"Cleared: {cleared}",
            f"Turn: {turn}",
            "Fuel: YES" if fuel_collected else "Fuel: no",
        ]
        if ghost:
            items.append("GHOST")
        if muted:
            items.append("MUTED")

        x = HUD_PADDING
        for line in items:
            text_surf = self.font.render(line, True, TEXT_COLOR)
            surf.blit(text_surf, (x, top))
            x += text_surf.get_width() + 24


class GameOverScreen:
    """Game over screen with final stats and restart option."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, cleared: int, turns: int) -> None:
        """
        Draw game over screen.
        """
        current_width = surf.get_width()
        current_height = surf.get_height()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("GAME OVER", True, (255, 100, 100))
        title_y = max(80, int(current_height * 0.25))
        game_over_rect = game_over_text.get_rect(center=(current_width//2, title_y))
        surf.blit(game_over_text, game_over_rect)

        stats_lines = [
            f"Levels cleared: {cleared}",
            f"Turns survived: {turns}",
        ]

        y_offset = max(title_y + 80, int(current_height * 0.4))
        for line in stats_lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            text_rect = text_surf.get_rect(center=(current_width // 2, y_offset))
            surf.blit(text_surf, text_rect)
            y_offset += 30

        inst_text = self.font_small.render("Press R to restart or ESC to quit", True, (150, 150, 150))
        inst_rect = inst_text.get_rect(center=(current_width // 2, y_offset + 30))
        surf.blit(inst_text, inst_rect)
