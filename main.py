"""Game entry point"""

from __future__ import annotations

import pygame

from escapegame.constants import (
    WIDTH, HEIGHT, FPS, BG_COLOR, FONT_NAME, FONT_SIZE_SMALL, FONT_SIZE_MEDIUM,
    FONT_SIZE_LARGE, LOG_FILE,
)
from escapegame.engine import GameEngine
from escapegame.logger import GameLogger
from escapegame.models import Direction, GameState
from escapegame.sound import SoundEffect
from ui import BoardRenderer, HUD, GameOverScreen

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


class Game:
    """
    pygame shell around the engine: owns the window, maps keys to commands
    and draws whatever the renderer last received.
    """

    def __init__(self) -> None:
        """Initialize subsystems, load assets, and set initial game state."""
        pygame.init()
        pygame.display.set_caption("EscapE")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)

        self.init_audio()
        self.renderer = BoardRenderer()
        self.logger = GameLogger(LOG_FILE)
        self.hud = HUD(self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)
        self.reset_game()

    def init_audio(self) -> None:
        """
        Initialize audio & load assets.
        """
        pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        self.sound = SoundEffect()

    def reset_game(self) -> None:
        """Start over from level 0."""
        self.engine = GameEngine(renderer=self.renderer, audio=self.sound, logger=self.logger)
        self.engine.start_game()

    # --------------------------------- Loop -----------------------------------------

    def show_start_screen(self) -> bool:
        """
        Display the start screen with instructions.

        Returns
        -------
        bool
            True if user wants to start game, False if quit
        """
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return False
                    if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                        return True
                    if event.key == pygame.K_m:
                        self.sound.toggleMute()

            self.draw_start_screen()
            self.clock.tick(FPS)

    def draw_start_screen(self) -> None:
        self.screen.fill(BG_COLOR)

        title_text = self.font_big.render("ESCAPE", True, (255, 255, 100))
        title_rect = title_text.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 140))
        self.screen.blit(title_text, title_rect)

        instructions = [
            "HOW TO PLAY:",
            "Arrow keys / WASD - Move one tile",
            "Collect the fuel and return to the car",
            "The ghost item lets you walk through walls",
            "Beware of nests",
            "+ / - - Music volume",
            "M - Toggle mute",
            "SPACE - Start, ESC - Quit",
        ]
        small = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)
        y_start = HEIGHT // 2 - 80
        for i, instruction in enumerate(instructions):
            color = (255, 255, 100) if i == 0 else (180, 180, 180)
            font = self.font_small if i == 0 else small
            text = font.render(instruction, True, color)
            text_rect = text.get_rect(center=(WIDTH // 2, y_start + i * 25))
            self.screen.blit(text, text_rect)

        pygame.display.flip()

    def run(self) -> None:
        """Main game entry point: show start screen then run game loop."""
        if not self.show_start_screen():
            pygame.quit()
            return
        self.run_game_loop()
        pygame.quit()

    def run_game_loop(self) -> None:
        """Main game loop: each accepted arrow key is exactly one engine turn."""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_r and self.engine.state is GameState.DEAD:
                        self.reset_game()
                    elif event.key == pygame.K_m:
                        self.sound.toggleMute()
                    elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                        self.sound.set_bgm_volume(self.sound.bgm_volume + 0.1)
                    elif event.key == pygame.K_MINUS:
                        self.sound.set_bgm_volume(self.sound.bgm_volume - 0.1)
                    elif event.key in KEY_DIRECTIONS:
                        self.engine.handle_command(KEY_DIRECTIONS[event.key])

            self.draw()
            self.clock.tick(FPS)

    def draw(self) -> None:
        engine = self.engine
        self.renderer.draw(self.screen)
        self.hud.draw(self.screen, engine.player.health, engine.player.max_health, engine.cleared,
                      engine.turn_number, engine.fuel_collected, engine.player.ghost, self.sound.muted)
        if engine.state is GameState.DEAD:
            self.game_over_screen.draw(self.screen, engine.cleared, engine.turn_number - 1)
        pygame.display.flip()


def main() -> None:
    Game().run()


if __name__ == "__main__":
    main()
