"""Menu, match and winner screens, and the program entry point."""

from __future__ import annotations

import argparse
import enum
from pathlib import Path

import pygame

from pongpp.button import Button
from pongpp.game import Match

WINDOW_SIZE = (800, 800)
TITLE = "Pong++"
BLACK = (0, 0, 0)
MUSIC_VOLUME = 0.3
CLICK_DELAY_MS = 200

START_BUTTON_IMAGE = Path("Graphics/startButton.png")
EXIT_BUTTON_IMAGE = Path("Graphics/exitButton.png")
MENU_BACKGROUND = Path("Graphics/menuBG.png")
WINNER_BACKGROUND = Path("Graphics/creditsBG.png")
MENU_MUSIC = Path("Audio/bgTheme.mp3")
GAME_MUSIC = Path("Audio/pongTheme.mp3")
WINNER_MUSIC = Path("Audio/playerWinsTheme.ogg")
BUTTON_SOUND = Path("Audio/buttonPressed.ogg")
COLLIDE_SOUND = Path("Audio/collideSound.ogg")


class MenuAction(enum.Enum):
    NONE = "none"
    START = "start"
    EXIT = "exit"


def choose_action(start_button, exit_button, mouse_pos, mouse_pressed) -> MenuAction:
    """Decide what a click at ``mouse_pos`` does on a start/exit screen."""
    if start_button.is_pressed(mouse_pos, mouse_pressed):
        return MenuAction.START
    if exit_button.is_pressed(mouse_pos, mouse_pressed):
        return MenuAction.EXIT
    return MenuAction.NONE


def _ensure_audio() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error:
        return False
    return True


def _load_sound(path: Path):
    if not _ensure_audio():
        return None
    try:
        return pygame.mixer.Sound(str(path))
    except (pygame.error, FileNotFoundError):
        return None


def _play_music(path: Path) -> None:
    if not _ensure_audio():
        return
    try:
        pygame.mixer.music.load(str(path))
        pygame.mixer.music.set_volume(MUSIC_VOLUME)
        pygame.mixer.music.play(-1)
    except (pygame.error, FileNotFoundError):
        pass


def _load_background(path: Path):
    try:
        return pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError):
        return None


def _poll_events() -> tuple[bool, bool]:
    """Return (close requested, left button clicked) for this frame."""
    close = clicked = False
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            close = True
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            close = True
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            clicked = True
    return close, clicked


def _button_screen(screen, background_path: Path, music_path: Path, fps: int) -> MenuAction:
    """Show a background with start/exit buttons until one is clicked.

    Closing the window counts as choosing exit.
    """
    background = _load_background(background_path)
    start_button = Button(START_BUTTON_IMAGE, (300, 300), 0.5)
    exit_button = Button(EXIT_BUTTON_IMAGE, (300, 450), 0.5)
    click = _load_sound(BUTTON_SOUND)
    _play_music(music_path)
    clock = pygame.time.Clock()

    while True:
        close, clicked = _poll_events()
        if close:
            return MenuAction.EXIT
        action = choose_action(start_button, exit_button, pygame.mouse.get_pos(), clicked)
        if action is not MenuAction.NONE:
            if click is not None:
                click.play()
            pygame.time.wait(CLICK_DELAY_MS)
            return action

        screen.fill(BLACK)
        if background is not None:
            screen.blit(background, (0, 0))
        start_button.draw(screen)
        exit_button.draw(screen)
        pygame.display.flip()
        clock.tick(fps)


def winner(screen) -> bool:
    """Show the winner screen; return True if another match should start."""
    return _button_screen(screen, WINNER_BACKGROUND, WINNER_MUSIC, 30) is MenuAction.START


def run_game(screen) -> bool:
    """Play matches until the player quits; return True when the window should close."""
    collide = _load_sound(COLLIDE_SOUND)
    _play_music(GAME_MUSIC)
    clock = pygame.time.Clock()
    match = Match(*screen.get_size())

    while True:
        close, _ = _poll_events()
        if close:
            return True

        keys = pygame.key.get_pressed()
        if match.step(keys[pygame.K_UP], keys[pygame.K_DOWN]) and collide is not None:
            collide.play()

        if match.has_winner():
            if not winner(screen):
                return True
            match = Match(*screen.get_size())
            _play_music(GAME_MUSIC)
            continue

        match.draw(screen)
        pygame.display.flip()
        clock.tick(60)


def main(argv=None) -> int:
    """Open the window and run the main menu."""
    argparse.ArgumentParser(prog="pongpp", description="A two-paddle arcade game.").parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)
        while True:
            action = _button_screen(screen, MENU_BACKGROUND, MENU_MUSIC, 60)
            if action is not MenuAction.START or run_game(screen):
                break
    finally:
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())