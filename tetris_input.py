
"""Key bindings: pygame events -> engine commands"""
from typing import Optional
import pygame
from tetris_config import CONFIG
from tetris_engine import Command

KEYDOWN_COMMANDS = {
    pygame.K_ESCAPE: Command.PAUSE_TOGGLE,
    pygame.K_RETURN: Command.RESET,
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_UP: Command.ROTATE,
    pygame.K_DOWN: Command.SOFT_DROP_ON,
}

KEYUP_COMMANDS = {
    pygame.K_DOWN: Command.SOFT_DROP_OFF,
}

MUSIC_KEY = pygame.K_m

def enable_key_repeat():
    """Held keys resend KEYDOWN after the delay, then every interval."""
    pygame.key.set_repeat(CONFIG["KEY_REPEAT_DELAY_MS"], CONFIG["KEY_REPEAT_MS"])

def translate(e) -> Optional[Command]:
    if e.type == pygame.KEYDOWN:
        return KEYDOWN_COMMANDS.get(e.key)
    if e.type == pygame.KEYUP:
        return KEYUP_COMMANDS.get(e.key)
    return None

def soft_drop_sync(down_held: bool) -> Command:
    """Command that brings gravity back in line with the DOWN key after a resume."""
    return Command.SOFT_DROP_ON if down_held else Command.SOFT_DROP_OFF
