"""Keyboard input source: pygame events in, one Command per frame out"""
from collections import deque
from typing import Deque, Optional

import pygame

from tetris_config import CONFIG
from tetris_game import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,   pygame.K_h: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT, pygame.K_l: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,   pygame.K_j: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE_CW,     pygame.K_x: Command.ROTATE_CW,
    pygame.K_k: Command.ROTATE_CW,
    pygame.K_z: Command.ROTATE_CCW,
    pygame.K_p: Command.TOGGLE_PAUSE,   pygame.K_ESCAPE: Command.TOGGLE_PAUSE,
    pygame.K_q: Command.QUIT,
}

# Commands that mean something while the game is paused
PAUSE_COMMANDS = (Command.TOGGLE_PAUSE, Command.QUIT)


class CommandQueue:
    """Bounded FIFO of pending commands. Moves queued while paused are
    dropped so they cannot replay after resume."""
    def __init__(self, maxlen: int = 8):
        self.items: Deque[Command] = deque(maxlen=maxlen)

    def __len__(self):
        return len(self.items)

    def push(self, cmd: Command, paused: bool = False):
        if paused and cmd not in PAUSE_COMMANDS:
            return
        self.items.append(cmd)

    def pop(self) -> Optional[Command]:
        return self.items.popleft() if self.items else None


class KeyboardInput:
    """poll() hands out one queued key press per call and leaves the rest for
    later frames. Held keys auto-repeat (DAS/ARR)."""
    def __init__(self):
        self.queue = CommandQueue()
        pygame.key.set_repeat(int(CONFIG["DAS_MS"]), int(CONFIG["ARR_MS"]))

    def pump(self, paused: bool = False):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.queue.push(Command.QUIT)
            elif e.type == pygame.KEYDOWN:
                cmd = KEYMAP.get(e.key)
                if cmd is not None:
                    self.queue.push(cmd, paused)

    def poll(self, paused: bool = False) -> Optional[Command]:
        self.pump(paused)
        return self.queue.pop()
