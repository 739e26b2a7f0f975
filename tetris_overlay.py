import pygame

from tetris_game import Snapshot
from tetris_layout import Dims


class Overlay:
    """Dimmed banner over the board while paused or after game over."""
    def __init__(self, font, big_font):
        self.font = font
        self.big_font = big_font

    def message(self, snap: Snapshot):
        if snap.game_over:
            return "GAME OVER", f"Score {snap.score}"
        if snap.paused:
            return "PAUSED", "P to resume • Q to quit"
        return None

    def draw(self, screen, snap: Snapshot, d: Dims):
        msg = self.message(snap)
        if msg is None: return
        title, hint = msg
        s = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s, (d.board_x, d.board_y))
        cx, cy = d.board_x + d.board_w // 2, d.board_y + d.board_h // 2
        t = self.big_font.render(title, True, (255,220,220) if snap.game_over else (220,240,255))
        screen.blit(t, t.get_rect(center=(cx, cy - 16)))
        h = self.font.render(hint, True, (200,210,235))
        screen.blit(h, h.get_rect(center=(cx, cy + 20)))
