
"""Pause and game-over banners drawn over the board"""
from typing import Optional
import pygame
from tetris_engine import GameState

class Overlay:
    def __init__(self, board_rect: pygame.Rect, font: pygame.font.Font):
        self.board_rect=board_rect
        self.font=font
        self.banner_rect: Optional[pygame.Rect]=None

    def draw(self,screen,state:GameState):
        self.banner_rect=None
        if state is GameState.RUNNING: return
        board=self.board_rect
        s=pygame.Surface(board.size,pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s,board.topleft)
        if state is GameState.PAUSED:
            lines=["PAUSED","Esc to resume"]
        else:
            lines=["GAME OVER","Click to restart!"]
        y=board.centery-len(lines)*18
        for i,txt in enumerate(lines):
            col=(255,220,220) if i==0 else (200,210,235)
            msg=self.font.render(txt,True,col)
            rect=msg.get_rect(center=(board.centerx,y)); y+=36
            screen.blit(msg,rect)
        if state is GameState.GAME_OVER:
            self.banner_rect=board

    def hit(self,pos) -> bool:
        """True if pos lands on the game-over banner from the last draw."""
        return self.banner_rect is not None and self.banner_rect.collidepoint(pos)
