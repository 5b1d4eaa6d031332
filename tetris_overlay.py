import pygame
from tetris_game import Snapshot

class Banner:
    """Dimmed message box over the board for the paused and game-over states."""
    def __init__(self, font, small_font):
        self.font=font; self.small_font=small_font

    @staticmethod
    def lines_for(snap: Snapshot):
        if snap.game_over: return ("GAME OVER", f"Score {snap.score}  -  R to play again")
        if snap.paused: return ("PAUSED", "P to start / resume")
        return None

    def draw(self,screen,snap,rect):
        msg=self.lines_for(snap)
        if msg is None: return
        title,hint=msg
        s=pygame.Surface(rect.size,pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s,rect.topleft)
        t=self.font.render(title,True,(255,220,220) if snap.game_over else (220,240,255))
        screen.blit(t,t.get_rect(center=(rect.centerx,rect.centery-18)))
        h=self.small_font.render(hint,True,(200,210,235))
        screen.blit(h,h.get_rect(center=(rect.centerx,rect.centery+18)))
