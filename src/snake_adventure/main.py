# main.py
from __future__ import annotations
import argparse
import logging
import random

import pygame  # type: ignore

from .config import WIDTH, HEIGHT, HUD_HEIGHT, CFG, Config
from .clock import FpsMeter, TickClock
from .controls import Intent, apply_intent
from .input import poll_intents
from .render import (
    draw_game, draw_monitor, draw_controls_hint,
    draw_start, draw_paused, draw_game_over,
)
from .session import Session

logger = logging.getLogger(__name__)


def sync_clock(clock: TickClock, session: Session, now: int) -> None:
    """Run the tick clock only while the session can actually move."""
    if session.running and not clock.running:
        clock.start(now)
    elif not session.running and clock.running:
        clock.stop()


def run(cfg: Config = CFG) -> Session:
    pygame.init()
    try:
        font = pygame.font.SysFont(None, 22)
        title_font = pygame.font.SysFont(None, 42)
        screen = pygame.display.set_mode((WIDTH, HEIGHT + HUD_HEIGHT))
        pygame.display.set_caption("Snake Adventure")
        frame_clock = pygame.time.Clock()

        session = Session(random.Random(cfg.seed))
        ticks = TickClock(cfg.tick_ms)
        fps = FpsMeter()
        started_at = 0
        running = True

        while running:
            now = pygame.time.get_ticks()

            # 1) input
            for intent in poll_intents(session):
                if intent is Intent.QUIT:
                    running = False
                    break
                if apply_intent(session, intent) and intent is Intent.START:
                    started_at = now  # controls hint restarts with each game
            if not running:
                break

            # 2) update
            sync_clock(ticks, session, now)
            for _ in range(ticks.due(now)):
                session.tick()
            sync_clock(ticks, session, now)

            # 3) render
            snap = session.snapshot()
            fps.frame(now)
            if not snap.started:
                draw_start(screen, title_font, font)
            else:
                draw_game(screen, font, snap)
                draw_monitor(screen, font, snap, fps.fps)
                if now - started_at < cfg.controls_hint_ms:
                    draw_controls_hint(screen, font)
                if snap.stats.game_over:
                    draw_game_over(screen, font, snap)
                elif snap.stats.is_paused:
                    draw_paused(screen, font)
            pygame.display.flip()
            frame_clock.tick(cfg.fps)

        ticks.stop()
        return session
    finally:
        pygame.quit()


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Snake Adventure")
    parser.add_argument("--seed", type=int, default=None, help="seed for apple placement")
    parser.add_argument("--fps", type=int, default=CFG.fps, help="render frames per second")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = Config(seed=args.seed, tick_ms=CFG.tick_ms, fps=args.fps,
                 controls_hint_ms=CFG.controls_hint_ms)
    session = run(cfg)

    stats = session.stats
    if session.started:
        outcome = "won" if stats.won else ("over" if stats.game_over else "quit")
        print(f"[GAME] {outcome}: score={stats.score}, apples={stats.apples_eaten}, length={len(session.snake)}")


if __name__ == "__main__":
    main()
