"""
Playing / Ended lifecycle around a GameState.

A session is a plain value: every entry point takes the current session and
returns the next one. The shell and the autoplay runner just keep the latest
return value, so there is no process-wide game object.
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Union
import logging
import random

from .config import CFG, Config
from .game import GameState, new_game_state, set_heading, step_game

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


@dataclass(frozen=True)
class RenderModel:
    """Read-only snapshot handed to the drawing code."""
    snake: Tuple[Cell, ...]        # head first
    food: Optional[Cell]
    score: int
    game_over: bool
    final_score: Optional[int] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class Playing:
    state: GameState


@dataclass(frozen=True)
class Ended:
    final_score: int
    reason: Optional[str]
    last_frame: RenderModel        # board at the moment the game ended


Session = Union[Playing, Ended]


def _snapshot(state: GameState) -> RenderModel:
    return RenderModel(
        snake=tuple(state.snake),
        food=state.food,
        score=state.score,
        game_over=False,
    )


def new_session(
    now_ms: int,
    cfg: Config = CFG,
    rng: Optional[random.Random] = None,
) -> Session:
    return Playing(new_game_state(now_ms, cfg, rng))


def handle_direction_input(session: Session, heading: Tuple[int, int]) -> Session:
    """Forward a directional key to the engine; ignored once the game has ended."""
    if isinstance(session, Playing):
        set_heading(session.state, heading)
    return session


def handle_restart_input(
    session: Session,
    now_ms: int,
    cfg: Config = CFG,
    rng: Optional[random.Random] = None,
) -> Session:
    """
    Start over with a brand new engine. Accepted in both states, so R also
    works as "new game" while playing.
    """
    if isinstance(session, Ended):
        logger.info("Restart after game over (score=%d)", session.final_score)
    else:
        logger.info("Restart while playing (score=%d)", session.state.score)
    return new_session(now_ms, cfg, rng)


def advance(session: Session, now_ms: int) -> Session:
    """Poll the engine clock; switches to Ended when the snake dies."""
    if isinstance(session, Ended):
        return session

    state = session.state
    if step_game(state, now_ms):
        return session

    logger.info("Game over: %s, final score %d", state.death_reason, state.score)
    return Ended(
        final_score=state.score,
        reason=state.death_reason,
        last_frame=_snapshot(state),
    )


def render_model(session: Session) -> RenderModel:
    if isinstance(session, Playing):
        return _snapshot(session.state)
    frame = session.last_frame
    return RenderModel(
        snake=frame.snake,
        food=frame.food,
        score=session.final_score,
        game_over=True,
        final_score=session.final_score,
        reason=session.reason,
    )
