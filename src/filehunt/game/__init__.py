from filehunt.game.session import GameSession
from filehunt.game.types import GameStatus, GuessRecord, GuessResult

__all__ = ["GameSession", "GameStatus", "GuessRecord", "GuessResult"]
