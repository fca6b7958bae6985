import logging
import os
import tempfile
from logging.handlers import RotatingFileHandler

logger = logging.getLogger("gamephysics")

log_file:str = os.environ.get(
    "GAMEPHYSICS_LOG_FILE",
    os.path.join(tempfile.gettempdir(), "gamephysics.log"),
)
file_handler = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=3, delay=True)
file_handler.setFormatter(logging.Formatter(
    "%(asctime)s [%(levelname)s] %(name)s %(filename)s:%(lineno)d: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
))
logger.addHandler(file_handler)

log_level_env:str|None = os.environ.get("LOG_LEVEL", None)
if log_level_env:
    levels_by_name = logging.getLevelNamesMapping()
    level = levels_by_name[log_level_env.upper()]

    logger.setLevel(level)
    logger.propagate = False
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)

else:
    logger.setLevel(logging.WARN)

from gamephysics.point import Point, UNIT_EPSILON
from gamephysics.angles import game_to_user, user_to_game, wrap_degrees, wrap_radians

__all__ = [
    "logger",
    "Point",
    "UNIT_EPSILON",
    "game_to_user",
    "user_to_game",
    "wrap_degrees",
    "wrap_radians",
]
