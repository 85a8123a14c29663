"""
levellog: leveled, colorized console logger.
"""
from levellog.core.colors import level_color, strip_ansi
from levellog.core.context import LogContext, default_context, get_minimum, set_minimum
from levellog.core.errors import InvalidLevelError, LevelLogError, SinkWriteError
from levellog.core.levels import Level
from levellog.core.logger import LevelLogger
from levellog.system.settings import LogSettings

__version__ = "0.1.0"

__all__ = [
    'Level','LevelLogger','LogContext','LogSettings',
    'default_context','get_minimum','set_minimum',
    'level_color','strip_ansi',
    'LevelLogError','InvalidLevelError','SinkWriteError',
]
