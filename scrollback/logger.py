import os, sys, logging
from typing import Optional
from functools import partial

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        # Handlers live on the shared named logger; only attach them once
        configured = any(not isinstance(h, logging.NullHandler) for h in self._logger.handlers)
        if logging_enabled and not configured:
            fmt = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            if log_file == "-":
                # stdout belongs to the screen
                handler = logging.StreamHandler(sys.stderr)
            else:
                if not log_file:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'scrollback_debug.log')
                handler = logging.FileHandler(log_file)
            handler.setFormatter(fmt)
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.DEBUG)
        elif not logging_enabled and not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
