import os, sys, logging
from typing import Optional
from functools import partial

PACKAGE = __name__.split('.')[0]

class Logger:
    """
    Named logger for one module. Enabling logging configures the shared
    package logger, so every termattrs module emits to the same target. A
    later Logger with a different target replaces the previous handler.
    """

    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            self._configure_package(log_file)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    @staticmethod
    def _configure_package(log_file: Optional[str]) -> None:
        package_logger = logging.getLogger(PACKAGE)
        package_logger.setLevel(logging.DEBUG)

        if log_file == "-":
            target = sys.stdout
        else:
            if log_file is None:
                project_root = os.path.dirname(os.path.dirname(__file__))
                os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                log_file = os.path.join(project_root, 'logs', 'termattrs_debug.log')
            target = os.path.abspath(log_file)

        for handler in list(package_logger.handlers):
            if getattr(handler, '_termattrs_target', None) is None:
                continue
            if handler._termattrs_target is target or handler._termattrs_target == target:
                return
            package_logger.removeHandler(handler)
            handler.close()

        if target is sys.stdout:
            handler = logging.StreamHandler(sys.stdout)
        else:
            handler = logging.FileHandler(target)
        handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        handler._termattrs_target = target
        package_logger.addHandler(handler)

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
