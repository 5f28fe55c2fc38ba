import logging
import logging.handlers
import queue
from pathlib import Path
from typing import Optional, Union

from cafeapi.util.basicpatterns import Singleton

__all__ = ["LogConfig", "configure_root_logger"]


class _LogServer(logging.handlers.QueueListener):
    """Dispatch the records pushed in the log queue to the file and console."""

    def __init__(
        self,
        log_queue: "queue.Queue[logging.LogRecord]",
        log_file: Path,
        log_level: int = logging.INFO,
        log_on_console: bool = True,
    ):
        super().__init__(
            log_queue,
            *self._handlers(log_file, log_level, log_on_console),
            respect_handler_level=True,
        )

    @staticmethod
    def _handlers(
        log_file: Path, log_level: int, log_on_console: bool
    ) -> list[logging.Handler]:
        logging_format = "%(levelname)-8s %(name)s: %(message)s"
        logging_date_format = "%Y-%m-%d %H:%M:%S"
        file_logging_format = (
            "%(asctime)s.%(msecs)03d %(levelname)-8s %(threadName)-20s"
            " %(name)s: %(message)s"
        )
        console_log_level = logging.WARNING

        handlers: list[logging.Handler] = []
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError:
            console_log_level = log_level
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(
                logging.Formatter(file_logging_format, logging_date_format)
            )
            handlers.append(file_handler)
        finally:
            if log_on_console:
                console_handler = logging.StreamHandler()
                console_handler.set_name("console")
                console_handler.setFormatter(logging.Formatter(logging_format))
                console_handler.setLevel(console_log_level)
                handlers.append(console_handler)
        return handlers


class LogConfig(metaclass=Singleton):
    """The application logging configuration.

    Log records of every logger are pushed in a queue by the root logger and
    written by a log server thread, so that request handlers never wait on the
    log file.
    """

    def __init__(
        self,
        log_file: Optional[Path] = None,
        log_level: Union[int, str] = logging.INFO,
        log_on_console: bool = True,
    ):
        self.log_file = log_file or Path("cafeapi.log")
        if isinstance(log_level, str):
            log_level = logging.getLevelName(log_level.upper())
        self.log_level = log_level
        self.log_on_console = log_on_console

        logging.captureWarnings(True)

        self.log_queue: "queue.Queue[logging.LogRecord]" = queue.Queue(-1)
        self.log_server = _LogServer(
            self.log_queue, self.log_file, self.log_level, self.log_on_console
        )

    def init_logging(self) -> None:
        self.log_server.start()
        configure_root_logger(self.log_queue, self.log_level)

    def stop_logging(self) -> None:
        self.log_server.stop()
        for handler in self.log_server.handlers:
            handler.close()


def configure_root_logger(
    log_queue: "queue.Queue[logging.LogRecord]", log_level: Union[int, str]
) -> None:
    handler = logging.handlers.QueueHandler(log_queue)
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(log_level)
