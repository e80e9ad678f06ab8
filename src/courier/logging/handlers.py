"""
Rotating file handler for daily log files.
"""

import os
import time
from logging.handlers import TimedRotatingFileHandler
from typing import List

SECONDS_PER_DAY = 24 * 60 * 60


class DailyRotatingFileHandler(TimedRotatingFileHandler):
    """File handler rotated at midnight, on size, and pruned by age.

    Rotated files are named ``<file>.<YYYY-MM-DD>`` with a ``.N`` counter
    appended when the size cap forces more than one rotation on the same day.
    Rotated files older than ``retention_days`` are removed on rollover.
    """

    def __init__(
        self,
        filename: str,
        max_bytes: int = 0,
        retention_days: int = 14,
        encoding: str = "utf-8",
        delay: bool = True,
    ):
        super().__init__(
            filename,
            when="midnight",
            interval=1,
            backupCount=retention_days,
            encoding=encoding,
            delay=delay,
        )
        self.max_bytes = max_bytes
        self.retention_days = retention_days

    def shouldRollover(self, record) -> bool:
        if int(time.time()) >= self.rolloverAt:
            return True
        if self.max_bytes <= 0:
            return False
        if self.stream is None:
            self.stream = self._open()
        message = f"{self.format(record)}\n".encode(self.encoding or "utf-8")
        self.stream.seek(0, 2)
        return self.stream.tell() + len(message) >= self.max_bytes

    def doRollover(self) -> None:
        if self.stream:
            self.stream.close()
            self.stream = None

        current_time = int(time.time())
        if current_time >= self.rolloverAt:
            # The current file holds the period that just ended
            stamp_time = self.rolloverAt - self.interval
            self.rolloverAt = self.computeRollover(current_time)
        else:
            stamp_time = current_time

        stamp = time.strftime(self.suffix, time.localtime(stamp_time))
        destination = self._next_free_name(f"{self.baseFilename}.{stamp}")
        if os.path.exists(self.baseFilename):
            self.rotate(self.baseFilename, destination)

        for path in self.getFilesToDelete():
            os.remove(path)

        if not self.delay:
            self.stream = self._open()

    def getFilesToDelete(self) -> List[str]:
        """Rotated files whose modification time is past the retention window."""
        directory, base = os.path.split(self.baseFilename)
        prefix = f"{base}."
        cutoff = time.time() - self.retention_days * SECONDS_PER_DAY

        expired = []
        for name in os.listdir(directory):
            if not name.startswith(prefix):
                continue
            path = os.path.join(directory, name)
            if os.path.getmtime(path) < cutoff:
                expired.append(path)
        return expired

    def _next_free_name(self, candidate: str) -> str:
        name = self.rotation_filename(candidate)
        counter = 1
        while os.path.exists(name):
            name = self.rotation_filename(f"{candidate}.{counter}")
            counter += 1
        return name
