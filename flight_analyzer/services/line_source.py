"""
Line sources: where the loader gets raw CSV lines from.

The loader only needs two things, "is the file there" and "give me every
line", so that is the whole interface. FileLineSource is the real one; tests
swap in a mock or an in-memory source.
"""
import asyncio
from abc import ABC, abstractmethod
from pathlib import Path


class LineSource(ABC):

    @abstractmethod
    def exists(self, path: str) -> bool:
        ...

    @abstractmethod
    async def read_lines(self, path: str) -> list[str]:
        """Return every line of `path` without line terminators.
        I/O and decoding errors propagate to the caller."""
        ...


class FileLineSource(LineSource):
    """Reads UTF-8 files from the local filesystem."""

    def __init__(self, encoding: str = "utf-8-sig"):
        # utf-8-sig drops a leading byte-order mark if the file has one
        self._encoding = encoding

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    async def read_lines(self, path: str) -> list[str]:
        # Blocking read goes to a worker thread so the event loop stays free
        return await asyncio.to_thread(self._read, path)

    def _read(self, path: str) -> list[str]:
        with open(path, encoding=self._encoding) as handle:
            return [line.rstrip("\n") for line in handle]
