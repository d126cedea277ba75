"""
Reading keystrokes from stdin as a shared async feed.
"""

import os
import sys
import asyncio
import logging
from codecs import getincrementaldecoder


logger = logging.getLogger("ansiterm")

CHUNK_SIZE = 1024


class StdinSource:
    """A byte source that reads from stdin without blocking the event loop.

    On Unix, the loop tells us when stdin is readable, and then we read
    what is there. Where that is not possible (on Windows, or when stdin is
    a regular file) the file descriptor is read via the loop's default
    executor.
    """

    def __init__(self, stdin=None):
        self._stdin = stdin or sys.__stdin__

    async def read(self, n=CHUNK_SIZE):
        loop = asyncio.get_running_loop()
        fd = self._stdin.fileno()
        if not sys.platform.startswith("win"):
            ready = loop.create_future()
            try:
                loop.add_reader(fd, _set_ready, ready)
            except (OSError, NotImplementedError):
                pass  # E.g. PermissionError for a regular file
            else:
                try:
                    await ready
                finally:
                    loop.remove_reader(fd)
                return os.read(fd, n)
        return await loop.run_in_executor(None, os.read, fd, n)


def _set_ready(future):
    if not future.done():
        future.set_result(None)


class KeystrokeStream:
    """A broadcast feed of text typed on the input device.

    All readers share one subscription to the byte source. Each chunk that
    is read is decoded (invalid bytes are replaced, not fatal) and handed to
    every reader that is waiting at that moment. There is no replay: a
    chunk goes only to the readers that wait when it is read. Bytes are
    only read while someone waits, so keys typed while nobody waits stay in
    the OS buffer, and are delivered to the next reader. In
    single-character mode, each chunk is one keystroke.

    Use ``await stream.first()`` to get the next keystroke, or iterate
    with ``async for``.
    """

    def __init__(self, source, encoding="utf-8"):
        self._source = source
        self._decode = getincrementaldecoder(encoding)(errors="replace").decode
        self._waiters = []
        self._pump = None
        self._closed = False

    @property
    def closed(self):
        """Whether the input has ended."""
        return self._closed

    async def first(self):
        """Wait for the next keystroke.

        Raises EOFError when the input has ended.
        """
        if self._closed:
            raise EOFError("input stream is closed")
        loop = asyncio.get_running_loop()
        waiter = loop.create_future()
        self._waiters.append(waiter)
        if self._pump is None:
            self._pump = loop.create_task(self._pump_chunks())
        try:
            return await waiter
        finally:
            if waiter in self._waiters:
                self._waiters.remove(waiter)

    def __aiter__(self):
        return self

    async def __anext__(self):
        try:
            return await self.first()
        except EOFError:
            raise StopAsyncIteration from None

    async def _pump_chunks(self):
        try:
            while self._waiters:
                bb = await self._source.read(CHUNK_SIZE)
                if not bb:  # input is closed
                    logger.info("keystroke stream ended")
                    self._closed = True
                    self._resolve(error=EOFError("input stream is closed"))
                    break
                text = self._decode(bb)
                if text:  # empty if bb is part of a multibyte char
                    self._resolve(text)
        except Exception as err:
            logger.error(f"Error reading keystrokes: {err}")
            self._resolve(error=err)
        finally:
            self._pump = None

    def _resolve(self, text=None, error=None):
        waiters, self._waiters = self._waiters, []
        for waiter in waiters:
            if waiter.done():
                continue
            if error is not None:
                waiter.set_exception(error)
            else:
                waiter.set_result(text)
