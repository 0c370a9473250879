"""Threaded token stream with a bounded hand-off.

Runs a Lexer on a worker thread and passes its tokens to the consumer
through a bounded queue. With the default capacity of one the hand-off is
a rendezvous: the producer waits for the consumer to take each token
before scanning further.

Example:
    >>> with TokenStream("# Title\\r\\n") as stream:
    ...     for token in stream:
    ...         print(token)
    Header H1: 'Title'
    EOF

"""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator

from marklex.config import LexConfig
from marklex.lexer import Lexer
from marklex.tokens import Token
from marklex.utils.logger import get_logger

logger = get_logger(__name__)


class TokenStream:
    """Iterate tokens produced on a worker thread.

    The Lexer is created in the calling thread, so it picks up the
    caller's context config. Closing the stream cancels the producer,
    unblocks it, and joins the worker.

    Thread Safety:
        One consumer per stream. The producer and consumer share only the
        queue and the close event.

    """

    __slots__ = ("_lexer", "_queue", "_thread", "_closed", "_error")

    def __init__(
        self,
        source: str,
        *,
        source_file: str | None = None,
        config: LexConfig | None = None,
        maxsize: int = 1,
    ) -> None:
        """Prepare a stream over source.

        Args:
            source: Markdown source text
            source_file: Optional source file path for error messages
            config: Scan configuration (defaults to the caller's context config)
            maxsize: Hand-off capacity; 1 makes it a rendezvous

        Raises:
            ValueError: maxsize is smaller than 1
        """
        if maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")
        self._lexer = Lexer(source, source_file=source_file, config=config)
        self._queue: queue.Queue[Token | None] = queue.Queue(maxsize=maxsize)
        self._thread: threading.Thread | None = None
        self._closed = threading.Event()
        self._error: Exception | None = None

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def start(self) -> None:
        """Start the producer thread (idempotent)."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._produce,
            name="marklex-producer",
            daemon=True,
        )
        self._thread.start()
        logger.debug("Started token producer %s", self._thread.name)

    def _produce(self) -> None:
        try:
            for token in self._lexer.tokenize():
                self._queue.put(token)
                if self._closed.is_set():
                    self._lexer.cancel()
        except Exception as exc:
            # Re-raised in the consumer thread by __iter__
            self._error = exc
        finally:
            # None marks the end of the producer's output
            self._queue.put(None)
            logger.debug("Token producer finished")

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until the producer finishes or the stream is closed.

        Leaving the loop early, or finishing it, closes the stream, so a
        stream is iterated at most once.
        """
        if self._closed.is_set():
            return
        self.start()
        try:
            while not self._closed.is_set():
                item = self._queue.get()
                if item is None:
                    if self._error is not None:
                        raise self._error
                    return
                yield item
        finally:
            self.close()

    def close(self) -> None:
        """Cancel the producer and wait for the worker to exit."""
        self._closed.set()
        self._lexer.cancel()
        thread = self._thread
        if thread is None:
            return
        while thread.is_alive():
            self._drain()
            thread.join(timeout=0.01)
        self._drain()

    def _drain(self) -> None:
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return

    def __enter__(self) -> TokenStream:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
