"""SessionRegistry: named SeededRNG instances shared across HTTP requests.

FastAPI runs sync endpoints on a thread pool, while a SeededRNG is not
thread-safe. Every session carries its own lock and all access goes through
``locked()``.
"""

from __future__ import annotations

import itertools
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from seedforge.config import ForgeConfig
from seedforge.core.enums import Algorithm
from seedforge.systems.rng import SeededRNG

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    """No session is registered under the requested id."""


class SessionLimitError(RuntimeError):
    """The registry already holds ``max_sessions`` sessions."""


@dataclass
class Session:
    session_id: str
    seed: str | int
    rng: SeededRNG
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def algorithm(self) -> Algorithm:
        return self.rng.algorithm


class SessionRegistry:
    """Thread-safe map of session id to Session."""

    def __init__(self, config: ForgeConfig) -> None:
        self._config = config
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()
        self._ids = itertools.count(1)

    @property
    def config(self) -> ForgeConfig:
        return self._config

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self, seed: str | int | None = None, algorithm: str | Algorithm | None = None) -> Session:
        if seed is None:
            seed = self._config.default_seed
        rng = SeededRNG(seed, algorithm if algorithm is not None else self._config.default_algorithm)
        return self._register(seed, rng)

    def adopt(self, seed: str | int, rng: SeededRNG) -> Session:
        """Register an already-built generator (used by fork)."""
        return self._register(seed, rng)

    def _register(self, seed: str | int, rng: SeededRNG) -> Session:
        with self._lock:
            if len(self._sessions) >= self._config.max_sessions:
                raise SessionLimitError(f"Session limit reached ({self._config.max_sessions})")
            session_id = f"gen-{next(self._ids)}"
            session = Session(session_id=session_id, seed=seed, rng=rng)
            self._sessions[session_id] = session
        logger.info("Session %s created (%s)", session_id, rng.algorithm.value)
        return session

    def get(self, session_id: str) -> Session:
        with self._lock:
            try:
                return self._sessions[session_id]
            except KeyError:
                raise SessionNotFoundError(f"Unknown generator session: {session_id}") from None

    @contextmanager
    def locked(self, session_id: str) -> Iterator[Session]:
        session = self.get(session_id)
        with session.lock:
            yield session

    def remove(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(f"Unknown generator session: {session_id}")
        logger.info("Session %s removed", session_id)

    def clear(self) -> None:
        with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
        if count:
            logger.info("Dropped %d session(s)", count)
