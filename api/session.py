"""Signed session IDs and the in-memory simulator session store."""

import asyncio
from datetime import datetime, timedelta
from random import Random
from uuid import uuid4

from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from blackjack_sim.game import BlackjackSimulator, RoundLog
from config import config


class SessionSigner:
    """Sign and verify session IDs using itsdangerous."""

    def __init__(self, secret_key: str | None = None) -> None:
        """Initialize the signer with a secret key."""
        self._secret_key = secret_key or config.security.secret_key
        self._serializer = URLSafeTimedSerializer(self._secret_key)

    def sign(self, session_id: str) -> str:
        """Create a signed token from a session ID."""
        return self._serializer.dumps(session_id)

    def unsign(self, token: str, max_age: int | None = None) -> str | None:
        """
        Verify and extract session_id from a signed token.

        Args:
            token: The signed token to verify
            max_age: Maximum age in seconds (defaults to session_ttl)

        Returns:
            The session ID if valid, None otherwise
        """
        max_age = max_age or config.session_ttl
        try:
            return self._serializer.loads(token, max_age=max_age)
        except (BadSignature, SignatureExpired):
            return None


# Global signer instance
_session_signer: SessionSigner | None = None


def get_session_signer() -> SessionSigner:
    """Get or create the session signer."""
    global _session_signer
    if _session_signer is None:
        _session_signer = SessionSigner()
    return _session_signer


def new_simulator(rng: Random | None = None) -> BlackjackSimulator:
    """Build a simulator from the application configuration."""
    sim_config = config.simulator
    round_log = RoundLog(sim_config.log_path) if sim_config.log_path else None
    return BlackjackSimulator(
        rules=sim_config.table_rules(),
        rng=rng,
        round_log=round_log,
    )


class SimulatorSessionStore:
    """
    Simulators kept in process memory, keyed by raw session ID.

    A simulator holds a live shoe, so sessions are not serialized. Each
    session also has a lock so its requests take turns with the simulator.
    """

    def __init__(self, ttl: int | None = None) -> None:
        self._ttl = ttl or config.session_ttl
        self._sessions: dict[str, tuple[BlackjackSimulator, datetime]] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    async def get(self, session_id: str) -> BlackjackSimulator | None:
        """Get a session's simulator and refresh its expiry."""
        if session_id not in self._sessions:
            return None

        simulator, expiry = self._sessions[session_id]
        if expiry < datetime.now():
            await self.delete(session_id)
            return None

        self._sessions[session_id] = (simulator, self._expiry())
        return simulator

    async def set(self, session_id: str, simulator: BlackjackSimulator) -> None:
        """Store a simulator for a session."""
        self._sessions[session_id] = (simulator, self._expiry())
        self._locks.setdefault(session_id, asyncio.Lock())

    async def delete(self, session_id: str) -> None:
        """Delete session."""
        self._sessions.pop(session_id, None)
        self._locks.pop(session_id, None)

    def lock(self, session_id: str) -> asyncio.Lock:
        """Get the lock serializing requests that touch one session."""
        return self._locks.setdefault(session_id, asyncio.Lock())

    async def exists(self, session_id: str) -> bool:
        """Check if session exists."""
        return await self.get(session_id) is not None

    async def cleanup_expired(self) -> int:
        """Remove expired sessions."""
        now = datetime.now()
        expired = [
            sid for sid, (_, expiry) in self._sessions.items() if expiry < now
        ]
        for sid in expired:
            del self._sessions[sid]
            self._locks.pop(sid, None)
        return len(expired)

    def _expiry(self) -> datetime:
        return datetime.now() + timedelta(seconds=self._ttl)


# Global session store instance
_session_store: SimulatorSessionStore | None = None


def get_session_store() -> SimulatorSessionStore:
    """Get or create the session store."""
    global _session_store
    if _session_store is None:
        _session_store = SimulatorSessionStore()
    return _session_store


async def create_session(simulator: BlackjackSimulator | None = None) -> str:
    """Create a new session and return its signed token."""
    session_id = str(uuid4())
    await get_session_store().set(session_id, simulator or new_simulator())
    return get_session_signer().sign(session_id)


def extract_session_id(token: str) -> str | None:
    """
    Extract the raw session ID from a signed token.

    Args:
        token: The signed session token

    Returns:
        The raw session ID if valid, None otherwise
    """
    return get_session_signer().unsign(token)


async def get_simulator(token: str) -> BlackjackSimulator | None:
    """Look up the simulator behind a signed session token."""
    session_id = extract_session_id(token)
    if session_id is None:
        return None
    return await get_session_store().get(session_id)


async def get_locked_simulator(
    token: str,
) -> tuple[BlackjackSimulator, asyncio.Lock] | None:
    """Look up a session's simulator together with its lock."""
    session_id = extract_session_id(token)
    if session_id is None:
        return None
    store = get_session_store()
    simulator = await store.get(session_id)
    if simulator is None:
        return None
    return simulator, store.lock(session_id)
