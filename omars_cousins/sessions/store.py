"""Chat session store with optimistic updates and key-value persistence.

Sessions are kept as a mapping from id to Session plus an explicit order
list (newest first). Updates replace the Session record for an id rather than
mutating it, and every change to the collection is written back to storage
as a JSON array under STORAGE_KEY.

UI flags (loading, error, success, input text) live on the store because the
page renders straight from it. The loading flag is global, not per session.
"""

import json
import logging
import uuid
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from omars_cousins.models.schemas import Message, Role, Session
from omars_cousins.sessions.storage import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "omars-cousins-sessions"
PRIMER = "Ask Omar's cousins anything."
ERROR_ANSWER = "Omar's cousins got lost on the way to the answer. Try again later!"

_ROLE_VALUES = {role.value for role in Role}
_SESSIONS_ADAPTER = TypeAdapter(list[Session])

Ask = Callable[[str], Awaitable[str]]


def primer_message() -> Message:
    return Message(role=Role.SYSTEM, content=PRIMER)


def session_name(moment: datetime) -> str:
    """Display name for a session created at ``moment``."""
    return moment.strftime("Chat %b %d, %I:%M:%S %p")


def new_session(now: datetime | None = None) -> Session:
    """Create a session holding only the persona primer."""
    created_at = now or datetime.now().astimezone()
    return Session(
        id=str(uuid.uuid4()),
        name=session_name(created_at),
        messages=[primer_message()],
        created_at=created_at,
    )


def dump_sessions(sessions: list[Session]) -> str:
    """Serialize sessions to the persisted JSON form."""
    return _SESSIONS_ADAPTER.dump_json(sessions, by_alias=True).decode()


def _normalize_record(record: Any) -> Any:
    """Coerce unknown roles to system and restore a missing primer."""
    if not isinstance(record, dict):
        return record

    messages = record.get("messages")
    if not isinstance(messages, list):
        return record

    for message in messages:
        if not isinstance(message, dict):
            continue
        role = message.get("role")
        if not isinstance(role, str) or role not in _ROLE_VALUES:
            message["role"] = Role.SYSTEM.value

    first = messages[0] if messages else None
    if not isinstance(first, dict) or first.get("role") != Role.SYSTEM.value:
        messages.insert(0, primer_message().model_dump(mode="json"))
    return record


def load_sessions(raw: str | None) -> list[Session]:
    """Deserialize persisted sessions.

    Args:
        raw: JSON text as written by dump_sessions, or None.

    Returns:
        The sessions in stored order. Corrupt data yields an empty list.
    """
    if not raw:
        return []

    try:
        records = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Discarding corrupt session data: {e}")
        return []

    if not isinstance(records, list):
        logger.warning("Discarding session data that is not a list")
        return []

    try:
        return _SESSIONS_ADAPTER.validate_python([_normalize_record(r) for r in records])
    except ValidationError as e:
        logger.warning(f"Discarding invalid session data: {e}")
        return []


class SessionStore:
    """Ordered collection of chat sessions with one selected session."""

    def __init__(
        self,
        storage: KeyValueStore,
        key: str = STORAGE_KEY,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._storage = storage
        self._key = key
        self._on_change = on_change
        self._sessions: dict[str, Session] = {}
        self._order: list[str] = []

        self.selected_id: str | None = None
        self.input_text: str = ""
        self.loading: bool = False
        self.error: bool = False
        self.success: bool = False

    @property
    def sessions(self) -> list[Session]:
        return [self._sessions[session_id] for session_id in self._order]

    @property
    def selected(self) -> Session | None:
        if self.selected_id is None:
            return None
        return self._sessions.get(self.selected_id)

    def get(self, session_id: str) -> Session:
        return self._sessions[session_id]

    def initialize(self) -> None:
        """Load persisted sessions, creating a default one if there are none."""
        sessions = load_sessions(self._storage.get(self._key))
        self._sessions = {}
        self._order = []
        for session in sessions:
            # First record wins for a repeated id
            if session.id in self._sessions:
                continue
            self._sessions[session.id] = session
            self._order.append(session.id)

        if len(self._order) < len(sessions):
            logger.warning(f"Dropped {len(sessions) - len(self._order)} duplicate session(s)")
            self.persist()

        if not self._order:
            logger.info("No saved sessions, starting a new chat")
            self.create_session()
            return

        self.selected_id = self._order[0]
        logger.info(f"Restored {len(self._order)} chat session(s)")

    def create_session(self) -> Session:
        """Prepend a fresh session and select it."""
        session = new_session()
        self._sessions[session.id] = session
        self._order.insert(0, session.id)
        self.selected_id = session.id
        self.clear_flags()
        self.persist()
        self._notify()
        return session

    def select_session(self, session_id: str) -> None:
        """Point the selection at an existing session.

        Raises:
            KeyError: If no session has this id.
        """
        if session_id not in self._sessions:
            raise KeyError(session_id)
        self.selected_id = session_id
        self.clear_flags()
        self._notify()

    def clear_flags(self) -> None:
        self.input_text = ""
        self.error = False
        self.success = False

    def persist(self) -> None:
        self._storage.set(self._key, dump_sessions(self.sessions))

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()

    def _append(self, session_id: str, message: Message) -> None:
        session = self._sessions[session_id]
        self._sessions[session_id] = session.model_copy(
            update={"messages": [*session.messages, message]}
        )
        self.persist()
        self._notify()

    async def submit(self, text: str, ask: Ask) -> Message | None:
        """Send a question from the selected session.

        The user message is appended before ``ask`` is awaited. The reply,
        or ERROR_ANSWER if ``ask`` raises, goes to the session the question
        was sent from even if the selection changed in the meantime.

        Args:
            text: Raw input text.
            ask: Coroutine function returning the answer for a question.

        Returns:
            The appended assistant message, or None if nothing was sent.
        """
        question = text.strip()
        if not question or self.selected_id is None or self.loading:
            return None

        session_id = self.selected_id
        self.input_text = ""
        self.error = False
        self.success = False
        self.loading = True
        self._append(session_id, Message(role=Role.USER, content=question))

        try:
            answer = await ask(question)
        except Exception as e:
            logger.warning(f"Asking the cousins failed: {e}")
            reply = Message(role=Role.ASSISTANT, content=ERROR_ANSWER)
            self.error = True
        else:
            reply = Message(role=Role.ASSISTANT, content=answer)
            self.success = True
        finally:
            self.loading = False

        self._append(session_id, reply)
        return reply
