"""Client-side state: the persisted credential artifact and ephemeral page state."""
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import MutableMapping, Optional

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()

TOKEN_KEY = 'token'
REDIRECT_ATTEMPT_KEY = 'redirect_attempt'


class ClientState(Base):
    __tablename__ = 'client_state'

    key = Column(String(100), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class LocalStorage:
    """Key-value store that survives page reloads (the browser's localStorage)"""

    def __init__(self, url: str):
        engine_args = {}
        if url.startswith('sqlite'):
            engine_args['connect_args'] = {"check_same_thread": False}
            if url in ('sqlite://', 'sqlite:///:memory:'):
                engine_args['poolclass'] = StaticPool
        self.engine = create_engine(url, **engine_args)
        Base.metadata.create_all(self.engine)
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @contextmanager
    def session_scope(self):
        """Provide a transactional scope around a series of operations."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_item(self, key: str) -> Optional[str]:
        with self.session_scope() as session:
            row = session.get(ClientState, key)
            return row.value if row else None

    def set_item(self, key: str, value: str):
        with self.session_scope() as session:
            row = session.get(ClientState, key)
            if row:
                row.value = value
            else:
                session.add(ClientState(key=key, value=value))

    def remove_item(self, key: str):
        with self.session_scope() as session:
            row = session.get(ClientState, key)
            if row:
                session.delete(row)
                logger.info(f"Removed client state '{key}'")


class SessionStorage:
    """Per-page ephemeral values kept inside the UI session mapping"""

    PREFIX = 'session_storage.'

    def __init__(self, state: MutableMapping):
        self.state = state

    def get_item(self, key: str):
        return self.state.get(self.PREFIX + key)

    def set_item(self, key: str, value):
        self.state[self.PREFIX + key] = value

    def remove_item(self, key: str):
        self.state.pop(self.PREFIX + key, None)
