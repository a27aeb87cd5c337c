"""Authentication boundary.

Credentials are not verified beyond being non-blank; this module only
tracks who is logged in and hands out their employee record. Every
session event is written to the sink.
"""

import logging
from typing import Optional

from .employee import EmployeeRecord
from .schemas import ProfileSchema, RosterEntry
from .sink import Sink

logger = logging.getLogger(__name__)

DEFAULT_ENTRY = RosterEntry(type="FullTime", hours=38.0)


class AuthManager:
    """Session holder for a single logged-in employee."""

    def __init__(self, sink: Sink, profile: Optional[ProfileSchema] = None):
        self._sink = sink
        self._profile = profile or ProfileSchema()
        self._current: Optional[EmployeeRecord] = None

    def login(self, identifier: str, secret: str) -> bool:
        """Start a session.

        Fails when either value is empty or whitespace. On success the
        employee record is seeded from the roster entry for this
        identifier, or from FullTime / 38 hours if there is none.

        Returns:
            True if the session started
        """
        self._sink.write("User login initiated...")

        if not identifier or not identifier.strip() or not secret or not secret.strip():
            self._sink.write("[WARN] Login failed: empty username or password.")
            self._current = None
            return False

        identifier = identifier.strip()
        entry = self._profile.employees.get(identifier)
        if entry is None:
            logger.debug(f"no roster entry for '{identifier}', using defaults")
            entry = DEFAULT_ENTRY

        self._current = EmployeeRecord(
            classification=entry.type,
            hours_worked=entry.hours,
            display_name=entry.name,
        )

        self._sink.write(f"[INFO] User '{identifier}' successfully logged in.")
        return True

    def logout(self) -> None:
        if self._current is not None:
            self._sink.write("[INFO] User successfully logged out.")
            self._current = None
        else:
            self._sink.write("[WARN] No user currently logged in to log out.")

    def is_authenticated(self) -> bool:
        return self._current is not None

    def get_current_employee(self) -> EmployeeRecord:
        """Get the session's employee record.

        Returns a blank record (and records a warning) when nobody is
        logged in, so callers always get something to compute over.
        """
        if self._current is not None:
            return self._current

        self._sink.write("[WARN] Attempted to get user details but no user is logged in.")
        return EmployeeRecord()
