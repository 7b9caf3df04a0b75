"""
Staff PIN Authentication

Staff sign in with a short PIN. The directory maps each staff name to a
bcrypt hash of their PIN, normally loaded from the STAFF_JSON env var:

    STAFF_JSON='{"Alex": "$2b$12$...", "Jake": "$2b$12$..."}'
"""

import json
import logging
from typing import Dict, Optional

import bcrypt

logger = logging.getLogger(__name__)


class StaffDirectoryError(Exception):
    """The staff directory could not be loaded."""
    pass


def hash_pin(pin: str, rounds: int = 12) -> str:
    """Hash a PIN for the staff directory."""
    return bcrypt.hashpw(pin.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_pin(pin: str, hashed: str) -> bool:
    """Check a PIN against a stored hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(pin.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        logger.warning("Staff directory contains a malformed PIN hash")
        return False


class StaffDirectory:
    """Staff name -> bcrypt PIN hash."""

    def __init__(self, hashes: Optional[Dict[str, str]] = None):
        self._hashes: Dict[str, str] = dict(hashes or {})

    @classmethod
    def from_json(cls, raw: str) -> "StaffDirectory":
        if not raw or not raw.strip():
            return cls()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StaffDirectoryError(f"STAFF_JSON is not valid JSON: {e}")
        if not isinstance(data, dict):
            raise StaffDirectoryError("STAFF_JSON must be an object of name -> hash")
        return cls({str(name): str(h) for name, h in data.items()})

    @property
    def is_configured(self) -> bool:
        return bool(self._hashes)

    @property
    def names(self):
        return list(self._hashes)

    def authenticate(self, pin: str) -> Optional[str]:
        """Return the staff name whose PIN matches, or None."""
        if not pin:
            return None
        for name, hashed in self._hashes.items():
            if verify_pin(pin, hashed):
                logger.info(f"PIN login for {name}")
                return name
        logger.info("PIN login rejected")
        return None
