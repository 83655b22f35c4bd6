"""
Admin Access - Login gate in front of the review dashboard.

A plain credential comparison; it hides the dashboard from casual
visitors and is not a security boundary.
"""

import hmac
import logging

from .review_workflow import ReviewSession


logger = logging.getLogger(__name__)


class AdminAccess:
    """Checks admin credentials and flips the session gate."""

    def __init__(self, username: str, password: str) -> None:
        self._username = username
        self._password = password

    def verify(self, username: str, password: str) -> bool:
        """Compare credentials."""
        username_ok = hmac.compare_digest(username.encode(), self._username.encode())
        password_ok = hmac.compare_digest(password.encode(), self._password.encode())
        return username_ok and password_ok

    def login(self, session: ReviewSession, username: str, password: str) -> bool:
        """Open the dashboard for this session if the credentials match."""
        session.authenticated = self.verify(username, password)
        if session.authenticated:
            logger.info(f"Admin '{username}' logged in")
        else:
            logger.warning(f"Failed admin login for '{username}'")
        return session.authenticated

    def logout(self, session: ReviewSession) -> None:
        """Close the dashboard and drop session state."""
        session.reset()
        logger.info("Admin logged out")
