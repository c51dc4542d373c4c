"""
Authentication check for the translation backend.

Flow:
1. Probe the backend. If it reports a session, we are done.
2. Otherwise run the interactive login once.
3. Re-probe up to ``retries`` times, waiting ``delay`` seconds before each
   probe (the session can take a moment to become visible).
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from docslingo.config import AUTH_RETRIES, AUTH_RETRY_DELAY
from docslingo.errors import AuthVerificationFailed
from docslingo.status import StatusCallback, silent
from docslingo.translate.base import Translator

logger = logging.getLogger(__name__)


class AuthChecker:
    """Make sure the translator is authenticated before translating.

    Usage:
        checker = AuthChecker(translator)
        checker.ensure_authenticated()  # raises on failure
    """

    def __init__(
        self,
        translator: Translator,
        retries: int = AUTH_RETRIES,
        delay: float = AUTH_RETRY_DELAY,
        notify: StatusCallback | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.translator = translator
        self.retries = retries
        self.delay = delay
        self.notify = notify or silent
        self.sleep = sleep

    def is_authenticated(self) -> bool:
        status = self.translator.check_auth()
        logger.debug("Auth probe (%s): %s", self.translator.name, status.authenticated)
        return status.authenticated

    def ensure_authenticated(self) -> None:
        """Block until the translator is authenticated.

        Raises:
            LoginFailed: If the login process fails
            AuthVerificationFailed: If still unauthenticated after login
        """
        if self.is_authenticated():
            self.notify("ok", "Authenticated")
            return

        self.notify("info", "Opening browser for authentication...")
        self.translator.login()
        self.notify("ok", "Login complete")

        for attempt in range(1, self.retries + 1):
            self.sleep(self.delay)

            if self.is_authenticated():
                self.notify("ok", "Successfully authenticated")
                return

            if attempt < self.retries:
                self.notify("warn", f"Auth check failed. Retrying ({attempt}/{self.retries})...")

        raise AuthVerificationFailed(
            "Authentication failed after login.",
            hint="Please run: npx lingo.dev@latest login manually and try again.",
        )
