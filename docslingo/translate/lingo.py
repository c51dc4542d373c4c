"""
lingo.dev CLI backend.

Every operation shells out to ``npx lingo.dev@latest``:

    npx lingo.dev@latest auth    # probe, output contains "Authenticated as"
    npx lingo.dev@latest login   # interactive, opens a browser
    npx lingo.dev@latest run     # translate, run from the project root

The login and run commands inherit the terminal so the user sees the tool's
own prompts and progress.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from docslingo.config import ProjectConfig
from docslingo.errors import LoginFailed
from docslingo.translate.base import AuthStatus, TranslationResult, Translator

logger = logging.getLogger(__name__)

LINGO_PACKAGE = "lingo.dev@latest"
AUTH_MARKER = "Authenticated as"


class LingoTranslator(Translator):
    """Translator backed by the lingo.dev CLI."""

    def __init__(self, npx: str | None = None, package: str = LINGO_PACKAGE):
        # npx is a .cmd shim on Windows, so resolve it to a full path
        self.npx = npx or shutil.which("npx") or "npx"
        self.package = package

    @property
    def name(self) -> str:
        return "lingo"

    def command(self, *args: str) -> list[str]:
        return [self.npx, self.package, *args]

    def check_auth(self) -> AuthStatus:
        cmd = self.command("auth")
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug("Auth error: %s", e)
            return AuthStatus(authenticated=False, output=str(e))

        output = proc.stdout or ""
        logger.debug("Auth output: %s", output.strip())
        return AuthStatus(authenticated=AUTH_MARKER in output, output=output)

    def login(self) -> None:
        cmd = self.command("login")
        logger.debug("Running %s", " ".join(cmd))
        try:
            returncode = subprocess.call(cmd)
        except OSError as e:
            raise LoginFailed(f"Login failed: {e}") from e
        if returncode != 0:
            raise LoginFailed(f"Login process exited with code {returncode}")

    def run(self, config: ProjectConfig) -> TranslationResult:
        cmd = self.command("run")
        cwd = config.root.resolve()
        logger.debug("Running %s in %s", " ".join(cmd), cwd)
        try:
            returncode = subprocess.call(cmd, cwd=cwd)
        except OSError as e:
            logger.warning("Could not start translation: %s", e)
            return TranslationResult(
                success=False,
                metadata={"translator": self.name, "error": str(e)},
            )

        if returncode != 0:
            logger.warning("Translation process exited with code %d", returncode)
        return TranslationResult(
            success=returncode == 0,
            returncode=returncode,
            metadata={"translator": self.name},
        )
