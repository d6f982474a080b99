"""Biometric unlock capability used by the passcode prompt host.

The passcode state machine never touches this module. The host asks
``is_available()`` to decide whether to offer biometric unlock and awaits
``authenticate()`` when the user requests it.
"""

from __future__ import annotations

import asyncio
import logging
import re
import shutil
from enum import Enum
from typing import Protocol

log = logging.getLogger(__name__)

FPRINTD_VERIFY = "fprintd-verify"


class BiometricResult(Enum):
    """Outcome of one authentication attempt."""

    SUCCESS = "success"
    FAILURE = "failure"
    USER_CANCELLED = "user_cancelled"  # No error is shown for this one


class BiometricAuthenticator(Protocol):
    """Capability interface injected into the prompt host."""

    label: str

    def is_available(self) -> bool: ...

    async def authenticate(self) -> BiometricResult: ...


class NoBiometrics:
    """Authenticator for systems without a usable biometric sensor."""

    label = "biometrics"

    def is_available(self) -> bool:
        return False

    async def authenticate(self) -> BiometricResult:
        return BiometricResult.FAILURE


class FprintdAuthenticator:
    """Fingerprint verification through fprintd's ``fprintd-verify`` command.

    fprintd prints the verification result as ``Verify result: <result>``,
    e.g. ``verify-match``, ``verify-no-match`` or ``verify-disconnected``.
    """

    label = "fingerprint"

    MATCH_RESULT = "verify-match"
    # Results that mean the attempt was abandoned rather than rejected
    CANCEL_RESULTS = ("verify-disconnected", "verify-unknown-error")
    RESULT_PATTERN = re.compile(r"Verify result:\s*(verify-[a-z-]+)")

    def __init__(self, user: str | None = None, executable: str = FPRINTD_VERIFY) -> None:
        self.user = user
        self.executable = executable

    def is_available(self) -> bool:
        """Check if fprintd-verify is installed."""
        return shutil.which(self.executable) is not None

    def build_command(self) -> list[str]:
        cmd = [self.executable]
        if self.user:
            cmd.append(self.user)
        return cmd

    async def authenticate(self) -> BiometricResult:
        """Run one fingerprint verification.

        Cancelling the awaiting task kills the child process and reports
        USER_CANCELLED.
        """
        cmd = self.build_command()
        log.info(f"Biometric authentication requested: {cmd[0]}")
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as e:
            log.error(f"Failed to start {cmd[0]}: {e}")
            return BiometricResult.FAILURE

        try:
            output, _ = await proc.communicate()
        except asyncio.CancelledError:
            if proc.returncode is None:
                proc.kill()
            log.info("Biometric authentication cancelled")
            return BiometricResult.USER_CANCELLED

        return self.interpret(proc.returncode, output.decode(errors="replace"))

    def interpret(self, returncode: int | None, output: str) -> BiometricResult:
        """Map fprintd-verify's exit status and output to a result.

        Only an explicit ``verify-match`` with exit status 0 unlocks. Some
        fprintd versions exit 0 whatever the result, so the exit status alone
        is never trusted.
        """
        results = self.RESULT_PATTERN.findall(output)
        # Retries print intermediate results; the last one is final
        final = results[-1] if results else None
        if final in self.CANCEL_RESULTS:
            log.info("Biometric authentication abandoned")
            return BiometricResult.USER_CANCELLED
        if returncode == 0 and final == self.MATCH_RESULT:
            log.info("Biometric authentication succeeded")
            return BiometricResult.SUCCESS
        log.warning(f"Biometric authentication failed (exit {returncode}, result {final})")
        return BiometricResult.FAILURE


def detect_authenticator(enabled: bool = True) -> BiometricAuthenticator:
    """Pick the authenticator for this system."""
    if enabled:
        fprintd = FprintdAuthenticator()
        if fprintd.is_available():
            return fprintd
    return NoBiometrics()
