"""Shared fixtures for pinpad tests."""

import asyncio

import pytest

from biometrics import BiometricResult
from controller import PasscodeController
from model import PasscodeMode


def enter(controller: PasscodeController, digits: str) -> list:
    """Type digits the way the host does, evaluating each completed entry.

    Returns the events produced by evaluate_completion().
    """
    events = []
    for ch in digits:
        if controller.add_digit(int(ch)):
            events.append(controller.evaluate_completion())
    return events


class FakeAuthenticator:
    """Biometric authenticator returning a canned result."""

    label = "fingerprint"

    def __init__(self, result: BiometricResult = BiometricResult.SUCCESS, available: bool = True) -> None:
        self.result = result
        self.available = available
        self.calls = 0

    def is_available(self) -> bool:
        return self.available

    async def authenticate(self) -> BiometricResult:
        self.calls += 1
        return self.result


class BlockingAuthenticator(FakeAuthenticator):
    """Authenticator that waits until released, to observe the prompt mid-scan."""

    def __init__(self, result: BiometricResult = BiometricResult.FAILURE) -> None:
        super().__init__(result)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def authenticate(self) -> BiometricResult:
        self.started.set()
        await self.release.wait()
        return await super().authenticate()


class FakeTimer:
    """Stand-in for textual.timer.Timer."""

    def __init__(self, delay, callback) -> None:
        self.delay = delay
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True

    def fire(self) -> None:
        if not self.stopped:
            self.callback()


class FakeScheduler:
    """Records scheduled timers instead of running them."""

    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, delay, callback) -> FakeTimer:
        timer = FakeTimer(delay, callback)
        self.timers.append(timer)
        return timer


@pytest.fixture
def create_controller():
    """Controller in CREATE mode with the default length."""
    return PasscodeController(PasscodeMode.CREATE)


@pytest.fixture
def verify_controller():
    """Controller in VERIFY mode with the default length."""
    return PasscodeController(PasscodeMode.VERIFY)


@pytest.fixture
def change_controller():
    """Controller in CHANGE mode with a 6-digit passcode."""
    return PasscodeController(PasscodeMode.CHANGE, 6)


@pytest.fixture
def recorder():
    """Observer that records (controller, event) notifications."""
    calls = []

    def observer(controller, event):
        calls.append(event)

    observer.calls = calls
    return observer


@pytest.fixture
def scheduler():
    return FakeScheduler()
