"""Tests for the passcode modal - verifies key presses and clicks drive the controller.

These tests run the app headless and catch wiring problems between the
keypad, key bindings, the controller and the deferred reset.
"""

import pytest
from textual.css.query import NoMatches
from textual.widgets import Button, Label

from app import PasscodeApp
from biometrics import BiometricResult
from conftest import BlockingAuthenticator, FakeAuthenticator
from model import PasscodeMode, PasscodePhase
from model.prompts import BIOMETRIC_FAILED_MESSAGE, MISMATCH_MESSAGE
from ui import PasscodeDots, PasscodeModal
import ui.ids as ids
from ui.ids import css


def make_app(mode=PasscodeMode.VERIFY, **kwargs) -> PasscodeApp:
    kwargs.setdefault("authenticator", FakeAuthenticator(available=False))
    return PasscodeApp(mode, **kwargs)


class TestKeyboardEntry:
    """Typing digits on the keyboard."""

    @pytest.mark.asyncio
    async def test_verify_returns_code(self):
        """Four digits in verify mode close the prompt with the code."""
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, PasscodeModal)
            await pilot.press("1", "2", "3", "4")
        assert app.return_value == "1234"
        assert app.completed is True

    @pytest.mark.asyncio
    async def test_dots_follow_entry(self):
        """Dots track the number of entered digits, including deletes."""
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            await pilot.press("7", "3")
            dots = modal.query_one(css(ids.PASSCODE_DOTS), PasscodeDots)
            assert dots.entered == 2
            await pilot.press("backspace")
            assert modal.controller.entered_digits == "7"
            assert dots.entered == 1

    @pytest.mark.asyncio
    async def test_create_confirms_then_returns(self):
        """Create mode asks for confirmation, then returns the code."""
        app = make_app(PasscodeMode.CREATE)
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            await pilot.press("1", "2", "3", "4")
            assert modal.controller.phase is PasscodePhase.CONFIRM
            title = modal.query_one(css(ids.PASSCODE_TITLE), Label)
            assert modal.controller.title_text == "Confirm passcode"
            assert title.display
            await pilot.press("1", "2", "3", "4")
        assert app.return_value == "1234"


class TestConfirmationMismatch:
    """Mismatch error and the deferred reset."""

    @pytest.mark.asyncio
    async def test_mismatch_shows_error_then_resets(self):
        app = make_app(PasscodeMode.CHANGE, length=6, reset_delay=0.05)
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            await pilot.press(*"123456")
            await pilot.press(*"654321")
            assert modal.controller.error_active
            assert modal.deferred_reset.pending
            error = modal.query_one(css(ids.PASSCODE_ERROR), Label)
            assert error.display
            assert modal.query_one(css(ids.PASSCODE_DOTS), PasscodeDots).has_class("error")
            assert modal.controller.error_message == MISMATCH_MESSAGE

            await pilot.pause(0.3)
            assert not modal.deferred_reset.pending
            assert modal.controller.phase is PasscodePhase.ENTRY
            assert modal.controller.confirmation_digits is None
            assert modal.controller.entered_digits == ""
            assert not error.display

    @pytest.mark.asyncio
    async def test_cancel_stops_pending_reset(self):
        """Cancelling while the error is shown drops the pending reset."""
        app = make_app(PasscodeMode.CREATE, reset_delay=10)
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            await pilot.press(*"1234")
            await pilot.press(*"4321")
            assert modal.deferred_reset.pending
            await pilot.press("escape")
            assert not modal.deferred_reset.pending
        assert app.return_value is None


class TestKeypad:
    """Clicking keypad buttons."""

    @pytest.mark.asyncio
    async def test_click_digit_and_delete(self):
        app = make_app()
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            modal = app.screen
            await pilot.click(css(ids.digit_key(5)))
            await pilot.click(css(ids.digit_key(0)))
            assert modal.controller.entered_digits == "50"
            await pilot.click(css(ids.DELETE_KEY))
            assert modal.controller.entered_digits == "5"


class TestCancel:
    """Cancelling the prompt."""

    @pytest.mark.asyncio
    async def test_escape_cancels(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("escape")
        assert app.return_value is None
        assert app.completed is False

    @pytest.mark.asyncio
    async def test_cancel_button(self):
        app = make_app()
        async with app.run_test(size=(80, 40)) as pilot:
            await pilot.pause()
            await pilot.click(css(ids.CANCEL_BTN))
        assert app.return_value is None

    @pytest.mark.asyncio
    async def test_not_cancellable(self):
        """Without cancellation there is no button and escape is ignored."""
        app = make_app(cancellable=False)
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            with pytest.raises(NoMatches):
                modal.query_one(css(ids.CANCEL_BTN), Button)
            await pilot.press("escape")
            await pilot.pause()
            assert app.screen is modal
            assert not modal.controller.is_finished
            await pilot.press(*"1234")
        assert app.return_value == "1234"


class TestBiometrics:
    """Biometric unlock through the injected authenticator."""

    @pytest.mark.asyncio
    async def test_button_hidden_when_unavailable(self):
        app = make_app()
        async with app.run_test() as pilot:
            await pilot.pause()
            with pytest.raises(NoMatches):
                app.screen.query_one(css(ids.BIOMETRIC_BTN), Button)

    @pytest.mark.asyncio
    async def test_success_returns_empty_code(self):
        authenticator = FakeAuthenticator(BiometricResult.SUCCESS)
        app = make_app(authenticator=authenticator)
        async with app.run_test() as pilot:
            await pilot.pause()
            button = app.screen.query_one(css(ids.BIOMETRIC_BTN), Button)
            assert str(button.label) == "Unlock with fingerprint"
            await pilot.press("b")
            await app.workers.wait_for_complete()
        assert authenticator.calls == 1
        assert app.return_value == ""
        assert app.completed is True

    @pytest.mark.asyncio
    async def test_failure_shows_error_until_next_digit(self):
        authenticator = FakeAuthenticator(BiometricResult.FAILURE)
        app = make_app(authenticator=authenticator)
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            await pilot.press("b")
            await app.workers.wait_for_complete()
            error = modal.query_one(css(ids.PASSCODE_ERROR), Label)
            assert error.display
            assert modal._host_error == BIOMETRIC_FAILED_MESSAGE

            await pilot.press("1")
            assert not error.display
            assert modal.controller.entered_digits == "1"

    @pytest.mark.asyncio
    async def test_user_cancel_shows_nothing(self):
        authenticator = FakeAuthenticator(BiometricResult.USER_CANCELLED)
        app = make_app(authenticator=authenticator)
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            await pilot.press("b")
            await app.workers.wait_for_complete()
            assert not modal.query_one(css(ids.PASSCODE_ERROR), Label).display
            assert app.screen is modal

    @pytest.mark.asyncio
    async def test_reason_shown_while_scanning(self):
        """The authentication reason is visible only while verification runs."""
        authenticator = BlockingAuthenticator(BiometricResult.FAILURE)
        app = make_app(authenticator=authenticator)
        async with app.run_test() as pilot:
            await pilot.pause()
            modal = app.screen
            status = modal.query_one(css(ids.PASSCODE_STATUS), Label)
            assert not status.display

            await pilot.press("b")
            await authenticator.started.wait()
            assert status.display

            authenticator.release.set()
            await app.workers.wait_for_complete()
            assert not status.display
            assert modal._host_error == BIOMETRIC_FAILED_MESSAGE
