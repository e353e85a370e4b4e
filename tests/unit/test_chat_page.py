"""Unit tests for the chat page's client lifecycle wiring."""

from unittest.mock import MagicMock

import pytest_check as check

from chatbot.agent.controller import TurnController
from chatbot.models.schemas import Turn
from chatbot.ui.chat_page import attach_teardown


class EchoGenerator:
    async def generate(self, text: str) -> str:
        return f"echo: {text}"


class TestAttachTeardown:
    """The controller closes on client deletion, not on socket drops."""

    def test_registers_delete_handler_only(self) -> None:
        client = MagicMock()
        controller = TurnController(EchoGenerator())

        attach_teardown(client, controller, lambda: None)

        client.on_delete.assert_called_once()
        client.on_disconnect.assert_not_called()
        assert controller.active

    async def test_chat_keeps_working_until_client_deleted(self) -> None:
        """A reconnecting client can still submit; deletion closes the chat."""
        client = MagicMock()
        controller = TurnController(EchoGenerator())
        renders: list[int] = []

        def listener() -> None:
            renders.append(len(controller.transcript))

        controller.transcript.subscribe(listener)
        attach_teardown(client, controller, listener)

        check.is_true(await controller.submit("hi"))
        check.equal(controller.transcript.last, Turn.bot("echo: hi"))

        on_delete = client.on_delete.call_args.args[0]
        on_delete()
        rendered = len(renders)

        check.is_false(controller.active)
        check.is_false(await controller.submit("again"))
        check.equal(len(renders), rendered)
