import logging
import uuid
import httpx
from typing import List, Optional
from Advisory.services.chatbot.chatbot_schemas import ChatMessage, Language
from Advisory.services.chatbot.mock_responses import get_mock_response

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Sorry, I could not reach the server."
SERVER_ERROR_MESSAGE = "Sorry, something went wrong on the server."

GREETINGS = {
    Language.english: "Hello! I am Business Bot. Ask me about starting a business in Espoo.",
    Language.finnish: "Hei! Olen Business Bot. Kysy minulta yrityksen perustamisesta Espoossa.",
    Language.swedish: "Hej! Jag är Business Bot. Fråga mig om att starta företag i Esbo.",
    Language.chinese: "您好！我是 Business Bot。欢迎咨询在埃斯波创业的相关问题。",
    Language.russian: "Здравствуйте! Я Business Bot. Спросите меня об открытии бизнеса в Эспоо.",
}


class ChatClient:
    """
    Client side of the chat widget.

    Keeps the visible transcript and talks to POST /api/chat. A failed call
    never raises: the user's message stays in the transcript and a fixed
    apology is appended as the bot's answer.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        language: Language = Language.english,
        use_mock: bool = False,
        http_client: Optional[httpx.Client] = None,
        path: str = "/api/chat",
    ) -> None:
        self.language = Language(language)
        self.use_mock = use_mock
        self.path = path
        self.http = http_client or httpx.Client(base_url=base_url, timeout=30)
        self.messages: List[ChatMessage] = []

    def _append(self, text: str, sender: str) -> ChatMessage:
        msg = ChatMessage(id=uuid.uuid4().hex, text=text, sender=sender)
        self.messages.append(msg)
        return msg

    def _ask(self, text: str) -> str:
        if self.use_mock:
            return get_mock_response(text, self.language)

        try:
            r = self.http.post(self.path, json={"message": text})
        except httpx.HTTPError as e:
            logger.warning("Chat request failed: %r", e)
            return UNREACHABLE_MESSAGE

        if r.is_error:
            logger.warning("Chat server answered %s", r.status_code)
            return SERVER_ERROR_MESSAGE

        try:
            reply = r.json().get("reply")
        except (ValueError, AttributeError):
            reply = None
        return reply if isinstance(reply, str) else SERVER_ERROR_MESSAGE

    def open(self) -> Optional[ChatMessage]:
        """Greet the user when the chat is opened on an empty transcript."""
        if self.messages:
            return None
        return self._append(GREETINGS[self.language], "bot")

    def send(self, text: str) -> Optional[ChatMessage]:
        if not text.strip():
            return None

        self._append(text, "user")
        return self._append(self._ask(text), "bot")

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
