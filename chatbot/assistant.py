"""Chat assistant.

Forwards the conversation to an OpenAI-compatible chat-completions endpoint
(by default Gemini's) and turns the reply into a ChatReply: the text to show
plus an optional OrderDraft for the order form.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from django.conf import settings
from openai import OpenAI, OpenAIError

from .drafts import OrderDraft, extract_order_draft
from .prompts import build_system_prompt

logger = logging.getLogger(__name__)

NOT_CONFIGURED_REPLY = "The AI Assistant is not configured. Missing API Key."
ERROR_REPLY = "I'm sorry, I encountered an error. Please try again later."
DRAFT_READY_REPLY = (
    "Great! I've filled out the order form for you with the details provided. "
    "Please review and submit it."
)


@dataclass
class ChatMessage:
    sender: str  # "user" | "bot"
    text: str


@dataclass
class ChatReply:
    text: str
    order_draft: Optional[OrderDraft] = None


def build_messages(history: Iterable[ChatMessage], new_message: str, system_prompt: str) -> List[dict]:
    messages = [{"role": "system", "content": system_prompt}]
    for msg in history:
        role = "user" if msg.sender == "user" else "assistant"
        messages.append({"role": role, "content": msg.text or ""})
    messages.append({"role": "user", "content": new_message})
    return messages


class ChatAssistant:
    def __init__(self, client=None, model: str = None, system_prompt: str = None):
        self.model = model or settings.DRAWPIX_AI_MODEL
        self.system_prompt = system_prompt or build_system_prompt()
        if client is None and settings.DRAWPIX_AI_API_KEY:
            client = OpenAI(api_key=settings.DRAWPIX_AI_API_KEY, base_url=settings.DRAWPIX_AI_BASE_URL)
        self.client = client

    @property
    def configured(self) -> bool:
        return self.client is not None

    def generate(self, history: Iterable[ChatMessage], new_message: str) -> str:
        """Raw model text for the next turn. Raises OpenAIError on API failure."""
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=build_messages(history, new_message, self.system_prompt),
        )
        return resp.choices[0].message.content or ""

    def reply(self, history: Iterable[ChatMessage], new_message: str) -> ChatReply:
        if not self.configured:
            logger.warning("Chat assistant called without an API key.")
            return ChatReply(text=NOT_CONFIGURED_REPLY)
        try:
            text = self.generate(history, new_message)
        except OpenAIError:
            logger.exception("Chat completion request failed.")
            return ChatReply(text=ERROR_REPLY)

        draft = extract_order_draft(text)
        if draft is not None:
            return ChatReply(text=DRAFT_READY_REPLY, order_draft=draft)
        return ChatReply(text=text)
