"""Chat turn sequencing.

One turn is: the user message is appended right away, then after a fixed
delay the bot answer is appended. While a turn is pending, new submissions
are ignored, so the log always alternates user, bot, user, bot.

The delay is handed to a scheduler, a callable ``(delay, callback)``.
``event_loop_scheduler`` defers the callback on the running asyncio loop;
``ManualScheduler`` queues it until ``run_pending()`` for synchronous hosts.
"""
import asyncio
import itertools
import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from advisor.config import Settings
from advisor.domain import ChatMessage, ProfileType, Sender
from advisor.intents import IntentClassifier
from advisor.responses import ResponseSelector, greeting

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], Any]


def event_loop_scheduler(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
    return asyncio.get_running_loop().call_later(delay, callback)


class ManualScheduler:

    def __init__(self):
        self._queue: List[Tuple[float, Callable[[], None]]] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> None:
        self._queue.append((delay, callback))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_pending(self) -> int:
        """Run every queued callback, return how many ran."""
        queue, self._queue = self._queue, []
        for _, callback in queue:
            callback()
        return len(queue)


class TurnState(str, Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class ChatTurnController:

    def __init__(
        self,
        profile: Optional[ProfileType] = None,
        classifier: Optional[IntentClassifier] = None,
        selector: Optional[ResponseSelector] = None,
        scheduler: Scheduler = event_loop_scheduler,
        response_delay: float = 1.0,
        greet: bool = False,
    ):
        self.profile = ProfileType(profile) if profile else None
        self.classifier = classifier or IntentClassifier()
        self.selector = selector or ResponseSelector()
        self.scheduler = scheduler
        self.response_delay = response_delay
        self.state = TurnState.IDLE
        self._ids = itertools.count(1)
        self._log: List[ChatMessage] = []
        self._pending_text: Optional[str] = None
        if greet:
            self._append(greeting(self.profile), Sender.BOT)

    @classmethod
    def from_settings(cls, settings: Settings, profile: Optional[ProfileType] = None, **kwargs) -> "ChatTurnController":
        kwargs.setdefault("selector", ResponseSelector.from_settings(settings))
        kwargs.setdefault("response_delay", settings.response_delay)
        return cls(profile=profile, **kwargs)

    @property
    def messages(self) -> Tuple[ChatMessage, ...]:
        return tuple(self._log)

    @property
    def is_awaiting(self) -> bool:
        return self.state == TurnState.AWAITING_RESPONSE

    def submit(self, text: str) -> None:
        if self.is_awaiting:
            logger.debug("turn in flight, ignoring submission")
            return
        if not text or not text.strip():
            logger.debug("empty submission ignored")
            return

        self._append(text, Sender.USER)
        self._pending_text = text
        self.state = TurnState.AWAITING_RESPONSE
        try:
            self.scheduler(self.response_delay, self.resolve)
        except Exception:
            # the answer can never arrive, undo the turn so the chat stays usable
            self._log.pop()
            self._pending_text = None
            self.state = TurnState.IDLE
            logger.exception("could not schedule the answer, turn dropped")
            raise
        logger.info("turn started, answering in %.2fs", self.response_delay)

    def resolve(self) -> None:
        if not self.is_awaiting:
            return
        topic = self.classifier.classify(self._pending_text)
        answer = self.selector.select(topic, self.profile)
        self._append(answer, Sender.BOT)
        self._pending_text = None
        self.state = TurnState.IDLE
        logger.info("turn resolved with topic %s", topic.value)

    def _append(self, text: str, sender: Sender) -> ChatMessage:
        message = ChatMessage(
            id=next(self._ids),
            text=text,
            sender=sender,
            ts=datetime.now().isoformat(timespec="seconds"),
        )
        self._log.append(message)
        return message
