import logging
from typing import Sequence, Tuple

from advisor.domain import FinanceTopic

logger = logging.getLogger(__name__)

# Checked in order, first keyword found wins. Plain substring match,
# so "savesomething" still counts as "save".
KEYWORDS: Tuple[Tuple[str, FinanceTopic], ...] = (
    ("budget", FinanceTopic.BUDGET),
    ("invest", FinanceTopic.INVEST),
    ("save", FinanceTopic.SAVE),
    ("tax", FinanceTopic.TAX),
)


class IntentClassifier:

    def __init__(self, keywords: Sequence[Tuple[str, FinanceTopic]] = KEYWORDS):
        self.keywords = tuple((word.lower(), topic) for word, topic in keywords)

    def classify(self, text: str) -> FinanceTopic:
        lowered = text.lower()
        topic = next(
            (topic for word, topic in self.keywords if word in lowered),
            FinanceTopic.GENERAL,
        )
        logger.debug("classified %r as %s", text, topic.value)
        return topic


def classify(text: str) -> FinanceTopic:
    return IntentClassifier().classify(text)
