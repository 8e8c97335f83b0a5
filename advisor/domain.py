from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ProfileType(str, Enum):
    STUDENT = "student"
    PROFESSIONAL = "professional"


class FinanceTopic(str, Enum):
    BUDGET = "budget"
    INVEST = "invest"
    SAVE = "save"
    TAX = "tax"
    GENERAL = "general"


class RecommendationStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"


class Sender(str, Enum):
    USER = "user"
    BOT = "bot"


# Expense categories in display order
EXPENSE_FIELDS = ("housing", "food", "transportation", "entertainment", "utilities", "other")


@dataclass(frozen=True)
class BudgetRecord:
    income: float = 0
    housing: float = 0
    food: float = 0
    transportation: float = 0
    entertainment: float = 0
    utilities: float = 0
    other: float = 0


@dataclass(frozen=True)
class BudgetMetrics:
    income: float
    total_expenses: float
    remaining_budget: float   # may be negative
    savings_rate: float       # percent, 0 when income <= 0
    housing_ratio: float      # fraction, 0 when income <= 0


@dataclass(frozen=True)
class Recommendation:
    title: str
    description: str
    status: RecommendationStatus
    percentage: Optional[int] = None


@dataclass(frozen=True)
class ChatMessage:
    id: int
    text: str
    sender: Sender
    ts: str  # timestamp, e.g. "2025-09-01T10:00:00"


@dataclass(frozen=True)
class UserProfile:
    name: str
    profile_type: ProfileType
    age: int
    income: float     # monthly budget for students, annual income for professionals
    goals: str = ""
