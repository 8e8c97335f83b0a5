import logging
import math
from typing import Dict, List, Optional

from advisor.config import Settings
from advisor.domain import BudgetMetrics, ProfileType, Recommendation, RecommendationStatus

logger = logging.getLogger(__name__)

HOUSING = "housing"
SAVINGS_RATE = "savings_rate"
EMERGENCY_FUND = "emergency_fund"

# Evaluation order of the recommendations
RULE_ORDER = (HOUSING, SAVINGS_RATE, EMERGENCY_FUND)

# rule -> profile -> (title, description)
RULE_TEXT: Dict[str, Dict[ProfileType, tuple]] = {
    HOUSING: {
        ProfileType.STUDENT: (
            "Housing Budget",
            "Try to keep housing under 30% of your budget. Consider shared living to reduce costs.",
        ),
        ProfileType.PROFESSIONAL: (
            "Housing Rule",
            "Keep housing costs below 30% of gross income for financial stability.",
        ),
    },
    SAVINGS_RATE: {
        ProfileType.STUDENT: (
            "Savings Rate",
            "Even saving 10-15% as a student builds great habits!",
        ),
        ProfileType.PROFESSIONAL: (
            "Savings Rate",
            "Aim for 20% savings rate to build wealth effectively.",
        ),
    },
    EMERGENCY_FUND: {
        ProfileType.STUDENT: (
            "Emergency Fund",
            "Start with $500, then build to 3 months of expenses.",
        ),
        ProfileType.PROFESSIONAL: (
            "Emergency Fund",
            "Maintain 3-6 months of expenses in emergency savings.",
        ),
    },
}


def round_half_up(value: float) -> int:
    # 12.5 -> 13, -12.5 -> -12
    return int(math.floor(value + 0.5))


def _status(ok: bool) -> RecommendationStatus:
    return RecommendationStatus.GOOD if ok else RecommendationStatus.WARNING


class RecommendationEvaluator:
    """Checks budget metrics against profile-dependent thresholds.

    Every rule is evaluated on its own; the result always holds the housing,
    savings rate and emergency fund recommendations, in that order.
    """

    def __init__(self, housing_limit: float = 0.30, savings_targets: Optional[Dict[ProfileType, float]] = None):
        self.housing_limit = housing_limit
        self.savings_targets = savings_targets or {
            ProfileType.STUDENT: 10,
            ProfileType.PROFESSIONAL: 20,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecommendationEvaluator":
        return cls(
            housing_limit=settings.housing_limit,
            savings_targets={p: settings.savings_target(p) for p in ProfileType},
        )

    def evaluate(self, metrics: BudgetMetrics, profile: ProfileType) -> List[Recommendation]:
        profile = ProfileType(profile)
        checks = {
            HOUSING: self._housing,
            SAVINGS_RATE: self._savings_rate,
            EMERGENCY_FUND: self._emergency_fund,
        }
        recommendations = []
        for rule in RULE_ORDER:
            title, description = RULE_TEXT[rule][profile]
            status, percentage = checks[rule](metrics, profile)
            recommendations.append(Recommendation(title, description, status, percentage))

        logger.debug(
            "evaluated %s budget: %s",
            profile.value,
            ", ".join(f"{r.title}={r.status.value}" for r in recommendations),
        )
        return recommendations

    def _housing(self, metrics: BudgetMetrics, profile: ProfileType):
        if metrics.income <= 0:
            return RecommendationStatus.WARNING, 0
        ok = metrics.housing_ratio <= self.housing_limit
        return _status(ok), round_half_up(metrics.housing_ratio * 100)

    def _savings_rate(self, metrics: BudgetMetrics, profile: ProfileType):
        ok = metrics.savings_rate >= self.savings_targets[profile]
        return _status(ok), round_half_up(metrics.savings_rate)

    def _emergency_fund(self, metrics: BudgetMetrics, profile: ProfileType):
        return _status(metrics.remaining_budget > 0), None
