import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from advisor.aggregator import BudgetAggregator
from advisor.config import Settings
from advisor.domain import BudgetMetrics, BudgetRecord, ProfileType, Recommendation, RecommendationStatus
from advisor.recommendations import RecommendationEvaluator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetReport:
    record: BudgetRecord
    profile_type: ProfileType
    metrics: BudgetMetrics
    recommendations: List[Recommendation]
    steps: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def has_income(self) -> bool:
        return self.record.income > 0


class BudgetAnalysisService:
    """Facade running the budget engines as recorded steps.

    Each step is kept as ``{"step": name, "output": value}`` in the report so
    the dashboard can show intermediate results.
    """

    def __init__(self, aggregator: Optional[BudgetAggregator] = None, evaluator: Optional[RecommendationEvaluator] = None):
        self.aggregator = aggregator or BudgetAggregator()
        self.evaluator = evaluator or RecommendationEvaluator()

    @classmethod
    def from_settings(cls, settings: Settings) -> "BudgetAnalysisService":
        return cls(evaluator=RecommendationEvaluator.from_settings(settings))

    def analyze(self, record: BudgetRecord, profile: ProfileType) -> BudgetReport:
        profile = ProfileType(profile)
        steps = []

        metrics = self.aggregator.compute(record)
        steps.append({"step": "compute_metrics", "output": metrics})

        recommendations = self.evaluator.evaluate(metrics, profile)
        steps.append({"step": "evaluate_recommendations", "output": recommendations})

        warnings = sum(1 for r in recommendations if r.status == RecommendationStatus.WARNING)
        logger.info("analyzed %s budget: %d of %d recommendations need attention",
                    profile.value, warnings, len(recommendations))
        return BudgetReport(
            record=record,
            profile_type=profile,
            metrics=metrics,
            recommendations=recommendations,
            steps=steps,
        )
