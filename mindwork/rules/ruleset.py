"""
Recommendation Ruleset — Ordered Table of Prioritised Rules

This is where the thresholds live. The aggregator produces numbers; the
ruleset decides which of them deserve a recommendation.

Rule variants:
- DegenerateNoHistoryRule: fires iff the caller signals "no history at all"
- ThresholdRule: window.<metric> compared (inclusively) against a threshold
- PredicateRule: arbitrary pure predicate over the window (fixture rulesets)

Order is the total order (priority, category). Lower priority sorts first.
"""

import operator
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from mindwork.assessments.schemas import AggregateWindow
from mindwork.config import Settings, settings as default_settings
from mindwork.errors import ConfigurationError


class Category(str, Enum):
    """Stable category tags shared with every consumer."""
    ONBOARDING = "onboarding"
    STRESS_MANAGEMENT = "stress_management"
    WORKLOAD = "workload"
    WORK_LIFE_BALANCE = "work_life_balance"


# Default priorities (gaps leave room for new rules)
PRIORITY_ONBOARDING = 0
PRIORITY_STRESS = 10
PRIORITY_WORKLOAD = 20
PRIORITY_WORK_LIFE_BALANCE = 30

# Window attributes a ThresholdRule may read
THRESHOLD_METRICS = ("mean_mood", "mean_stress", "mean_workload")

# Inclusive comparisons only
OPERATORS = {
    ">=": operator.ge,
    "<=": operator.le,
}


def _tag(category: Union[Category, str]) -> str:
    return category.value if isinstance(category, Category) else str(category)


@dataclass(frozen=True)
class DegenerateNoHistoryRule:
    """Onboarding rule: the user has no records at all."""
    category: str
    priority: int
    title: str
    description: str

    def __post_init__(self):
        object.__setattr__(self, "category", _tag(self.category))

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (self.priority, self.category)

    def predicate(self, window: AggregateWindow, no_history: bool = False) -> bool:
        return no_history


@dataclass(frozen=True)
class ThresholdRule:
    """Fires when window.<metric> <op> threshold (boundary included)."""
    category: str
    priority: int
    metric: str
    op: str
    threshold: float
    title: str
    description: str

    def __post_init__(self):
        object.__setattr__(self, "category", _tag(self.category))
        if self.metric not in THRESHOLD_METRICS:
            raise ConfigurationError(
                f"Rule '{self.category}': unknown metric '{self.metric}' "
                f"(expected one of {THRESHOLD_METRICS})"
            )
        if self.op not in OPERATORS:
            raise ConfigurationError(
                f"Rule '{self.category}': unsupported operator '{self.op}' "
                f"(expected one of {tuple(OPERATORS)})"
            )

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (self.priority, self.category)

    def predicate(self, window: AggregateWindow, no_history: bool = False) -> bool:
        # Zeroed means of an empty window are not observations
        if window.count <= 0:
            return False
        observed = getattr(window, self.metric)
        return OPERATORS[self.op](observed, self.threshold)


@dataclass(frozen=True)
class PredicateRule:
    """Rule backed by any pure function of the window."""
    category: str
    priority: int
    check: Callable[[AggregateWindow], bool] = field(compare=False)
    title: str = ""
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "category", _tag(self.category))

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (self.priority, self.category)

    def predicate(self, window: AggregateWindow, no_history: bool = False) -> bool:
        return bool(self.check(window))


RecommendationRule = Union[DegenerateNoHistoryRule, ThresholdRule, PredicateRule]


def default_ruleset(config: Optional[Settings] = None) -> Tuple[RecommendationRule, ...]:
    """
    Reference ruleset with thresholds taken from settings.

    Text is Brazilian Portuguese, the single output language.
    """
    config = config or default_settings

    return (
        DegenerateNoHistoryRule(
            category=Category.ONBOARDING,
            priority=PRIORITY_ONBOARDING,
            title="Comece registrando como você está",
            description=(
                "Ainda não encontramos autoavaliações suas no período. "
                "Registre seu humor, estresse e carga de trabalho algumas vezes "
                "por semana para receber recomendações personalizadas."
            ),
        ),
        ThresholdRule(
            category=Category.STRESS_MANAGEMENT,
            priority=PRIORITY_STRESS,
            metric="mean_stress",
            op=">=",
            threshold=config.STRESS_THRESHOLD,
            title="Reduzir fontes de estresse",
            description=(
                "Percebi níveis de estresse frequentemente altos nas últimas semanas. "
                "Experimente bloquear 30 minutos no seu dia para pausas sem telas."
            ),
        ),
        ThresholdRule(
            category=Category.WORKLOAD,
            priority=PRIORITY_WORKLOAD,
            metric="mean_workload",
            op=">=",
            threshold=config.WORKLOAD_THRESHOLD,
            title="Check-in com o gestor",
            description=(
                "Sua carga de trabalho está acima da média. Agende uma conversa "
                "rápida com seu gestor para revisar prioridades."
            ),
        ),
        ThresholdRule(
            category=Category.WORK_LIFE_BALANCE,
            priority=PRIORITY_WORK_LIFE_BALANCE,
            metric="mean_mood",
            op="<=",
            threshold=config.LOW_MOOD_THRESHOLD,
            title="Cuidar do equilíbrio entre vida pessoal e trabalho",
            description=(
                "Seu humor médio tem estado baixo. Reserve momentos para atividades "
                "fora do trabalho e, se precisar, procure apoio da equipe de pessoas."
            ),
        ),
    )


def ordered(ruleset) -> List[RecommendationRule]:
    """
    Sort by (priority, category) and reject duplicate categories.

    Raises:
        ConfigurationError: If two rules share a category
    """
    rules = sorted(ruleset, key=lambda r: r.sort_key)
    seen = set()
    for rule in rules:
        if rule.category in seen:
            raise ConfigurationError(f"Duplicate rule category '{rule.category}'")
        seen.add(rule.category)
    return rules
