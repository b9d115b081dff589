"""
Rules Module — Rule Evaluation + Recommendation Synthesis

Public API:
- Category: Stable category tags
- DegenerateNoHistoryRule / ThresholdRule / PredicateRule: Rule variants
- default_ruleset: Reference ruleset built from settings
- RuleEngine / evaluate: Ordered, all-matches rule evaluation
- Recommendation / synthesize: Categories to user-facing text
"""

from .ruleset import (
    Category,
    DegenerateNoHistoryRule,
    ThresholdRule,
    PredicateRule,
    RecommendationRule,
    default_ruleset,
    PRIORITY_ONBOARDING,
    PRIORITY_STRESS,
    PRIORITY_WORKLOAD,
    PRIORITY_WORK_LIFE_BALANCE,
)
from .engine import RuleEngine, evaluate
from .synthesizer import (
    Recommendation,
    synthesize,
    templates_from_ruleset,
)

__all__ = [
    "Category",
    "DegenerateNoHistoryRule",
    "ThresholdRule",
    "PredicateRule",
    "RecommendationRule",
    "default_ruleset",
    "PRIORITY_ONBOARDING",
    "PRIORITY_STRESS",
    "PRIORITY_WORKLOAD",
    "PRIORITY_WORK_LIFE_BALANCE",
    "RuleEngine",
    "evaluate",
    "Recommendation",
    "synthesize",
    "templates_from_ruleset",
]
