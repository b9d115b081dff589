"""
Rule Engine — Evaluate an Ordered Ruleset Against an Aggregate Window

Not first-match-wins: every data rule is checked, so a user with high
stress AND high workload gets both categories.

Constraints:
- Output order is (priority, category), independent of input order
- "No history" is an explicit signal, never inferred from zeroed means
- When the degenerate rule fires, nothing else is evaluated
"""

import logging
from typing import Iterable, List, Optional

from mindwork.assessments.schemas import AggregateWindow
from mindwork.errors import InputContractError

from .ruleset import DegenerateNoHistoryRule, RecommendationRule, ordered


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Evaluates a fixed ruleset. Read-only after construction, so one
    instance can serve concurrent callers.
    """

    def __init__(self, ruleset: Iterable[RecommendationRule]):
        """
        Args:
            ruleset: Rules in any order; sorted here by (priority, category)

        Raises:
            ConfigurationError: On duplicate categories
        """
        rules = ordered(ruleset)
        self._rules = tuple(rules)
        self._degenerate = tuple(r for r in rules if isinstance(r, DegenerateNoHistoryRule))
        self._data_rules = tuple(r for r in rules if not isinstance(r, DegenerateNoHistoryRule))

    @property
    def rules(self) -> tuple:
        return self._rules

    def evaluate(
        self,
        window: AggregateWindow,
        no_history: Optional[bool] = None
    ) -> List[str]:
        """
        Collect every matching category.

        Args:
            window: Aggregated statistics
            no_history: True when the user has no records at all.
                        Defaults to window.count == 0.

        Returns:
            Matched categories in (priority, category) order

        Raises:
            InputContractError: If window.count is negative
        """
        if window.count < 0:
            raise InputContractError("count", window.count, f"count must be >= 0, got {window.count}")

        if no_history is None:
            no_history = window.count == 0

        if no_history:
            # Degenerate rules short-circuit everything else
            matched = [r.category for r in self._degenerate if r.predicate(window, no_history=True)]
            logger.debug(f"[RuleEngine] No history -> {matched}")
            return matched

        matched = [r.category for r in self._data_rules if r.predicate(window)]
        logger.debug(f"[RuleEngine] count={window.count} matched={matched}")
        return matched


def evaluate(
    window: AggregateWindow,
    ruleset: Iterable[RecommendationRule],
    no_history: Optional[bool] = None
) -> List[str]:
    """Convenience wrapper: evaluate window against ruleset once."""
    return RuleEngine(ruleset).evaluate(window, no_history=no_history)
