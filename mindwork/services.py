"""
Insights Services — Entry Points for the Controller Layer

Wires aggregator -> rule engine -> synthesizer/composer behind the two
boundary contracts (per-user recommendations, monthly report) plus the
manager dashboard summary.

Records arrive already fetched and filtered; nothing here touches storage.
"""

import logging
from datetime import datetime
from typing import Iterable, List, Mapping, Optional, Tuple

from mindwork.assessments.aggregator import aggregate
from mindwork.assessments.schemas import WellnessRecord
from mindwork.assessments.windows import lookback_bounds, month_bounds
from mindwork.config import Settings, settings as default_settings
from mindwork.errors import InputContractError, MindWorkError
from mindwork.reports.constants import REPORT_SENTENCES
from mindwork.reports.dashboard import DashboardSummary, summarize_period
from mindwork.reports.monthly import MonthlyReport, MonthlyReportComposer
from mindwork.rules.engine import RuleEngine
from mindwork.rules.ruleset import RecommendationRule, default_ruleset
from mindwork.rules.synthesizer import Recommendation, synthesize, templates_from_ruleset


logger = logging.getLogger(__name__)


class InsightsService:
    """
    Stateless facade over the insights core.

    Rule, template and sentence tables are fixed at construction and only
    read afterwards, so one instance can be shared across requests.
    """

    def __init__(
        self,
        ruleset: Optional[Iterable[RecommendationRule]] = None,
        templates: Optional[Mapping[str, Tuple[str, str]]] = None,
        sentences: Optional[Mapping[str, Tuple[str, str]]] = None,
        config: Optional[Settings] = None
    ):
        """
        Args:
            ruleset: Rules to evaluate (default: reference ruleset from config)
            templates: category -> (title, description); default built from rules
            sentences: category -> (finding, action) for monthly reports
            config: Settings (default: module singleton)
        """
        self.config = config or default_settings
        rules = tuple(ruleset) if ruleset is not None else default_ruleset(self.config)

        self.engine = RuleEngine(rules)
        self.templates = templates if templates is not None else templates_from_ruleset(rules)
        self.composer = MonthlyReportComposer(
            engine=self.engine,
            sentences=sentences if sentences is not None else REPORT_SENTENCES,
        )

        logger.info(
            f"[InsightsService] Initialized with {len(self.engine.rules)} rules "
            f"({self.config.ENVIRONMENT})"
        )

    # ------------------------------------------------------------------
    # Windows for the storage collaborator
    # ------------------------------------------------------------------

    def lookback_window(self, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
        """Range of records to fetch for per-user recommendations."""
        return lookback_bounds(self.config.LOOKBACK_DAYS, now=now)

    def dashboard_window(
        self,
        period_days: Optional[int] = None,
        now: Optional[datetime] = None
    ) -> Tuple[datetime, datetime]:
        """Range of records to fetch for the dashboard summary."""
        if period_days is None:
            period_days = self.config.DASHBOARD_DEFAULT_DAYS
        return lookback_bounds(period_days, now=now)

    @staticmethod
    def month_window(year: int, month: int) -> Tuple[datetime, datetime]:
        """Range of records to fetch for a monthly report."""
        return month_bounds(year, month)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def recommendations_for_user(
        self,
        user_id: str,
        records: Iterable[WellnessRecord]
    ) -> List[Recommendation]:
        """
        Personalized recommendations for one user.

        Args:
            user_id: Owner of the records
            records: That user's records within lookback_window()

        Returns:
            Ordered recommendations. Empty input yields onboarding only.

        Raises:
            InputContractError: Foreign records or invalid ordinals
            ConfigurationError: Matched category without a template
        """
        records = list(records)
        try:
            for record in records:
                if record.user_id != user_id:
                    raise InputContractError(
                        "user_id",
                        record.user_id,
                        f"Record '{record.id}' belongs to '{record.user_id}', not '{user_id}'",
                    )

            window = aggregate(records)
            categories = self.engine.evaluate(window, no_history=len(records) == 0)
            recommendations = synthesize(categories, self.templates)
        except MindWorkError as e:
            logger.error(f"[InsightsService] Recommendations failed for user {user_id}: {e}")
            raise

        logger.debug(
            f"[InsightsService] user={user_id} records={len(records)} "
            f"categories={[r.category for r in recommendations]}"
        )
        return recommendations

    def monthly_report(
        self,
        year: int,
        month: int,
        records: Iterable[WellnessRecord]
    ) -> MonthlyReport:
        """
        Organization-wide report for one calendar month.

        Raises:
            InputContractError: Invalid year/month or ordinals
            ConfigurationError: Matched category without a sentence
        """
        try:
            return self.composer.compose(year, month, records)
        except MindWorkError as e:
            logger.error(f"[InsightsService] Monthly report {year}-{month} failed: {e}")
            raise

    def dashboard_summary(
        self,
        records: Iterable[WellnessRecord],
        period_days: Optional[int] = None
    ) -> DashboardSummary:
        """Anonymous overview of the trailing period."""
        try:
            if period_days is None:
                period_days = self.config.DASHBOARD_DEFAULT_DAYS
            return summarize_period(records, period_days)
        except MindWorkError as e:
            logger.error(f"[InsightsService] Dashboard summary failed: {e}")
            raise
