"""
Monthly Report Composer — Organization-Wide Climate Report

Runs the aggregator and the shared rule engine over one calendar month of
self-assessments, then writes a summary, key findings and suggested actions.

Constraints:
- Records are assumed pre-filtered to month_bounds(year, month); no re-filtering
- No data: averages 0, empty lists, summary contains NO_DATA_PHRASE
- Findings/actions come from the same categories as per-user recommendations
- A category without a sentence entry is a configuration error
"""

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mindwork.assessments.aggregator import aggregate
from mindwork.assessments.schemas import AggregateWindow, WellnessRecord
from mindwork.assessments.windows import validate_year_month
from mindwork.errors import ConfigurationError, MissingTemplateError
from mindwork.rules.engine import RuleEngine
from mindwork.rules.ruleset import default_ruleset

from .constants import (
    MONTH_NAMES,
    NO_DATA_SUMMARY,
    REPORT_SENTENCES,
    STABLE_ACTION,
    STABLE_FINDING,
    SUMMARY_TEMPLATE,
)


logger = logging.getLogger(__name__)


class MonthlyReport(BaseModel):
    """
    Monthly climate report.

    Serialise with model_dump(by_alias=True) for the camelCase payload
    (averageMood, keyFindings, ...).
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    year: int
    month: int = Field(..., ge=1, le=12)
    average_mood: float = 0.0
    average_stress: float = 0.0
    average_workload: float = 0.0
    summary: str
    key_findings: List[str] = Field(default_factory=list)
    suggested_actions: List[str] = Field(default_factory=list)


def share_at_or_above(distribution: Dict[int, int], level: int, count: int) -> float:
    """Percentage of records with an ordinal >= level."""
    if count == 0:
        return 0.0
    return 100.0 * sum(n for lvl, n in distribution.items() if lvl >= level) / count


def share_at_or_below(distribution: Dict[int, int], level: int, count: int) -> float:
    """Percentage of records with an ordinal <= level."""
    if count == 0:
        return 0.0
    return 100.0 * sum(n for lvl, n in distribution.items() if lvl <= level) / count


def sentence_context(window: AggregateWindow) -> Dict[str, float]:
    """Values the finding templates may interpolate."""
    return {
        "count": window.count,
        "mean_mood": window.mean_mood,
        "mean_stress": window.mean_stress,
        "mean_workload": window.mean_workload,
        "high_stress_pct": share_at_or_above(window.stress_distribution, 4, window.count),
        "high_workload_pct": share_at_or_above(window.workload_distribution, 4, window.count),
        "low_mood_pct": share_at_or_below(window.mood_distribution, 2, window.count),
    }


class MonthlyReportComposer:
    """
    Composes MonthlyReport objects.

    Pure: the engine and sentence table are only read.
    """

    def __init__(
        self,
        engine: Optional[RuleEngine] = None,
        sentences: Mapping[str, Tuple[str, str]] = REPORT_SENTENCES
    ):
        """
        Args:
            engine: Shared rule engine (default: reference ruleset)
            sentences: category -> (finding, suggested action)
        """
        self.engine = engine or RuleEngine(default_ruleset())
        self.sentences = sentences

    def _render(self, categories: List[str], window: AggregateWindow) -> Tuple[List[str], List[str]]:
        missing = [c for c in categories if c not in self.sentences]
        if missing:
            raise MissingTemplateError(missing[0], table="report sentences")

        context = sentence_context(window)
        findings, actions = [], []
        for category in categories:
            finding, action = self.sentences[category]
            try:
                findings.append(finding.format(**context))
                actions.append(action.format(**context))
            except (KeyError, IndexError) as e:
                raise ConfigurationError(
                    f"Report sentence for '{category}' uses unknown placeholder: {e}"
                ) from e
        return findings, actions

    def compose(
        self,
        year: int,
        month: int,
        records: Iterable[WellnessRecord]
    ) -> MonthlyReport:
        """
        Build the report for one calendar month.

        Args:
            year: Positive year
            month: 1..12
            records: All organization records within month_bounds(year, month)

        Returns:
            MonthlyReport

        Raises:
            InputContractError: Invalid year/month or ordinal values
            MissingTemplateError: Category without a sentence entry
        """
        validate_year_month(year, month)
        month_name = MONTH_NAMES[month]

        window = aggregate(records)

        if window.count == 0:
            logger.info(f"[MonthlyReport] {year}-{month:02d}: no self-assessments")
            return MonthlyReport(
                year=year,
                month=month,
                summary=NO_DATA_SUMMARY.format(month_name=month_name, year=year),
            )

        categories = self.engine.evaluate(window, no_history=False)
        findings, actions = self._render(categories, window)

        if not categories:
            findings, actions = [STABLE_FINDING], [STABLE_ACTION]

        summary = SUMMARY_TEMPLATE.format(
            month_name=month_name,
            year=year,
            count=window.count,
            mean_mood=window.mean_mood,
            mean_stress=window.mean_stress,
            mean_workload=window.mean_workload,
        )

        logger.info(
            f"[MonthlyReport] {year}-{month:02d}: {window.count} assessments, "
            f"categories={categories}"
        )

        return MonthlyReport(
            year=year,
            month=month,
            average_mood=window.mean_mood,
            average_stress=window.mean_stress,
            average_workload=window.mean_workload,
            summary=summary,
            key_findings=findings,
            suggested_actions=actions,
        )


def compose(
    year: int,
    month: int,
    records: Iterable[WellnessRecord],
    composer: Optional[MonthlyReportComposer] = None
) -> MonthlyReport:
    """Compose a monthly report with the reference ruleset and wording."""
    return (composer or MonthlyReportComposer()).compose(year, month, records)
