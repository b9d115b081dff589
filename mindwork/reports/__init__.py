"""
Reports Module — Organization-Level Outputs

Public API:
- MonthlyReportComposer / compose: Monthly climate report
- MonthlyReport: Report model (camelCase aliases on dump)
- summarize_period / DashboardSummary: Anonymous period overview
- NO_DATA_PHRASE: Fixed phrase signalling an empty month
"""

from .constants import NO_DATA_PHRASE, REPORT_SENTENCES, MONTH_NAMES
from .monthly import (
    MonthlyReport,
    MonthlyReportComposer,
    compose,
)
from .dashboard import DashboardSummary, summarize_period

__all__ = [
    "NO_DATA_PHRASE",
    "REPORT_SENTENCES",
    "MONTH_NAMES",
    "MonthlyReport",
    "MonthlyReportComposer",
    "compose",
    "DashboardSummary",
    "summarize_period",
]
