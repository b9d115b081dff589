"""
MindWork Insights — Wellness Recommendation & Reporting Core

Pipeline:
    records -> assessments.aggregate -> rules.RuleEngine -> rules.synthesize
                                                         -> reports.MonthlyReportComposer
"""

__version__ = "1.0.0"
