"""
MindWork Insights - End-to-End Pipeline Demo

This script demonstrates the full data flow:
1. Synthetic self-assessments
2. Metric Aggregation
3. Rule Evaluation
4. Recommendation Synthesis
5. Monthly Report
6. Dashboard Summary
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import json
from datetime import datetime, timedelta, timezone

import numpy as np

from mindwork.assessments import WellnessRecord, aggregate, month_bounds
from mindwork.config import configure_logging
from mindwork.rules import RuleEngine, default_ruleset, synthesize, templates_from_ruleset
from mindwork.services import InsightsService

configure_logging()

print('='*60)
print('MINDWORK INSIGHTS - END-TO-END PIPELINE DEMO')
print('='*60)

# Step 1: Synthetic data
print('\n[1] SYNTHETIC SELF-ASSESSMENTS')
np.random.seed(42)
start, _ = month_bounds(2025, 3)
users = ['ana', 'bruno', 'carla']

records = []
for i in range(60):
    user = users[i % len(users)]
    # bruno is under pressure this month
    stress_base = 4.5 if user == 'bruno' else 2.5
    records.append(WellnessRecord(
        id=f'rec-{i}',
        user_id=user,
        occurred_at=start + timedelta(hours=12 * i),
        mood=int(np.clip(np.round(np.random.normal(3.3, 0.8)), 1, 5)),
        stress=int(np.clip(np.round(np.random.normal(stress_base, 0.6)), 1, 5)),
        workload=int(np.clip(np.round(np.random.normal(3.6, 0.7)), 1, 5)),
    ))
print(f'   [OK] Generated {len(records)} records for {len(users)} users')

# Step 2: Aggregation
print('\n[2] METRIC AGGREGATION (bruno)')
bruno = [r for r in records if r.user_id == 'bruno']
window = aggregate(bruno)
print(f'   - count: {window.count}')
print(f'   - mean mood/stress/workload: {window.mean_mood} / {window.mean_stress} / {window.mean_workload}')
print(f'   - stress distribution: {window.stress_distribution}')

# Step 3: Rules
print('\n[3] RULE EVALUATION')
rules = default_ruleset()
categories = RuleEngine(rules).evaluate(window)
print(f'   [OK] Matched categories: {categories}')

# Step 4: Recommendations
print('\n[4] RECOMMENDATIONS')
for rec in synthesize(categories, templates_from_ruleset(rules)):
    print(f'   - [{rec.category}] {rec.title}')

service = InsightsService()
onboarding = service.recommendations_for_user('new-user', [])
print(f'   - new user -> {[r.category for r in onboarding]}')

# Step 5: Monthly report
print('\n[5] MONTHLY REPORT (2025-03)')
report = service.monthly_report(2025, 3, records)
print(json.dumps(report.model_dump(by_alias=True), ensure_ascii=False, indent=2))

empty = service.monthly_report(2025, 4, [])
print(f'   - empty month: {empty.summary}')

# Step 6: Dashboard
print('\n[6] DASHBOARD SUMMARY (last 30 days)')
now = start + timedelta(days=31)
window_start, window_end = service.dashboard_window(30, now=now)
recent = [r for r in records if window_start <= r.occurred_at < window_end]
summary = service.dashboard_summary(recent, 30)
print(f'   - total assessments: {summary.total_assessments}')
print(f'   - averages: {summary.average_mood} / {summary.average_stress} / {summary.average_workload}')

print('\n' + '='*60)
print('DEMO COMPLETE')
print('='*60)
