"""
Recommendation Synthesizer — Categories to User-Facing Text

Maps matched categories to (title, description) pairs.

Constraints:
- One Recommendation per category, in engine order (no re-sorting)
- Duplicate categories collapse to their first occurrence
- A missing template is a configuration error, never silently dropped
- All-or-nothing: nothing is returned if any template is missing
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field

from mindwork.errors import MissingTemplateError

from .ruleset import RecommendationRule


Template = Tuple[str, str]


class Recommendation(BaseModel):
    """Plain output value, not persisted."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Short headline")
    description: str = Field(..., description="Actionable suggestion")
    category: str = Field(..., description="Stable category tag")


def templates_from_ruleset(ruleset: Iterable[RecommendationRule]) -> Mapping[str, Template]:
    """Read-only category -> (title, description) table built from rule text."""
    return MappingProxyType({
        rule.category: (rule.title, rule.description)
        for rule in ruleset
        if rule.title
    })


def _dedupe(categories: Iterable[str]) -> List[str]:
    seen = set()
    unique = []
    for category in categories:
        if category not in seen:
            seen.add(category)
            unique.append(category)
    return unique


def synthesize(
    categories: Iterable[str],
    templates: Mapping[str, Template]
) -> List[Recommendation]:
    """
    Build one Recommendation per category.

    Args:
        categories: Output of RuleEngine.evaluate
        templates: category -> (title, description)

    Returns:
        Recommendations in the given order

    Raises:
        MissingTemplateError: If any category has no template
    """
    unique = _dedupe(categories)

    missing = [c for c in unique if c not in templates]
    if missing:
        raise MissingTemplateError(missing[0], table="recommendation templates")

    recommendations = []
    for category in unique:
        title, description = templates[category]
        recommendations.append(Recommendation(
            title=title,
            description=description,
            category=category,
        ))
    return recommendations
