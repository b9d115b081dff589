"""
Report Constants — Wording, Month Names, Fixed Phrases

All report text is centralized here. Output language is Brazilian Portuguese.

NO_DATA_PHRASE is a bit-exact contract: consumers assert on it.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

from mindwork.rules.ruleset import Category


# =============================================================================
# FIXED PHRASES
# =============================================================================

NO_DATA_PHRASE: str = "Nenhum dado de autoavaliação"

NO_DATA_SUMMARY: str = (
    NO_DATA_PHRASE + " foi encontrado para {month_name} de {year}. "
    "Incentive a equipe a registrar como está se sentindo para gerar o relatório."
)

SUMMARY_TEMPLATE: str = (
    "Em {month_name} de {year}, {count} autoavaliações foram registradas. "
    "O humor médio ficou em {mean_mood:.2f}, o estresse médio em {mean_stress:.2f} "
    "e a carga de trabalho média em {mean_workload:.2f}."
)

# Used when the month has data but no rule fires
STABLE_FINDING: str = "Indicadores de humor, estresse e carga de trabalho dentro da faixa esperada."
STABLE_ACTION: str = "Manter as práticas atuais e acompanhar os indicadores no próximo mês."


# =============================================================================
# MONTH NAMES (pt-BR, index 1..12)
# =============================================================================

MONTH_NAMES: Tuple[str, ...] = (
    "",
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
)


# =============================================================================
# CATEGORY -> (finding, suggested action)
# =============================================================================
# Placeholders available: mean_mood, mean_stress, mean_workload,
# high_stress_pct, high_workload_pct, low_mood_pct, count

REPORT_SENTENCES: Mapping[str, Tuple[str, str]] = MappingProxyType({
    Category.STRESS_MANAGEMENT.value: (
        "Estresse médio elevado ({mean_stress:.2f}), com nível 4 ou 5 em "
        "{high_stress_pct:.0f}% das avaliações.",
        "Incentivar pausas programadas e uso de férias.",
    ),
    Category.WORKLOAD.value: (
        "Carga de trabalho em nível 4 ou 5 em {high_workload_pct:.0f}% das avaliações "
        "(média {mean_workload:.2f}).",
        "Reavaliar prioridades e distribuição de demandas com os líderes de equipe.",
    ),
    Category.WORK_LIFE_BALANCE.value: (
        "Humor médio baixo ({mean_mood:.2f}), com nível 1 ou 2 em "
        "{low_mood_pct:.0f}% das avaliações.",
        "Promover ações de equilíbrio entre vida pessoal e trabalho e divulgar canais de apoio.",
    ),
})
