"""
Checklist ESP - Motor de regras (Lei 14.133/2021, LC 123/2006)

Uso:
    from checklist_esp.rules import evaluate_rules

    for r in evaluate_rules(campos):
        print(f"[{r.status}] {r.id} {r.title}: {r.message}")
"""
from checklist_esp.rules.base import RuleEvaluator, parse_int_lenient, parse_percent
from checklist_esp.rules.catalog import FASES, RULE_CATALOG
from checklist_esp.rules.engine import evaluate_rules, summarize

__all__ = [
    "FASES",
    "RULE_CATALOG",
    "RuleEvaluator",
    "evaluate_rules",
    "parse_int_lenient",
    "parse_percent",
    "summarize",
]
