"""
Motor de regras: avalia o catálogo sobre o mapa de campos.

Função pura e determinística; saída na ordem do catálogo, sem reordenação.
"""
from typing import List, Mapping, Optional, Sequence

from checklist_esp.models import STATUS_OK, STATUS_WARNING, STATUSES_VALIDOS, RuleOutcome
from checklist_esp.rules.base import RuleEvaluator
from checklist_esp.rules.catalog import RULE_CATALOG


def evaluate_rules(
    campos: Mapping[str, str],
    catalogo: Sequence[RuleEvaluator] = RULE_CATALOG,
    fases: Optional[Sequence[str]] = None,
) -> List[RuleOutcome]:
    """
    Avalia cada regra do catálogo e retorna os resultados emitidos.

    Args:
        campos: mapa campo -> valor (ausente = não determinado)
        catalogo: lista ordenada de avaliadores
        fases: se informado, avalia só as regras dessas fases

    Raises:
        TypeError: se campos for None
    """
    if campos is None:
        raise TypeError("mapa de campos não pode ser None")

    resultados: List[RuleOutcome] = []
    for regra in catalogo:
        if fases is not None and regra.fase not in fases:
            continue
        outcome = regra.avaliar(campos)
        if outcome is None:
            continue
        if outcome.status not in STATUSES_VALIDOS:
            raise ValueError(f"{regra.rule_id}: status inválido '{outcome.status}'")
        resultados.append(outcome)
    return resultados


def summarize(resultados: Sequence[RuleOutcome]) -> dict:
    """Contagem por status, no formato usado pela resposta HTTP."""
    total_ok = sum(1 for r in resultados if r.status == STATUS_OK)
    return {
        "total": len(resultados),
        STATUS_OK: total_ok,
        STATUS_WARNING: len(resultados) - total_ok,
    }
