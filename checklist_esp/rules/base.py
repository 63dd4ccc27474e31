"""
Checklist ESP - Base do motor de regras
=======================================

Cada avaliador é independente: lê o mapa de campos e devolve no máximo um
RuleOutcome (ou None). Nenhum avaliador depende do resultado de outro.
"""

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from checklist_esp.models import STATUS_OK, STATUS_WARNING, RuleOutcome

Campos = Mapping[str, str]


@dataclass(frozen=True)
class RuleEvaluator:
    rule_id: str
    fase: str
    avaliar: Callable[[Campos], Optional[RuleOutcome]]


# ── Leitura de campos ────────────────────────────────────────────────────────

def valor(campos: Campos, nome: str) -> str:
    """Valor do campo como string aparada; ausente/None -> ''."""
    v = campos.get(nome)
    if v is None:
        return ""
    return str(v).strip()


_RE_INT_INICIAL = re.compile(r"^\s*([+-]?\d+)")
_RE_NUM_INICIAL = re.compile(r"^\s*([+-]?\d+(?:[.,]\d+)?)")


def parse_int_lenient(texto) -> int:
    """
    Inteiro inicial da string, como parseInt: '8 dias' -> 8, '08' -> 8.
    Sem dígito inicial -> 0 (nunca levanta).
    """
    if texto is None:
        return 0
    m = _RE_INT_INICIAL.match(str(texto))
    return int(m.group(1)) if m else 0


def parse_percent(texto) -> float:
    """'5' / '5%' / '0,5 %' -> float. Não numérico -> 0.0."""
    if texto is None:
        return 0.0
    m = _RE_NUM_INICIAL.match(str(texto))
    if not m:
        return 0.0
    return float(m.group(1).replace(",", "."))


def fmt_numero(n: float) -> str:
    """5.0 -> '5'; 0.5 -> '0,5'."""
    if float(n).is_integer():
        return str(int(n))
    return f"{n:g}".replace(".", ",")


# ── Construtores de resultado ────────────────────────────────────────────────

def ok(rule_id, title, message, legal, **extra) -> RuleOutcome:
    return RuleOutcome(id=rule_id, title=title, status=STATUS_OK, message=message, legal=legal, **extra)


def warning(rule_id, title, message, legal, **extra) -> RuleOutcome:
    return RuleOutcome(id=rule_id, title=title, status=STATUS_WARNING, message=message, legal=legal, **extra)
