"""
Pipeline completo do checklist: texto do edital -> campos + origens + regras.

Caminho determinístico:
    index_sections -> extract_fields -> evaluate_rules

Se um extrator por IA for injetado (callable texto -> dict de campos, ou
{"campos": ..., "estrutura": [...]} para trazer também as seções), ele é
tentado primeiro; qualquer exceção cai no caminho determinístico e o motivo
fica registrado em aviso_ia.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from checklist_esp.extractors import extract_fields
from checklist_esp.models import FIELD_NAMES, FIELD_NAMES_SET, RuleOutcome, Section, SourceAttribution
from checklist_esp.observability import EventSink, NULL_SINK
from checklist_esp.rules import evaluate_rules
from checklist_esp.structure import index_sections, sort_sections

logger = logging.getLogger(__name__)

METODO_REGEX = "regex"
METODO_IA = "ai"

CONTEXTO_IA = "Extraído por IA"

ExtratorIA = Callable[[str], Mapping[str, Any]]


@dataclass
class ChecklistReport:
    campos: Dict[str, str] = field(default_factory=dict)
    fontes: List[SourceAttribution] = field(default_factory=list)
    secoes: List[Section] = field(default_factory=list)
    regras: List[RuleOutcome] = field(default_factory=list)
    metodo: str = METODO_REGEX
    aviso_ia: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "extractedData": dict(self.campos),
            "sources": [f.to_dict() for f in self.fontes],
            "documentStructure": [s.to_dict() for s in self.secoes],
            "rules": [r.to_dict() for r in self.regras],
            "extractionMethod": self.metodo,
        }
        if self.aviso_ia:
            d["aiWarning"] = self.aviso_ia
        return d


def _campos_da_ia(bruto: Mapping[str, Any]) -> Dict[str, str]:
    """Mantém só campos conhecidos com valor não vazio, na ordem do formulário."""
    if not isinstance(bruto, Mapping):
        raise ValueError(f"extrator de IA retornou {type(bruto).__name__}, esperado dict")
    campos = {}
    for nome in FIELD_NAMES:
        valor = bruto.get(nome)
        if valor is None:
            continue
        valor = str(valor).strip()
        if valor:
            campos[nome] = valor
    desconhecidos = [k for k in bruto if k not in FIELD_NAMES_SET]
    if desconhecidos:
        logger.debug(f"extrator IA: campos ignorados {desconhecidos[:10]}")
    return campos


def _fontes_da_ia(campos: Mapping[str, str]) -> List[SourceAttribution]:
    return [
        SourceAttribution(field=nome, snippet=valor, context=CONTEXTO_IA)
        for nome, valor in campos.items()
    ]


def _secoes_da_ia(estrutura: Any) -> Optional[List[Section]]:
    if estrutura is None:
        return None
    if not isinstance(estrutura, list) or not all(isinstance(d, Mapping) for d in estrutura):
        raise ValueError("extrator de IA: estrutura deve ser lista de objetos")
    return sort_sections([s for s in (Section.from_dict(d) for d in estrutura) if s.number])


def _resposta_da_ia(bruto: Mapping[str, Any]) -> Tuple[Dict[str, str], Optional[List[Section]]]:
    """
    Aceita o mapa de campos direto ou {"campos": {...}, "estrutura": [...]}.
    Sem "estrutura", as seções vêm do indexador.
    """
    if isinstance(bruto, Mapping) and isinstance(bruto.get("campos"), Mapping):
        return _campos_da_ia(bruto["campos"]), _secoes_da_ia(bruto.get("estrutura"))
    return _campos_da_ia(bruto), None


def analisar_edital(
    texto: str,
    secoes: Optional[Sequence[Section]] = None,
    extrator_ia: Optional[ExtratorIA] = None,
    eventos: Optional[EventSink] = None,
) -> ChecklistReport:
    """
    Analisa o texto do edital e devolve o relatório completo.

    Args:
        texto: texto plano do edital
        secoes: estrutura pré-computada; tem precedência sobre a da IA e a do indexador
        extrator_ia: caminho alternativo opcional; falhas caem no regex
        eventos: sink de diagnóstico

    Raises:
        TypeError: texto None
    """
    if texto is None:
        raise TypeError("texto do edital não pode ser None")
    eventos = eventos or NULL_SINK

    campos_ia = None
    secoes_ia = None
    aviso_ia = None
    if extrator_ia is not None:
        try:
            campos_ia, secoes_ia = _resposta_da_ia(extrator_ia(texto))
        except Exception as e:
            aviso_ia = f"Extração por IA indisponível, usando regex: {type(e).__name__}: {e}"
            logger.warning(aviso_ia)
            eventos.emit("pipeline.ia_falhou", erro=type(e).__name__)

    if secoes is None:
        secoes = secoes_ia if secoes_ia is not None else index_sections(texto, eventos=eventos)
    secoes = list(secoes)

    if campos_ia is not None:
        eventos.emit("pipeline.ia_ok", campos=len(campos_ia), secoes=len(secoes))
        return ChecklistReport(
            campos=campos_ia,
            fontes=_fontes_da_ia(campos_ia),
            secoes=secoes,
            regras=evaluate_rules(campos_ia),
            metodo=METODO_IA,
        )

    resultado = extract_fields(texto, secoes, eventos=eventos)
    regras = evaluate_rules(resultado.fields)
    logger.info(
        f"analisar_edital: secoes={len(secoes)} campos={len(resultado.fields)} "
        f"fontes={len(resultado.sources)} regras={len(regras)}"
    )
    return ChecklistReport(
        campos=resultado.fields,
        fontes=resultado.sources,
        secoes=secoes,
        regras=regras,
        metodo=METODO_REGEX,
        aviso_ia=aviso_ia,
    )
