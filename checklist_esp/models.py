"""
Checklist ESP - Data models
============================
Dataclasses puras compartilhadas por indexador, extrator e motor de regras.
Sem dependência de I/O.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# Vocabulário fechado de campos do checklist (ordem do formulário)
FIELD_NAMES = (
    "objetoDescricao",
    "valorLicitacao",
    "registroPreco",
    "formaObjeto",
    "criterioJulgamento",
    "precoBase",
    "escopoJulgamento",
    "modoDisputa",
    "preferenciaMe",
    "exclusivaMe",
    "subcontratacaoMe",
    "cota25Me",
    "cooperativas",
    "consorcio",
    "classePrazo",
    "pncpPublicacao",
    "pncpPrazo",
    "pncpIntencao",
    "pncpPrazoIntencao",
    "orcamentoSigiloso",
    "orcamentoPublico",
    "lanceIntermediario",
    "intervaloMinimo",
    "prazoRecursal",
    "prazoImpugnacao",
    "prazoEsclarecimento",
    "prazoPropostaInicio",
    "prazoPropostaFim",
    "prazoHabilitacao",
    "garantiaContratual",
    "garantiaParticipacao",
    "amostras",
    "demonstracao",
    "visita",
    "visitaObrigatoria",
    "criterioDesempate",
    "criterioDesempateMe",
    "criterioDesempateSorteio",
    "beneficioLocal",
    "margem25",
    "margem10",
)

FIELD_NAMES_SET = frozenset(FIELD_NAMES)

SIM = "sim"
NAO = "nao"

# Status possíveis de uma regra (não existe estado de erro)
STATUS_OK = "ok"
STATUS_WARNING = "warning"

STATUSES_VALIDOS = frozenset({STATUS_OK, STATUS_WARNING})


@dataclass(frozen=True)
class Section:
    """Um nó do sumário recuperado do edital (ex: 3.5.2)."""
    number: str                 # '3.5.2'
    title: str                  # 'DO REGISTRO DE PREÇOS'
    content: str                # texto até a próxima fronteira
    level: int                  # pontos + 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "title": self.title,
            "content": self.content,
            "level": self.level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Section":
        number = str(data.get("number", "")).strip()
        level = data.get("level")
        if not isinstance(level, int) or level < 1:
            level = number.count(".") + 1
        return cls(
            number=number,
            title=str(data.get("title", "") or ""),
            content=str(data.get("content", "") or ""),
            level=level,
        )


@dataclass(frozen=True)
class SourceAttribution:
    """Trecho do edital que originou um campo extraído."""
    field: str
    snippet: str
    context: str
    section_number: Optional[str] = None
    section_title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "field": self.field,
            "snippet": self.snippet,
            "context": self.context,
        }
        if self.section_number is not None:
            d["editalItem"] = self.section_number
        if self.section_title is not None:
            d["editalTitle"] = self.section_title
        return d


@dataclass(frozen=True)
class RuleOutcome:
    """Resultado de uma regra do checklist."""
    id: str
    title: str
    status: str                 # ok | warning
    message: str
    legal: str
    guidance: Optional[str] = None
    source_context: Optional[str] = None
    edital_reference: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "message": self.message,
            "legal": self.legal,
        }
        if self.guidance is not None:
            d["guidance"] = self.guidance
        if self.source_context is not None:
            d["sourceContext"] = self.source_context
        if self.edital_reference is not None:
            d["editalReference"] = self.edital_reference
        return d


@dataclass
class ExtractionResult:
    """Saída do extrator: mapa de campos + atribuições de origem."""
    fields: Dict[str, str] = field(default_factory=dict)
    sources: List[SourceAttribution] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "extractedData": dict(self.fields),
            "sources": [s.to_dict() for s in self.sources],
        }
