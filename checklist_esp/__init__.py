"""
Checklist ESP - análise de conformidade de editais (Lei 14.133/2021)

Extrai campos do texto do edital, rastreia a origem de cada um e valida o
resultado contra o checklist de regras legais.
"""
from checklist_esp.models import (
    FIELD_NAMES,
    STATUS_OK,
    STATUS_WARNING,
    ExtractionResult,
    RuleOutcome,
    Section,
    SourceAttribution,
)
from checklist_esp.structure import index_sections, find_section
from checklist_esp.extractors import extract_fields
from checklist_esp.rules import evaluate_rules
from checklist_esp.serialization import export_fields_json, import_fields_json
from checklist_esp.pipeline import ChecklistReport, analisar_edital

__version__ = "1.0.0"

__all__ = [
    "FIELD_NAMES",
    "STATUS_OK",
    "STATUS_WARNING",
    "ChecklistReport",
    "ExtractionResult",
    "RuleOutcome",
    "Section",
    "SourceAttribution",
    "analisar_edital",
    "evaluate_rules",
    "export_fields_json",
    "extract_fields",
    "find_section",
    "import_fields_json",
    "index_sections",
]
