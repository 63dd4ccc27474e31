"""
Estrutura do edital: indexador de seções e localizador de trechos.
"""
from checklist_esp.structure.indexer import (
    index_sections,
    compare_dotted_path,
    dotted_path_key,
    sort_sections,
)
from checklist_esp.structure.matcher import find_section

__all__ = [
    "index_sections",
    "compare_dotted_path",
    "dotted_path_key",
    "sort_sections",
    "find_section",
]
