# checklist_esp/security/__init__.py
"""
Proteção da camada HTTP: error shield e validação de inputs.
"""
from checklist_esp.security.error_shield import safe_handler
from checklist_esp.security.validation import (
    json_error,
    validate_campos,
    validate_estrutura,
    validate_json_body,
    validate_texto,
)

__all__ = [
    "safe_handler",
    "json_error",
    "validate_campos",
    "validate_estrutura",
    "validate_json_body",
    "validate_texto",
]
