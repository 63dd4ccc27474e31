import azure.functions as func

bp = func.Blueprint()


@bp.function_name(name="parse_document")
@bp.route(route="parse_document", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
def parse_document(req: func.HttpRequest) -> func.HttpResponse:
    from checklist_esp.api.parse_document import handle_parse_document
    return handle_parse_document(req)


@bp.function_name(name="validate_rules")
@bp.route(route="validate_rules", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
def validate_rules(req: func.HttpRequest) -> func.HttpResponse:
    from checklist_esp.api.validate_rules import handle_validate_rules
    return handle_validate_rules(req)


@bp.function_name(name="export_fields")
@bp.route(route="export_fields", methods=["POST"], auth_level=func.AuthLevel.FUNCTION)
def export_fields(req: func.HttpRequest) -> func.HttpResponse:
    from checklist_esp.api.validate_rules import handle_export_fields
    return handle_export_fields(req)
