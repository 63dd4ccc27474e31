# function_app.py
import logging

import azure.functions as func

from checklist_esp import config

# ---- Log level via CHECKLIST_LOG_LEVEL (visível no Azure Log Stream) ----
logging.basicConfig(level=config.get_log_level())

_ok, _msg = config.validate_config()
if not _ok:
    logging.error("Configuração inválida: %s", _msg)

app = func.FunctionApp()


@app.function_name(name="ping")
@app.route(route="ping", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def ping(req: func.HttpRequest) -> func.HttpResponse:
    return func.HttpResponse("pong", status_code=200)


# ---- Blueprints ----
from blueprints.bp_checklist import bp as checklist_bp

app.register_functions(checklist_bp)
