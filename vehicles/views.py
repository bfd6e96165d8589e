# vehicles/views.py
from django.http import JsonResponse
from django.shortcuts import render
from django.urls import reverse
from django.utils.timezone import now
from django.views.decorators.http import require_GET

from .data_sources import get_data_source
from .state import LOADING_MESSAGE, Failed, Loading, dashboard_payload, load_dashboard_state

###############################################################################
#                                  VISÃO GERAL                                  #
###############################################################################
# Dashboard de produção de veículos.
#
# 1) GET "/" entrega a página no estado Loading ("Loading dashboard...").
# 2) O script da página chama GET "/api/dashboard/" uma única vez.
# 3) A API aguarda a fonte de dados configurada e responde:
#       - "ready": gráficos (status, fábrica, ano, cor), tabela e cards;
#       - "error": a mensagem fixa "Failed to load vehicle data".
#
# Não existe refresh nem retry: depois de Ready ou Error a página não volta
# para Loading.
###############################################################################


@require_GET
def vehicle_dashboard_view(request):
    state = Loading()
    return render(
        request,
        "vehicles/dashboard.html",
        {
            "state": state.name,
            "loading_message": LOADING_MESSAGE,
            "data_url": reverse("vehicle_dashboard_data"),
        },
    )


@require_GET
async def vehicle_dashboard_data(request):
    """
    Resolve o estado do dashboard e devolve o payload JSON para o front.
    Falha de carga responde 500 com a mensagem fixa.
    """
    state = await load_dashboard_state(get_data_source())

    payload = dashboard_payload(state)
    payload["generated_at"] = now().isoformat()

    return JsonResponse(
        payload,
        status=500 if isinstance(state, Failed) else 200,
        json_dumps_params={"ensure_ascii": False},
    )
