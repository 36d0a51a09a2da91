"""Views for Solar calendar utilities."""

import logging

from django.core.exceptions import ValidationError
from django.http import (
    HttpResponseBadRequest,
    HttpResponseRedirect,
    JsonResponse,
)
from django.views.decorators.http import require_GET, require_POST

from . import core
from .forms import SolarConvertForm
from .utils import (
    calendar_meta,
    format_gregorian_date,
    format_solar_date,
    parse_solar_date,
    to_storage,
)

logger = logging.getLogger(__name__)


def _is_ajax(request) -> bool:
    return request.headers.get("x-requested-with") == "XMLHttpRequest"


@require_POST
def set_solar_date(request):
    """Store current Solar date in session."""
    raw = request.POST.get("solar_date", "")
    try:
        solar = parse_solar_date(raw)
        if solar is None:
            raise ValidationError("Date is required")
    except ValidationError as exc:
        message = " ".join(exc.messages)
        logger.info("rejected solar date %r: %s", raw, message)
        if _is_ajax(request):
            return JsonResponse({"error": message}, status=400)
        return HttpResponseBadRequest(message)
    stored = to_storage(solar)
    request.session["solar_current_date"] = stored
    if _is_ajax(request):
        return JsonResponse({"ok": True, "value": stored, "text": format_solar_date(solar)})
    return HttpResponseRedirect(request.META.get("HTTP_REFERER", "/"))


@require_GET
def year_meta(request, y: int) -> JsonResponse:
    """Return calendar metadata for year ``y``."""

    return JsonResponse(calendar_meta(y))


@require_GET
def convert_to_gregorian(request) -> JsonResponse:
    """Convert Solar components from the query string to a Gregorian date."""

    form = SolarConvertForm(request.GET)
    if not form.is_valid():
        logger.info("rejected conversion %s: %s", request.GET.dict(), form.errors.as_json())
        return JsonResponse({"errors": form.errors.get_json_data()}, status=400)
    data = form.cleaned_data
    try:
        result = core.solar_to_gregorian(
            data["year"], data.get("month"), data["day"], data["is_solstice_day"]
        )
    except OverflowError:
        return JsonResponse(
            {"errors": {"__all__": [{"message": "date out of range", "code": "overflow"}]}},
            status=400,
        )
    return JsonResponse(
        {
            "date": result.isoformat(),
            "text": format_gregorian_date(result),
            "solar": to_storage(core.gregorian_to_solar(result)),
        }
    )
