# apps/core/views.py
import hmac
import json
import logging
from dataclasses import asdict

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from .api import json_api, load_json, validated
from .domain import welcome_data
from .domain.reminders import ReminderService
from .domain.services import AccountSettingsService, DashboardService, UserService
from .domain.time_functions import get_month_options, get_year_options
from .domain.timezones import TIMEZONES
from .forms import AccountSettingsForm, UserForm

logger = logging.getLogger(__name__)


@require_http_methods(["POST"])
@login_required
@json_api
def user_create_view(request):
    form = validated(UserForm(load_json(request)))
    profile = UserService().create_user(request.user, **form.changes())
    return JsonResponse(profile.to_dict())


@require_http_methods(["GET"])
@login_required
def current_user_view(request):
    return JsonResponse(UserService().get_current_user(request.user).to_dict())


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def account_settings_view(request):
    """GET: ustawienia albo null, POST: utworzenie (raz na użytkownika)."""
    service = AccountSettingsService()

    if request.method == "POST":
        form = validated(AccountSettingsForm(load_json(request)))
        settings_obj = service.create(request.user, **form.changes())
        return JsonResponse(settings_obj.to_dict(), status=201)

    settings_obj = service.get(request.user)
    return JsonResponse(settings_obj.to_dict() if settings_obj else None, safe=False)


@require_http_methods(["PATCH", "DELETE"])
@login_required
@json_api
def account_settings_detail_view(request, pk):
    service = AccountSettingsService()

    if request.method == "DELETE":
        service.delete(request.user, pk)
        return HttpResponse(status=204)

    form = validated(AccountSettingsForm(load_json(request), partial=True))
    settings_obj = service.update(request.user, pk, **form.changes())
    return JsonResponse(settings_obj.to_dict())


@require_http_methods(["GET"])
@login_required
def onboarding_status_view(request):
    completed = AccountSettingsService().has_completed_onboarding(request.user)
    return JsonResponse({'completed': completed})


@require_http_methods(["GET"])
@login_required
def reminder_preferences_view(request):
    return JsonResponse(AccountSettingsService().reminder_preferences(request.user), safe=False)


@require_http_methods(["POST"])
@login_required
@json_api
def enable_notifications_view(request):
    settings_obj = AccountSettingsService().enable_email_notifications(request.user)
    return JsonResponse(settings_obj.reminder_preferences())


@require_http_methods(["GET"])
@login_required
def reference_data_view(request):
    """Listy opcji dla formularzy (strefy, dni, godziny, lata)."""
    return JsonResponse({
        'timezones': [asdict(tz) for tz in TIMEZONES],
        'days_of_week': welcome_data.DAYS_OF_WEEK,
        'hours_12': welcome_data.HOURS_12,
        'minutes': welcome_data.MINUTES,
        'am_pm': welcome_data.AM_PM_OPTIONS,
        'months': get_month_options(),
        'years': get_year_options(),
        'default_performance_questions': welcome_data.DEFAULT_PERFORMANCE_QUESTIONS,
    })


@require_http_methods(["GET"])
@login_required
def dashboard_view(request):
    return JsonResponse(DashboardService().summary(request.user))


@csrf_exempt
@require_http_methods(["POST"])
def email_webhook_view(request):
    """Webhook dostawcy poczty (odbicia, skargi, trwałe błędy)."""
    secret = settings.RESEND_WEBHOOK_SECRET
    if not secret:
        logger.error("RESEND_WEBHOOK_SECRET not configured")
        return HttpResponse('Webhook secret not configured', status=500)

    signature = request.headers.get('resend-signature', '')
    if not hmac.compare_digest(signature, secret):
        logger.warning("Rejected email webhook with invalid signature")
        return HttpResponse('Invalid signature', status=401)

    try:
        event = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        return HttpResponse('Invalid JSON payload', status=400)
    if not isinstance(event, dict):
        return HttpResponse('Invalid JSON payload', status=400)

    ReminderService().handle_webhook_event(event)
    return HttpResponse('OK')
