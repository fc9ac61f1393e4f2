# apps/core/api.py
import json
import logging
from functools import wraps

from django.core.exceptions import BadRequest, PermissionDenied, ValidationError
from django.http import Http404, JsonResponse

logger = logging.getLogger(__name__)


def get_owned_or_404(model, pk, user, label=None):
    """
    Jedno miejsce sprawdzania własności rekordu.
    Brak rekordu -> 404, cudzy rekord -> 403.
    """
    label = label or model._meta.verbose_name.capitalize()
    try:
        obj = model.objects.get(pk=pk)
    except (model.DoesNotExist, ValueError, TypeError):
        raise Http404(f"{label} not found")

    if obj.user_id != user.id:
        raise PermissionDenied("Access denied")
    return obj


def load_json(request):
    """Ciało żądania jako słownik. Pusty body -> {}."""
    if not request.body:
        return {}
    try:
        payload = json.loads(request.body)
    except (ValueError, UnicodeDecodeError):
        raise BadRequest("Malformed JSON body")
    if not isinstance(payload, dict):
        raise BadRequest("JSON body must be an object")
    return payload


def error_dict(exc: ValidationError) -> dict:
    if hasattr(exc, 'error_dict'):
        return exc.message_dict
    return {'__all__': exc.messages}


def json_api(view_func):
    """
    Tłumaczy wyjątki domenowe na odpowiedzi JSON:
    ValidationError/ValueError/BadRequest -> 400, PermissionDenied -> 403, Http404 -> 404.
    """
    @wraps(view_func)
    def wrapper(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except ValidationError as e:
            return JsonResponse({'errors': error_dict(e)}, status=400)
        except (ValueError, BadRequest) as e:
            return JsonResponse({'errors': {'__all__': [str(e)]}}, status=400)
        except PermissionDenied as e:
            logger.warning("Access denied for %s on %s", request.user, request.path)
            return JsonResponse({'error': str(e) or 'Access denied'}, status=403)
        except Http404 as e:
            return JsonResponse({'error': str(e) or 'Not found'}, status=404)
    return wrapper


def validated(form):
    """Zwraca formularz po walidacji; błędy lecą jako ValidationError (-> 400)."""
    if not form.is_valid():
        errors = {
            field: [e['message'] for e in errs]
            for field, errs in form.errors.get_json_data().items()
        }
        raise ValidationError(errors)
    return form


def as_list(items):
    return JsonResponse([item.to_dict() for item in items], safe=False)


def positive_limit(request):
    """?limit=N z query stringu (None gdy brak). Nie-liczba albo N < 1 -> ValueError (400)."""
    value = request.GET.get('limit')
    if not value:
        return None
    limit = int(value)
    if limit < 1:
        raise ValueError("Limit must be positive")
    return limit
