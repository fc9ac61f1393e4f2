# apps/notes/views.py
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.api import as_list, get_owned_or_404, json_api, load_json, validated
from .forms import NoteForm
from .models import Note


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def note_list_view(request):
    if request.method == "POST":
        form = validated(NoteForm(load_json(request)))
        # Właściciel zawsze z sesji
        note = Note.objects.create(user=request.user, **form.changes())
        return JsonResponse(note.to_dict(), status=201)

    notes = Note.objects.filter(user=request.user).order_by('-created_at', '-id')
    return as_list(notes)


@require_http_methods(["GET", "PATCH", "DELETE"])
@login_required
@json_api
def note_detail_view(request, pk):
    note = get_owned_or_404(Note, pk, request.user)

    if request.method == "PATCH":
        form = validated(NoteForm(load_json(request), partial=True))
        for field, value in form.changes().items():
            setattr(note, field, value)
        note.save()
        return JsonResponse(note.to_dict())

    if request.method == "DELETE":
        note.delete()
        return HttpResponse(status=204)

    return JsonResponse(note.to_dict())
