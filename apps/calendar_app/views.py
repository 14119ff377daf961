# apps/calendar_app/views.py
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from .adapters.orm_repositories import DjangoEventRepository
from .domain.services import EventService, event_start, sort_events
from .filters import EventFilter
from .forms import CalendarEventForm
from .models import CalendarEvent


def event_to_json(event):
    return {
        'id': str(event.id),
        'title': event.title,
        'date': event.date.isoformat(),
        'time': event.time.strftime('%H:%M'),
        'start': event_start(event).isoformat(),
        'notes': event.notes,
    }


@require_http_methods(["GET", "POST"])
@login_required
def event_list_view(request):
    """GET: events (filterable by ?day=, ?date_after=, ?date_before=). POST: new event."""
    repo = DjangoEventRepository()

    if request.method == "POST":
        form = CalendarEventForm(request.POST)
        if not form.is_valid():
            return JsonResponse({'errors': form.errors}, status=400)

        service = EventService()
        try:
            event = service.build_event(
                form.cleaned_data['title'],
                form.cleaned_data['date'],
                form.cleaned_data['time'],
                form.cleaned_data.get('notes', ''),
            )
        except ValueError as e:
            return JsonResponse({'error': str(e)}, status=400)

        event = repo.add(event, user_id=request.user.id)
        return JsonResponse(event_to_json(event), status=201)

    event_filter = EventFilter(request.GET, queryset=CalendarEvent.objects.filter(user=request.user))
    if not event_filter.is_valid():
        return JsonResponse({'errors': event_filter.errors}, status=400)

    events = sort_events(repo.to_entity(e) for e in event_filter.qs)
    return JsonResponse({'events': [event_to_json(e) for e in events]})


@require_http_methods(["DELETE"])
@login_required
def event_delete_view(request, pk):
    repo = DjangoEventRepository()
    if not repo.delete(pk, user_id=request.user.id):
        return JsonResponse({'error': 'Event not found'}, status=404)
    return JsonResponse({'deleted': str(pk)})
