from datetime import date

from django.contrib.auth.decorators import login_required
from django.http import JsonResponse

from apps.calendar_app.adapters.orm_repositories import DjangoEventRepository
from apps.calendar_app.domain.services import event_start, events_for_day
from apps.projects.adapters.orm_repositories import DjangoProjectRepository


@login_required
def dashboard_view(request):
    today = date.today()

    summaries = DjangoProjectRepository().list_summaries(request.user.id)
    todays_events = events_for_day(
        DjangoEventRepository().list_events(request.user.id, start=today, end=today),
        today
    )

    return JsonResponse({
        'today': today.isoformat(),
        'projects': len(summaries),
        'projects_with_grid': sum(1 for s in summaries if s.show_grid),
        'colored_cells': sum(s.colored_cells for s in summaries),
        'events_today': [
            {
                'id': str(e.id),
                'title': e.title,
                'time': e.time.strftime('%H:%M'),
                'start': event_start(e).isoformat(),
            }
            for e in todays_events
        ],
    })
