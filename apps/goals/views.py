from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.goals.domain.entities import GoalUnit, parse_amount
from apps.projects.adapters.orm_repositories import DjangoProjectRepository
from apps.projects.application.use_cases import (
    AddGoalUseCase,
    CompleteGoalUseCase,
    DeleteGoalUseCase,
    EditGoalUseCase,
    GoalInput,
    ProjectNotFound,
    RecordProgressUseCase,
)
from apps.projects.serializers import goal_to_json, project_to_json
from .forms import GoalForm, ProgressForm
from .models import Goal


def _not_found(e):
    return JsonResponse({'error': str(e)}, status=404)


def _goal_input(request, form):
    return GoalInput(
        user_id=request.user.id,
        text=form.cleaned_data['text'],
        amount_text=form.cleaned_data['total_number'],
        unit=GoalUnit(form.cleaned_data['unit']),
    )


@require_http_methods(["POST"])
@login_required
def goal_create_view(request, project_id):
    form = GoalForm(request.POST)
    if not form.is_valid():
        return JsonResponse({'errors': form.errors}, status=400)

    use_case = AddGoalUseCase(repository=DjangoProjectRepository())
    try:
        goal = use_case.execute(project_id, _goal_input(request, form))
    except ProjectNotFound as e:
        return _not_found(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    return JsonResponse(goal_to_json(goal), status=201)


@require_http_methods(["POST"])
@login_required
def goal_edit_view(request, pk):
    """Redefining a goal resets its progress."""
    form = GoalForm(request.POST)
    if not form.is_valid():
        return JsonResponse({'errors': form.errors}, status=400)

    use_case = EditGoalUseCase(repository=DjangoProjectRepository())
    try:
        goal = use_case.execute(pk, _goal_input(request, form))
    except ProjectNotFound as e:
        return _not_found(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    return JsonResponse(goal_to_json(goal))


@require_http_methods(["DELETE"])
@login_required
def goal_delete_view(request, pk):
    use_case = DeleteGoalUseCase(repository=DjangoProjectRepository())
    try:
        project = use_case.execute(pk, request.user.id)
    except ProjectNotFound as e:
        return _not_found(e)
    return JsonResponse(project_to_json(project))


@require_http_methods(["POST"])
@login_required
def goal_progress_view(request, pk):
    """Credits the entered amount and reveals the matching share of the image."""
    # Remaining amount is needed by the form, so the goal is looked up first
    goal = Goal.objects.filter(pk=pk, project__user=request.user).first()
    if goal is None:
        return JsonResponse({'error': 'Goal not found'}, status=404)

    form = ProgressForm(request.POST, remaining=parse_amount(goal.remaining_number))
    if not form.is_valid():
        return JsonResponse({'errors': form.errors}, status=400)

    use_case = RecordProgressUseCase(repository=DjangoProjectRepository())
    try:
        result = use_case.execute(pk, request.user.id, form.cleaned_data['amount'])
    except ProjectNotFound as e:
        return _not_found(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    return JsonResponse({
        'goal': goal_to_json(result.goal),
        'newly_colored': result.newly_colored,
        'project': project_to_json(result.project),
    })


@require_http_methods(["POST"])
@login_required
def goal_complete_view(request, pk):
    use_case = CompleteGoalUseCase(repository=DjangoProjectRepository())
    try:
        result = use_case.execute(pk, request.user.id)
    except ProjectNotFound as e:
        return _not_found(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)

    return JsonResponse({
        'goal': goal_to_json(result.goal),
        'newly_colored': result.newly_colored,
        'project': project_to_json(result.project),
    })
