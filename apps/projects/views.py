# apps/projects/views.py
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from .adapters.images import decode_image_or_placeholder, placeholder_png
from .adapters.orm_repositories import DjangoProjectRepository
from .application.use_cases import (
    DeleteProjectUseCase,
    DivideImageUseCase,
    ListProjectsUseCase,
    LoadProjectUseCase,
    ProjectNotFound,
    SaveProjectInput,
    SaveProjectUseCase,
)
from .forms import ProjectForm
from .serializers import project_to_json, summary_to_json


def _not_found(e):
    return JsonResponse({'error': str(e)}, status=404)


@require_http_methods(["GET", "POST"])
@login_required
def project_list_view(request):
    """GET: saved projects gallery. POST: start a project from an uploaded image."""
    repo = DjangoProjectRepository()

    if request.method == "POST":
        form = ProjectForm(request.POST, request.FILES, require_image=True)
        if not form.is_valid():
            return JsonResponse({'errors': form.errors}, status=400)

        input_dto = SaveProjectInput(
            user_id=request.user.id,
            image_data=form.cleaned_data['image'],
            project_name=form.cleaned_data['project_name'],
            deadline=form.cleaned_data['deadline'],
        )
        try:
            project = SaveProjectUseCase(repository=repo).execute(input_dto)
        except ValueError as e:
            return JsonResponse({'error': str(e)}, status=400)
        return JsonResponse(project_to_json(project), status=201)

    summaries = ListProjectsUseCase(repository=repo).execute(request.user.id)
    return JsonResponse({'projects': [summary_to_json(s) for s in summaries]})


@require_http_methods(["GET", "DELETE"])
@login_required
def project_detail_view(request, pk):
    repo = DjangoProjectRepository()
    try:
        if request.method == "DELETE":
            DeleteProjectUseCase(repository=repo).execute(pk, request.user.id)
            return JsonResponse({'deleted': str(pk)})
        project = LoadProjectUseCase(repository=repo).execute(pk, request.user.id)
    except ProjectNotFound as e:
        return _not_found(e)
    return JsonResponse(project_to_json(project))


@require_http_methods(["POST"])
@login_required
def project_divide_view(request, pk):
    """Splits the image into the grid sized by the current goals."""
    use_case = DivideImageUseCase(repository=DjangoProjectRepository())
    try:
        project = use_case.execute(pk, request.user.id)
    except ProjectNotFound as e:
        return _not_found(e)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    return JsonResponse(project_to_json(project))


@require_http_methods(["POST"])
@login_required
def project_save_view(request, pk):
    """Re-save of a loaded project: updates it in place (new name, deadline or image)."""
    form = ProjectForm(request.POST, request.FILES)
    if not form.is_valid():
        return JsonResponse({'errors': form.errors}, status=400)

    input_dto = SaveProjectInput(
        user_id=request.user.id,
        project_id=pk,
        image_data=form.cleaned_data['image'],
        project_name=form.cleaned_data['project_name'] or None,
        deadline=form.cleaned_data['deadline'],
    )
    try:
        project = SaveProjectUseCase(repository=DjangoProjectRepository()).execute(input_dto)
    except ProjectNotFound as e:
        return _not_found(e)
    return JsonResponse(project_to_json(project))


@require_http_methods(["GET"])
@login_required
def project_thumbnail_view(request, pk):
    project = DjangoProjectRepository().get_by_id(pk, user_id=request.user.id)
    if project is None:
        return _not_found(f"Project {pk} not found")
    return HttpResponse(project.thumbnail_data or placeholder_png(), content_type='image/png')


@require_http_methods(["GET"])
@login_required
def project_image_view(request, pk):
    project = DjangoProjectRepository().get_by_id(pk, user_id=request.user.id)
    if project is None:
        return _not_found(f"Project {pk} not found")
    return HttpResponse(decode_image_or_placeholder(project.image_data), content_type='image/png')
