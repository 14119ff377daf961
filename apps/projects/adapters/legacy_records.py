# apps/projects/adapters/legacy_records.py
from typing import List

from apps.core import records
from apps.goals.domain.entities import GoalEntity, GoalUnit, parse_amount
from apps.goals.domain.services import check_goal_total, compute_scale
from apps.projects.domain.entities import CellEntity, ProjectEntity

PROJECTS_KEY = "savedProjects"


def _amount_text(value) -> str:
    # Older records stored the amounts as strings, tolerate plain numbers too
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value))
    if not isinstance(value, str):
        raise TypeError(f"Amount must be text, got {type(value).__name__}")
    return value


def goal_from_record(record: dict) -> GoalEntity:
    total_number = _amount_text(record['totalNumber'])
    total = parse_amount(total_number)
    check_goal_total(total)
    return GoalEntity(
        id=records.parse_uuid(record['id']),
        text=str(record['text']),
        total_number=total_number,
        remaining_number=_amount_text(record['remainingNumber']),
        is_completed=bool(record.get('isCompleted', False)),
        unit=GoalUnit(record['unit']),
        # Derived from the total, whatever the record says
        scale=compute_scale(total),
    )


def goal_to_record(goal: GoalEntity) -> dict:
    return {
        'id': records.format_uuid(goal.id),
        'text': goal.text,
        'totalNumber': goal.total_number,
        'remainingNumber': goal.remaining_number,
        'isCompleted': goal.is_completed,
        'unit': GoalUnit(goal.unit).value,
        'scale': goal.scale,
    }


def cell_from_record(record: dict) -> CellEntity:
    position = record['position']
    if not isinstance(position, int) or isinstance(position, bool) or position < 0:
        raise ValueError(f"Invalid cell position: {position!r}")
    return CellEntity(position=position, is_colored=bool(record.get('isColored', False)))


def project_from_record(record: dict) -> ProjectEntity:
    project_id = records.parse_uuid(record['id'])
    goals = [goal_from_record(g) for g in record.get('goals', [])]
    for goal in goals:
        goal.project_id = project_id

    cells = sorted((cell_from_record(c) for c in record.get('cells', [])), key=lambda c: c.position)
    return ProjectEntity(
        id=project_id,
        project_name=str(record.get('projectName', '')),
        image_data=records.decode_data(record['imageData']),
        thumbnail_data=records.decode_data(record.get('thumbnailData')),
        goals=goals,
        cells=cells,
        show_grid=bool(record.get('showGrid', False)),
        deadline=records.parse_record_date(record.get('deadline')),
    )


def project_to_record(project: ProjectEntity) -> dict:
    record = {
        'id': records.format_uuid(project.id),
        'imageData': records.encode_data(project.image_data),
        'thumbnailData': records.encode_data(project.thumbnail_data),
        'goals': [goal_to_record(g) for g in project.goals],
        'projectName': project.display_name,
        'cells': [{'isColored': c.is_colored, 'position': c.position} for c in project.cells],
        'showGrid': project.show_grid,
    }
    if project.deadline is not None:
        record['deadline'] = records.format_record_date(project.deadline)
    return record


def load_projects(blob) -> List[ProjectEntity]:
    return records.load_collection(blob, project_from_record, name=PROJECTS_KEY)


def dump_projects(projects: List[ProjectEntity]) -> str:
    return records.dump_collection(projects, project_to_record)
