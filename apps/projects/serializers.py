# apps/projects/serializers.py
from apps.projects.domain.services import cell_coordinates, grid_dimensions


def goal_to_json(goal):
    return {
        'id': str(goal.id),
        'text': goal.text,
        'total_number': goal.total_number,
        'remaining_number': goal.remaining_number,
        'is_completed': goal.is_completed,
        'unit': goal.unit.value,
        'scale': goal.scale,
        'progress': goal.progress_label,
    }


def project_to_json(project):
    rows, columns = grid_dimensions(len(project.cells))
    return {
        'id': str(project.id),
        'project_name': project.display_name,
        'show_grid': project.show_grid,
        'deadline': project.deadline.isoformat() if project.deadline else None,
        'goals': [goal_to_json(g) for g in project.goals],
        'grid': {
            'rows': rows,
            'columns': columns,
            'total': len(project.cells),
            'colored': project.colored_count,
        },
        # Row-major, index == cell position
        'cells': [c.is_colored for c in project.cells],
        # [row, column] of every colored cell
        'colored_coordinates': [
            list(cell_coordinates(c.position, columns)) for c in project.cells if c.is_colored
        ],
    }


def summary_to_json(summary):
    return {
        'id': str(summary.id),
        'project_name': summary.project_name,
        'goal_count': summary.goal_count,
        'colored_cells': summary.colored_cells,
        'total_cells': summary.total_cells,
        'show_grid': summary.show_grid,
        'deadline': summary.deadline.isoformat() if summary.deadline else None,
    }
