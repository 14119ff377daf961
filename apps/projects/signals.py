# apps/projects/signals.py
"""
State-change notifications for an editing session. UI layers connect to
these instead of sharing mutable state with the use cases.
"""
import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# sender: use case class; kwargs: project (ProjectEntity)
grid_rebuilt = Signal()
# kwargs: project, goal (updated GoalEntity), amount, newly_colored (int)
progress_recorded = Signal()
# kwargs: project, created (bool)
project_saved = Signal()
# kwargs: project_id
project_deleted = Signal()


@receiver(grid_rebuilt)
def log_grid_rebuilt(sender, project, **kwargs):
    logger.debug(
        "Grid rebuilt for %s: %d cells, %d colored",
        project.id, len(project.cells), project.colored_count
    )


@receiver(progress_recorded)
def log_progress_recorded(sender, project, goal, amount, newly_colored, **kwargs):
    logger.info(
        "Goal '%s' +%d%s (%s), colored %d cells",
        goal.text, amount, goal.unit.value, goal.progress_label, newly_colored
    )
    if goal.is_completed:
        logger.info("Goal '%s' completed", goal.text)


@receiver(project_saved)
def log_project_saved(sender, project, created, **kwargs):
    logger.info("%s project %s (%s)", "Created" if created else "Updated", project.id, project.display_name)


@receiver(project_deleted)
def log_project_deleted(sender, project_id, **kwargs):
    logger.info("Deleted project %s", project_id)
