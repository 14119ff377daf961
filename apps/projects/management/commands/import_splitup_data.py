from pathlib import Path

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.calendar_app.adapters.legacy_records import load_events
from apps.calendar_app.adapters.orm_repositories import DjangoEventRepository
from apps.projects.adapters.images import make_thumbnail
from apps.projects.adapters.legacy_records import load_projects
from apps.projects.adapters.orm_repositories import DjangoProjectRepository


class Command(BaseCommand):
    help = 'Imports saved projects and calendar events exported from the mobile app'

    def add_arguments(self, parser):
        parser.add_argument('username', help='Owner of the imported data')
        parser.add_argument('--projects', type=Path, help='JSON file with the savedProjects array')
        parser.add_argument('--events', type=Path, help='JSON file with the calendarEvents array')

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(username=options['username'])
        except User.DoesNotExist:
            raise CommandError(f"User '{options['username']}' does not exist")

        if not options['projects'] and not options['events']:
            raise CommandError("Nothing to import: pass --projects and/or --events")

        if options['projects']:
            repo = DjangoProjectRepository()
            imported = 0
            for project in load_projects(self._read(options['projects'])):
                if not project.thumbnail_data:
                    project.thumbnail_data = make_thumbnail(project.image_data)
                try:
                    repo.save(project, user_id=user.id)
                except ValueError as e:
                    # Ids owned by another user are left alone
                    self.stderr.write(self.style.WARNING(f"Skipped {project.display_name}: {e}"))
                    continue
                imported += 1
                self.stdout.write(f"- {project.display_name} ({len(project.goals)} goals, {len(project.cells)} cells)")
            self.stdout.write(self.style.SUCCESS(f'Imported {imported} projects.'))

        if options['events']:
            repo = DjangoEventRepository()
            imported = 0
            for event in load_events(self._read(options['events'])):
                try:
                    repo.add(event, user_id=user.id)
                except ValueError as e:
                    self.stderr.write(self.style.WARNING(f"Skipped event {event.title}: {e}"))
                    continue
                imported += 1
            self.stdout.write(self.style.SUCCESS(f'Imported {imported} calendar events.'))

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding='utf-8')
        except OSError as e:
            raise CommandError(f"Cannot read {path}: {e}")
