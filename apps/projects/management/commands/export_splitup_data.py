from pathlib import Path

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.calendar_app.adapters.legacy_records import dump_events
from apps.calendar_app.adapters.orm_repositories import DjangoEventRepository
from apps.projects.adapters.legacy_records import dump_projects
from apps.projects.adapters.orm_repositories import DjangoProjectRepository


class Command(BaseCommand):
    help = 'Writes a user\'s projects and calendar events in the mobile app record format'

    def add_arguments(self, parser):
        parser.add_argument('username')
        parser.add_argument('--projects', type=Path, help='Output file for the savedProjects array')
        parser.add_argument('--events', type=Path, help='Output file for the calendarEvents array')

    def handle(self, *args, **options):
        User = get_user_model()
        try:
            user = User.objects.get(username=options['username'])
        except User.DoesNotExist:
            raise CommandError(f"User '{options['username']}' does not exist")

        if options['projects']:
            repo = DjangoProjectRepository()
            projects = [repo.get_by_id(s.id) for s in repo.list_summaries(user.id)]
            options['projects'].write_text(dump_projects(projects), encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Exported {len(projects)} projects.'))

        if options['events']:
            events = DjangoEventRepository().list_events(user.id)
            options['events'].write_text(dump_events(events), encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f'Exported {len(events)} calendar events.'))
