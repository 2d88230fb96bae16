from django.core.management.base import BaseCommand, CommandError
from users.models import User, RoleName
from rich.console import Console


class Command(BaseCommand):
    help = 'Set the active role of a user'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.console = Console()

    def add_arguments(self, parser):
        parser.add_argument('username', type=str, help='Username')
        parser.add_argument('role', type=str, choices=RoleName.values, help='Role name to make active')

    def handle(self, *args, **options):
        username = options['username']
        role_name = options['role']

        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            raise CommandError(f'User "{username}" does not exist')

        previous = user.get_active_role_name()
        if previous == role_name:
            self.console.print(f"[yellow]• User '{username}' already has active role '{role_name}'[/yellow]")
            return

        try:
            user.assign_role(role_name)
        except ValueError as e:
            raise CommandError(str(e))
        self.console.print(f"[green]✓ Successfully assigned role '{role_name}' to user '{username}'[/green]")
        self.console.print(f"[cyan]Previous role for {username}: {previous or 'None'}[/cyan]")
