from django.core.management.base import BaseCommand, CommandError
from rich.console import Console
from rich.table import Table

from instructors.ledger import WorkloadLedger
from instructors.models import Instructor

console = Console()


class Command(BaseCommand):
    help = "Print instructors' workload ledger entries"

    def add_arguments(self, parser):
        parser.add_argument("--user", type=int, help="Only this instructor (user id)")
        parser.add_argument("--year", type=int, help="Only entries for this year")

    def handle(self, *args, **options):
        instructor = None
        if options["user"] is not None:
            instructor = Instructor.objects.filter(user_id=options["user"]).select_related("user").first()
            if instructor is None:
                raise CommandError(f'No workload recorded for user "{options["user"]}"')

        entries = WorkloadLedger().entries(instructor=instructor, year=options["year"])
        if not entries:
            console.print("[yellow]No workload entries found[/yellow]")
            return

        table = Table(title="Workload Ledger")
        table.add_column("Instructor", style="cyan")
        table.add_column("Year")
        table.add_column("Semester")
        table.add_column("Program")
        table.add_column("Value", justify="right", style="yellow")
        for entry in entries:
            table.add_row(
                entry.instructor.user.get_full_name(),
                str(entry.year),
                entry.semester,
                entry.program,
                f"{entry.value:.2f}",
            )
        console.print(table)
