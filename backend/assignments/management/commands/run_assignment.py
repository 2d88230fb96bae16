import random

from django.core.management.base import BaseCommand, CommandError
from rich.console import Console
from rich.table import Table

from courses.models import AssignedBy, Semester
from assignments.allocators import (
    CommonCourseAllocator, CourseRequest, ExtensionAllocator, PreferenceScoreAllocator, SummerAllocator,
)
from assignments.exceptions import AssignmentError

console = Console()

STRATEGIES = ["common", "extension", "summer", "preference"]


def _course_request(value, lab_division):
    """Parse "<courseId>" or "<courseId>:<section>"."""
    course_id, _, section = value.partition(":")
    return CourseRequest(course_id=course_id, section=section, lab_division=lab_division)


class Command(BaseCommand):
    help = "Run an automatic assignment strategy and print the resulting sub-assignments"

    def add_arguments(self, parser):
        parser.add_argument("strategy", choices=STRATEGIES, help="Allocation strategy to run")
        parser.add_argument("--year", type=int, required=True)
        parser.add_argument("--semester", default=Semester.REGULAR_1.value, choices=Semester.values)
        parser.add_argument(
            "--assigned-by",
            default=AssignedBy.COC.value,
            choices=AssignedBy.values,
            help="Caller; for the preference strategy this is the chair whose form is used",
        )
        parser.add_argument("--instructors", nargs="*", default=[], help="Instructor user ids")
        parser.add_argument("--courses", nargs="*", default=[], help="Course ids, optionally as id:section")
        parser.add_argument("--lab-division", action="store_true", help="Apply lab division to every course")
        parser.add_argument("--seed", type=int, help="Seed for tie-break draws")

    def handle(self, *args, **options):
        strategy = options["strategy"]
        rng = random.Random(options["seed"]) if options["seed"] is not None else None
        courses = [_course_request(c, options["lab_division"]) for c in options["courses"]]

        try:
            if strategy == "common":
                allocator = CommonCourseAllocator(
                    options["year"], options["semester"], options["assigned_by"],
                    courses=courses, instructors=options["instructors"], rng=rng,
                )
            elif strategy == "extension":
                allocator = ExtensionAllocator(
                    options["year"], options["semester"], options["assigned_by"],
                    courses=courses, instructors=options["instructors"], rng=rng,
                )
            elif strategy == "summer":
                allocator = SummerAllocator(
                    options["year"], options["assigned_by"],
                    courses=courses, instructors=options["instructors"], rng=rng,
                )
            else:
                allocator = PreferenceScoreAllocator(
                    options["year"], options["semester"], options["assigned_by"], rng=rng,
                )
            result = allocator.run()
        except AssignmentError as e:
            raise CommandError(f"{e.code}: {e.message}")

        table = Table(title=f"{strategy.title()} assignment {options['year']} {allocator.semester}")
        table.add_column("Course", style="cyan")
        table.add_column("Section")
        table.add_column("Instructor", style="green")
        table.add_column("Workload", justify="right", style="yellow")
        table.add_column("Score", justify="right")
        for sub in result.created:
            table.add_row(
                sub.course.code,
                sub.section or "-",
                sub.instructor.get_full_name(),
                f"{sub.workload:.2f}",
                "-" if sub.score is None else f"{sub.score:.2f}",
            )
        console.print(table)

        if result.duplicates:
            console.print(f"[yellow]• {result.warning}: {len(result.duplicates)} skipped[/yellow]")
        if result.fallback_courses:
            console.print(f"[yellow]• Fallback used for courses: {result.fallback_courses}[/yellow]")
        console.print(f"[green]✓ {len(result.created)} assignments saved to record {result.assignment.pk}[/green]")
