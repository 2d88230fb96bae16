"""
Test management commands for the assignments app.
"""
from io import StringIO
from unittest.mock import patch

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from assignments.models import SubAssignment
from courses.factory import CourseFactory
from instructors.factory import WorkloadEntryFactory
from users.factory import InstructorUserFactory


class RunAssignmentCommandTestCase(TestCase):
    """Test cases for run_assignment."""

    def setUp(self):
        self.lecturer = InstructorUserFactory()
        self.course = CourseFactory()

    @patch("assignments.management.commands.run_assignment.console")
    def test_extension_run(self, console):
        """Test an extension run from the command line."""
        call_command(
            "run_assignment", "extension",
            "--year", "2024", "--semester", "Extension 1",
            "--instructors", str(self.lecturer.pk),
            "--courses", f"{self.course.pk}:A",
            "--seed", "3",
        )
        sub = SubAssignment.objects.get()
        self.assertEqual(sub.section, "A")
        self.assertEqual(sub.instructor, self.lecturer)
        self.assertTrue(console.print.called)

    @patch("assignments.management.commands.run_assignment.console")
    def test_lab_division_flag(self, console):
        """Test --lab-division applies to every course."""
        call_command(
            "run_assignment", "common",
            "--year", "2024",
            "--instructors", str(self.lecturer.pk),
            "--courses", str(self.course.pk),
            "--lab-division",
        )
        self.assertEqual(SubAssignment.objects.get().workload, 7.0)

    def test_engine_error_becomes_command_error(self):
        """Test errors are reported as CommandError."""
        with self.assertRaises(CommandError) as cm:
            call_command("run_assignment", "summer", "--year", "2024", "--courses", str(self.course.pk))
        self.assertIn("empty_input", str(cm.exception))


class ShowWorkloadCommandTestCase(TestCase):
    """Test cases for show_workload."""

    @patch("assignments.management.commands.show_workload.console")
    def test_prints_entries(self, console):
        """Test the ledger table is printed."""
        WorkloadEntryFactory(value=5)
        call_command("show_workload", "--year", "2024")
        console.print.assert_called_once()

    def test_unknown_user(self):
        """Test --user without a ledger."""
        with self.assertRaises(CommandError):
            call_command("show_workload", "--user", "999999")

    @patch("assignments.management.commands.show_workload.console")
    def test_no_entries(self, console):
        """Test output when the ledger is empty."""
        call_command("show_workload", stdout=StringIO())
        console.print.assert_called_once_with("[yellow]No workload entries found[/yellow]")
