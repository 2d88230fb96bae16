"""
Test the workload ledger.
"""
from django.db import IntegrityError
from django.test import TestCase

from courses.factory import CourseFactory, PositionFactory
from instructors.factory import AssignedCourseFactory, InstructorFactory, WorkloadEntryFactory
from instructors.ledger import WorkloadLedger
from instructors.models import Instructor, WorkloadEntry, position_exemption


class WorkloadLedgerTestCase(TestCase):
    """Test cases for WorkloadLedger."""

    def setUp(self):
        self.ledger = WorkloadLedger()
        self.instructor = InstructorFactory()

    def test_get_missing_entry_defaults_to_zero(self):
        """Test get() without an entry."""
        self.assertEqual(self.ledger.get(self.instructor, 2024, "Regular 1", "Regular"), 0)

    def test_upsert_add_creates_then_increments(self):
        """Test that repeated adds land on one row."""
        self.ledger.upsert_add(self.instructor, 2024, "Regular 1", "Regular", 5.0)
        entry = self.ledger.upsert_add(self.instructor, 2024, "Regular 1", "Regular", 7.0)

        self.assertEqual(entry.value, 12.0)
        self.assertEqual(WorkloadEntry.objects.filter(instructor=self.instructor).count(), 1)

    def test_get_without_program_uses_first_entry(self):
        """Test get() ignores the program when none is given."""
        WorkloadEntryFactory(instructor=self.instructor, program="Regular", value=4)
        WorkloadEntryFactory(instructor=self.instructor, program="Common", value=9)
        self.assertEqual(self.ledger.get(self.instructor, 2024, "Regular 1"), 4)
        self.assertEqual(self.ledger.get(self.instructor, 2024, "Regular 1", "Common"), 9)

    def test_subtract_clamps_at_zero(self):
        """Test subtract never goes negative."""
        WorkloadEntryFactory(instructor=self.instructor, value=3)
        entry = self.ledger.subtract(self.instructor, 2024, "Regular 1", "Regular", 5)
        self.assertEqual(entry.value, 0)

    def test_subtract_drop_empty_deletes_entry(self):
        """Test drop_empty removes an exhausted entry."""
        WorkloadEntryFactory(instructor=self.instructor, value=5)
        self.assertIsNone(self.ledger.subtract(self.instructor, 2024, "Regular 1", "Regular", 5, drop_empty=True))
        self.assertFalse(WorkloadEntry.objects.exists())

    def test_subtract_missing_entry(self):
        """Test subtract without an entry is a no-op."""
        self.assertIsNone(self.ledger.subtract(self.instructor, 2024, "Regular 1", "Regular", 5))

    def test_sum_where(self):
        """Test sums filtered by semester and year."""
        WorkloadEntryFactory(instructor=self.instructor, year=2023, semester="Regular 1", value=4)
        WorkloadEntryFactory(instructor=self.instructor, year=2024, semester="Regular 2", value=6)
        WorkloadEntryFactory(instructor=self.instructor, year=2024, semester="Extension 1",
                             program="Extension", value=2)

        self.assertEqual(self.ledger.sum_where(self.instructor), 12)
        self.assertEqual(self.ledger.sum_where(self.instructor, semesters=["Regular 1", "Regular 2"]), 10)
        self.assertEqual(self.ledger.sum_where(self.instructor, year=2024), 8)
        self.assertEqual(self.ledger.sum_where(self.instructor, programs=["Extension"]), 2)

    def test_unique_period(self):
        """Test the database rejects a second row for the same period."""
        WorkloadEntryFactory(instructor=self.instructor)
        with self.assertRaises(IntegrityError):
            WorkloadEntryFactory(instructor=self.instructor)


class InstructorModelTestCase(TestCase):
    """Test cases for Instructor helpers."""

    def test_for_user_is_idempotent(self):
        """Test for_user returns the same profile."""
        instructor = InstructorFactory()
        self.assertEqual(Instructor.for_user(instructor.user), instructor)
        self.assertEqual(Instructor.objects.count(), 1)

    def test_experience_counts_history_rows(self):
        """Test experience_with counts teaching history per course."""
        instructor = InstructorFactory()
        course = CourseFactory()
        AssignedCourseFactory(instructor=instructor, course=course, year=2022)
        AssignedCourseFactory(instructor=instructor, course=course, year=2023)
        AssignedCourseFactory(instructor=instructor)
        self.assertEqual(instructor.experience_with(course), 2)

    def test_exemption_from_position(self):
        """Test exemption lookup through the user's position."""
        PositionFactory(name="Department Head", exemption=6)
        instructor = InstructorFactory(user__position="Department Head")
        self.assertEqual(instructor.exemption(), 6)
        self.assertEqual(position_exemption("Unknown"), 0)
        self.assertEqual(position_exemption(""), 0)
