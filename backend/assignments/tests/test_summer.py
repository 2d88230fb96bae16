"""
Test summer allocation.
"""
import random

from django.test import TestCase, override_settings

from assignments.allocators import CourseRequest, SummerAllocator
from courses.factory import CourseFactory
from instructors.factory import InstructorFactory, WorkloadEntryFactory
from instructors.models import WorkloadEntry
from users.factory import InstructorUserFactory


class SummerAllocatorTestCase(TestCase):
    """Test cases for SummerAllocator."""

    def setUp(self):
        self.first = InstructorUserFactory()
        self.second = InstructorUserFactory()
        self.course = CourseFactory(number_of_students=20)

    def run_summer(self, reserve_all_candidates=None, courses=None):
        return SummerAllocator(
            2024, "COC",
            courses=courses or [CourseRequest(self.course.pk, "A")],
            instructors=[self.first.pk, self.second.pk],
            reserve_all_candidates=reserve_all_candidates,
            rng=random.Random(0),
        ).run()

    def summer_entries(self):
        return {
            e.instructor.user_id: e.value
            for e in WorkloadEntry.objects.filter(semester="Summer", program="Summer")
        }

    def test_record_is_summer_period(self):
        """Test the record and ledger key are always Summer."""
        result = self.run_summer()
        self.assertEqual(result.assignment.semester, "Summer")
        self.assertEqual(result.assignment.program, "Summer")

    def test_chair_bonus_counts_against_candidate(self):
        """Test the course's chair gets the +2 consideration."""
        self.course.chair = str(self.first.pk)
        self.course.save()

        result = self.run_summer()

        self.assertEqual(result.created[0].instructor, self.second)

    def test_chair_reason(self):
        """Test that the chair consideration shows up when the chair still wins."""
        self.course.chair = str(self.first.pk)
        self.course.save()
        WorkloadEntryFactory(
            instructor=InstructorFactory(user=self.second),
            semester="Extension 1", program="Extension", value=6,
        )

        sub = self.run_summer().created[0]

        self.assertEqual(sub.instructor, self.first)
        self.assertIn("chair of this course", sub.assignment_reason)
        self.assertEqual(sub.score, -2)

    def test_extension_history_counts_against_candidate(self):
        """Test earlier extension load of any year is added to the benefit."""
        WorkloadEntryFactory(
            instructor=InstructorFactory(user=self.first),
            year=2022, semester="Extension 2", program="Extension", value=3,
        )
        result = self.run_summer()
        self.assertEqual(result.created[0].instructor, self.second)

    def test_only_winner_ledger_is_written_by_default(self):
        """Test the default mode books the winner alone."""
        self.course.chair = str(self.first.pk)
        self.course.save()

        self.run_summer(reserve_all_candidates=False)

        self.assertEqual(self.summer_entries(), {self.second.pk: 5.0})

    def test_reserve_all_candidates(self):
        """Test the reserving mode books every candidate once."""
        self.course.chair = str(self.first.pk)
        self.course.save()

        result = self.run_summer(reserve_all_candidates=True)

        self.assertEqual(result.created[0].instructor, self.second)
        self.assertEqual(self.summer_entries(), {self.first.pk: 5.0, self.second.pk: 5.0})

    @override_settings(SUMMER_RESERVE_ALL_CANDIDATES=True)
    def test_reserve_mode_from_settings(self):
        """Test the setting switches the mode when no flag is passed."""
        self.run_summer()
        self.assertEqual(len(self.summer_entries()), 2)

    def test_regular_history_overload_counts_against_candidate(self):
        """Test regular load from any year pushes a regular-semester course into overload."""
        # 12 + 5 = 17 hours against 12 expected: benefit (5 - 3) * 0.942
        WorkloadEntryFactory(
            instructor=InstructorFactory(user=self.first),
            year=2023, semester="Regular 1", program="Regular", value=12,
        )
        request = CourseRequest(self.course.pk, "A")
        allocator = SummerAllocator(2024, "COC", courses=[request], instructors=[self.first.pk])

        evaluation = allocator.evaluate(self.first, self.course, request)

        self.assertEqual(evaluation.total_workload, 17.0)
        self.assertAlmostEqual(evaluation.benefit, 1.884)

        sub = self.run_summer().created[0]
        self.assertEqual(sub.instructor, self.second)
        self.assertEqual(sub.score, 0)

    def test_overload_ignored_for_non_regular_course(self):
        """Test that only regular-semester courses carry the overload benefit."""
        WorkloadEntryFactory(
            instructor=InstructorFactory(user=self.first),
            year=2023, semester="Regular 1", program="Regular", value=12,
        )
        self.course.semester = ""
        self.course.save()
        request = CourseRequest(self.course.pk, "A")
        allocator = SummerAllocator(2024, "COC", courses=[request], instructors=[self.first.pk])

        evaluation = allocator.evaluate(self.first, self.course, request)

        self.assertEqual(evaluation.overload, 5.0)
        self.assertEqual(evaluation.benefit, 0)

    def test_chair_matches_user_id_only(self):
        """Test a chair name never triggers the chair consideration."""
        request = CourseRequest(self.course.pk, "A")
        allocator = SummerAllocator(2024, "COC", courses=[request], instructors=[self.first.pk])

        by_name = allocator.evaluate(self.first, self.course, request)
        self.course.chair = str(self.first.pk)
        by_id = allocator.evaluate(self.first, self.course, request)

        self.assertFalse(by_name.is_chair)
        self.assertEqual(by_name.benefit, 0)
        self.assertTrue(by_id.is_chair)
        self.assertEqual(by_id.benefit, 2)
