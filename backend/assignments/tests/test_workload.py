"""
Test teaching-load formulas.
"""
from django.test import SimpleTestCase

from assignments.workload import (
    credit_hour, expected_load, extension_workload, is_lab_division, overload_benefit,
    preference_workload, regular_equivalent, regular_workload,
)
from courses.models import Course


def course(lecture=3, lab=3, tutorial=0, students=20):
    return Course(code="CSE1", lecture=lecture, lab=lab, tutorial=tutorial, number_of_students=students)


class CreditHourTestCase(SimpleTestCase):
    """Test cases for the credit hour and workload variants."""

    def test_credit_hour_counts_two_thirds_of_lab_and_tutorial(self):
        """Test 3 lecture + 3 lab gives 5 hours."""
        self.assertAlmostEqual(credit_hour(course()), 5.0)
        self.assertAlmostEqual(credit_hour(course(lab=0, tutorial=3)), 5.0)

    def test_regular_workload_with_lab_division(self):
        """Test that lab division doubles only the lab/tutorial share."""
        self.assertEqual(regular_workload(course(), "No"), 5.0)
        self.assertEqual(regular_workload(course(), "Yes"), 7.0)
        self.assertEqual(regular_workload(course(), True), 7.0)

    def test_regular_workload_is_rounded(self):
        """Test that the manual formula rounds to two places."""
        self.assertEqual(regular_workload(course(lecture=2, lab=1)), 2.67)

    def test_extension_workload_small_class(self):
        """Test extension workload below the large-class threshold."""
        self.assertAlmostEqual(extension_workload(course(students=25)), 5.0)

    def test_extension_workload_large_class(self):
        """Test that more than 25 students adds another lab/tutorial share."""
        self.assertAlmostEqual(extension_workload(course(students=26)), 7.0)

    def test_extension_workload_lab_division_doubles_everything(self):
        """Test that lab division doubles the whole extension credit hour."""
        self.assertAlmostEqual(extension_workload(course(students=26), "Yes"), 14.0)
        self.assertAlmostEqual(extension_workload(course(), "Yes"), 10.0)

    def test_preference_workload(self):
        """Test the preference workload has no lab division."""
        self.assertEqual(preference_workload(course()), 5.0)

    def test_is_lab_division(self):
        """Test the accepted lab division spellings."""
        self.assertTrue(is_lab_division("Yes"))
        self.assertTrue(is_lab_division(" yes "))
        self.assertFalse(is_lab_division("No"))
        self.assertFalse(is_lab_division(None))


class OverloadTestCase(SimpleTestCase):
    """Test cases for expected load and overload benefit."""

    def test_expected_load(self):
        """Test expected load is 12 minus the exemption."""
        self.assertEqual(expected_load(), 12)
        self.assertEqual(expected_load(4), 8)

    def test_benefit_is_zero_up_to_allowance(self):
        """Test no benefit while overload is at most 3 hours."""
        self.assertEqual(overload_benefit(-5), 0)
        self.assertEqual(overload_benefit(3), 0)

    def test_benefit_above_allowance(self):
        """Test benefit grows by 0.942 per hour above the allowance."""
        self.assertAlmostEqual(overload_benefit(4), 0.942)
        self.assertAlmostEqual(overload_benefit(5.5), 2.5 * 0.942)

    def test_regular_equivalent(self):
        """Test extension semesters map to their regular counterpart."""
        self.assertEqual(regular_equivalent("Extension 1"), "Regular 1")
        self.assertEqual(regular_equivalent("Extension 2"), "Regular 2")
        self.assertEqual(regular_equivalent("Summer"), "Summer")
