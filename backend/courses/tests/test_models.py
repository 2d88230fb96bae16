"""
Test models for the courses app.
"""
from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.test import TestCase

from courses.factory import ChairFactory, CourseFactory, PositionFactory
from courses.models import Course
from users.factory import ChairHeadUserFactory


class CourseModelTestCase(TestCase):
    """Test cases for Course."""

    def test_clean_uppercases_code(self):
        """Test the code is normalised."""
        course = Course(code=" seng3021 ", lecture=3)
        course.clean()
        self.assertEqual(course.code, "SENG3021")

    def test_clean_requires_contact_hours(self):
        """Test a course without lecture, lab or tutorial hours."""
        with self.assertRaises(ValidationError):
            Course(code="CSE1", lecture=0, lab=0, tutorial=0).clean()

    def test_code_is_unique(self):
        """Test duplicate codes are rejected."""
        CourseFactory(code="CSE2001")
        with self.assertRaises(IntegrityError):
            CourseFactory(code="CSE2001")

    def test_str(self):
        """Test string representation."""
        self.assertEqual(str(CourseFactory(code="CSE3001", name="Compilers")), "CSE3001 - Compilers")
        self.assertEqual(str(CourseFactory(code="CSE3002", name="")), "CSE3002")


class ChairModelTestCase(TestCase):
    """Test cases for Chair and Position."""

    def test_chair_courses_and_head(self):
        """Test a chair owning courses."""
        head = ChairHeadUserFactory()
        chair = ChairFactory(name="Programming", head=head)
        course = CourseFactory()
        chair.courses.add(course)

        self.assertEqual(list(course.chairs.all()), [chair])
        self.assertEqual(list(head.headed_chairs.all()), [chair])

    def test_position_str(self):
        """Test Position string representation."""
        self.assertEqual(str(PositionFactory(name="Dean", exemption=8)), "Dean (-8)")
