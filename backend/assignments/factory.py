"""
Factory classes for assignment records.
"""
import factory
from factory.django import DjangoModelFactory

from assignments.models import Assignment, SubAssignment
from courses.factory import CourseFactory
from users.factory import InstructorUserFactory


class AssignmentFactory(DjangoModelFactory):
    """Factory for creating Assignment records (one per period)."""

    class Meta:
        model = Assignment
        django_get_or_create = ("year", "semester", "program")

    year = 2024
    semester = "Regular 1"
    program = "Regular"
    assigned_by = "COC"


class SubAssignmentFactory(DjangoModelFactory):
    """Factory for creating SubAssignment rows."""

    class Meta:
        model = SubAssignment

    assignment = factory.SubFactory(AssignmentFactory)
    instructor = factory.SubFactory(InstructorUserFactory)
    course = factory.SubFactory(CourseFactory)
    section = "A"
    no_of_sections = 1
    lab_division = "No"
    workload = 5.0
    assignment_reason = ""
