"""
Factory classes for instructor ledger test data.
"""
import factory
from factory.django import DjangoModelFactory

from courses.factory import CourseFactory
from instructors.models import Instructor, WorkloadEntry, AssignedCourse
from users.factory import InstructorUserFactory


class InstructorFactory(DjangoModelFactory):
    """Factory for creating Instructor instances backed by an instructor user."""

    class Meta:
        model = Instructor
        django_get_or_create = ("user",)

    user = factory.SubFactory(InstructorUserFactory)


class WorkloadEntryFactory(DjangoModelFactory):
    """Factory for creating ledger entries."""

    class Meta:
        model = WorkloadEntry

    instructor = factory.SubFactory(InstructorFactory)
    year = 2024
    semester = "Regular 1"
    program = "Regular"
    value = 0


class AssignedCourseFactory(DjangoModelFactory):
    """Factory for creating teaching history rows."""

    class Meta:
        model = AssignedCourse

    instructor = factory.SubFactory(InstructorFactory)
    course = factory.SubFactory(CourseFactory)
    year = 2023
    semester = "Regular 1"
    program = "Regular"
