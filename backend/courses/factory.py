"""
Factory classes for catalog test data.
"""
import factory
from factory.django import DjangoModelFactory
from courses.models import Course, Position, Chair


class CourseFactory(DjangoModelFactory):
    """Factory for creating Course instances (3 lecture + 3 lab hours by default)."""

    class Meta:
        model = Course

    code = factory.Sequence(lambda n: f"CSE{1000 + n}")
    name = factory.Faker("catch_phrase")
    department = "Computer Science"
    semester = "Regular 1"
    lecture = 3
    lab = 3
    tutorial = 0
    number_of_students = 20
    chair = "Programming"
    location = "Main Campus"


class PositionFactory(DjangoModelFactory):
    """Factory for creating Position instances."""

    class Meta:
        model = Position
        django_get_or_create = ("name",)

    name = factory.Sequence(lambda n: f"Position {n}")
    exemption = 0


class ChairFactory(DjangoModelFactory):
    """Factory for creating Chair instances."""

    class Meta:
        model = Chair
        django_get_or_create = ("name",)

    name = factory.Sequence(lambda n: f"Chair {n}")
