"""
Factory classes for preference test data.
"""
import factory
from factory.django import DjangoModelFactory

from courses.factory import CourseFactory
from preferences.models import (
    PreferenceForm, PreferenceFormCourse, Preference, PreferenceItem,
    PreferenceWeight, CourseExperienceWeight,
)
from users.factory import InstructorUserFactory


class PreferenceFormFactory(DjangoModelFactory):
    """Factory for creating PreferenceForm instances."""

    class Meta:
        model = PreferenceForm

    chair = "Programming"
    year = 2024
    semester = "Regular 1"
    max_preferences = 5


class PreferenceFormCourseFactory(DjangoModelFactory):
    class Meta:
        model = PreferenceFormCourse

    form = factory.SubFactory(PreferenceFormFactory)
    course = factory.SubFactory(CourseFactory)


class PreferenceFactory(DjangoModelFactory):
    """Factory for creating a submission; pass `items=[(course, rank), ...]` to rank courses."""

    class Meta:
        model = Preference

    instructor = factory.SubFactory(InstructorUserFactory)
    form = factory.SubFactory(PreferenceFormFactory)

    @factory.post_generation
    def items(self, create, extracted, **kwargs):
        if not create or not extracted:
            return
        for course, rank in extracted:
            PreferenceItem.objects.create(preference=self, course=course, rank=rank)


class PreferenceWeightFactory(DjangoModelFactory):
    class Meta:
        model = PreferenceWeight

    max_weight = 10
    interval = 3


class CourseExperienceWeightFactory(DjangoModelFactory):
    class Meta:
        model = CourseExperienceWeight

    max_weight = 5
    interval = 1
