# assignments/catalog.py
import logging

from instructors.models import AssignedCourse
from preferences.models import CourseExperienceWeight, PreferenceWeight
from preferences.services import find_form, form_submissions

from .exceptions import NotFound

logger = logging.getLogger(__name__)


class PreferenceCatalog:
    """
    Read-only view over one preference form, its submissions and the
    current rank / experience weight tables. Missing weights resolve to 0.
    """

    def __init__(self, form):
        self.form = form
        rank_table = PreferenceWeight.latest()
        years_table = CourseExperienceWeight.latest()
        self.rank_weights = rank_table.as_mapping() if rank_table else {}
        self.years_weights = years_table.as_mapping() if years_table else {}
        self._experience = {}

    @classmethod
    def for_chair(cls, chair, year, semester):
        form = find_form(chair, year, semester)
        if form is None:
            raise NotFound(
                "No preference form found for the specified chair, year, and semester.",
                chair=chair, year=year, semester=semester,
            )
        return cls(form)

    def form_courses(self):
        """Allowlisted courses keyed by course id, in form order."""
        return {fc.course_id: fc for fc in self.form.form_courses.select_related("course").order_by("id")}

    def submissions(self):
        return form_submissions(self.form)

    def weight_for_rank(self, rank):
        return self.rank_weights.get(rank, 0)

    def weight_for_years(self, years):
        return self.years_weights.get(years, 0)

    def experience_years(self, user_id, course_id):
        key = (user_id, course_id)
        if key not in self._experience:
            self._experience[key] = AssignedCourse.objects.filter(
                instructor__user_id=user_id, course_id=course_id,
            ).count()
        return self._experience[key]
