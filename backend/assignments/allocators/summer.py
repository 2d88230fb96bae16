# assignments/allocators/summer.py
import logging

from django.conf import settings

from courses.models import EXTENSION_SEMESTERS, REGULAR_SEMESTERS, Program, Semester
from instructors.models import Instructor, position_exemption

from ..exceptions import parse_id
from ..workload import expected_load, extension_workload, overload_benefit
from .base import Allocator
from .extension import Evaluation, benefit_reason, pick_minimum

logger = logging.getLogger(__name__)

CHAIR_BONUS = 2
SUMMER_LOAD_SEMESTERS = EXTENSION_SEMESTERS + (Semester.SUMMER.value,)


class SummerAllocator(Allocator):
    """
    Summer courses go to the instructor with the lowest total benefit.

    Every (course, instructor) pair is evaluated first against the
    instructor's whole history: all regular-semester load counts towards the
    overload, and all extension and summer load is added to the benefit. The
    course's chair gets a +2 bonus. Selection happens once every pair has
    been evaluated.

    With SUMMER_RESERVE_ALL_CANDIDATES the evaluation step also books the
    workload into every candidate's Summer ledger entry, and the winner gets
    no further increment. Otherwise only the winner's ledger is written.
    """
    program = Program.SUMMER.value
    name = "summer assignment"

    def __init__(self, year, assigned_by, courses, instructors, reserve_all_candidates=None, **kwargs):
        super().__init__(year, Semester.SUMMER.value, assigned_by, **kwargs)
        self.requests = list(courses or [])
        self.instructor_ids = list(instructors or [])
        if reserve_all_candidates is None:
            reserve_all_candidates = getattr(settings, "SUMMER_RESERVE_ALL_CANDIDATES", False)
        self.reserve_all_candidates = reserve_all_candidates

    def prepare(self):
        self.pool = self.load_instructors(self.instructor_ids)
        self.courses = self.load_courses(self.requests)

    def evaluate(self, user, course, request):
        instructor = self.instructor_of(user)
        expected = expected_load(position_exemption(user.position))
        workload = extension_workload(course, request.lab_division)
        if instructor is not None:
            regular_total = self.ledger.sum_where(instructor, semesters=REGULAR_SEMESTERS)
            extension_total = self.ledger.sum_where(instructor, semesters=SUMMER_LOAD_SEMESTERS)
            existing_summer = self.ledger.get(instructor, self.year, Semester.SUMMER.value, self.program)
        else:
            regular_total = extension_total = existing_summer = 0
        total = regular_total + existing_summer + workload
        overload = total - expected
        benefit = overload_benefit(overload) if course.semester in REGULAR_SEMESTERS else 0
        is_chair = course.chair == str(user.pk)
        total_benefit = benefit + extension_total + (CHAIR_BONUS if is_chair else 0)
        logger.debug(
            "Instructor %s for %s: expected %.2f, total %.2f, overload %.2f, benefit %.3f",
            user.pk, course.code, expected, total, overload, total_benefit,
        )
        if self.reserve_all_candidates:
            self.ledger.upsert_add(
                instructor or Instructor.for_user(user),
                self.year, Semester.SUMMER.value, self.program, workload,
            )
        return Evaluation(
            user=user,
            course=course,
            request=request,
            workload=workload,
            expected_load=expected,
            total_workload=total,
            overload=overload,
            benefit=total_benefit,
            experience_years=instructor.experience_with(course) if instructor else 0,
            is_chair=is_chair,
        )

    def allocate(self):
        by_course = []
        for request in self.requests:
            self.check_deadline()
            course = self.courses.get(parse_id(request.course_id, "courseId"))
            if course is None:
                logger.info("Course %s not found, skipping", request.course_id)
                continue
            holder = self.held_by_pool(course, request.section, self.pool)
            if holder is not None:
                self.record_duplicate(course, request.section, holder)
                continue
            by_course.append((request, [self.evaluate(user, course, request) for user in self.pool]))

        for request, evaluations in by_course:
            self.check_deadline()
            winner, tie_count = pick_minimum(evaluations, self.rng)
            if self.is_duplicate(winner.course.pk, request.section, winner.user.pk):
                logger.info("Selected assignment for %s is a duplicate, skipping", winner.course.code)
                continue
            self.commit(
                winner.user, winner.course, winner.workload,
                section=request.section,
                no_of_sections=request.no_of_sections,
                lab_division=request.lab_division,
                write_ledger=not self.reserve_all_candidates,
                score=-winner.benefit,
                experience_years=winner.experience_years,
                assignment_reason=benefit_reason(winner, tie_count),
            )
