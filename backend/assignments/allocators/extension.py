# assignments/allocators/extension.py
import logging
from dataclasses import dataclass

from courses.models import Program
from instructors.models import position_exemption

from ..exceptions import parse_id
from ..workload import expected_load, extension_workload, overload_benefit, regular_equivalent
from .base import Allocator

logger = logging.getLogger(__name__)


@dataclass
class Evaluation:
    """One candidate's standing for one course."""
    user: object
    course: object
    request: object
    workload: float
    expected_load: float
    total_workload: float
    overload: float
    benefit: float
    experience_years: int = 0
    is_chair: bool = False


def pick_minimum(evaluations, rng):
    """Lowest-benefit evaluation, drawn uniformly among ties. Returns (winner, tie_count)."""
    lowest = min(e.benefit for e in evaluations)
    tied = [e for e in evaluations if e.benefit == lowest]
    winner = tied[rng.randrange(len(tied))] if len(tied) > 1 else tied[0]
    return winner, len(tied)


def benefit_reason(evaluation, tie_count):
    e = evaluation
    reason = (
        f"Assigned based on minimum benefit value ({e.benefit:.2f}). "
        f"Expected workload: {e.expected_load:g} hrs. "
        f"Current workload: {e.total_workload:.1f} hrs. "
        f"Overload: {e.overload:.1f} hrs. "
    )
    if e.experience_years > 0:
        plural = "s" if e.experience_years != 1 else ""
        reason += f"Instructor has {e.experience_years} year{plural} of experience teaching this course. "
    if e.is_chair:
        reason += "Instructor is the chair of this course (additional consideration). "
    if tie_count > 1:
        reason += f"Selected randomly from {tie_count} instructors with equal benefit value."
    return reason.strip()


class ExtensionAllocator(Allocator):
    """
    Gives each extension course to the instructor whose overload benefit is
    lowest, counting the regular-semester load of the matching term and the
    extension load already carried this term.
    """
    program = Program.EXTENSION.value
    name = "extension assignment"

    def __init__(self, year, semester, assigned_by, courses, instructors, **kwargs):
        super().__init__(year, semester, assigned_by, **kwargs)
        self.requests = list(courses or [])
        self.instructor_ids = list(instructors or [])

    def prepare(self):
        self.pool = self.load_instructors(self.instructor_ids)
        self.courses = self.load_courses(self.requests)

    def evaluate(self, user, course, request):
        instructor = self.instructor_of(user)
        expected = expected_load(position_exemption(user.position))
        workload = extension_workload(course, request.lab_division)
        existing_regular = self.ledger_value(user, self.year, regular_equivalent(self.semester))
        existing_extension = self.ledger_value(user, self.year, self.semester, self.program)
        total = existing_regular + workload
        overload = total - expected
        benefit = overload_benefit(overload) + existing_extension
        evaluation = Evaluation(
            user=user,
            course=course,
            request=request,
            workload=workload,
            expected_load=expected,
            total_workload=total,
            overload=overload,
            benefit=benefit,
            experience_years=instructor.experience_with(course) if instructor else 0,
        )
        logger.debug(
            "Instructor %s for %s: expected %.2f, total %.2f, overload %.2f, benefit %.3f",
            user.pk, course.code, expected, total, overload, benefit,
        )
        return evaluation

    def allocate(self):
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

            evaluations = [self.evaluate(user, course, request) for user in self.pool]
            winner, tie_count = pick_minimum(evaluations, self.rng)
            self.commit(
                winner.user, course, winner.workload,
                section=request.section,
                no_of_sections=request.no_of_sections,
                lab_division=request.lab_division,
                score=-winner.benefit,
                experience_years=winner.experience_years,
                assignment_reason=benefit_reason(winner, tie_count),
            )

