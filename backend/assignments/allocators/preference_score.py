# assignments/allocators/preference_score.py
import logging
from dataclasses import dataclass

from courses.models import Program

from ..catalog import PreferenceCatalog
from ..exceptions import EmptyInput
from ..workload import preference_workload
from .base import Allocator

logger = logging.getLogger(__name__)


@dataclass
class Candidate:
    user: object
    course_id: int
    rank: int
    experience_years: int
    score: float
    submitted_at: object


@dataclass
class Pick:
    candidate: Candidate
    fallback: bool = False


class PreferenceScoreAllocator(Allocator):
    """
    Allocates the courses of a chair's preference form from the submitted
    rankings.

    score = weight(rank) + weight(years of experience with the course).
    Candidates per course are ordered by score, then by earliest submission.
    The greedy pass gives each instructor at most one course. The fallback
    pass then hands every course still open to its top candidate, even one
    who already got a course in the greedy pass.
    """
    program = Program.REGULAR.value
    name = "preference assignment"

    def __init__(self, year, semester, assigned_by, catalog=None, **kwargs):
        super().__init__(year, semester, assigned_by, **kwargs)
        self.catalog = catalog

    def prepare(self):
        if self.catalog is None:
            self.catalog = PreferenceCatalog.for_chair(self.assigned_by, self.year, self.semester)
        self.form_courses = self.catalog.form_courses()
        self.candidates = self.collect_candidates()
        if not self.candidates:
            raise EmptyInput(
                "No preferences have been submitted for the allowed courses of this form.",
                preferenceFormId=self.catalog.form.pk,
            )

    def collect_candidates(self):
        by_course = {}
        for preference in self.catalog.submissions():
            for item in preference.items.all():
                if item.course_id not in self.form_courses:
                    logger.info("Course %s not in allowed courses, skipping", item.course_id)
                    continue
                years = self.catalog.experience_years(preference.instructor_id, item.course_id)
                score = self.catalog.weight_for_rank(item.rank) + self.catalog.weight_for_years(years)
                logger.debug(
                    "Instructor %s for course %s: rank %s, experience %s, score %s",
                    preference.instructor_id, item.course_id, item.rank, years, score,
                )
                by_course.setdefault(item.course_id, []).append(Candidate(
                    user=preference.instructor,
                    course_id=item.course_id,
                    rank=item.rank,
                    experience_years=years,
                    score=score,
                    submitted_at=preference.submitted_at,
                ))
        for candidates in by_course.values():
            candidates.sort(key=lambda c: (-c.score, c.submitted_at))
        return by_course

    def greedy_pass(self):
        """At most one course per instructor; courses without a free candidate stay open."""
        picks = {}
        taken = set()
        for course_id, candidates in self.candidates.items():
            for candidate in candidates:
                if candidate.user.pk not in taken:
                    picks[course_id] = Pick(candidate)
                    taken.add(candidate.user.pk)
                    break
                logger.debug("Instructor %s already assigned to another course", candidate.user.pk)
        return picks

    def fallback_pass(self, picks):
        """Open courses go to their top candidate regardless of earlier picks."""
        filled = dict(picks)
        for course_id, candidates in self.candidates.items():
            if course_id not in filled and candidates:
                logger.info("Force assigning course %s to top candidate %s", course_id, candidates[0].user.pk)
                filled[course_id] = Pick(candidates[0], fallback=True)
        return filled

    def allocate(self):
        picks = self.fallback_pass(self.greedy_pass())
        for course_id, pick in picks.items():
            self.check_deadline()
            candidate = pick.candidate
            meta = self.form_courses[course_id]
            course = meta.course
            section = meta.section or ""
            if self.is_duplicate(course.pk, section, candidate.user.pk):
                self.record_duplicate(course, section, candidate.user)
                continue
            if pick.fallback:
                self.fallback_courses.append(course.pk)
            self.commit(
                candidate.user, course, preference_workload(course),
                section=section,
                no_of_sections=meta.no_of_sections or 1,
                lab_division=meta.lab_division or "No",
                score=candidate.score,
                preference_rank=candidate.rank,
                experience_years=candidate.experience_years,
                assignment_reason=self.reason(pick),
            )

    def reason(self, pick):
        candidate = pick.candidate
        others = [c for c in self.candidates[candidate.course_id] if c.user.pk != candidate.user.pk]
        plural = "s" if candidate.experience_years != 1 else ""
        lines = [
            "Reason:",
            f"- They listed this course as preference #{candidate.rank}.",
            f"- They have {candidate.experience_years} year{plural} of experience teaching it.",
            f"- Their combined score was {candidate.score:.2f}.",
        ]
        higher = [c for c in others if c.score > candidate.score]
        tied_later = [c for c in others if c.score == candidate.score and c.submitted_at > candidate.submitted_at]
        if pick.fallback:
            lines.append("- Every candidate was already assigned, so the course went to its top-scoring candidate.")
        elif higher:
            lines.append(
                f"- Although there were {len(higher)} instructor(s) with a higher score, "
                "they were already assigned to other courses."
            )
        elif tied_later:
            lines.append("- Their score was equal to others, but they submitted their preferences earlier.")
        else:
            lines.append("- They had the highest score among available instructors for this course.")
        return "\n".join(lines)
