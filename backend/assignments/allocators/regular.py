# assignments/allocators/regular.py
import logging

from django.contrib.auth import get_user_model

from courses.models import Course, Program

from ..exceptions import EmptyInput, NotFound, parse_id
from ..workload import regular_workload
from .base import Allocator

logger = logging.getLogger(__name__)

User = get_user_model()


class ManualAllocator(Allocator):
    """
    Assigns an explicit list of (instructor, course, section) tuples.

    Every course and instructor is resolved before the first write, so a
    bad id aborts the batch without touching the ledger.
    """
    name = "manual assignment"

    def __init__(self, year, semester, assigned_by, program, requests, **kwargs):
        super().__init__(year, semester, assigned_by, program=program, **kwargs)
        self.requests = list(requests or [])
        self.courses = {}
        self.users = {}

    def prepare(self):
        if not self.requests:
            raise EmptyInput("At least one assignment is required", field="assignments")
        for request in self.requests:
            request.course_id = parse_id(request.course_id, "courseId")
            request.instructor_id = parse_id(request.instructor_id, "instructorId")
        course_ids = {r.course_id for r in self.requests}
        user_ids = {r.instructor_id for r in self.requests}
        self.courses = Course.objects.in_bulk(course_ids)
        self.users = User.objects.filter(is_active=True).in_bulk(user_ids)
        for request in self.requests:
            if request.course_id not in self.courses:
                raise NotFound(f"Course not found for ID: {request.course_id}", courseId=request.course_id)
            if request.instructor_id not in self.users:
                raise NotFound(
                    f"Instructor not found for ID: {request.instructor_id}",
                    instructorId=request.instructor_id,
                )

    def allocate(self):
        for request in self.requests:
            self.check_deadline()
            course = self.courses[request.course_id]
            user = self.users[request.instructor_id]
            if self.is_duplicate(course.pk, request.section, user.pk):
                self.record_duplicate(course, request.section, user)
                continue
            workload = regular_workload(course, request.lab_division)
            self.commit(
                user, course, workload,
                section=request.section,
                no_of_sections=request.no_of_sections,
                lab_division=request.lab_division,
                assignment_reason=request.assignment_reason or "",
            )


class CommonCourseAllocator(Allocator):
    """
    Gives each requested course to the least-loaded instructor of the pool.

    Candidates are ranked by their current Regular workload for the period
    plus a location term (-1 when the instructor's location matches the
    course, +1 otherwise). Ties keep the pool order.
    """
    program = Program.REGULAR.value
    name = "common course assignment"

    def __init__(self, year, semester, assigned_by, courses, instructors, **kwargs):
        super().__init__(year, semester, assigned_by, **kwargs)
        self.requests = list(courses or [])
        self.instructor_ids = list(instructors or [])

    def prepare(self):
        self.pool = self.load_instructors(self.instructor_ids)
        self.courses = self.load_courses(self.requests)

    def rank(self, course):
        candidates = []
        for user in self.pool:
            current = self.ledger_value(user, self.year, self.semester, self.program)
            location_priority = -1 if user.location == course.location else 1
            candidates.append((current + location_priority, current, user))
            logger.debug(
                "Candidate %s for %s: workload %.2f, location priority %d",
                user.pk, course.code, current, location_priority,
            )
        # sorted() is stable, so equal keys keep the pool order
        return sorted(candidates, key=lambda c: c[0])

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

            _, current, user = self.rank(course)[0]
            location_match = user.location == course.location
            workload = regular_workload(course, request.lab_division)
            reason = f"Instructor selected based on lowest workload ({current:.1f} hrs). "
            if location_match:
                reason += "Location matched the course."
            self.commit(
                user, course, workload,
                section=request.section,
                no_of_sections=request.no_of_sections,
                lab_division=request.lab_division,
                score=10 - current / 2 - (0 if location_match else 1),
                assignment_reason=reason.strip(),
            )
