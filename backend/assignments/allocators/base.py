# assignments/allocators/base.py
import logging
import random
import time
from dataclasses import dataclass, field

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction

from courses.models import AssignedBy, Course, LabDivision, Program, Semester
from instructors.ledger import WorkloadLedger
from instructors.models import AssignedCourse, Instructor

from ..exceptions import AllAssignmentsExist, AllocationTimeout, EmptyInput, NotFound, ValidationFailed, parse_id
from ..models import Assignment, SubAssignment
from ..serializers import SubAssignmentSerializer
from ..workload import is_lab_division

logger = logging.getLogger(__name__)

User = get_user_model()

DUPLICATE_WARNING = "Some assignments were skipped because they already exist"


@dataclass
class CourseRequest:
    """A course to allocate automatically, with its section layout."""
    course_id: int
    section: str = ""
    lab_division: bool = False
    no_of_sections: int = 1


@dataclass
class ManualRequest:
    instructor_id: int
    course_id: int
    section: str = ""
    lab_division: bool = False
    no_of_sections: int = 1
    assignment_reason: str = ""


@dataclass
class AllocationResult:
    assignment: Assignment
    created: list
    duplicates: list = field(default_factory=list)
    fallback_courses: list = field(default_factory=list)

    @property
    def warning(self):
        return DUPLICATE_WARNING if self.duplicates else None


class Allocator:
    """
    Common run loop for every allocation strategy.

    A run locks the Assignment row for its (year, semester, program), reads
    the keys already present, lets the strategy pick instructors through
    `allocate()`, and commits everything in one transaction. Any error raised
    while allocating rolls back every ledger and record write of the run.
    """
    program = None
    name = "allocation"

    def __init__(self, year, semester, assigned_by, program=None, rng=None, timeout=None, ledger=None):
        if year in (None, ""):
            raise ValidationFailed("Year is required.", field="year")
        self.year = parse_id(year, "year")
        if semester not in Semester.values:
            raise ValidationFailed(f"Invalid semester: {semester}", field="semester")
        if assigned_by not in AssignedBy.values:
            raise ValidationFailed(f"Invalid assignedBy: {assigned_by}", field="assignedBy")
        self.semester = semester
        self.assigned_by = assigned_by
        if program is not None:
            self.program = program
        if self.program not in Program.values:
            raise ValidationFailed(f"Invalid program: {self.program}", field="program")
        if rng is None:
            rng = random.Random(getattr(settings, "ASSIGNMENT_RANDOM_SEED", None))
        self.rng = rng
        self.timeout = timeout if timeout is not None else getattr(settings, "ASSIGNMENT_RUN_TIMEOUT", 30)
        self.ledger = ledger or WorkloadLedger()
        self.record = None
        self.existing_keys = set()
        self.created = []
        self.duplicates = []
        self.fallback_courses = []
        self._deadline = None

    # ---- run ---------------------------------------------------------------

    def run(self):
        logger.info(
            "Starting %s: %s %s %s by %s",
            self.name, self.year, self.semester, self.program, self.assigned_by,
        )
        self.prepare()
        self._deadline = time.monotonic() + self.timeout
        with transaction.atomic():
            self.record = self._lock_record()
            self.existing_keys = set(
                self.record.sub_assignments.values_list("course_id", "section", "instructor_id")
            )
            logger.info("Found %d existing course assignments", len(self.existing_keys))
            self.allocate()
            if not self.created:
                if self.duplicates:
                    raise AllAssignmentsExist(self.duplicates)
                raise EmptyInput("No assignment could be made from the supplied data.")
        logger.info(
            "Finished %s: %d assigned, %d duplicates skipped",
            self.name, len(self.created), len(self.duplicates),
        )
        return AllocationResult(
            assignment=self.record,
            created=self.created,
            duplicates=self.duplicates,
            fallback_courses=self.fallback_courses,
        )

    def prepare(self):
        """Validate and load the whole batch before anything is written."""

    def allocate(self):
        raise NotImplementedError

    def _lock_record(self):
        record, created = Assignment.objects.get_or_create(
            year=self.year,
            semester=self.record_semester,
            program=self.program,
            defaults={"assigned_by": self.assigned_by},
        )
        if created:
            logger.info("No existing assignment for %s %s %s", self.year, self.record_semester, self.program)
        return Assignment.objects.select_for_update().get(pk=record.pk)

    @property
    def record_semester(self):
        return self.semester

    def check_deadline(self):
        if self._deadline is not None and time.monotonic() > self._deadline:
            logger.warning("%s exceeded %ss after %d assignments", self.name, self.timeout, len(self.created))
            raise AllocationTimeout(SubAssignmentSerializer(self.created, many=True).data)

    # ---- lookups -----------------------------------------------------------

    def load_courses(self, requests):
        """Courses for the requested ids; unknown ids are skipped, none at all is NotFound."""
        if not requests:
            raise EmptyInput("At least one course is required.", field="courses")
        ids = [parse_id(r.course_id, "courseId") for r in requests]
        courses = Course.objects.in_bulk(ids)
        if not courses:
            raise NotFound("No valid courses found.", courseIds=ids)
        return courses

    def load_instructors(self, instructor_ids):
        """Instructor-role users for the pool, in the order requested."""
        if not instructor_ids:
            raise EmptyInput("At least one instructor is required.", field="instructors")
        ids = [parse_id(i, "instructorId") for i in instructor_ids]
        users = {u.pk: u for u in User.objects.instructors(ids)}
        pool = [users[i] for i in dict.fromkeys(ids) if i in users]
        if not pool:
            raise NotFound("No valid instructors found.", instructorIds=ids)
        return pool

    def instructor_of(self, user):
        """Ledger owner for the user, or None when nothing was ever allocated to them."""
        return Instructor.objects.filter(user=user).first()

    def ledger_value(self, user, year, semester, program=None):
        instructor = self.instructor_of(user)
        return self.ledger.get(instructor, year, semester, program) if instructor else 0

    # ---- duplicates & commit -------------------------------------------------

    def is_duplicate(self, course_id, section, user_id):
        return (course_id, section, user_id) in self.existing_keys

    def held_by_pool(self, course, section, pool):
        """First pool member already holding (course, section) in this record, if any."""
        for user in pool:
            if self.is_duplicate(course.pk, section, user.pk):
                return user
        return None

    def record_duplicate(self, course, section, user):
        logger.info("Assignment %s-%s-%s already exists, skipping", course.pk, section, user.pk)
        self.duplicates.append({
            "course": course.name or course.code,
            "courseId": course.pk,
            "section": section,
            "instructor": user.get_full_name(),
            "instructorId": user.pk,
        })

    def commit(self, user, course, workload, section="", no_of_sections=1, lab_division=False,
               ledger_key=None, write_ledger=True, **details):
        """
        Record one allocation: ledger increment, teaching history and the
        sub-assignment itself.
        """
        instructor = Instructor.for_user(user)
        year, semester, program = ledger_key or (self.year, self.record_semester, self.program)
        if write_ledger:
            self.ledger.upsert_add(instructor, year, semester, program, workload)
        AssignedCourse.objects.create(
            instructor=instructor,
            course=course,
            year=year,
            semester=semester,
            program=program,
        )
        sub = SubAssignment.objects.create(
            assignment=self.record,
            instructor=user,
            course=course,
            section=section or "",
            no_of_sections=no_of_sections or 1,
            lab_division=LabDivision.YES if is_lab_division(lab_division) else LabDivision.NO,
            workload=workload,
            **details,
        )
        self.created.append(sub)
        self.existing_keys.add(sub.duplicate_key)
        return sub
