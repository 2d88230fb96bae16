# assignments/services.py
import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from courses.models import AssignedBy, Course, LabDivision
from instructors.ledger import WorkloadLedger
from instructors.models import Instructor

from .exceptions import NotFound, ValidationFailed, parse_id
from .models import Assignment, SubAssignment
from .workload import is_lab_division, regular_workload

logger = logging.getLogger(__name__)

User = get_user_model()

# assignedBy=COC lists what the COC and every chair assigned
COC_SCOPE = [
    AssignedBy.PROGRAMMING.value,
    AssignedBy.SOFTWARE.value,
    AssignedBy.DATABASE.value,
    AssignedBy.NETWORKING.value,
    AssignedBy.COC.value,
]


def _locate(parent_id, sub_id):
    parent_id = parse_id(parent_id, "parentId")
    sub_id = parse_id(sub_id, "subId")
    parent = Assignment.objects.select_for_update().filter(pk=parent_id).first()
    if parent is None:
        raise NotFound("Parent assignment not found", parentId=parent_id)
    sub = parent.sub_assignments.select_related("course", "instructor").filter(pk=sub_id).first()
    if sub is None:
        raise NotFound("Sub-assignment not found", parentId=parent_id, subId=sub_id)
    return parent, sub


def _lab_division_value(value):
    if isinstance(value, str) and value not in LabDivision.values:
        raise ValidationFailed(f"Invalid labDivision: {value}", field="labDivision")
    return LabDivision.YES.value if is_lab_division(value) else LabDivision.NO.value


@transaction.atomic
def update_sub_assignment(parent_id, sub_id, instructor_id=None, course_id=None,
                          lab_division=None, assignment_reason=None, ledger=None):
    """
    Edit one sub-assignment and carry the workload change into the ledger.

    An edit that would repeat another sub-assignment's (course, section,
    instructor) in the same record is rejected with ValidationFailed.

    The workload is recomputed with the manual formula when the course or
    the lab division changes. Moving the sub-assignment to another
    instructor takes the old workload off the previous instructor (clamped
    at 0) and books the new workload on the new one.

    Returns (sub_assignment, change) where change is {"old", "new",
    "difference"} when the workload changed, else None.
    """
    ledger = ledger or WorkloadLedger()
    parent, sub = _locate(parent_id, sub_id)
    key = (parent.year, parent.semester, parent.program)

    old_user = sub.instructor
    old_workload = sub.workload
    old_lab = sub.lab_division
    new_lab = _lab_division_value(lab_division) if lab_division is not None else old_lab

    course = sub.course
    if course_id is not None:
        course_id = parse_id(course_id, "courseId")
        course = Course.objects.filter(pk=course_id).first()
        if course is None:
            raise NotFound(f"Course not found for ID: {course_id}", courseId=course_id)

    new_user = old_user
    if instructor_id is not None:
        instructor_id = parse_id(instructor_id, "instructorId")
        new_user = User.objects.filter(pk=instructor_id, is_active=True).first()
        if new_user is None:
            raise NotFound(f"Instructor not found for ID: {instructor_id}", instructorId=instructor_id)

    taken = (parent.sub_assignments
             .exclude(pk=sub.pk)
             .filter(course=course, section=sub.section, instructor=new_user)
             .exists())
    if taken:
        raise ValidationFailed(
            "Assignment already exists for this course, section and instructor.",
            courseId=course.pk, section=sub.section, instructorId=new_user.pk,
        )

    new_workload = old_workload
    if new_lab != old_lab or course.pk != sub.course_id:
        new_workload = regular_workload(course, new_lab)

    sub.instructor = new_user
    sub.course = course
    sub.lab_division = new_lab
    sub.workload = new_workload
    if assignment_reason is not None:
        sub.assignment_reason = assignment_reason
    sub.save()

    if new_user.pk != old_user.pk:
        previous = Instructor.objects.filter(user=old_user).first()
        if previous is not None:
            ledger.subtract(previous, *key, old_workload)
        ledger.upsert_add(Instructor.for_user(new_user), *key, new_workload)
        logger.info("Sub-assignment %s moved from %s to %s", sub.pk, old_user.pk, new_user.pk)
    elif new_workload != old_workload:
        instructor = Instructor.objects.filter(user=old_user).first()
        if instructor is not None:
            # subtracting a negative difference adds it
            ledger.subtract(instructor, *key, old_workload - new_workload)

    change = None
    if new_workload != old_workload:
        change = {"old": old_workload, "new": new_workload, "difference": new_workload - old_workload}
    return sub, change


@transaction.atomic
def delete_sub_assignment(parent_id, sub_id, ledger=None):
    """
    Remove a sub-assignment, the parent record once it is empty, and its
    workload from the instructor's ledger entry (dropped when nothing is left).
    """
    ledger = ledger or WorkloadLedger()
    parent, sub = _locate(parent_id, sub_id)
    user, workload = sub.instructor, sub.workload
    sub.delete()
    if not parent.sub_assignments.exists():
        logger.info("Assignment %s is empty, deleting it", parent.pk)
        parent.delete()
    instructor = Instructor.objects.filter(user=user).first()
    if instructor is not None:
        ledger.subtract(instructor, parent.year, parent.semester, parent.program, workload, drop_empty=True)


def filter_assignments(year=None, semester=None, program=None, assigned_by=None):
    qs = Assignment.objects.prefetch_related("sub_assignments__course", "sub_assignments__instructor")
    if year:
        qs = qs.filter(year=parse_id(year, "year"))
    if semester:
        qs = qs.filter(semester=semester)
    if program:
        qs = qs.filter(program=program)
    if assigned_by == AssignedBy.COC:
        qs = qs.filter(assigned_by__in=COC_SCOPE)
    elif assigned_by:
        qs = qs.filter(assigned_by=assigned_by)
    return qs


def get_assignment(assignment_id):
    assignment_id = parse_id(assignment_id, "assignmentId")
    assignment = (Assignment.objects
                  .prefetch_related("sub_assignments__course", "sub_assignments__instructor")
                  .filter(pk=assignment_id)
                  .first())
    if assignment is None:
        raise NotFound("Assignment not found", assignmentId=assignment_id)
    return assignment


def instructor_sub_assignments(instructor_id):
    instructor_id = parse_id(instructor_id, "instructorId")
    if not User.objects.filter(pk=instructor_id).exists():
        raise NotFound(f"Instructor not found for ID: {instructor_id}", instructorId=instructor_id)
    return (SubAssignment.objects
            .filter(instructor_id=instructor_id)
            .select_related("assignment", "course", "instructor")
            .order_by("-assignment__year", "assignment__semester", "id"))


def fallback_reason(sub):
    """Explanation for sub-assignments stored without a reason."""
    text = ""
    if sub.preference_rank:
        if sub.preference_rank <= 3:
            text += f"This course was listed as preference #{sub.preference_rank} by the instructor. "
        else:
            text += f"This course was listed as preference #{sub.preference_rank} (lower priority) by the instructor. "
    if sub.experience_years:
        plural = "s" if sub.experience_years > 1 else ""
        text += f"The instructor has {sub.experience_years} year{plural} of experience teaching this course. "
    else:
        text += "The instructor has no previous experience teaching this course. "
    if sub.score:
        text += f"Final assignment score: {sub.score:.2f}"
    return text.strip() or "Assignment information not available"
