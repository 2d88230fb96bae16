"""
Teaching-load formulas.

Manual and common allocation double the lab/tutorial share for a lab
division and round to two places. Extension and summer allocation double the
lab/tutorial share for large classes and then double the whole credit hour
for a lab division, without rounding. Both variants are kept side by side.
"""
from courses.models import Semester

STANDARD_TEACHING_LOAD = 12
OVERLOAD_ALLOWANCE = 3
OVERLOAD_RATE = 0.942
LARGE_CLASS_THRESHOLD = 25

REGULAR_EQUIVALENT = {
    Semester.EXTENSION_1.value: Semester.REGULAR_1.value,
    Semester.EXTENSION_2.value: Semester.REGULAR_2.value,
}


def is_lab_division(value):
    """Accept the "Yes"/"No" form used on the wire as well as booleans."""
    if isinstance(value, str):
        return value.strip().lower() == "yes"
    return bool(value)


def lab_tutorial_share(course):
    return (2 / 3) * (course.lab or 0) + (2 / 3) * (course.tutorial or 0)


def credit_hour(course, lab_division=False, large_class_rule=False):
    share = lab_tutorial_share(course)
    ch = (course.lecture or 0) + share
    if lab_division:
        ch += share
    if large_class_rule and (course.number_of_students or 0) > LARGE_CLASS_THRESHOLD:
        ch += share
    return ch


def regular_workload(course, lab_division=False):
    """Workload for manual and common-course allocation."""
    return round(credit_hour(course, lab_division=is_lab_division(lab_division)), 2)


def extension_workload(course, lab_division=False):
    """Workload for extension and summer allocation."""
    ch = credit_hour(course, large_class_rule=True)
    return ch * (2 if is_lab_division(lab_division) else 1)


def preference_workload(course):
    return round(credit_hour(course), 2)


def expected_load(exemption=0):
    return STANDARD_TEACHING_LOAD - (exemption or 0)


def overload_benefit(overload):
    if overload <= OVERLOAD_ALLOWANCE:
        return 0
    return (overload - OVERLOAD_ALLOWANCE) * OVERLOAD_RATE


def regular_equivalent(semester):
    return REGULAR_EQUIVALENT.get(semester, semester)
