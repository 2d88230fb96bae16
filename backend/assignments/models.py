#assignments/models.py
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from courses.models import Course, AssignedBy, LabDivision, Program, Semester


class Assignment(models.Model):
    """
    Outcome of allocation runs for one (year, semester, program).

    Later runs for the same period append their sub-assignments to the
    existing record instead of creating a second one.
    """
    year = models.PositiveIntegerField()
    semester = models.CharField(max_length=20, choices=Semester.choices)
    program = models.CharField(max_length=20, choices=Program.choices)
    assigned_by = models.CharField(max_length=20, choices=AssignedBy.choices)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "assignments"
        ordering = ["-year", "semester", "program"]
        constraints = [
            models.UniqueConstraint(fields=["year", "semester", "program"], name="unique_assignment_period"),
        ]

    def __str__(self):
        return f"{self.year} {self.semester} {self.program} ({self.assigned_by})"


class SubAssignment(models.Model):
    """A single course/section given to one instructor, with the workload it carries."""
    assignment = models.ForeignKey(Assignment, on_delete=models.CASCADE, related_name="sub_assignments")
    instructor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sub_assignments",
    )
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="sub_assignments")
    section = models.CharField(max_length=20, blank=True, default="")
    no_of_sections = models.PositiveIntegerField(default=1)
    lab_division = models.CharField(max_length=3, choices=LabDivision.choices, default=LabDivision.NO)
    workload = models.FloatField(validators=[MinValueValidator(0)])
    score = models.FloatField(null=True, blank=True)
    preference_rank = models.PositiveIntegerField(null=True, blank=True)
    experience_years = models.PositiveIntegerField(null=True, blank=True)
    assignment_reason = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "sub_assignments"
        ordering = ["id"]
        verbose_name = "Sub-assignment"
        verbose_name_plural = "Sub-assignments"

    def __str__(self):
        section = f" ({self.section})" if self.section else ""
        return f"{self.course.code}{section} -> {self.instructor}"

    @property
    def duplicate_key(self):
        return (self.course_id, self.section, self.instructor_id)
