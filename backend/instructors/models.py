#instructors/models.py
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from courses.models import Course, Position, Semester, Program


def position_exemption(position_name):
    """Load reduction granted by a position, 0 when the position is unknown."""
    position = Position.objects.filter(name=position_name).first() if position_name else None
    return position.exemption if position else 0


class Instructor(models.Model):
    """
    Workload owner for a teaching user.

    Created on demand the first time an allocation touches the user. The
    teaching profile (chair, position, location) lives on the user.
    """
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="instructor_profile",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "instructors"
        ordering = ["user__username"]

    def __str__(self):
        return str(self.user)

    @classmethod
    def for_user(cls, user):
        instructor, _ = cls.objects.get_or_create(user=user)
        return instructor

    @property
    def location(self):
        return self.user.location

    @property
    def position(self):
        return self.user.position

    @property
    def chair(self):
        return self.user.chair

    def exemption(self):
        return position_exemption(self.position)

    def experience_with(self, course):
        return self.assigned_courses.filter(course=course).count()


class WorkloadEntry(models.Model):
    """One ledger row: the load an instructor carries for a (year, semester, program)."""
    instructor = models.ForeignKey(Instructor, on_delete=models.CASCADE, related_name="workload")
    year = models.PositiveIntegerField()
    semester = models.CharField(max_length=20, choices=Semester.choices)
    program = models.CharField(max_length=20, choices=Program.choices)
    value = models.FloatField(default=0, validators=[MinValueValidator(0)])
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "instructor_workload"
        ordering = ["id"]
        verbose_name = "Workload Entry"
        verbose_name_plural = "Workload Entries"
        constraints = [
            models.UniqueConstraint(
                fields=["instructor", "year", "semester", "program"],
                name="unique_workload_period",
            ),
        ]

    def __str__(self):
        return f"{self.instructor} {self.year} {self.semester}/{self.program}: {self.value:.2f}"


class AssignedCourse(models.Model):
    """Teaching history; the number of rows per course is the instructor's experience with it."""
    instructor = models.ForeignKey(Instructor, on_delete=models.CASCADE, related_name="assigned_courses")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="teaching_history")
    year = models.PositiveIntegerField()
    semester = models.CharField(max_length=20, choices=Semester.choices)
    program = models.CharField(max_length=20, choices=Program.choices)
    assigned_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "instructor_assigned_courses"
        ordering = ["-year", "course__code"]
        indexes = [
            models.Index(fields=["instructor", "course"], name="assigned_course_lookup_idx"),
        ]

    def __str__(self):
        return f"{self.instructor} - {self.course.code} ({self.year} {self.semester})"
