#courses/models.py
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models


class Semester(models.TextChoices):
    REGULAR_1 = "Regular 1", "Regular 1"
    REGULAR_2 = "Regular 2", "Regular 2"
    SUMMER = "Summer", "Summer"
    EXTENSION_1 = "Extension 1", "Extension 1"
    EXTENSION_2 = "Extension 2", "Extension 2"


class Program(models.TextChoices):
    REGULAR = "Regular", "Regular"
    COMMON = "Common", "Common"
    EXTENSION = "Extension", "Extension"
    SUMMER = "Summer", "Summer"


class LabDivision(models.TextChoices):
    YES = "Yes", "Yes"
    NO = "No", "No"


class AssignedBy(models.TextChoices):
    CHAIR_HEAD = "ChairHead", "Chair Head"
    PROGRAMMING = "Programming", "Programming"
    SOFTWARE = "Software", "Software"
    DATABASE = "Database", "Database"
    NETWORKING = "Networking", "Networking"
    COC = "COC", "COC"


REGULAR_SEMESTERS = (Semester.REGULAR_1.value, Semester.REGULAR_2.value)
EXTENSION_SEMESTERS = (Semester.EXTENSION_1.value, Semester.EXTENSION_2.value)


class Course(models.Model):
    """
    Model representing an offered course and its credit structure.
    """
    code = models.CharField(
        max_length=20,
        unique=True,
        help_text="Unique course code (e.g., SENG3021)"
    )
    name = models.CharField(max_length=255, blank=True)
    department = models.CharField(max_length=100, blank=True)
    category = models.CharField(max_length=100, blank=True)
    year = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Curriculum year the course belongs to"
    )
    semester = models.CharField(
        max_length=20,
        blank=True,
        help_text="Nominal semester label (e.g., Regular 1)"
    )
    credit_hour = models.FloatField(null=True, blank=True)
    lecture = models.FloatField(default=0, validators=[MinValueValidator(0)])
    lab = models.FloatField(default=0, validators=[MinValueValidator(0)])
    tutorial = models.FloatField(default=0, validators=[MinValueValidator(0)])
    number_of_students = models.PositiveIntegerField(default=0)
    chair = models.CharField(
        max_length=100,
        blank=True,
        help_text="Chair name or chair holder's user id; summer assignment gives the +2 chair "
                  "consideration only to the instructor whose user id equals this value"
    )
    location = models.CharField(max_length=100, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "courses"
        ordering = ["code"]
        verbose_name = "Course"
        verbose_name_plural = "Courses"

    def __str__(self):
        return f"{self.code} - {self.name}" if self.name else self.code

    def clean(self):
        """Validate course data."""
        if self.code:
            self.code = self.code.upper().strip()
        if (self.lecture or 0) + (self.lab or 0) + (self.tutorial or 0) <= 0:
            raise ValidationError("A course needs a positive number of lecture, lab or tutorial hours.")


class Position(models.Model):
    """Academic position and the teaching-load exemption it grants."""
    name = models.CharField(max_length=100, unique=True)
    exemption = models.FloatField(default=0, validators=[MinValueValidator(0)])
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "positions"
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} (-{self.exemption:g})"


class Chair(models.Model):
    """Teaching chair (department sub-unit) with its head and owned courses."""
    name = models.CharField(max_length=100, unique=True)
    head = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="headed_chairs",
    )
    courses = models.ManyToManyField(Course, blank=True, related_name="chairs")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "chairs"
        ordering = ["name"]

    def __str__(self):
        return self.name
