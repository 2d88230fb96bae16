#preferences/models.py
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from courses.models import Course, LabDivision, Semester


def generate_weight_table(max_weight, interval, start):
    """
    Weight table for (max_weight, interval): the i-th entry, labelled
    `start + i`, weighs `max_weight - i * interval`. Generation stops before
    the first weight that is not positive.
    """
    if max_weight is None or interval is None or max_weight <= 0 or interval <= 0:
        raise ValidationError("Both maxWeight and interval must be positive numbers.")
    table = []
    i = 0
    while True:
        weight = max_weight - i * interval
        if weight <= 0:
            break
        table.append((start + i, weight))
        i += 1
    return table


class PreferenceForm(models.Model):
    """
    A chair's call for course preferences for one (year, semester).

    The courses listed on the form are the only ones instructors may rank.
    """
    chair = models.CharField(max_length=100, help_text="Chair issuing the form (e.g., Programming)")
    year = models.PositiveIntegerField()
    semester = models.CharField(max_length=20, choices=Semester.choices)
    max_preferences = models.PositiveIntegerField(default=5)
    submission_start = models.DateTimeField(default=timezone.now)
    submission_end = models.DateTimeField(null=True, blank=True)
    instructors = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="preference_forms",
    )
    all_instructors = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "preference_forms"
        ordering = ["-year", "semester", "chair"]
        verbose_name = "Preference Form"
        verbose_name_plural = "Preference Forms"

    def __str__(self):
        return f"{self.chair} {self.year} {self.semester}"

    def course_ids(self):
        return set(self.form_courses.values_list("course_id", flat=True))


class PreferenceFormCourse(models.Model):
    """Course offered on a preference form with its section layout."""
    form = models.ForeignKey(PreferenceForm, on_delete=models.CASCADE, related_name="form_courses")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="preference_form_entries")
    section = models.CharField(max_length=20, default="A")
    no_of_sections = models.PositiveIntegerField(default=1)
    lab_division = models.CharField(max_length=3, choices=LabDivision.choices, default=LabDivision.NO)

    class Meta:
        db_table = "preference_form_courses"
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["form", "course"], name="unique_form_course"),
        ]

    def __str__(self):
        return f"{self.form} - {self.course.code} ({self.section})"


class Preference(models.Model):
    """One instructor's ranked submission against a form."""
    instructor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="course_preferences",
    )
    form = models.ForeignKey(PreferenceForm, on_delete=models.CASCADE, related_name="submissions")
    submitted_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "preferences"
        ordering = ["submitted_at", "id"]
        constraints = [
            models.UniqueConstraint(fields=["instructor", "form"], name="unique_instructor_form_preference"),
        ]

    def __str__(self):
        return f"{self.instructor} -> {self.form}"


class PreferenceItem(models.Model):
    preference = models.ForeignKey(Preference, on_delete=models.CASCADE, related_name="items")
    course = models.ForeignKey(Course, on_delete=models.CASCADE, related_name="+")
    rank = models.PositiveIntegerField(validators=[MinValueValidator(1)], help_text="1 = most preferred")

    class Meta:
        db_table = "preference_items"
        ordering = ["rank"]

    def __str__(self):
        return f"#{self.rank} {self.course.code}"


class _WeightTable(models.Model):
    max_weight = models.FloatField()
    interval = models.FloatField()
    created_at = models.DateTimeField(auto_now_add=True)

    # Label of the first generated entry and the JSON key it is stored under.
    table_start = 1
    table_key = "rank"

    class Meta:
        abstract = True

    def clean(self):
        generate_weight_table(self.max_weight, self.interval, self.table_start)

    def build_table(self):
        return [
            {self.table_key: label, "weight": weight}
            for label, weight in generate_weight_table(self.max_weight, self.interval, self.table_start)
        ]

    def as_mapping(self):
        return {entry[self.table_key]: entry["weight"] for entry in self.table}

    @classmethod
    def latest(cls):
        return cls.objects.order_by("-created_at", "-id").first()


class PreferenceWeight(_WeightTable):
    """Weight per preference rank, regenerated from (max_weight, interval) on save."""
    weights = models.JSONField(default=list, blank=True)

    table_start = 1
    table_key = "rank"

    class Meta:
        db_table = "preference_weights"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Preference weights (max {self.max_weight:g}, step {self.interval:g})"

    @property
    def table(self):
        return self.weights

    def save(self, *args, **kwargs):
        self.weights = self.build_table()
        super().save(*args, **kwargs)


class CourseExperienceWeight(_WeightTable):
    """Weight per year of experience with a course, regenerated on save."""
    years_experience = models.JSONField(default=list, blank=True)

    table_start = 0
    table_key = "years"

    class Meta:
        db_table = "course_experience_weights"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Experience weights (max {self.max_weight:g}, step {self.interval:g})"

    @property
    def table(self):
        return self.years_experience

    def save(self, *args, **kwargs):
        self.years_experience = self.build_table()
        super().save(*args, **kwargs)
