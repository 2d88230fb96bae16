import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


SEMESTER_CHOICES = [
    ("Regular 1", "Regular 1"),
    ("Regular 2", "Regular 2"),
    ("Summer", "Summer"),
    ("Extension 1", "Extension 1"),
    ("Extension 2", "Extension 2"),
]
PROGRAM_CHOICES = [
    ("Regular", "Regular"),
    ("Common", "Common"),
    ("Extension", "Extension"),
    ("Summer", "Summer"),
]
ASSIGNED_BY_CHOICES = [
    ("ChairHead", "Chair Head"),
    ("Programming", "Programming"),
    ("Software", "Software"),
    ("Database", "Database"),
    ("Networking", "Networking"),
    ("COC", "COC"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("courses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Assignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("year", models.PositiveIntegerField()),
                ("semester", models.CharField(choices=SEMESTER_CHOICES, max_length=20)),
                ("program", models.CharField(choices=PROGRAM_CHOICES, max_length=20)),
                ("assigned_by", models.CharField(choices=ASSIGNED_BY_CHOICES, max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "assignments",
                "ordering": ["-year", "semester", "program"],
            },
        ),
        migrations.AddConstraint(
            model_name="assignment",
            constraint=models.UniqueConstraint(fields=("year", "semester", "program"), name="unique_assignment_period"),
        ),
        migrations.CreateModel(
            name="SubAssignment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("section", models.CharField(blank=True, default="", max_length=20)),
                ("no_of_sections", models.PositiveIntegerField(default=1)),
                ("lab_division", models.CharField(choices=[("Yes", "Yes"), ("No", "No")], default="No", max_length=3)),
                ("workload", models.FloatField(validators=[django.core.validators.MinValueValidator(0)])),
                ("score", models.FloatField(blank=True, null=True)),
                ("preference_rank", models.PositiveIntegerField(blank=True, null=True)),
                ("experience_years", models.PositiveIntegerField(blank=True, null=True)),
                ("assignment_reason", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("assignment", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sub_assignments", to="assignments.assignment")),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sub_assignments", to="courses.course")),
                ("instructor", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sub_assignments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Sub-assignment",
                "verbose_name_plural": "Sub-assignments",
                "db_table": "sub_assignments",
                "ordering": ["id"],
            },
        ),
    ]
