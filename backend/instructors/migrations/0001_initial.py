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


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("courses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Instructor",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="instructor_profile", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "instructors",
                "ordering": ["user__username"],
            },
        ),
        migrations.CreateModel(
            name="WorkloadEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("year", models.PositiveIntegerField()),
                ("semester", models.CharField(choices=SEMESTER_CHOICES, max_length=20)),
                ("program", models.CharField(choices=PROGRAM_CHOICES, max_length=20)),
                ("value", models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("instructor", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="workload", to="instructors.instructor")),
            ],
            options={
                "verbose_name": "Workload Entry",
                "verbose_name_plural": "Workload Entries",
                "db_table": "instructor_workload",
                "ordering": ["id"],
            },
        ),
        migrations.AddConstraint(
            model_name="workloadentry",
            constraint=models.UniqueConstraint(fields=("instructor", "year", "semester", "program"), name="unique_workload_period"),
        ),
        migrations.CreateModel(
            name="AssignedCourse",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("year", models.PositiveIntegerField()),
                ("semester", models.CharField(choices=SEMESTER_CHOICES, max_length=20)),
                ("program", models.CharField(choices=PROGRAM_CHOICES, max_length=20)),
                ("assigned_at", models.DateTimeField(auto_now_add=True)),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="teaching_history", to="courses.course")),
                ("instructor", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="assigned_courses", to="instructors.instructor")),
            ],
            options={
                "db_table": "instructor_assigned_courses",
                "ordering": ["-year", "course__code"],
            },
        ),
        migrations.AddIndex(
            model_name="assignedcourse",
            index=models.Index(fields=["instructor", "course"], name="assigned_course_lookup_idx"),
        ),
    ]
