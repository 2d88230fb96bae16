import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


SEMESTER_CHOICES = [
    ("Regular 1", "Regular 1"),
    ("Regular 2", "Regular 2"),
    ("Summer", "Summer"),
    ("Extension 1", "Extension 1"),
    ("Extension 2", "Extension 2"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("courses", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="PreferenceForm",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("chair", models.CharField(help_text="Chair issuing the form (e.g., Programming)", max_length=100)),
                ("year", models.PositiveIntegerField()),
                ("semester", models.CharField(choices=SEMESTER_CHOICES, max_length=20)),
                ("max_preferences", models.PositiveIntegerField(default=5)),
                ("submission_start", models.DateTimeField(default=django.utils.timezone.now)),
                ("submission_end", models.DateTimeField(blank=True, null=True)),
                ("all_instructors", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("instructors", models.ManyToManyField(blank=True, related_name="preference_forms", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Preference Form",
                "verbose_name_plural": "Preference Forms",
                "db_table": "preference_forms",
                "ordering": ["-year", "semester", "chair"],
            },
        ),
        migrations.CreateModel(
            name="PreferenceFormCourse",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("section", models.CharField(default="A", max_length=20)),
                ("no_of_sections", models.PositiveIntegerField(default=1)),
                ("lab_division", models.CharField(choices=[("Yes", "Yes"), ("No", "No")], default="No", max_length=3)),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="preference_form_entries", to="courses.course")),
                ("form", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="form_courses", to="preferences.preferenceform")),
            ],
            options={
                "db_table": "preference_form_courses",
                "ordering": ["id"],
            },
        ),
        migrations.AddConstraint(
            model_name="preferenceformcourse",
            constraint=models.UniqueConstraint(fields=("form", "course"), name="unique_form_course"),
        ),
        migrations.CreateModel(
            name="Preference",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("submitted_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("form", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="submissions", to="preferences.preferenceform")),
                ("instructor", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="course_preferences", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "preferences",
                "ordering": ["submitted_at", "id"],
            },
        ),
        migrations.AddConstraint(
            model_name="preference",
            constraint=models.UniqueConstraint(fields=("instructor", "form"), name="unique_instructor_form_preference"),
        ),
        migrations.CreateModel(
            name="PreferenceItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("rank", models.PositiveIntegerField(help_text="1 = most preferred", validators=[django.core.validators.MinValueValidator(1)])),
                ("course", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="+", to="courses.course")),
                ("preference", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="items", to="preferences.preference")),
            ],
            options={
                "db_table": "preference_items",
                "ordering": ["rank"],
            },
        ),
        migrations.CreateModel(
            name="PreferenceWeight",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("max_weight", models.FloatField()),
                ("interval", models.FloatField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("weights", models.JSONField(blank=True, default=list)),
            ],
            options={
                "db_table": "preference_weights",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="CourseExperienceWeight",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("max_weight", models.FloatField()),
                ("interval", models.FloatField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("years_experience", models.JSONField(blank=True, default=list)),
            ],
            options={
                "db_table": "course_experience_weights",
                "ordering": ["-created_at"],
            },
        ),
    ]
