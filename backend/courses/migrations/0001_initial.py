import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Course",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(help_text="Unique course code (e.g., SENG3021)", max_length=20, unique=True)),
                ("name", models.CharField(blank=True, max_length=255)),
                ("department", models.CharField(blank=True, max_length=100)),
                ("category", models.CharField(blank=True, max_length=100)),
                ("year", models.PositiveIntegerField(blank=True, help_text="Curriculum year the course belongs to", null=True)),
                ("semester", models.CharField(blank=True, help_text="Nominal semester label (e.g., Regular 1)", max_length=20)),
                ("credit_hour", models.FloatField(blank=True, null=True)),
                ("lecture", models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ("lab", models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ("tutorial", models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ("number_of_students", models.PositiveIntegerField(default=0)),
                ("chair", models.CharField(blank=True, help_text="Chair name or chair holder's user id; summer assignment gives the +2 chair consideration only to the instructor whose user id equals this value", max_length=100)),
                ("location", models.CharField(blank=True, max_length=100)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Course",
                "verbose_name_plural": "Courses",
                "db_table": "courses",
                "ordering": ["code"],
            },
        ),
        migrations.CreateModel(
            name="Position",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
                ("exemption", models.FloatField(default=0, validators=[django.core.validators.MinValueValidator(0)])),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "positions",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Chair",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("courses", models.ManyToManyField(blank=True, related_name="chairs", to="courses.course")),
                ("head", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="headed_chairs", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "chairs",
                "ordering": ["name"],
            },
        ),
    ]
