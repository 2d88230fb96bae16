import logging

from django.apps import AppConfig
from django.conf import settings
from django.contrib import admin

logger = logging.getLogger(__name__)


class CourseOfferingConfig(AppConfig):
    name = "course_offering"
    verbose_name = "Course Offering"

    def ready(self):
        site_name = getattr(settings, "ADMIN_SITE_NAME", self.verbose_name)
        admin.site.site_header = f"{site_name} Administration"
        admin.site.site_title = f"{site_name} Admin"
        admin.site.index_title = "Courses, assignments and instructor workload"

        logger.debug(
            "Assignment engine: run timeout %ss, random seed %s, summer reserves all candidates: %s",
            getattr(settings, "ASSIGNMENT_RUN_TIMEOUT", 30),
            getattr(settings, "ASSIGNMENT_RANDOM_SEED", None),
            getattr(settings, "SUMMER_RESERVE_ALL_CANDIDATES", False),
        )
