"""
Test project-level wiring.
"""
from django.contrib import admin
from django.test import TestCase
from django.urls import reverse


class ProjectConfigTestCase(TestCase):
    """Test cases for admin titles and the health check."""

    def test_admin_titles(self):
        """Test admin titles are built from the site name."""
        self.assertEqual(admin.site.site_header, "Course Offering Administration")
        self.assertEqual(admin.site.site_title, "Course Offering Admin")

    def test_health(self):
        """Test the unauthenticated health check."""
        response = self.client.get(reverse("health"))
        self.assertEqual(response.status_code, 200)
