"""
Test role permissions for the users app.
"""
from django.contrib.auth.models import AnonymousUser
from django.test import TestCase
from rest_framework.test import APIRequestFactory

from users.factory import ChairHeadUserFactory, COCUserFactory, InstructorUserFactory, UserFactory
from users.permissions import IsChairHeadOrCOC, IsCOC, IsInstructorRole


class RolePermissionTestCase(TestCase):
    """Test cases for the role gates."""

    def setUp(self):
        self.factory = APIRequestFactory()

    def check(self, permission, user):
        request = self.factory.get('/')
        request.user = user
        return permission().has_permission(request, None)

    def test_anonymous_is_denied(self):
        """Test that anonymous users are denied by every gate."""
        for permission in (IsCOC, IsChairHeadOrCOC, IsInstructorRole):
            self.assertFalse(self.check(permission, AnonymousUser()))

    def test_coc_gate(self):
        """Test that only COC passes IsCOC."""
        self.assertTrue(self.check(IsCOC, COCUserFactory()))
        self.assertFalse(self.check(IsCOC, ChairHeadUserFactory()))
        self.assertFalse(self.check(IsCOC, InstructorUserFactory()))

    def test_chair_head_or_coc_gate(self):
        """Test that chair heads and COC pass IsChairHeadOrCOC."""
        self.assertTrue(self.check(IsChairHeadOrCOC, COCUserFactory()))
        self.assertTrue(self.check(IsChairHeadOrCOC, ChairHeadUserFactory()))
        self.assertFalse(self.check(IsChairHeadOrCOC, InstructorUserFactory()))

    def test_instructor_gate(self):
        """Test that any teaching role passes IsInstructorRole."""
        self.assertTrue(self.check(IsInstructorRole, InstructorUserFactory()))
        self.assertTrue(self.check(IsInstructorRole, ChairHeadUserFactory()))
        self.assertFalse(self.check(IsInstructorRole, UserFactory()))

    def test_staff_bypass(self):
        """Test that staff users pass every gate."""
        staff = UserFactory(is_staff=True)
        self.assertTrue(self.check(IsCOC, staff))
        self.assertTrue(self.check(IsChairHeadOrCOC, staff))
