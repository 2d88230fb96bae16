"""
Test models for the users app.
"""
from django.test import TestCase

from users.models import User, Role, RoleName, UserRoles
from users.factory import UserFactory, InstructorUserFactory, COCUserFactory


class UserManagerTestCase(TestCase):
    """Test cases for UserManager."""

    def test_create_user_with_username_and_password(self):
        """Test creating a user with username and password."""
        user = User.objects.create_user(
            username='abebe',
            password='testpass123',
            first_name='Abebe',
            last_name='Kebede',
        )
        self.assertEqual(user.username, 'abebe')
        self.assertTrue(user.check_password('testpass123'))
        self.assertTrue(user.is_active)
        self.assertFalse(user.is_staff)

    def test_create_user_without_username_raises_error(self):
        """Test that creating user without username raises ValueError."""
        with self.assertRaises(ValueError) as cm:
            User.objects.create_user(username='', password='testpass123')
        self.assertEqual(str(cm.exception), 'The username field must be set')

    def test_create_user_assigns_default_instructor_role(self):
        """Test that the Instructor role is assigned when no role is given."""
        user = User.objects.create_user(username='newcomer')
        self.assertTrue(user.has_role(RoleName.INSTRUCTOR))
        self.assertFalse(user.has_usable_password())

    def test_create_user_with_specific_role(self):
        """Test creating user with specific role."""
        user = User.objects.create_user(username='coc', role_name=RoleName.COC)
        self.assertEqual(user.get_active_role_name(), RoleName.COC)

    def test_create_user_with_unknown_role_raises_error(self):
        """Test that an unknown role name is rejected."""
        with self.assertRaises(ValueError):
            User.objects.create_user(username='ghost', role_name='Janitor')

    def test_create_superuser(self):
        """Test that superusers are staff with the Head of Faculty role."""
        user = User.objects.create_superuser(username='root', password='pw')
        self.assertTrue(user.is_staff)
        self.assertEqual(user.get_active_role_name(), RoleName.HEAD_OF_FACULTY)

    def test_instructors_only_returns_active_instructor_role(self):
        """Test that instructors() filters by role and active flag."""
        lecturer = InstructorUserFactory()
        InstructorUserFactory(is_active=False)
        COCUserFactory()
        self.assertEqual(list(User.objects.instructors()), [lecturer])

    def test_instructors_restricted_to_ids(self):
        """Test that instructors() honours the id filter."""
        first = InstructorUserFactory()
        InstructorUserFactory()
        self.assertEqual(list(User.objects.instructors([first.pk])), [first])


class UserModelTestCase(TestCase):
    """Test cases for the User model."""

    def test_full_name_falls_back_to_username(self):
        """Test get_full_name without first and last name."""
        user = UserFactory(first_name='', last_name='')
        self.assertEqual(user.get_full_name(), user.username)
        self.assertEqual(str(user), user.username)

    def test_full_name(self):
        """Test get_full_name with names."""
        user = UserFactory(first_name='Sara', last_name='Tadesse')
        self.assertEqual(user.get_full_name(), 'Sara Tadesse')
        self.assertEqual(user.get_short_name(), 'Sara')

    def test_assign_role_keeps_single_active_role(self):
        """Test that assigning a new role disables the previous one."""
        user = InstructorUserFactory()
        user.assign_role(RoleName.CHAIR_HEAD)

        self.assertEqual(user.get_active_role_name(), RoleName.CHAIR_HEAD)
        self.assertEqual(UserRoles.objects.filter(user=user, is_active=True).count(), 1)
        old = UserRoles.objects.get(user=user, role__role_name=RoleName.INSTRUCTOR)
        self.assertFalse(old.is_active)
        self.assertIsNotNone(old.disabled_at)

    def test_user_without_role(self):
        """Test role helpers for a user with no role."""
        user = UserFactory()
        self.assertIsNone(user.get_active_role())
        self.assertIsNone(user.get_active_role_name())
        self.assertFalse(user.has_role(RoleName.INSTRUCTOR))


class RoleModelTestCase(TestCase):
    """Test cases for Role and UserRoles."""

    def test_role_str(self):
        """Test Role string representation."""
        role = Role.objects.create(role_name='Tester')
        self.assertEqual(str(role), 'Tester')

    def test_user_role_str(self):
        """Test UserRoles string representation."""
        user = COCUserFactory(username='office')
        link = UserRoles.objects.get(user=user, is_active=True)
        self.assertEqual(str(link), 'office - COC (Active)')
        link.disable()
        self.assertEqual(str(link), 'office - COC (Disabled)')
