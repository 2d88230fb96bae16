"""
Factory classes for generating test data using Factory Boy and Faker.
"""
import factory
from factory.django import DjangoModelFactory
from factory.fuzzy import FuzzyChoice
from django.contrib.auth import get_user_model
from users.models import Role, RoleName, UserRoles

User = get_user_model()

LOCATIONS = ["Main Campus", "City Campus", "Online"]


class RoleFactory(DjangoModelFactory):
    """Factory for creating Role instances."""

    class Meta:
        model = Role
        django_get_or_create = ("role_name",)

    role_name = factory.Sequence(lambda n: f"Role_{n}")
    description = factory.Faker("text", max_nb_chars=200)


class UserFactory(DjangoModelFactory):
    """Factory for creating User instances without a role."""

    class Meta:
        model = User

    username = factory.Sequence(lambda n: f"user{n}")
    email = factory.LazyAttribute(lambda obj: f"{obj.username}@example.com")
    first_name = factory.Faker("first_name")
    last_name = factory.Faker("last_name")
    location = FuzzyChoice(LOCATIONS)
    is_active = True
    is_staff = False

    @factory.post_generation
    def password(self, create, extracted, **kwargs):
        """Set password for the user."""
        if not create:
            return
        self.set_password(extracted or "defaultpass123")
        self.save()


class InstructorUserFactory(UserFactory):
    """Factory for users holding the Instructor role."""

    chair = "Programming"
    position = "Lecturer"

    @factory.post_generation
    def roles(self, create, extracted, **kwargs):
        if not create:
            return
        _grant(self, RoleName.INSTRUCTOR)


class ChairHeadUserFactory(UserFactory):
    """Factory for users holding the ChairHead role."""

    chair = "Programming"

    @factory.post_generation
    def roles(self, create, extracted, **kwargs):
        if not create:
            return
        _grant(self, RoleName.CHAIR_HEAD)


class COCUserFactory(UserFactory):
    """Factory for users holding the COC role."""

    @factory.post_generation
    def roles(self, create, extracted, **kwargs):
        if not create:
            return
        _grant(self, RoleName.COC)


def _grant(user, role_name):
    role, _ = Role.objects.get_or_create(
        role_name=role_name,
        defaults={"description": f"{role_name} role"},
    )
    UserRoles.objects.filter(user=user, is_active=True).update(is_active=False)
    UserRoles.objects.create(user=user, role=role, is_active=True)
