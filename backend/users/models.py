# backend/users/models.py
from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models, transaction
from django.utils import timezone
import logging
from rich.console import Console

console = Console()
logger = logging.getLogger(__name__)


class RoleName(models.TextChoices):
    HEAD_OF_FACULTY = "HeadOfFaculty", "Head of Faculty"
    CHAIR_HEAD = "ChairHead", "Chair Head"
    COC = "COC", "COC"
    INSTRUCTOR = "Instructor", "Instructor"


class UserManager(BaseUserManager):
    """Custom user manager for username-based authentication with a single active role."""

    def create_user(self, username, password=None, role_name=None, **extra_fields):
        if not username:
            raise ValueError("The username field must be set")

        extra_fields.setdefault("is_active", True)

        if not role_name:
            role_name = RoleName.INSTRUCTOR
            console.print(f"[yellow]No role specified for user {username}, assigning default role: {role_name}[/yellow]")

        with transaction.atomic():
            user = self.model(username=username, **extra_fields)
            if password:
                user.set_password(password)
            else:
                user.set_unusable_password()
            user.save()
            self._assign_role_to_user(user, role_name)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_active", True)
        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        return self.create_user(username, password, role_name=RoleName.HEAD_OF_FACULTY, **extra_fields)

    def with_role(self, role_name):
        """Users whose active role is `role_name`."""
        return self.filter(
            userroles__role__role_name=role_name,
            userroles__is_active=True,
        ).distinct()

    def instructors(self, ids=None):
        """Active users holding the Instructor role, optionally restricted to `ids`."""
        qs = self.with_role(RoleName.INSTRUCTOR).filter(is_active=True)
        if ids is not None:
            qs = qs.filter(pk__in=ids)
        return qs

    def _assign_role_to_user(self, user, role_name):
        Role = self.model._meta.apps.get_model("users", "Role")
        UserRoles = self.model._meta.apps.get_model("users", "UserRoles")

        try:
            try:
                role = Role.objects.get(role_name=role_name)
            except Role.DoesNotExist:
                if role_name in RoleName.values:
                    role, _ = Role.objects.get_or_create(
                        role_name=role_name,
                        defaults={"description": f"{role_name} role"},
                    )
                else:
                    raise ValueError(f"Role '{role_name}' does not exist and is not an essential role")

            with transaction.atomic():
                for user_role in UserRoles.objects.filter(user=user, is_active=True):
                    user_role.disable()
                UserRoles.objects.create(user=user, role=role, is_active=True)
        except Exception as e:
            console.print(f"[red]✗ Error assigning role to user:[/red] {str(e)}")
            raise


class User(AbstractBaseUser):
    """
    Custom User model with username as the unique identifier.

    Instructors carry their teaching profile here: the chair they belong to,
    their position name (looked up in courses.Position for the load exemption)
    and the campus location used for location matching.
    """
    username    = models.CharField(max_length=150, unique=True, null=False, blank=False)
    email       = models.EmailField(unique=False, null=True, blank=True)
    first_name  = models.CharField(max_length=150, blank=True)
    last_name   = models.CharField(max_length=150, blank=True)
    phone       = models.CharField(max_length=50, blank=True)
    chair       = models.CharField(max_length=100, blank=True)
    position    = models.CharField(max_length=100, blank=True)
    location    = models.CharField(max_length=100, blank=True)
    is_active   = models.BooleanField(default=True)
    is_staff    = models.BooleanField(default=False)
    created_at  = models.DateTimeField(default=timezone.now)
    updated_at  = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD  = "username"
    REQUIRED_FIELDS = []

    class Meta:
        verbose_name = "User"
        verbose_name_plural = "Users"

    def __str__(self):
        return self.get_full_name()

    def get_full_name(self):
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.username

    def get_short_name(self):
        return self.first_name or self.username

    # Required methods for Django admin compatibility without PermissionsMixin
    def has_perm(self, perm, obj=None):
        return self.is_staff

    def has_module_perms(self, app_label):
        return self.is_staff

    def get_active_role(self):
        ur = (UserRoles.objects
              .filter(user=self, is_active=True)
              .select_related("role")
              .first())
        return ur.role if ur else None

    def get_active_role_name(self):
        """Get the user's active role name."""
        role = self.get_active_role()
        return role.role_name if role else None

    def assign_role(self, role_name):
        """Assign a role to this user (single active role only)."""
        User.objects._assign_role_to_user(self, role_name)

    def has_role(self, role_name):
        return UserRoles.objects.filter(
            user=self,
            role__role_name=role_name,
            is_active=True,
        ).exists()


class Role(models.Model):
    """Role model for the single-active-role system."""
    role_name = models.CharField(max_length=100, unique=True, null=False)
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Role"
        verbose_name_plural = "Roles"

    def __str__(self):
        return self.role_name


class UserRoles(models.Model):
    """User/role link with auditing support; at most one active row per user."""
    user = models.ForeignKey(User, on_delete=models.CASCADE)
    role = models.ForeignKey(Role, on_delete=models.CASCADE)
    assigned_at = models.DateTimeField(default=timezone.now)
    is_active = models.BooleanField(default=True)
    disabled_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = "User Role"
        verbose_name_plural = "User Roles"

    def __str__(self):
        status = "Active" if self.is_active else "Disabled"
        return f"{self.user.username} - {self.role.role_name} ({status})"

    def disable(self):
        self.is_active = False
        self.disabled_at = timezone.now()
        self.save()
