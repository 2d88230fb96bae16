from django.contrib import admin
from django import forms
from django.db import transaction
from .models import User, Role, RoleName, UserRoles


class UserRoleInline(admin.TabularInline):
    """Inline for managing user roles with proper auditing."""
    model = UserRoles
    extra = 0
    fields = ["role", "is_active", "assigned_at", "disabled_at"]
    readonly_fields = ["assigned_at", "disabled_at"]

    def get_queryset(self, request):
        """Show all roles (both active and inactive) for auditing purposes."""
        return super().get_queryset(request).select_related("role").order_by("-assigned_at")


class UserAdminForm(forms.ModelForm):
    """Custom form for User admin with role selection."""
    role = forms.ModelChoiceField(
        queryset=Role.objects.all().order_by("role_name"),
        required=False,
        help_text="Select a role for this user. If not specified, Instructor role will be assigned.",
        empty_label="-- Select Role (defaults to Instructor) --",
    )

    class Meta:
        model = User
        fields = "__all__"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if self.instance and self.instance.pk:
            current_role = self.instance.get_active_role()
            if current_role:
                self.fields["role"].initial = current_role


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """Admin for User model with role management and instructor profile."""
    form = UserAdminForm
    inlines = [UserRoleInline]
    list_display = ["username", "first_name", "last_name", "chair", "position", "location", "is_active", "get_roles"]
    list_filter = ["is_active", "is_staff", "chair", "position", "location"]
    search_fields = ["username", "email", "first_name", "last_name"]
    ordering = ["username"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        ("Authentication", {
            "fields": ("username", "password")
        }),
        ("Personal Information", {
            "fields": ("first_name", "last_name", "email", "phone")
        }),
        ("Teaching Profile", {
            "fields": ("chair", "position", "location")
        }),
        ("Role Assignment", {
            "fields": ("role",),
            "description": "Select the primary role for this user. Role changes are audited."
        }),
        ("Permissions", {
            "fields": ("is_active", "is_staff"),
        }),
        ("Important Dates", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )

    def get_roles(self, obj):
        """Display user roles."""
        roles = obj.userroles_set.filter(is_active=True)
        if roles:
            return ", ".join(ur.role.role_name for ur in roles)
        return "No roles assigned"
    get_roles.short_description = "Active Roles"

    def save_model(self, request, obj, form, change):
        """Save user and handle role assignment with proper auditing."""
        super().save_model(request, obj, form, change)

        selected_role = form.cleaned_data.get("role")

        with transaction.atomic():
            if selected_role:
                for assignment in UserRoles.objects.filter(user=obj, is_active=True):
                    assignment.disable()
                UserRoles.objects.create(user=obj, role=selected_role, is_active=True)
                self.message_user(request, f"User {obj.username} assigned role: {selected_role.role_name}")
            elif not change:
                obj.assign_role(RoleName.INSTRUCTOR)
                self.message_user(request, f"User {obj.username} assigned default Instructor role")


@admin.register(Role)
class RoleAdmin(admin.ModelAdmin):
    """Admin for Role model."""
    list_display = ["role_name", "description", "get_users_count", "created_at"]
    search_fields = ["role_name", "description"]
    readonly_fields = ["created_at", "updated_at"]
    ordering = ["role_name"]

    def get_users_count(self, obj):
        """Count of users with this role."""
        return obj.userroles_set.filter(is_active=True).count()
    get_users_count.short_description = "Users"
