from django.contrib import admin
from .models import Assignment, SubAssignment


class SubAssignmentInline(admin.TabularInline):
    model = SubAssignment
    extra = 0
    fields = ["instructor", "course", "section", "no_of_sections", "lab_division", "workload", "score"]
    readonly_fields = ["workload", "score"]


@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ["year", "semester", "program", "assigned_by", "get_count", "created_at"]
    list_filter = ["year", "semester", "program", "assigned_by"]
    readonly_fields = ["created_at", "updated_at"]
    inlines = [SubAssignmentInline]

    def get_count(self, obj):
        return obj.sub_assignments.count()
    get_count.short_description = "Sub-assignments"


@admin.register(SubAssignment)
class SubAssignmentAdmin(admin.ModelAdmin):
    """Read-mostly view; edits that change workload go through the API so the ledger follows."""
    list_display = ["course", "section", "instructor", "workload", "score", "preference_rank", "assignment"]
    list_filter = ["assignment__year", "assignment__semester", "assignment__program", "lab_division"]
    search_fields = ["course__code", "course__name", "instructor__username"]
    readonly_fields = ["workload", "score", "preference_rank", "experience_years", "created_at"]

    fieldsets = (
        ("Allocation", {
            "fields": ("assignment", "instructor", "course", "section", "no_of_sections", "lab_division")
        }),
        ("Scoring", {
            "fields": ("workload", "score", "preference_rank", "experience_years", "assignment_reason")
        }),
        ("Timestamps", {
            "fields": ("created_at",),
            "classes": ("collapse",)
        }),
    )
