from django.contrib import admin
from .models import Instructor, WorkloadEntry, AssignedCourse


class WorkloadEntryInline(admin.TabularInline):
    model = WorkloadEntry
    extra = 0
    fields = ["year", "semester", "program", "value", "updated_at"]
    readonly_fields = ["updated_at"]


class AssignedCourseInline(admin.TabularInline):
    model = AssignedCourse
    extra = 0
    fields = ["course", "year", "semester", "program", "assigned_at"]
    readonly_fields = ["assigned_at"]


@admin.register(Instructor)
class InstructorAdmin(admin.ModelAdmin):
    list_display = ["user", "get_chair", "get_position", "get_location", "created_at"]
    search_fields = ["user__username", "user__first_name", "user__last_name"]
    inlines = [WorkloadEntryInline, AssignedCourseInline]

    def get_chair(self, obj):
        return obj.chair
    get_chair.short_description = "Chair"

    def get_position(self, obj):
        return obj.position
    get_position.short_description = "Position"

    def get_location(self, obj):
        return obj.location
    get_location.short_description = "Location"


@admin.register(WorkloadEntry)
class WorkloadEntryAdmin(admin.ModelAdmin):
    list_display = ["instructor", "year", "semester", "program", "value", "updated_at"]
    list_filter = ["year", "semester", "program"]
    search_fields = ["instructor__user__username"]
    ordering = ["-year", "semester", "program"]


@admin.register(AssignedCourse)
class AssignedCourseAdmin(admin.ModelAdmin):
    list_display = ["instructor", "course", "year", "semester", "program", "assigned_at"]
    list_filter = ["year", "semester", "program"]
    search_fields = ["instructor__user__username", "course__code", "course__name"]
