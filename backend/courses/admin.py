from django.contrib import admin
from .models import Course, Position, Chair


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ["code", "name", "chair", "semester", "lecture", "lab", "tutorial", "number_of_students", "location"]
    list_filter = ["chair", "semester", "location", "department"]
    search_fields = ["code", "name"]
    ordering = ["code"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = (
        ("Basic Information", {
            "fields": ("code", "name", "department", "category", "chair")
        }),
        ("Delivery Details", {
            "fields": ("year", "semester", "location", "number_of_students")
        }),
        ("Credit Structure", {
            "fields": ("credit_hour", "lecture", "lab", "tutorial")
        }),
        ("Timestamps", {
            "fields": ("created_at", "updated_at"),
            "classes": ("collapse",)
        }),
    )


@admin.register(Position)
class PositionAdmin(admin.ModelAdmin):
    list_display = ["name", "exemption", "created_at"]
    search_fields = ["name"]
    ordering = ["name"]


@admin.register(Chair)
class ChairAdmin(admin.ModelAdmin):
    list_display = ["name", "head", "created_at"]
    search_fields = ["name", "head__username"]
    filter_horizontal = ["courses"]
    ordering = ["name"]
