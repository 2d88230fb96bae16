from django.contrib import admin
from .models import (
    PreferenceForm, PreferenceFormCourse, Preference, PreferenceItem,
    PreferenceWeight, CourseExperienceWeight,
)


class PreferenceFormCourseInline(admin.TabularInline):
    model = PreferenceFormCourse
    extra = 1
    fields = ["course", "section", "no_of_sections", "lab_division"]


@admin.register(PreferenceForm)
class PreferenceFormAdmin(admin.ModelAdmin):
    list_display = ["chair", "year", "semester", "max_preferences", "submission_start", "submission_end", "all_instructors"]
    list_filter = ["year", "semester", "chair"]
    search_fields = ["chair"]
    filter_horizontal = ["instructors"]
    inlines = [PreferenceFormCourseInline]


class PreferenceItemInline(admin.TabularInline):
    model = PreferenceItem
    extra = 0
    fields = ["course", "rank"]


@admin.register(Preference)
class PreferenceAdmin(admin.ModelAdmin):
    list_display = ["instructor", "form", "submitted_at", "updated_at"]
    list_filter = ["form__year", "form__semester", "form__chair"]
    search_fields = ["instructor__username", "instructor__first_name", "instructor__last_name"]
    readonly_fields = ["updated_at"]
    inlines = [PreferenceItemInline]


class WeightTableAdmin(admin.ModelAdmin):
    list_display = ["max_weight", "interval", "created_at"]
    readonly_fields = ["created_at"]


@admin.register(PreferenceWeight)
class PreferenceWeightAdmin(WeightTableAdmin):
    readonly_fields = ["weights", "created_at"]


@admin.register(CourseExperienceWeight)
class CourseExperienceWeightAdmin(WeightTableAdmin):
    readonly_fields = ["years_experience", "created_at"]
