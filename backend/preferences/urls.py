from django.urls import path

from .views import InstructorPreferenceView, PreferenceFormListView, PreferenceListView, PreferenceSubmitView

urlpatterns = [
    path("", PreferenceListView.as_view(), name="list"),
    path("forms/", PreferenceFormListView.as_view(), name="form-list"),
    path("submit/", PreferenceSubmitView.as_view(), name="submit"),
    path("instructor/<int:instructor_id>/", InstructorPreferenceView.as_view(), name="instructor"),
]
