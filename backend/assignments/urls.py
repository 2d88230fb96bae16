from django.urls import path

from .views import (
    AssignmentDetailView, AssignmentListView, AutomaticAssignmentView, CommonAutoAssignmentView,
    ExtensionAutoAssignmentView, InstructorAssignmentsView, ManualAssignmentView, SubAssignmentDetailView,
    SummerAutoAssignmentView,
)

urlpatterns = [
    path("", AssignmentListView.as_view(), name="list"),
    path("manual/", ManualAssignmentView.as_view(), name="manual"),
    path("common/manual/", ManualAssignmentView.as_view(), name="common-manual"),
    path("auto/common/", CommonAutoAssignmentView.as_view(), name="auto-common"),
    path("auto/extension/", ExtensionAutoAssignmentView.as_view(), name="auto-extension"),
    path("auto/summer/", SummerAutoAssignmentView.as_view(), name="auto-summer"),
    path("automatic/", AutomaticAssignmentView.as_view(), name="automatic"),
    path("instructor/<str:instructor_id>/", InstructorAssignmentsView.as_view(), name="instructor"),
    path("sub/<str:parent_id>/<str:sub_id>/", SubAssignmentDetailView.as_view(), name="sub-detail"),
    path("<str:assignment_id>/", AssignmentDetailView.as_view(), name="detail"),
]
