# assignments/views.py
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter

from users.permissions import IsChairHeadOrCOC, IsCOC
from .allocators import (
    CommonCourseAllocator, CourseRequest, ExtensionAllocator, ManualAllocator, ManualRequest,
    PreferenceScoreAllocator, SummerAllocator,
)
from .exceptions import AssignmentError
from .models import Assignment
from .serializers import (
    AssignmentSerializer, AutoAssignmentSerializer, InstructorSubAssignmentSerializer,
    ManualAssignmentSerializer, PreferenceRunSerializer, ReasonedAssignmentSerializer,
    SubAssignmentSerializer, SubAssignmentUpdateSerializer, SummerAssignmentSerializer,
)
from .services import (
    delete_sub_assignment, filter_assignments, get_assignment, instructor_sub_assignments, update_sub_assignment,
)

logger = logging.getLogger(__name__)


def _course_requests(items):
    return [
        CourseRequest(
            course_id=item["courseId"],
            section=item.get("section", ""),
            lab_division=item.get("labDivision", "No"),
            no_of_sections=item.get("NoOfSections", 1),
        )
        for item in items
    ]


def _allocation_response(result, message, include_fallback=False):
    data = {
        "message": message,
        "assignmentId": result.assignment.pk,
        "assignments": SubAssignmentSerializer(result.created, many=True).data,
    }
    if result.duplicates:
        data["warning"] = result.warning
        data["duplicateAssignments"] = result.duplicates
    if include_fallback:
        data["fallbackCourses"] = result.fallback_courses
    return Response(data, status=status.HTTP_201_CREATED)


class AssignmentAPIView(APIView):
    """APIView that renders engine errors as {"detail", "code", ...context}."""

    def handle_exception(self, exc):
        if isinstance(exc, AssignmentError):
            logger.info("Assignment request failed (%s): %s", exc.code, exc.message)
            return Response(exc.as_data(), status=exc.status_code)
        return super().handle_exception(exc)


class ManualAssignmentView(AssignmentAPIView):
    """
    Assign explicit instructor/course/section tuples.
    Used for both regular and common-course manual assignment.
    """
    permission_classes = [IsChairHeadOrCOC]

    @extend_schema(request=ManualAssignmentSerializer)
    def post(self, request):
        serializer = ManualAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        requests = [
            ManualRequest(
                instructor_id=item["instructorId"],
                course_id=item["courseId"],
                section=item["section"],
                lab_division=item["labDivision"],
                no_of_sections=item["NoOfSections"],
                assignment_reason=item["assignmentReason"],
            )
            for item in data["assignments"]
        ]
        result = ManualAllocator(
            data["year"], data["semester"], data["assignedBy"], data["program"], requests,
        ).run()
        return _allocation_response(result, "Courses assigned successfully")


class CommonAutoAssignmentView(AssignmentAPIView):
    """Least-loaded, location-aware assignment of common courses."""
    permission_classes = [IsCOC]

    @extend_schema(request=AutoAssignmentSerializer)
    def post(self, request):
        serializer = AutoAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = CommonCourseAllocator(
            data["year"], data["semester"], data["assignedBy"],
            courses=_course_requests(data["courses"]),
            instructors=data["instructors"],
        ).run()
        return _allocation_response(result, "Automatic assignment for common courses completed successfully.")


class ExtensionAutoAssignmentView(AssignmentAPIView):
    """Minimum-benefit assignment of extension courses."""
    permission_classes = [IsCOC]

    @extend_schema(request=AutoAssignmentSerializer)
    def post(self, request):
        serializer = AutoAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = ExtensionAllocator(
            data["year"], data["semester"], data["assignedBy"],
            courses=_course_requests(data["courses"]),
            instructors=data["instructors"],
        ).run()
        return _allocation_response(result, "Automatic assignment completed successfully!")


class SummerAutoAssignmentView(AssignmentAPIView):
    """Minimum-benefit assignment of summer courses."""
    permission_classes = [IsCOC]

    @extend_schema(request=SummerAssignmentSerializer)
    def post(self, request):
        serializer = SummerAssignmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = SummerAllocator(
            data["year"], data["assignedBy"],
            courses=_course_requests(data["courses"]),
            instructors=data["instructors"],
        ).run()
        return _allocation_response(result, "Automatic assignment completed successfully!")


class AutomaticAssignmentView(AssignmentAPIView):
    """
    GET: list records filtered by ?year=&semester=&program=&assignedBy=
    (assignedBy=COC also covers the four chairs); missing reasons are filled in.
    POST: run the preference-score assignment for the form of chair=assignedBy.
    """

    def get_permissions(self):
        if self.request.method == "POST":
            return [IsChairHeadOrCOC()]
        return super().get_permissions()

    @extend_schema(
        parameters=[
            OpenApiParameter("year", int, required=False),
            OpenApiParameter("semester", str, required=False),
            OpenApiParameter("program", str, required=False),
            OpenApiParameter("assignedBy", str, required=False),
        ],
        responses={200: ReasonedAssignmentSerializer(many=True)},
    )
    def get(self, request):
        params = request.query_params
        qs = filter_assignments(
            year=params.get("year"),
            semester=params.get("semester"),
            program=params.get("program"),
            assigned_by=params.get("assignedBy"),
        )
        return Response({"assignments": ReasonedAssignmentSerializer(qs, many=True).data})

    @extend_schema(request=PreferenceRunSerializer)
    def post(self, request):
        serializer = PreferenceRunSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        result = PreferenceScoreAllocator(data["year"], data["semester"], data["assignedBy"]).run()
        return _allocation_response(result, "Courses assigned successfully", include_fallback=True)


class AssignmentListView(AssignmentAPIView):
    """List every assignment record."""

    @extend_schema(responses={200: AssignmentSerializer(many=True)})
    def get(self, request):
        qs = Assignment.objects.prefetch_related("sub_assignments__course", "sub_assignments__instructor")
        return Response(AssignmentSerializer(qs, many=True).data)


class AssignmentDetailView(AssignmentAPIView):
    """One assignment record with its sub-assignments."""

    @extend_schema(responses={200: AssignmentSerializer})
    def get(self, request, assignment_id):
        return Response(AssignmentSerializer(get_assignment(assignment_id)).data)


class InstructorAssignmentsView(AssignmentAPIView):
    """Sub-assignments held by one instructor (by user id)."""

    @extend_schema(responses={200: InstructorSubAssignmentSerializer(many=True)})
    def get(self, request, instructor_id):
        qs = instructor_sub_assignments(instructor_id)
        return Response(InstructorSubAssignmentSerializer(qs, many=True).data)


class SubAssignmentDetailView(AssignmentAPIView):
    """Edit or remove one sub-assignment, keeping the workload ledger in step."""
    permission_classes = [IsChairHeadOrCOC]

    @extend_schema(request=SubAssignmentUpdateSerializer)
    def put(self, request, parent_id, sub_id):
        serializer = SubAssignmentUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        sub, change = update_sub_assignment(
            parent_id, sub_id,
            instructor_id=data.get("instructorId"),
            course_id=data.get("courseId"),
            lab_division=data.get("labDivision"),
            assignment_reason=data.get("assignmentReason"),
        )
        return Response({
            "message": "Assignment updated successfully",
            "assignment": SubAssignmentSerializer(sub).data,
            "workloadChanged": change,
        })

    def delete(self, request, parent_id, sub_id):
        delete_sub_assignment(parent_id, sub_id)
        return Response({"message": "Assignment deleted successfully"})
