# preferences/views.py
from rest_framework import generics, status
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiParameter

from users.permissions import IsChairHeadOrCOC, IsInstructorRole
from .models import Preference, PreferenceForm
from .serializers import (
    PreferenceFormQuerySerializer, PreferenceFormSerializer, PreferenceSerializer, PreferenceSubmitSerializer,
)
from .services import PreferenceAlreadySubmitted, find_form, form_submissions, replace_preferences, submit_preferences


class PreferenceFormListView(generics.ListAPIView):
    """
    List preference forms (optionally filter by ?year=&semester=&chair=).
    """
    serializer_class = PreferenceFormSerializer

    def get_queryset(self):
        qs = PreferenceForm.objects.prefetch_related("form_courses__course")
        for param in ("year", "semester", "chair"):
            value = self.request.query_params.get(param)
            if value:
                qs = qs.filter(**{param: value})
        return qs


class PreferenceSubmitView(APIView):
    """
    Submit (POST) or replace (PUT) the current user's ranked course preferences.
    """
    permission_classes = [IsInstructorRole]

    @extend_schema(request=PreferenceSubmitSerializer, responses={201: PreferenceSerializer})
    def post(self, request):
        serializer = PreferenceSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            preference = submit_preferences(
                request.user,
                serializer.validated_data["form"],
                serializer.validated_data["preferences"],
            )
        except PreferenceAlreadySubmitted as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        return Response(
            {"message": "Preferences submitted successfully", "preference": PreferenceSerializer(preference).data},
            status=status.HTTP_201_CREATED,
        )

    @extend_schema(request=PreferenceSubmitSerializer, responses={200: PreferenceSerializer})
    def put(self, request):
        serializer = PreferenceSubmitSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            preference = replace_preferences(
                request.user,
                serializer.validated_data["form"],
                serializer.validated_data["preferences"],
            )
        except Preference.DoesNotExist:
            return Response(
                {"detail": "Preferences not found. Submit preferences first."},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response(
            {"message": "Preferences updated successfully", "preference": PreferenceSerializer(preference).data},
            status=status.HTTP_200_OK,
        )


FORM_QUERY_PARAMETERS = [
    OpenApiParameter("year", int, required=True),
    OpenApiParameter("semester", str, required=True),
    OpenApiParameter("chair", str, required=True),
]


def _requested_form(request):
    serializer = PreferenceFormQuerySerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    form = find_form(**serializer.validated_data)
    if form is None:
        raise NotFound("No preference form found for given criteria")
    return form


class PreferenceListView(APIView):
    """
    Every submission made against a chair's form, so the chair can review
    them before running the preference assignment.
    """
    permission_classes = [IsChairHeadOrCOC]

    @extend_schema(parameters=FORM_QUERY_PARAMETERS)
    def get(self, request):
        form = _requested_form(request)
        return Response({
            "preferenceForm": PreferenceFormSerializer(form).data,
            "preferences": PreferenceSerializer(form_submissions(form), many=True).data,
        })


class InstructorPreferenceView(APIView):
    """One instructor's submission for the form of ?year=&semester=&chair=."""

    @extend_schema(parameters=FORM_QUERY_PARAMETERS, responses={200: PreferenceSerializer})
    def get(self, request, instructor_id):
        form = _requested_form(request)
        preference = form_submissions(form).filter(instructor_id=instructor_id).first()
        if preference is None:
            raise NotFound("No preferences found.")
        return Response(PreferenceSerializer(preference).data)
