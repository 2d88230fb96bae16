from rest_framework import serializers

from courses.models import AssignedBy, LabDivision, Program, Semester
from .models import Assignment, SubAssignment
from .services import fallback_reason


class SubAssignmentSerializer(serializers.ModelSerializer):
    """Serializer for SubAssignment model, camelCase as the clients expect."""
    instructorId = serializers.IntegerField(source="instructor_id", read_only=True)
    instructorName = serializers.SerializerMethodField()
    courseId = serializers.IntegerField(source="course_id", read_only=True)
    courseCode = serializers.CharField(source="course.code", read_only=True)
    courseName = serializers.CharField(source="course.name", read_only=True)
    NoOfSections = serializers.IntegerField(source="no_of_sections", read_only=True)
    labDivision = serializers.CharField(source="lab_division", read_only=True)
    preferenceRank = serializers.IntegerField(source="preference_rank", read_only=True)
    experienceYears = serializers.IntegerField(source="experience_years", read_only=True)
    assignmentReason = serializers.CharField(source="assignment_reason", read_only=True)

    class Meta:
        model = SubAssignment
        fields = [
            "id", "instructorId", "instructorName", "courseId", "courseCode", "courseName",
            "section", "NoOfSections", "labDivision", "workload", "score",
            "preferenceRank", "experienceYears", "assignmentReason",
        ]

    def get_instructorName(self, obj):
        return obj.instructor.get_full_name()


class InstructorSubAssignmentSerializer(SubAssignmentSerializer):
    assignmentId = serializers.IntegerField(source="assignment_id", read_only=True)
    year = serializers.IntegerField(source="assignment.year", read_only=True)
    semester = serializers.CharField(source="assignment.semester", read_only=True)
    program = serializers.CharField(source="assignment.program", read_only=True)

    class Meta(SubAssignmentSerializer.Meta):
        fields = ["assignmentId", "year", "semester", "program"] + SubAssignmentSerializer.Meta.fields


class AssignmentSerializer(serializers.ModelSerializer):
    """Serializer for Assignment model with its sub-assignments."""
    assignedBy = serializers.CharField(source="assigned_by", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    assignments = SubAssignmentSerializer(source="sub_assignments", many=True, read_only=True)

    class Meta:
        model = Assignment
        fields = ["id", "year", "semester", "program", "assignedBy", "createdAt", "assignments"]


class ReasonedSubAssignmentSerializer(SubAssignmentSerializer):
    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not data["assignmentReason"]:
            data["assignmentReason"] = fallback_reason(instance)
        return data


class ReasonedAssignmentSerializer(AssignmentSerializer):
    assignments = ReasonedSubAssignmentSerializer(source="sub_assignments", many=True, read_only=True)


# ---- Requests -------------------------------------------------------------------

class ManualItemSerializer(serializers.Serializer):
    instructorId = serializers.IntegerField(min_value=1)
    courseId = serializers.IntegerField(min_value=1)
    section = serializers.CharField(required=False, allow_blank=True, default="")
    NoOfSections = serializers.IntegerField(required=False, min_value=1, default=1)
    labDivision = serializers.ChoiceField(choices=LabDivision.choices, required=False, default=LabDivision.NO)
    assignmentReason = serializers.CharField(required=False, allow_blank=True, default="")


class ManualAssignmentSerializer(serializers.Serializer):
    assignments = ManualItemSerializer(many=True)
    year = serializers.IntegerField(min_value=1)
    semester = serializers.ChoiceField(choices=Semester.choices)
    program = serializers.ChoiceField(choices=Program.choices)
    assignedBy = serializers.ChoiceField(choices=AssignedBy.choices)


class CourseItemSerializer(serializers.Serializer):
    courseId = serializers.IntegerField(min_value=1)
    section = serializers.CharField(required=False, allow_blank=True, default="")
    NoOfSections = serializers.IntegerField(required=False, min_value=1, default=1)
    labDivision = serializers.ChoiceField(choices=LabDivision.choices, required=False, default=LabDivision.NO)


class AutoAssignmentSerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=1)
    semester = serializers.ChoiceField(choices=Semester.choices)
    assignedBy = serializers.ChoiceField(choices=AssignedBy.choices)
    instructors = serializers.ListField(child=serializers.IntegerField(min_value=1))
    courses = CourseItemSerializer(many=True)


class SummerAssignmentSerializer(AutoAssignmentSerializer):
    semester = None


class PreferenceRunSerializer(serializers.Serializer):
    year = serializers.IntegerField(min_value=1)
    semester = serializers.ChoiceField(choices=Semester.choices)
    assignedBy = serializers.ChoiceField(choices=AssignedBy.choices)


class SubAssignmentUpdateSerializer(serializers.Serializer):
    instructorId = serializers.IntegerField(required=False, min_value=1)
    courseId = serializers.IntegerField(required=False, min_value=1)
    labDivision = serializers.ChoiceField(choices=LabDivision.choices, required=False)
    assignmentReason = serializers.CharField(required=False, allow_blank=True)
