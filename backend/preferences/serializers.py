from rest_framework import serializers

from .models import PreferenceForm, PreferenceFormCourse, Preference, PreferenceItem


class PreferenceFormCourseSerializer(serializers.ModelSerializer):
    courseId = serializers.IntegerField(source="course_id", read_only=True)
    code = serializers.CharField(source="course.code", read_only=True)
    name = serializers.CharField(source="course.name", read_only=True)
    NoOfSections = serializers.IntegerField(source="no_of_sections", read_only=True)
    labDivision = serializers.CharField(source="lab_division", read_only=True)

    class Meta:
        model = PreferenceFormCourse
        fields = ["courseId", "code", "name", "section", "NoOfSections", "labDivision"]


class PreferenceFormSerializer(serializers.ModelSerializer):
    """Serializer for PreferenceForm model."""
    courses = PreferenceFormCourseSerializer(source="form_courses", many=True, read_only=True)
    maxPreferences = serializers.IntegerField(source="max_preferences", read_only=True)
    submissionStart = serializers.DateTimeField(source="submission_start", read_only=True)
    submissionEnd = serializers.DateTimeField(source="submission_end", read_only=True)

    class Meta:
        model = PreferenceForm
        fields = ["id", "chair", "year", "semester", "maxPreferences", "submissionStart", "submissionEnd", "courses"]


class PreferenceItemSerializer(serializers.Serializer):
    courseId = serializers.IntegerField(min_value=1)
    rank = serializers.IntegerField()


class PreferenceSubmitSerializer(serializers.Serializer):
    """
    Validates a ranked submission against its form.

    Items ranked 0 or below are dropped and the rest are renumbered 1..n in
    rank order before the allowlist and size checks run.
    """
    preferenceFormId = serializers.IntegerField(min_value=1)
    preferences = PreferenceItemSerializer(many=True)

    def validate_preferenceFormId(self, value):
        try:
            return PreferenceForm.objects.get(pk=value)
        except PreferenceForm.DoesNotExist:
            raise serializers.ValidationError(f"Preference form {value} does not exist.")

    def validate_preferences(self, value):
        return compact_ranks(value)

    def validate(self, attrs):
        form = attrs["preferenceFormId"]
        items = attrs["preferences"]
        allowed = form.course_ids()
        outside = [item["courseId"] for item in items if item["courseId"] not in allowed]
        if outside:
            raise serializers.ValidationError({
                "preferences": f"Courses {outside} are not offered on this preference form."
            })
        course_ids = [item["courseId"] for item in items]
        if len(set(course_ids)) != len(course_ids):
            raise serializers.ValidationError({"preferences": "Each course may be ranked only once."})
        if len(items) > form.max_preferences:
            raise serializers.ValidationError({
                "preferences": f"At most {form.max_preferences} preferences may be submitted."
            })
        attrs["form"] = attrs.pop("preferenceFormId")
        return attrs


class PreferenceFormQuerySerializer(serializers.Serializer):
    """Identifies one chair's form by ?year=&semester=&chair=."""
    year = serializers.IntegerField()
    semester = serializers.CharField()
    chair = serializers.CharField()


class PreferenceSerializer(serializers.ModelSerializer):
    instructorId = serializers.IntegerField(source="instructor_id", read_only=True)
    instructorName = serializers.SerializerMethodField()
    preferenceFormId = serializers.IntegerField(source="form_id", read_only=True)
    submittedAt = serializers.DateTimeField(source="submitted_at", read_only=True)
    preferences = serializers.SerializerMethodField()

    class Meta:
        model = Preference
        fields = ["id", "instructorId", "instructorName", "preferenceFormId", "submittedAt", "preferences"]

    def get_instructorName(self, obj):
        return obj.instructor.get_full_name() or obj.instructor.username

    def get_preferences(self, obj):
        return [{"courseId": item.course_id, "rank": item.rank} for item in obj.items.all()]


def compact_ranks(items):
    kept = sorted((item for item in items if item["rank"] > 0), key=lambda item: item["rank"])
    return [{"courseId": item["courseId"], "rank": index} for index, item in enumerate(kept, start=1)]
