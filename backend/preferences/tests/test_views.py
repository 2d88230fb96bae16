"""
Test views for the preferences app.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from courses.factory import CourseFactory
from preferences.factory import PreferenceFactory, PreferenceFormCourseFactory, PreferenceFormFactory
from preferences.models import Preference
from users.factory import ChairHeadUserFactory, InstructorUserFactory, UserFactory


class PreferenceSubmitViewTestCase(APITestCase):
    """Test cases for submitting preferences."""

    def setUp(self):
        self.lecturer = InstructorUserFactory()
        self.form = PreferenceFormFactory(max_preferences=2)
        self.c1 = PreferenceFormCourseFactory(form=self.form).course
        self.c2 = PreferenceFormCourseFactory(form=self.form).course
        self.c3 = PreferenceFormCourseFactory(form=self.form).course
        self.url = reverse("preferences:submit")
        self.client.force_authenticate(user=self.lecturer)

    def payload(self, *items):
        return {
            "preferenceFormId": self.form.pk,
            "preferences": [{"courseId": course.pk, "rank": rank} for course, rank in items],
        }

    def test_submit(self):
        """Test a first submission with compacted ranks."""
        response = self.client.post(self.url, self.payload((self.c1, 3), (self.c2, 7)), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["message"], "Preferences submitted successfully")
        self.assertEqual(
            response.data["preference"]["preferences"],
            [{"courseId": self.c1.pk, "rank": 1}, {"courseId": self.c2.pk, "rank": 2}],
        )

    def test_second_submission_is_rejected(self):
        """Test POST twice for the same form."""
        self.client.post(self.url, self.payload((self.c1, 1)), format="json")
        response = self.client.post(self.url, self.payload((self.c2, 1)), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["detail"], "Preferences already submitted.")

    def test_replace(self):
        """Test PUT replaces the ranked items."""
        self.client.post(self.url, self.payload((self.c1, 1)), format="json")
        response = self.client.put(self.url, self.payload((self.c2, 1), (self.c3, 2)), format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        preference = Preference.objects.get(instructor=self.lecturer, form=self.form)
        self.assertEqual(list(preference.items.values_list("course_id", flat=True)), [self.c2.pk, self.c3.pk])

    def test_replace_without_submission(self):
        """Test PUT before POST."""
        response = self.client.put(self.url, self.payload((self.c1, 1)), format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_course_not_on_form(self):
        """Test ranking a course the form does not offer."""
        response = self.client.post(self.url, self.payload((CourseFactory(), 1)), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("preferences", response.data)

    def test_duplicate_course(self):
        """Test ranking the same course twice."""
        response = self.client.post(self.url, self.payload((self.c1, 1), (self.c1, 2)), format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_too_many_preferences(self):
        """Test the form's max_preferences."""
        response = self.client.post(
            self.url, self.payload((self.c1, 1), (self.c2, 2), (self.c3, 3)), format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_user_without_role(self):
        """Test users without a teaching role are forbidden."""
        self.client.force_authenticate(user=UserFactory())
        response = self.client.post(self.url, self.payload((self.c1, 1)), format="json")
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)


class PreferenceFormListViewTestCase(APITestCase):
    """Test cases for listing preference forms."""

    def test_filter_by_chair(self):
        """Test ?chair= filtering."""
        PreferenceFormFactory(chair="Programming")
        PreferenceFormFactory(chair="Database")
        self.client.force_authenticate(user=InstructorUserFactory())

        response = self.client.get(reverse("preferences:form-list"), {"chair": "Database"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([form["chair"] for form in response.data], ["Database"])


class PreferenceReviewViewTestCase(APITestCase):
    """Test cases for reviewing submissions of a form."""

    def setUp(self):
        self.form = PreferenceFormFactory(chair="Programming", year=2024, semester="Regular 1")
        self.course = PreferenceFormCourseFactory(form=self.form).course
        self.lecturer = InstructorUserFactory()
        self.preference = PreferenceFactory(instructor=self.lecturer, form=self.form, items=[(self.course, 1)])
        PreferenceFactory(form=PreferenceFormFactory(chair="Database"))
        self.params = {"year": 2024, "semester": "Regular 1", "chair": "Programming"}
        self.client.force_authenticate(user=ChairHeadUserFactory())

    def test_list_submissions_of_form(self):
        """Test a chair head sees every submission of their form and nothing else."""
        response = self.client.get(reverse("preferences:list"), self.params)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["preferenceForm"]["id"], self.form.pk)
        self.assertEqual([p["id"] for p in response.data["preferences"]], [self.preference.pk])
        self.assertEqual(response.data["preferences"][0]["preferences"], [{"courseId": self.course.pk, "rank": 1}])

    def test_list_unknown_form(self):
        """Test criteria that match no form."""
        response = self.client.get(reverse("preferences:list"), dict(self.params, chair="Networking"))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_missing_criteria(self):
        """Test year, semester and chair are required."""
        response = self.client.get(reverse("preferences:list"), {"chair": "Programming"})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("year", response.data)

    def test_list_forbidden_for_instructor(self):
        """Test instructors cannot review other submissions."""
        self.client.force_authenticate(user=self.lecturer)
        response = self.client.get(reverse("preferences:list"), self.params)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_instructor_submission(self):
        """Test fetching one instructor's submission for a form."""
        url = reverse("preferences:instructor", args=[self.lecturer.pk])

        response = self.client.get(url, self.params)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["instructorId"], self.lecturer.pk)
        self.assertEqual(response.data["preferenceFormId"], self.form.pk)

    def test_instructor_without_submission(self):
        """Test an instructor who has not submitted."""
        url = reverse("preferences:instructor", args=[InstructorUserFactory().pk])
        response = self.client.get(url, self.params)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
