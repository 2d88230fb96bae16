# backend/course_offering/urls.py
from django.contrib import admin
from django.urls import include, path
from django.http import JsonResponse
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView


def health_view(request):
    return JsonResponse({"status": "ok"})


urlpatterns = [
    # HEALTH
    path("health/", health_view, name="health"),

    # DJANGO ADMIN
    path("admin/", admin.site.urls),

    # AUTH
    path("api/auth/token/", TokenObtainPairView.as_view(), name="token_obtain_pair"),
    path("api/auth/token/refresh/", TokenRefreshView.as_view(), name="token_refresh"),

    # API DOCS
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    # APP APIs
    path("api/", include([
        path("assignments/", include(("assignments.urls", "assignments"), namespace="assignments")),
        path("preferences/", include(("preferences.urls", "preferences"), namespace="preferences")),
    ])),
]
