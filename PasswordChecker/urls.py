from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from checker.urls import api_urlpatterns as checker_api_urlpatterns


api_urlpatterns = [
    path("api/password/", include(checker_api_urlpatterns)),
]

urlpatterns = [
    # API Schema and Documentation
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "schema/swagger-ui/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "schema/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
    path("", include("checker.urls")),
]

urlpatterns += api_urlpatterns

handler404 = "checker.views.custom_404_view"
