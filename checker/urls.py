from django.urls import path

from . import views

api_urlpatterns = [
    path("check", views.PasswordCheckView.as_view(), name="password-check"),
    path(
        "requirements",
        views.PasswordRequirementsView.as_view(),
        name="password-requirements",
    ),
]

urlpatterns = [
    path("", views.PasswordCheckerPageView.as_view(), name="password-checker"),
]
