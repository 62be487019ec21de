import logging

from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from ..serializers import (
    PasswordCheckResultSerializer,
    PasswordCheckSerializer,
    RequirementSerializer,
)
from ..utils.password_validator import get_password_requirements
from ..utils.presentation import build_checklist

logger = logging.getLogger("checker.api")


class PasswordCheckView(APIView):
    """
    Evaluate a candidate password against every rule.

    Called by the checker screen on each keystroke. The password is
    never stored or logged.
    """

    permission_classes = [permissions.AllowAny]

    @extend_schema(
        summary="Check password rules",
        description="""Evaluate a candidate password against the checker rules.

        **Rules:**
        - `length`: at least 8 characters
        - `capital`: at least one capital letter (A-Z)
        - `number`: the whole password is one or more letters-digits-letters blocks

        An empty password is reported with `neutral` statuses and every rule false.
        """,
        tags=["Password Checker"],
        request=PasswordCheckSerializer,
        responses={
            200: PasswordCheckResultSerializer,
            400: {"description": "Malformed request body"},
        },
        examples=[
            OpenApiExample(
                "Check Request",
                value={"password": "Passw0rd"},
                request_only=True,
            ),
            OpenApiExample(
                "Valid Response",
                value={
                    "is_valid": True,
                    "status": "valid",
                    "items": [
                        {
                            "rule": "length",
                            "text": "Must contain at least 8 characters.",
                            "is_valid": True,
                            "status": "valid",
                        },
                    ],
                },
                response_only=True,
            ),
        ],
    )
    def post(self, request):
        serializer = PasswordCheckSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        checklist = build_checklist(serializer.validated_data["password"])
        logger.debug(
            "Password checked: %s",
            ", ".join(
                f"{item['rule']}={item['is_valid']}" for item in checklist["items"]
            ),
        )
        return Response(checklist, status=status.HTTP_200_OK)


class PasswordRequirementsView(APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        summary="List password rules",
        tags=["Password Checker"],
        responses={200: RequirementSerializer(many=True)},
    )
    def get(self, request):
        return Response(get_password_requirements(), status=status.HTTP_200_OK)
