from .password_check import (
    PasswordCheckResultSerializer,
    PasswordCheckSerializer,
    RequirementSerializer,
)
