from django.conf import settings
from rest_framework import serializers

from checker.utils.password_validator import Rule
from checker.utils.presentation import Status


def _max_password_length():
    return settings.PASSWORD_CHECKER.get("MAX_PASSWORD_LENGTH", 256)


class PasswordCheckSerializer(serializers.Serializer):
    password = serializers.CharField(
        allow_blank=True,
        trim_whitespace=False,
        write_only=True,
        default="",
    )

    def validate_password(self, value):
        limit = _max_password_length()
        if len(value) > limit:
            raise serializers.ValidationError(
                f"Ensure this field has no more than {limit} characters."
            )
        return value


class RequirementSerializer(serializers.Serializer):
    rule = serializers.ChoiceField(choices=[rule.value for rule in Rule])
    text = serializers.CharField()


class ChecklistItemSerializer(RequirementSerializer):
    is_valid = serializers.BooleanField()
    status = serializers.ChoiceField(choices=[status.value for status in Status])


class PasswordCheckResultSerializer(serializers.Serializer):
    is_valid = serializers.BooleanField()
    status = serializers.ChoiceField(choices=[status.value for status in Status])
    items = ChecklistItemSerializer(many=True)
