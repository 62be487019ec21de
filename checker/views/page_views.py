import logging

from django.http import JsonResponse
from django.shortcuts import render
from django.views import View

from ..forms import PasswordCheckForm
from ..utils.presentation import STATUS_COLORS, build_checklist

logger = logging.getLogger(__name__)


class PasswordCheckerPageView(View):
    """
    The single checker screen.

    GET shows the neutral state. POST re-renders with the statuses for the
    submitted value, so the page still works with scripts disabled.
    """

    template_name = "checker/index.html"

    def get(self, request):
        return self._render(request, PasswordCheckForm(), "")

    def post(self, request):
        form = PasswordCheckForm(request.POST)
        if not form.is_valid():
            logger.info("Rejected checker form post: %s", list(form.errors))
            return self._render(request, form, "", status=400)
        return self._render(request, form, form.cleaned_data["password"])

    def _render(self, request, form, candidate, status=200):
        context = {
            "form": form,
            "checklist": build_checklist(candidate),
            "status_colors": {
                status_key.value: color for status_key, color in STATUS_COLORS.items()
            },
        }
        return render(request, self.template_name, context, status=status)


def custom_404_view(request, exception):
    response_data = {"error": "The requested resource was not found."}
    return JsonResponse(response_data, status=404)
