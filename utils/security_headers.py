from django.conf import settings


class SecurityHeadersMiddleware:
    """
    Adds HTTP security headers to every response.

    Responses under the checker paths also get ``Cache-Control: no-store``
    since they echo or describe a typed password.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.no_store_paths = settings.PASSWORD_CHECKER.get("NO_STORE_PATHS", [])

    def __call__(self, request):
        response = self.get_response(request)

        # Permissions Policy (restrict browser features)
        response["Permissions-Policy"] = (
            "camera=(), microphone=(), geolocation=(), "
            "fullscreen=(self), payment=()"
        )

        # Cross-Origin protections
        response["Cross-Origin-Opener-Policy"] = "same-origin"
        response["Cross-Origin-Resource-Policy"] = "same-origin"

        if self._is_no_store_path(request.path):
            response["Cache-Control"] = "no-store"
            response["Pragma"] = "no-cache"

        return response

    def _is_no_store_path(self, path):
        for prefix in self.no_store_paths:
            if prefix == "/" and path == "/":
                return True
            if prefix != "/" and path.startswith(prefix):
                return True
        return False
