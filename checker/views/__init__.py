from .check_views import PasswordCheckView, PasswordRequirementsView
from .page_views import PasswordCheckerPageView, custom_404_view
