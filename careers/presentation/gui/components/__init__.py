# GUI Components
from .job_description import create_job_description
from .application_form import ApplicationFormPanel
from .admin_login import AdminLoginPanel
from .admin_dashboard import AdminDashboard

__all__ = [
    "create_job_description",
    "ApplicationFormPanel",
    "AdminLoginPanel",
    "AdminDashboard",
]
