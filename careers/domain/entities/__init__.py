# Domain Entities
from .application import JobApplication, ApplicationStatus, utc_now
from .job_posting import JobPosting

__all__ = ["JobApplication", "ApplicationStatus", "JobPosting", "utc_now"]
