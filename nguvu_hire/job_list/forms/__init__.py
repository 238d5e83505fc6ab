from .job_forms import ApplicationForm, ApplicationStatusForm, AvailabilityForm, JobForm

__all__ = ["ApplicationForm", "ApplicationStatusForm", "AvailabilityForm", "JobForm"]
