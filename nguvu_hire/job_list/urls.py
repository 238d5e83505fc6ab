from django.urls import path

from nguvu_hire.job_list.employers import views as employer_views
from nguvu_hire.job_list.user import views as user_views

app_name = 'job_list'

urlpatterns = [
    # ===== PUBLIC / CANDIDATE VIEWS =====
    path('browse/', user_views.browse_view, name='browse'),                                   # /jobs/browse/?tab=talent
    path('<int:job_id>/', user_views.job_detail_view, name='job_detail'),                     # /jobs/3/
    path('<int:job_id>/apply/', user_views.apply_to_job, name='apply_to_job'),                # /jobs/3/apply/
    path('talent/<int:availability_id>/', user_views.availability_detail_view, name='availability_detail'),
    path('talent/new/', user_views.post_availability, name='post_availability'),
    path('talent/<int:availability_id>/edit/', user_views.edit_availability, name='edit_availability'),
    path('talent/<int:availability_id>/delete/', user_views.delete_availability, name='delete_availability'),

    # ===== EMPLOYER VIEWS =====
    path('new/', employer_views.post_job, name='post_job'),
    path('<int:job_id>/edit/', employer_views.edit_job, name='edit_job'),
    path('<int:job_id>/delete/', employer_views.delete_job, name='delete_job'),
    path('applications/', employer_views.applications_view, name='applications'),
    path('applications/<int:application_id>/status/', employer_views.update_application_status, name='update_application_status'),
    path('applications/<int:application_id>/delete/', employer_views.delete_application, name='delete_application'),
]
