from django.urls import path

from . import views

app_name = 'hires'

urlpatterns = [
    path('', views.hire_requests, name='hire_requests'),
    path('sent/', views.sent_requests, name='sent_requests'),
    path('request/<int:availability_id>/', views.send_hire_request, name='send_hire_request'),
    path('<int:hire_id>/respond/', views.respond_to_hire, name='respond_to_hire'),
    path('<int:hire_id>/delete/', views.delete_hire, name='delete_hire'),
]
