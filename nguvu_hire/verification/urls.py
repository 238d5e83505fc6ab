from django.urls import path

from . import views

app_name = 'verification'

urlpatterns = [
    path('', views.verification_home, name='home'),
    path('start/', views.start_view, name='start'),
    path('documents/', views.documents_view, name='documents'),
    path('documents/<int:document_id>/remove/', views.remove_document_view, name='remove_document'),
    path('submit/', views.submit_view, name='submit'),
]
