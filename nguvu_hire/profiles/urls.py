from django.urls import path

from . import views

app_name = "profiles"

urlpatterns = [
    path('', views.my_profile, name='my_profile'),
    path('onboarding/', views.onboarding, name='onboarding'),
    path('edit/', views.edit_profile, name='edit_profile'),
    path('picture/remove/', views.remove_profile_picture, name='remove_profile_picture'),
    path('<int:user_id>/', views.public_profile, name='public_profile'),
]
