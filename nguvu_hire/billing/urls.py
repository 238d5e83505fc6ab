from django.urls import path

from . import views

app_name = 'billing'

urlpatterns = [
    path('pricing/', views.pricing_view, name='pricing'),
    path('plans/', views.plans_json, name='plans'),
    path('status/', views.subscription_status_json, name='status'),
    path('boost/', views.boost_post_view, name='boost_post'),
    path('checkout/', views.checkout_view, name='checkout'),
    path('payments/', views.my_payments, name='my_payments'),
    path('payments/<str:reference>/', views.payment_status, name='payment_status'),
]
