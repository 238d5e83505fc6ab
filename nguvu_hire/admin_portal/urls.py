from django.urls import path

from . import views

app_name = "admin_portal"

urlpatterns = [
    path("", views.OverviewView.as_view(), name="overview"),
    path("users/", views.UserListView.as_view(), name="users"),
    path("users/<int:pk>/toggle-active/", views.user_toggle_active, name="user_toggle_active"),
    path("users/<int:pk>/delete/", views.user_delete, name="user_delete"),
    path("permissions/", views.PermissionsView.as_view(), name="permissions"),
    path("permissions/<int:pk>/role/", views.user_set_role, name="user_set_role"),
    path("posts/", views.posts_view, name="posts"),
    path("posts/<str:post_type>/<int:pk>/delete/", views.post_delete, name="post_delete"),
    path("ads/", views.AdListView.as_view(), name="ads"),
    path("ads/new/", views.AdCreateView.as_view(), name="ad_create"),
    path("ads/<int:pk>/edit/", views.AdUpdateView.as_view(), name="ad_edit"),
    path("ads/<int:pk>/toggle/", views.ad_toggle, name="ad_toggle"),
    path("ads/<int:pk>/delete/", views.ad_delete, name="ad_delete"),
    path("verifications/", views.VerificationQueueView.as_view(), name="verifications"),
    path("verifications/<int:pk>/approve/", views.verification_approve, name="verification_approve"),
    path("verifications/<int:pk>/reject/", views.verification_reject, name="verification_reject"),
    path("billing/", views.billing_view, name="billing"),
    path("billing/<int:pk>/complete/", views.payment_complete, name="payment_complete"),
    path("billing/<int:pk>/fail/", views.payment_fail, name="payment_fail"),
    path("messages/", views.messages_view, name="messages"),
    path("messages/<str:kind>/<int:pk>/delete/", views.message_delete, name="message_delete"),
    path("broadcast/", views.broadcast_view, name="broadcast"),
    path("reports/", views.reports_view, name="reports"),
    path("reports/export/", views.reports_export, name="reports_export"),
    path("audit-log/", views.AuditLogListView.as_view(), name="audit_log"),
]
