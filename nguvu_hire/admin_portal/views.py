import csv
from datetime import timedelta

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth.decorators import login_required
from django.contrib.auth.models import User
from django.core.paginator import Paginator
from django.db.models import Count, Q
from django.db.models.functions import TruncMonth
from django.http import HttpResponse, HttpResponseForbidden
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse_lazy
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.generic import CreateView, ListView, UpdateView

from nguvu_hire.ads.models import Ad
from nguvu_hire.billing.models import Payment, UserSubscription
from nguvu_hire.billing.services.payments import PaymentError, complete_payment, fail_payment
from nguvu_hire.dashboard.models import Notification
from nguvu_hire.dashboard.services.notifications import notify
from nguvu_hire.hires.models import Hire
from nguvu_hire.job_list.models import Application, Availability, Job
from nguvu_hire.profiles.models import ROLE_ADMIN, ROLE_CHOICES, Profile
from nguvu_hire.verification.models import VerificationRequest
from nguvu_hire.verification.services import VerificationError, approve_request, reject_request

from .forms import AdForm, BroadcastForm, ReviewNotesForm, RoleForm
from .models import AuditLog


def _log_action(actor, action, obj, metadata=None):
    AuditLog.objects.create(
        actor=actor,
        action=action,
        object_type=obj.__class__.__name__,
        object_id=str(obj.pk),
        object_repr=str(obj)[:255],
        metadata=metadata or {},
    )


class StaffRequiredMixin:
    @method_decorator(staff_member_required)
    def dispatch(self, request, *args, **kwargs):
        return super().dispatch(request, *args, **kwargs)


def _month_starts(count=6):
    """First day of each of the last `count` months, oldest first."""
    today = timezone.localdate()
    year, month = today.year, today.month
    starts = []
    for _ in range(count):
        starts.append(today.replace(year=year, month=month, day=1))
        month -= 1
        if month == 0:
            month, year = 12, year - 1
    return list(reversed(starts))


def _monthly_counts(qs, field, starts):
    rows = (
        qs.filter(**{f"{field}__date__gte": starts[0]})
        .annotate(month=TruncMonth(field))
        .values("month")
        .annotate(count=Count("id"))
    )
    by_month = {}
    for row in rows:
        month = row["month"]
        if month is None:
            continue
        key = month.date() if hasattr(month, "date") else month
        by_month[key.replace(day=1)] = row["count"]
    return [by_month.get(start, 0) for start in starts]


def _totals():
    return {
        "users": User.objects.count(),
        "jobs": Job.objects.count(),
        "availabilities": Availability.objects.count(),
        "applications": Application.objects.count(),
        "hires": Hire.objects.count(),
        "active_ads": Ad.objects.filter(is_active=True).count(),
        "pending_verifications": VerificationRequest.objects.filter(
            status=VerificationRequest.STATUS_UNDER_REVIEW
        ).count(),
    }


# =========================
# Overview
# =========================
class OverviewView(StaffRequiredMixin, View):
    template_name = "admin_portal/overview.html"

    def get(self, request):
        role_rows = Profile.objects.values("role").annotate(count=Count("id"))
        by_role = {row["role"]: row["count"] for row in role_rows}
        context = {
            "totals": _totals(),
            "users_by_role": [(label, by_role.get(value, 0)) for value, label in ROLE_CHOICES],
            "recent_jobs": Job.objects.select_related("created_by__profile").order_by("-created_at")[:5],
            "recent_availabilities": Availability.objects.select_related("created_by__profile").order_by("-created_at")[:5],
        }
        return render(request, self.template_name, context)


# =========================
# Users
# =========================
class UserListView(StaffRequiredMixin, ListView):
    model = User
    template_name = "admin_portal/users_list.html"
    context_object_name = "users"
    paginate_by = 20

    def get_queryset(self):
        qs = User.objects.select_related("profile").order_by("-date_joined")
        q = (self.request.GET.get("q") or "").strip()
        if q:
            qs = qs.filter(
                Q(username__icontains=q)
                | Q(email__icontains=q)
                | Q(first_name__icontains=q)
                | Q(last_name__icontains=q)
                | Q(profile__first_name__icontains=q)
                | Q(profile__last_name__icontains=q)
                | Q(profile__company_name__icontains=q)
                | Q(profile__username__icontains=q)
            )
        role = (self.request.GET.get("role") or "").strip()
        if role:
            qs = qs.filter(profile__role=role)
        country = (self.request.GET.get("country") or "").strip()
        if country:
            qs = qs.filter(profile__country__iexact=country)
        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["q"] = self.request.GET.get("q", "")
        context["role"] = self.request.GET.get("role", "")
        context["country"] = self.request.GET.get("country", "")
        context["role_choices"] = ROLE_CHOICES
        context["country_stats"] = (
            Profile.objects.exclude(country="")
            .values("country")
            .annotate(count=Count("id"))
            .order_by("-count", "country")
        )
        return context


@login_required
@staff_member_required
def user_toggle_active(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    user = get_object_or_404(User.objects.select_related("profile"), pk=pk)
    if user == request.user:
        messages.error(request, "You can't deactivate your own account.")
        return redirect("admin_portal:users")
    profile = user.profile
    profile.is_active = not profile.is_active
    profile.save(update_fields=["is_active", "updated_at"])
    user.is_active = profile.is_active
    user.save(update_fields=["is_active"])
    _log_action(request.user, "update", user, {"is_active": user.is_active})
    messages.success(request, "User status updated.")
    return redirect("admin_portal:users")


@login_required
@staff_member_required
def user_delete(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    user = get_object_or_404(User, pk=pk)
    if user == request.user or user.is_superuser:
        messages.error(request, "This account can't be deleted here.")
        return redirect("admin_portal:users")
    _log_action(request.user, "delete", user, {"username": user.username})
    # jobs, availabilities, applications and hires cascade with the user
    user.delete()
    messages.success(request, "User deleted.")
    return redirect("admin_portal:users")


# =========================
# Permissions
# =========================
class PermissionsView(UserListView):
    template_name = "admin_portal/permissions.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["role_form"] = RoleForm()
        return context


@login_required
@staff_member_required
def user_set_role(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    user = get_object_or_404(User.objects.select_related("profile"), pk=pk)
    form = RoleForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Invalid role.")
        return redirect("admin_portal:permissions")

    profile = user.profile
    old_role = profile.role
    profile.role = form.cleaned_data["role"]
    if profile.role != "employer":
        profile.employer_type = ""
    profile.save(update_fields=["role", "employer_type", "updated_at"])
    if not user.is_superuser:
        user.is_staff = profile.role == ROLE_ADMIN
        user.save(update_fields=["is_staff"])
    _log_action(request.user, "role", user, {"from": old_role, "to": profile.role})
    messages.success(request, f"{profile.display_name} is now {profile.get_role_display()}.")
    return redirect("admin_portal:permissions")


# =========================
# Posts
# =========================
POST_SOURCES = {
    "job": (Job, "title"),
    "availability": (Availability, "desired_job"),
}


class PostRows:
    """
    Jobs and availabilities newest first, as one sliceable sequence for Paginator.
    A slice reads at most `stop` rows from each table.
    """

    def __init__(self, post_types):
        self.querysets = {
            post_type: POST_SOURCES[post_type][0].objects.select_related("created_by__profile").order_by("-created_at", "-pk")
            for post_type in post_types
        }

    def count(self):
        return sum(qs.count() for qs in self.querysets.values())

    def __getitem__(self, index):
        if not isinstance(index, slice):
            raise TypeError("PostRows only supports slicing")
        start, stop = index.start or 0, index.stop
        rows = []
        for post_type, qs in self.querysets.items():
            title_field = POST_SOURCES[post_type][1]
            for obj in qs[:stop]:
                rows.append({"type": post_type, "obj": obj, "title": getattr(obj, title_field), "created_at": obj.created_at})
        rows.sort(key=lambda row: (row["created_at"], row["obj"].pk, row["type"]), reverse=True)
        return rows[start:stop]


@login_required
@staff_member_required
def posts_view(request):
    post_type = (request.GET.get("type") or "").strip()
    if post_type not in POST_SOURCES:
        post_type = ""
    rows = PostRows([post_type] if post_type else list(POST_SOURCES))
    page_obj = Paginator(rows, 25).get_page(request.GET.get("page"))
    return render(request, "admin_portal/posts.html", {
        "page_obj": page_obj,
        "post_type": post_type,
    })


@login_required
@staff_member_required
def post_delete(request, post_type, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    model = {"job": Job, "availability": Availability}.get(post_type)
    if model is None:
        return HttpResponseForbidden()
    post = get_object_or_404(model, pk=pk)
    _log_action(request.user, "delete", post)
    post.delete()
    messages.success(request, "Post deleted.")
    return redirect("admin_portal:posts")


# =========================
# Ads
# =========================
class AdListView(StaffRequiredMixin, ListView):
    model = Ad
    template_name = "admin_portal/ads_list.html"
    context_object_name = "ads"
    paginate_by = 20


class AdCreateView(StaffRequiredMixin, CreateView):
    model = Ad
    form_class = AdForm
    template_name = "admin_portal/ad_form.html"
    success_url = reverse_lazy("admin_portal:ads")

    def form_valid(self, form):
        response = super().form_valid(form)
        _log_action(self.request.user, "create", self.object)
        messages.success(self.request, "Ad created.")
        return response


class AdUpdateView(StaffRequiredMixin, UpdateView):
    model = Ad
    form_class = AdForm
    template_name = "admin_portal/ad_form.html"
    success_url = reverse_lazy("admin_portal:ads")

    def form_valid(self, form):
        response = super().form_valid(form)
        _log_action(self.request.user, "update", self.object)
        messages.success(self.request, "Ad updated.")
        return response


@login_required
@staff_member_required
def ad_toggle(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    ad = get_object_or_404(Ad, pk=pk)
    ad.is_active = not ad.is_active
    ad.save(update_fields=["is_active", "updated_at"])
    _log_action(request.user, "update", ad, {"is_active": ad.is_active})
    return redirect("admin_portal:ads")


@login_required
@staff_member_required
def ad_delete(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    ad = get_object_or_404(Ad, pk=pk)
    _log_action(request.user, "delete", ad)
    ad.delete()
    messages.success(request, "Ad deleted.")
    return redirect("admin_portal:ads")


# =========================
# Verifications
# =========================
class VerificationQueueView(StaffRequiredMixin, ListView):
    model = VerificationRequest
    template_name = "admin_portal/verifications.html"
    context_object_name = "requests"
    paginate_by = 20

    def get_queryset(self):
        status = self.request.GET.get("status", VerificationRequest.STATUS_UNDER_REVIEW)
        qs = VerificationRequest.objects.select_related("user__profile", "payment").prefetch_related("documents")
        if status:
            qs = qs.filter(status=status)
        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["status"] = self.request.GET.get("status", VerificationRequest.STATUS_UNDER_REVIEW)
        context["status_choices"] = VerificationRequest.STATUS_CHOICES
        context["notes_form"] = ReviewNotesForm()
        return context


@login_required
@staff_member_required
def verification_approve(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    vrequest = get_object_or_404(VerificationRequest.objects.select_related("user__profile"), pk=pk)
    form = ReviewNotesForm(request.POST)
    notes = form.cleaned_data["notes"] if form.is_valid() else ""
    try:
        approve_request(vrequest, notes)
    except VerificationError as exc:
        messages.error(request, exc.message)
        return redirect("admin_portal:verifications")
    _log_action(request.user, "approve", vrequest, {"note": notes})
    messages.success(request, f"{vrequest.user.profile.display_name} is now verified.")
    return redirect("admin_portal:verifications")


@login_required
@staff_member_required
def verification_reject(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    vrequest = get_object_or_404(VerificationRequest.objects.select_related("user__profile"), pk=pk)
    form = ReviewNotesForm(request.POST)
    notes = form.cleaned_data["notes"] if form.is_valid() else ""
    try:
        reject_request(vrequest, notes)
    except VerificationError as exc:
        messages.error(request, exc.message)
        return redirect("admin_portal:verifications")
    _log_action(request.user, "reject", vrequest, {"reason": notes})
    messages.success(request, "Verification rejected.")
    return redirect("admin_portal:verifications")


# =========================
# Billing
# =========================
@login_required
@staff_member_required
def billing_view(request):
    status = (request.GET.get("status") or "").strip()
    payments = Payment.objects.select_related("user__profile", "plan")
    if status:
        payments = payments.filter(status=status)
    page_obj = Paginator(payments, 25).get_page(request.GET.get("page"))
    subscriptions = (
        UserSubscription.objects.filter(status=UserSubscription.STATUS_ACTIVE)
        .select_related("user__profile", "plan")
        .order_by("-started_at")
    )
    return render(request, "admin_portal/billing.html", {
        "page_obj": page_obj,
        "status": status,
        "status_choices": Payment.STATUS_CHOICES,
        "subscriptions": subscriptions,
    })


@login_required
@staff_member_required
def payment_complete(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    payment = get_object_or_404(Payment, pk=pk)
    try:
        payment = complete_payment(payment)
    except PaymentError as exc:
        messages.error(request, exc.message)
        return redirect("admin_portal:billing")
    _log_action(request.user, "payment", payment, {"status": payment.status})
    messages.success(request, f"Payment {payment.reference} completed.")
    return redirect("admin_portal:billing")


@login_required
@staff_member_required
def payment_fail(request, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    payment = get_object_or_404(Payment, pk=pk)
    reason = (request.POST.get("reason") or "").strip()
    try:
        payment = fail_payment(payment, reason)
    except PaymentError as exc:
        messages.error(request, exc.message)
        return redirect("admin_portal:billing")
    _log_action(request.user, "payment", payment, {"status": payment.status, "reason": reason})
    messages.success(request, f"Payment {payment.reference} marked failed.")
    return redirect("admin_portal:billing")


# =========================
# Messages
# =========================
@login_required
@staff_member_required
def messages_view(request):
    stream = []
    for hire in Hire.objects.select_related("employer__profile", "job_seeker__profile")[:100]:
        stream.append({"kind": "hire", "obj": hire, "created_at": hire.created_at})
    for note in Notification.objects.select_related("user__profile")[:100]:
        stream.append({"kind": "notification", "obj": note, "created_at": note.created_at})
    stream.sort(key=lambda row: row["created_at"], reverse=True)
    page_obj = Paginator(stream, 30).get_page(request.GET.get("page"))
    return render(request, "admin_portal/messages.html", {"page_obj": page_obj})


@login_required
@staff_member_required
def message_delete(request, kind, pk):
    if request.method != "POST":
        return HttpResponseForbidden()
    model = {"hire": Hire, "notification": Notification}.get(kind)
    if model is None:
        return HttpResponseForbidden()
    obj = get_object_or_404(model, pk=pk)
    _log_action(request.user, "delete", obj)
    obj.delete()
    messages.success(request, "Message deleted.")
    return redirect("admin_portal:messages")


# =========================
# Broadcast
# =========================
@login_required
@staff_member_required
def broadcast_view(request):
    if request.method == "POST":
        form = BroadcastForm(request.POST)
        if form.is_valid():
            target = form.cleaned_data["target"]
            recipients = User.objects.filter(is_active=True)
            if target != "all":
                recipients = recipients.filter(profile__role=target)
            sent = 0
            for user in recipients:
                if notify(user, form.cleaned_data["title"], form.cleaned_data["message"], type="system"):
                    sent += 1
            AuditLog.objects.create(
                actor=request.user,
                action="broadcast",
                object_type="Notification",
                object_id=target,
                object_repr=form.cleaned_data["title"][:255],
                metadata={"target": target, "sent": sent},
            )
            messages.success(request, f"Broadcast sent to {sent} user(s).")
            return redirect("admin_portal:broadcast")
    else:
        form = BroadcastForm()
    return render(request, "admin_portal/broadcast.html", {"form": form})


# =========================
# Reports
# =========================
def _report_rows():
    starts = _month_starts(6)
    users = _monthly_counts(User.objects.all(), "date_joined", starts)
    jobs = _monthly_counts(Job.objects.all(), "created_at", starts)
    availabilities = _monthly_counts(Availability.objects.all(), "created_at", starts)
    return [
        {"month": start, "users": u, "jobs": j, "availabilities": a}
        for start, u, j, a in zip(starts, users, jobs, availabilities)
    ]


@login_required
@staff_member_required
def reports_view(request):
    return render(request, "admin_portal/reports.html", {
        "totals": _totals(),
        "monthly": _report_rows(),
    })


@login_required
@staff_member_required
def reports_export(request):
    rows = [["month", "new_users", "new_jobs", "new_availabilities"]]
    for row in _report_rows():
        rows.append([row["month"].strftime("%Y-%m"), row["users"], row["jobs"], row["availabilities"]])
    rows.append([])
    rows.append(["metric", "total"])
    for key, value in _totals().items():
        rows.append([key, value])

    response = HttpResponse(content_type="text/csv")
    response["Content-Disposition"] = "attachment; filename=nguvu_report.csv"
    writer = csv.writer(response)
    writer.writerows(rows)
    return response


# =========================
# Audit log
# =========================
class AuditLogListView(StaffRequiredMixin, ListView):
    model = AuditLog
    template_name = "admin_portal/audit_log.html"
    context_object_name = "logs"
    paginate_by = 30

    def get_queryset(self):
        qs = AuditLog.objects.select_related("actor").all()
        action = (self.request.GET.get("action") or "").strip().lower()
        if action:
            qs = qs.filter(action=action)
        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["action"] = self.request.GET.get("action", "")
        context["action_choices"] = AuditLog.ACTION_CHOICES
        return context
