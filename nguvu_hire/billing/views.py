# billing/views.py

import json
import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_GET, require_POST

from nguvu_hire.core.utils.analytics import track_event
from nguvu_hire.profiles.models import ROLE_EMPLOYER, ROLE_JOB_SEEKER, get_role
from .models import Payment, SubscriptionPlan, UserSubscription
from .services.boosts import BoostError, boost_post
from .services.payments import (
    BOOST_PACKS,
    VERIFICATION_PLANS,
    PaymentError,
    create_boost_payment,
    create_subscription_payment,
    create_verification_payment,
)
from .services.subscriptions import activate_plan, plans_for, serialize_plan, subscription_status

logger = logging.getLogger(__name__)


def _audience(request):
    audience = (request.GET.get('type') or '').strip()
    if audience in (ROLE_JOB_SEEKER, ROLE_EMPLOYER):
        return audience
    return ROLE_EMPLOYER if get_role(request.user) == ROLE_EMPLOYER else ROLE_JOB_SEEKER


# =========================
# Plans
# =========================
def pricing_view(request):
    audience = _audience(request)
    current = None
    if request.user.is_authenticated:
        current = subscription_status(request.user)['subscription']
    return render(request, 'billing/pricing.html', {
        'plans': plans_for(audience),
        'audience': audience,
        'current_subscription': current,
        'boost_packs': BOOST_PACKS,
    })


@require_GET
def plans_json(request):
    audience = (request.GET.get('type') or '').strip() or None
    plans = [serialize_plan(p) for p in plans_for(audience)]
    return JsonResponse({'plans': plans})


@require_GET
def subscription_status_json(request):
    return JsonResponse(subscription_status(request.user))


# =========================
# Boosts
# =========================
@require_POST
def boost_post_view(request):
    """JSON body: postId, postType (job|availability), boostType (standard|premium|ultra)."""
    if not request.user.is_authenticated:
        return JsonResponse({'error': 'Unauthorized'}, status=401)

    if request.content_type == 'application/json':
        try:
            payload = json.loads(request.body or b'{}')
        except (ValueError, UnicodeDecodeError):
            return JsonResponse({'error': 'Invalid JSON'}, status=400)
        if not isinstance(payload, dict):
            return JsonResponse({'error': 'Invalid JSON'}, status=400)
    else:
        payload = request.POST

    try:
        boost, remaining = boost_post(
            request.user,
            payload.get('postId'),
            str(payload.get('postType') or '').strip(),
            str(payload.get('boostType') or 'standard').strip(),
        )
    except BoostError as exc:
        return JsonResponse({'error': exc.message}, status=exc.status)

    track_event(
        event_type='post_boosted',
        user=request.user,
        metadata={'post_type': boost.post_type, 'post_id': boost.post_id, 'boost_type': boost.boost_type},
    )
    return JsonResponse({
        'success': True,
        'message': f'Post boosted successfully for {boost.boost_type} duration',
        'boostEnd': boost.boost_end.isoformat(),
        'creditsRemaining': remaining,
    })


# =========================
# Checkout
# =========================
@login_required
def checkout_view(request):
    """
    ?type=subscription&plan=<slug>&cycle=monthly|yearly
    ?type=verification&plan=basic_verification|premium_verification
    ?type=boost&plan=boost_5
    GET shows the summary, POST records a pending payment.
    """
    params = request.POST if request.method == 'POST' else request.GET
    kind = (params.get('type') or '').strip()
    plan_key = (params.get('plan') or '').strip()
    cycle = (params.get('cycle') or UserSubscription.CYCLE_MONTHLY).strip()

    plan = None
    if kind == Payment.TYPE_SUBSCRIPTION:
        plan = get_object_or_404(SubscriptionPlan, slug=plan_key, is_active=True)
        summary = {'name': plan.name, 'price': plan.price_for(cycle)}
    elif kind == Payment.TYPE_VERIFICATION and plan_key in VERIFICATION_PLANS:
        summary = VERIFICATION_PLANS[plan_key]
    elif kind == Payment.TYPE_BOOST and plan_key in BOOST_PACKS:
        summary = BOOST_PACKS[plan_key]
    else:
        messages.error(request, "Choose a plan to continue.")
        return redirect('billing:pricing')

    if request.method == 'POST':
        try:
            if plan is not None and plan.is_free:
                activate_plan(request.user, plan, cycle)
                messages.success(request, f"You're on the {plan.name} plan.")
                return redirect('billing:pricing')
            if plan is not None:
                payment = create_subscription_payment(request.user, plan, cycle)
            elif kind == Payment.TYPE_VERIFICATION:
                payment = create_verification_payment(request.user, plan_key)
            else:
                payment = create_boost_payment(request.user, plan_key)
        except PaymentError as exc:
            messages.error(request, exc.message)
            return redirect('billing:pricing')
        return redirect('billing:payment_status', reference=payment.reference)

    return render(request, 'billing/checkout.html', {
        'kind': kind,
        'plan_key': plan_key,
        'cycle': cycle,
        'summary': summary,
    })


@login_required
def payment_status(request, reference):
    payment = get_object_or_404(Payment, reference=reference)
    if payment.user_id != request.user.id and not request.user.is_staff:
        return redirect('billing:pricing')
    return render(request, 'billing/payment_status.html', {'payment': payment})


@login_required
def my_payments(request):
    payments = Payment.objects.filter(user=request.user).select_related('plan')
    return render(request, 'billing/my_payments.html', {'payments': payments})
