# verification/views.py

import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from nguvu_hire.billing.services.payments import PaymentError, VERIFICATION_PLANS
from .forms import DocumentUploadForm, StartVerificationForm
from .models import VerificationDocument
from .services import (
    REQUIRED_DOCUMENTS,
    VerificationError,
    current_request,
    missing_documents,
    remove_document,
    start_verification,
    submit_request,
    upload_document,
)

logger = logging.getLogger(__name__)


@login_required
def verification_home(request):
    return render(request, 'verification/home.html', {
        'plans': VERIFICATION_PLANS,
        'form': StartVerificationForm(),
        'vrequest': current_request(request.user),
        'profile': request.user.profile,
    })


@require_POST
@login_required
def start_view(request):
    if request.user.profile.is_verified:
        messages.info(request, "Your account is already verified.")
        return redirect('profiles:my_profile')

    form = StartVerificationForm(request.POST)
    if not form.is_valid():
        messages.error(request, "Choose a verification plan.")
        return redirect('verification:home')
    try:
        payment = start_verification(request.user, form.cleaned_data['plan'])
    except (VerificationError, PaymentError) as exc:
        messages.error(request, exc.message)
        return redirect('verification:home')
    return redirect('billing:payment_status', reference=payment.reference)


@login_required
def documents_view(request):
    vrequest = current_request(request.user)
    if vrequest is None:
        messages.info(request, "Start verification first. Documents can be uploaded once your payment is confirmed.")
        return redirect('verification:home')

    if request.method == 'POST':
        form = DocumentUploadForm(request.POST, request.FILES)
        if form.is_valid():
            try:
                upload_document(vrequest, form.cleaned_data['document_type'], form.cleaned_data['file'])
                messages.success(request, "Document uploaded.")
                return redirect('verification:documents')
            except VerificationError as exc:
                messages.error(request, exc.message)
    else:
        form = DocumentUploadForm()

    return render(request, 'verification/documents.html', {
        'vrequest': vrequest,
        'form': form,
        'documents': vrequest.documents.all(),
        'missing': missing_documents(vrequest),
        'required': REQUIRED_DOCUMENTS,
    })


@require_POST
@login_required
def remove_document_view(request, document_id):
    document = get_object_or_404(
        VerificationDocument.objects.select_related('request'), pk=document_id, request__user=request.user
    )
    try:
        remove_document(document)
        messages.success(request, "Document removed.")
    except VerificationError as exc:
        messages.error(request, exc.message)
    return redirect('verification:documents')


@require_POST
@login_required
def submit_view(request):
    vrequest = current_request(request.user)
    if vrequest is None:
        return redirect('verification:home')
    try:
        submit_request(vrequest)
    except VerificationError as exc:
        messages.error(request, exc.message)
        return redirect('verification:documents')
    messages.success(request, "Submitted! We'll review your documents shortly.")
    return redirect('verification:home')
