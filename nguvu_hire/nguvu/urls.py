from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('accounts/', include('allauth.urls')),

    path('', include('nguvu_hire.main.urls')),
    path('profile/', include('nguvu_hire.profiles.urls')),
    path('jobs/', include('nguvu_hire.job_list.urls')),
    path('hires/', include('nguvu_hire.hires.urls')),
    path('dashboard/', include('nguvu_hire.dashboard.urls')),
    path('ads/', include('nguvu_hire.ads.urls')),
    path('billing/', include('nguvu_hire.billing.urls')),
    path('verification/', include('nguvu_hire.verification.urls')),
    path('portal/', include('nguvu_hire.admin_portal.urls')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
