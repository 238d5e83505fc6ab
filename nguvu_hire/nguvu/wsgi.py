import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "nguvu_hire.nguvu.settings")

application = get_wsgi_application()
