from django.core.management.base import BaseCommand

from nguvu_hire.billing.services.boosts import expire_boosts


class Command(BaseCommand):
    help = "Deactivate boosts whose end date has passed"

    def handle(self, *args, **options):
        count = expire_boosts()
        self.stdout.write(self.style.SUCCESS(f"✅ Deactivated {count} expired boost(s)."))
