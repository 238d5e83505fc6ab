from decimal import Decimal

from django.core.management.base import BaseCommand

from nguvu_hire.billing.models import SubscriptionPlan

PLANS = [
    # ----- Job seekers -----
    {
        "slug": "starter",
        "name": "Starter",
        "audience": "job_seeker",
        "price_monthly": Decimal("0"),
        "price_yearly": Decimal("0"),
        "boost_credits": 1,
        "max_boost_duration": 3,
        "features": ["Basic profile visibility", "Standard search ranking", "Job alerts"],
    },
    {
        "slug": "pro-candidate",
        "name": "Pro Candidate",
        "audience": "job_seeker",
        "price_monthly": Decimal("19"),
        "price_yearly": Decimal("190"),
        "boost_credits": 5,
        "max_boost_duration": 7,
        "features": ["Priority profile ranking", "5 boost credits monthly", "7-day boost duration", "Priority support"],
    },
    {
        "slug": "elite-candidate",
        "name": "Elite Candidate",
        "audience": "job_seeker",
        "price_monthly": Decimal("49"),
        "price_yearly": Decimal("490"),
        "boost_credits": 15,
        "max_boost_duration": 14,
        "features": ["Top-tier profile ranking", "15 boost credits monthly", "14-day boost duration", "Featured candidate status"],
    },
    # ----- Employers -----
    {
        "slug": "starter-employer",
        "name": "Starter Employer",
        "audience": "employer",
        "price_monthly": Decimal("0"),
        "price_yearly": Decimal("0"),
        "boost_credits": 1,
        "max_boost_duration": 3,
        "features": ["Post 1 job at a time", "Basic candidate search", "Email support"],
    },
    {
        "slug": "pro-employer",
        "name": "Pro Employer",
        "audience": "employer",
        "price_monthly": Decimal("99"),
        "price_yearly": Decimal("990"),
        "boost_credits": 5,
        "max_boost_duration": 7,
        "features": ["Post up to 5 jobs simultaneously", "5 boost credits monthly", "7-day boost duration", "Priority support"],
    },
    {
        "slug": "enterprise",
        "name": "Enterprise",
        "audience": "employer",
        "price_monthly": Decimal("299"),
        "price_yearly": Decimal("2990"),
        "boost_credits": 20,
        "max_boost_duration": 14,
        "features": ["Unlimited job posts", "20 boost credits monthly", "14-day boost duration", "Dedicated account manager"],
    },
]


class Command(BaseCommand):
    help = "Create or update the subscription plans shown on the pricing page"

    def handle(self, *args, **options):
        created_count = 0
        for data in PLANS:
            defaults = {k: v for k, v in data.items() if k != "slug"}
            defaults["is_active"] = True
            _, created = SubscriptionPlan.objects.update_or_create(slug=data["slug"], defaults=defaults)
            created_count += int(created)
        self.stdout.write(self.style.SUCCESS(
            f"✅ Plans seeded: {created_count} created, {len(PLANS) - created_count} updated."
        ))
