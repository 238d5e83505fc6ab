from django.contrib import admin

from .models import BoostCredit, BoostedPost, Payment, SubscriptionPlan, UserSubscription


@admin.register(SubscriptionPlan)
class SubscriptionPlanAdmin(admin.ModelAdmin):
    list_display = ("name", "audience", "price_monthly", "price_yearly", "boost_credits", "is_active")
    list_filter = ("audience", "is_active")
    prepopulated_fields = {"slug": ("name",)}


@admin.register(UserSubscription)
class UserSubscriptionAdmin(admin.ModelAdmin):
    list_display = ("user", "plan", "status", "billing_cycle", "started_at", "expires_at")
    list_filter = ("status", "billing_cycle")


@admin.register(BoostCredit)
class BoostCreditAdmin(admin.ModelAdmin):
    list_display = ("user", "credits_available", "credits_used", "updated_at")


@admin.register(BoostedPost)
class BoostedPostAdmin(admin.ModelAdmin):
    list_display = ("post_type", "post_id", "user", "boost_type", "boost_end", "is_active")
    list_filter = ("post_type", "boost_type", "is_active")


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ("reference", "user", "payment_type", "amount", "currency", "status", "created_at")
    list_filter = ("payment_type", "status")
    search_fields = ("reference", "user__username")
