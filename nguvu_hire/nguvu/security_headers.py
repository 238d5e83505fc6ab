# security_headers.py  (listed in MIDDLEWARE after SecurityMiddleware)
from django.utils.deprecation import MiddlewareMixin


class SecurityHeadersMiddleware(MiddlewareMixin):
    def process_response(self, request, response):
        # --- Content Security Policy ---
        # Ad creatives and cover images are stored as absolute URLs, so images and
        # media may come from any https origin. Scripts stay first-party.
        script_src = " ".join([
            "'self'",
            "'unsafe-inline'",  # inline confirm() handlers on the card templates
        ])

        media_src = " ".join([
            "'self'",
            "blob:",
            "https:",
        ])

        csp = (
            "default-src 'self'; "
            f"script-src {script_src}; "
            "style-src 'self' 'unsafe-inline' https:; "
            "img-src 'self' data: blob: https:; "
            f"media-src {media_src}; "
            "font-src 'self' data: https:; "
            "connect-src 'self'; "
            "frame-ancestors 'none'"
        )
        response.headers.setdefault("Content-Security-Policy", csp)

        # --- Permissions-Policy: lock down browser features ---
        # Camera stays available to the page itself for the verification selfie upload.
        response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=(self)")

        return response
