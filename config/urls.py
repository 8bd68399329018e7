"""
URL configuration for the RDM Habit Ledger project.

Every API route lives under /api/ and keeps the exact paths the mobile
client calls (no trailing slashes).
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check (used by the client for server discovery)
    path('api/health', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/', include('apps.accounts.urls')),
    path('api/token/refresh', TokenRefreshView.as_view(), name='token_refresh'),

    # Ledger endpoints
    path('api/', include('apps.goals.urls')),
    path('api/', include('apps.wallets.urls')),
    path('api/', include('apps.charity.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
