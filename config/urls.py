"""
URL configuration for the Site Ledger project.

Every API route lives under /api/. Each app ships its own router-based
urls module; see the app for the individual endpoints.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework_simplejwt.views import TokenRefreshView

from config.views import health_check

urlpatterns = [
    # Health check (for Render)
    path('api/health/', health_check, name='health-check'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # Authentication
    path('api/auth/', include('apps.accounts.urls')),
    path('api/auth/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),

    # API endpoints
    path('api/projects/', include('apps.projects.urls')),
    path('api/categories/', include('apps.categories.urls')),
    path('api/employees/', include('apps.employees.urls')),
    path('api/landlords/', include('apps.landlords.urls')),
    path('api/customers/', include('apps.customers.urls')),
    path('api/customer-payments/', include('apps.customers.payment_urls')),
    path('api/expenses/', include('apps.expenses.urls')),
    path('api/incomes/', include('apps.incomes.urls')),
    path('api/audit-logs/', include('apps.audit.urls')),
    path('api/dashboard/', include('apps.dashboard.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
