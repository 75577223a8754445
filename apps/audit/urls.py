from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'audit'

router = DefaultRouter()
router.register(r'', views.AuditLogViewSet, basename='auditlog')

urlpatterns = [
    # GET /api/audit-logs/          - Filtered, paginated trail
    # GET /api/audit-logs/stats/    - Breakdown and daily activity
    # GET /api/audit-logs/{id}/     - Entry with old/new snapshots
    path('', include(router.urls)),
]
