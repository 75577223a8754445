from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'customers'

router = DefaultRouter()
router.register(r'', views.CustomerViewSet, basename='customer')

urlpatterns = [
    # GET    /api/customers/                  - List customers with balances
    # POST   /api/customers/                  - Create customer
    # GET    /api/customers/{id}/             - Get customer
    # PUT    /api/customers/{id}/             - Update customer
    # PATCH  /api/customers/{id}/             - Partial update
    # DELETE /api/customers/{id}/             - Delete customer
    # GET    /api/customers/stats/summary/    - Value, paid and outstanding totals
    # GET    /api/customers/export/csv/       - CSV download
    # GET    /api/customers/export/pdf/       - PDF download
    # GET    /api/customers/print/            - Printable page
    path('', include(router.urls)),
]
