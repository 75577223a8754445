from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'customer_payments'

router = DefaultRouter()
router.register(r'', views.CustomerPaymentViewSet, basename='customerpayment')

urlpatterns = [
    # GET    /api/customer-payments/                  - List payments
    # POST   /api/customer-payments/                  - Record payment
    # GET    /api/customer-payments/{id}/             - Get payment
    # PUT    /api/customer-payments/{id}/             - Update payment
    # PATCH  /api/customer-payments/{id}/             - Partial update
    # DELETE /api/customer-payments/{id}/             - Delete payment
    # GET    /api/customer-payments/stats/summary/    - Due, received and pending totals
    # GET    /api/customer-payments/export/csv/       - CSV download
    # GET    /api/customer-payments/export/pdf/       - PDF download
    # GET    /api/customer-payments/print/            - Printable page
    path('', include(router.urls)),
]
