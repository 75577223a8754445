from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'expenses'

router = DefaultRouter()
router.register(r'', views.ExpenseViewSet, basename='expense')

urlpatterns = [
    # GET    /api/expenses/                  - List expenses
    # POST   /api/expenses/                  - Record expense
    # GET    /api/expenses/{id}/             - Get expense
    # PUT    /api/expenses/{id}/             - Update expense
    # PATCH  /api/expenses/{id}/             - Partial update
    # DELETE /api/expenses/{id}/             - Delete expense
    # GET    /api/expenses/stats/summary/    - Totals by payment mode and category
    # GET    /api/expenses/export/csv/       - CSV download
    # GET    /api/expenses/export/pdf/       - PDF download
    # GET    /api/expenses/print/            - Printable page
    path('', include(router.urls)),
]
