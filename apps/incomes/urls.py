from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'incomes'

router = DefaultRouter()
router.register(r'', views.IncomeViewSet, basename='income')

urlpatterns = [
    # GET    /api/incomes/                  - List incomes
    # POST   /api/incomes/                  - Record income
    # GET    /api/incomes/{id}/             - Get income
    # PUT    /api/incomes/{id}/             - Update income
    # PATCH  /api/incomes/{id}/             - Partial update
    # DELETE /api/incomes/{id}/             - Delete income
    # GET    /api/incomes/stats/summary/    - Totals by payment mode
    # GET    /api/incomes/export/csv/       - CSV download
    # GET    /api/incomes/export/pdf/       - PDF download
    # GET    /api/incomes/print/            - Printable page
    path('', include(router.urls)),
]
