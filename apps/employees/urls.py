from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'employees'

router = DefaultRouter()
router.register(r'', views.EmployeeViewSet, basename='employee')

urlpatterns = [
    # GET    /api/employees/                  - List employees
    # POST   /api/employees/                  - Create employee
    # GET    /api/employees/{id}/             - Get employee
    # PUT    /api/employees/{id}/             - Update employee
    # PATCH  /api/employees/{id}/             - Partial update
    # DELETE /api/employees/{id}/             - Delete employee
    # GET    /api/employees/stats/summary/    - Head counts and salary totals
    # GET    /api/employees/export/csv/       - CSV download
    # GET    /api/employees/export/pdf/       - PDF download
    # GET    /api/employees/print/            - Printable page
    path('', include(router.urls)),
]
