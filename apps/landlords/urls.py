from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'landlords'

router = DefaultRouter()
router.register(r'', views.LandlordViewSet, basename='landlord')

urlpatterns = [
    # GET    /api/landlords/                  - List landlords
    # POST   /api/landlords/                  - Create landlord
    # GET    /api/landlords/{id}/             - Get landlord
    # PUT    /api/landlords/{id}/             - Update landlord
    # PATCH  /api/landlords/{id}/             - Partial update
    # DELETE /api/landlords/{id}/             - Delete landlord
    # GET    /api/landlords/stats/summary/    - Land value and advance totals
    # GET    /api/landlords/export/csv/       - CSV download
    # GET    /api/landlords/export/pdf/       - PDF download
    # GET    /api/landlords/print/            - Printable page
    path('', include(router.urls)),
]
