from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'categories'

router = DefaultRouter()
router.register(r'', views.CategoryViewSet, basename='category')

urlpatterns = [
    # GET    /api/categories/                  - List categories
    # POST   /api/categories/                  - Create category with subcategories
    # GET    /api/categories/{id}/             - Get category by its ID
    # PUT    /api/categories/{id}/             - Update (ID is immutable)
    # DELETE /api/categories/{id}/             - Delete unreferenced category
    # POST   /api/categories/init-defaults/    - Seed default trees
    # GET    /api/categories/stats/summary/    - Totals
    # GET    /api/categories/export/csv/       - CSV download
    # GET    /api/categories/export/pdf/       - PDF download
    # GET    /api/categories/print/            - Printable page
    path('', include(router.urls)),
]
