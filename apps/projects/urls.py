from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'projects'

router = DefaultRouter()
router.register(r'', views.ProjectViewSet, basename='project')

urlpatterns = [
    # GET    /api/projects/                  - List projects
    # POST   /api/projects/                  - Create project
    # GET    /api/projects/{id}/             - Get project
    # PUT    /api/projects/{id}/             - Update project
    # PATCH  /api/projects/{id}/             - Partial update
    # DELETE /api/projects/{id}/             - Delete unreferenced project
    # GET    /api/projects/stats/summary/    - Totals
    # GET    /api/projects/export/csv/       - CSV download
    # GET    /api/projects/export/pdf/       - PDF download
    # GET    /api/projects/print/            - Printable page
    path('', include(router.urls)),
]
