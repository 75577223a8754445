from django.urls import path
from . import views

app_name = 'dashboard'

urlpatterns = [
    # Cards
    path('summary/', views.summary, name='summary'),

    # Charts
    path('charts/monthly-expenses/', views.monthly_expenses, name='monthly-expenses'),
    path('charts/expense-categories/', views.expense_categories, name='expense-categories'),

    # Reports
    path('reports/', views.report, name='reports'),
    path('reports/export/csv/', views.report_csv, name='reports-export-csv'),
]
