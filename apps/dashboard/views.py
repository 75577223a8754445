from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .analytics import DashboardQueries
from .exceptions import DashboardServiceError
from .reports import build_report, render_report_csv
from .serializers import (
    # Input serializers
    DateRangeQuerySerializer,
    ReportQuerySerializer,
    # Response serializers
    DashboardSummarySerializer,
    MonthlyExpenseSerializer,
    CategoryExpenseSerializer,
    ReportSerializer,
    ErrorSerializer,
)

DATE_RANGE_PARAMETERS = [
    OpenApiParameter('start_date', OpenApiTypes.DATE, description='Start date (YYYY-MM-DD)'),
    OpenApiParameter('end_date', OpenApiTypes.DATE, description='End date (YYYY-MM-DD)'),
]

REPORT_PARAMETERS = [
    OpenApiParameter('report_type', OpenApiTypes.STR, description='expenses, income, payments or landlords', default='expenses'),
    OpenApiParameter('time_range', OpenApiTypes.STR, description='daily, weekly, monthly, quarterly, half-yearly, yearly, till-date or custom', default='monthly'),
    OpenApiParameter('project', OpenApiTypes.UUID, description='Project ID'),
    OpenApiParameter('category', OpenApiTypes.STR, description='Category ID (expense reports)'),
] + DATE_RANGE_PARAMETERS


def _date_range(request):
    query_serializer = DateRangeQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    params = query_serializer.validated_data
    return params['start_date'], params['end_date']


def _report(request):
    query_serializer = ReportQuerySerializer(data=request.query_params)
    query_serializer.is_valid(raise_exception=True)
    return build_report(owner=request.user, **query_serializer.validated_data)


@extend_schema(
    parameters=DATE_RANGE_PARAMETERS,
    responses={200: DashboardSummarySerializer, 400: ErrorSerializer},
    description="Dashboard cards: in-range money totals plus all-time payment, employee and landlord figures.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def summary(request):
    """Dashboard summary cards - thin HTTP handler."""
    start_date, end_date = _date_range(request)
    try:
        data = DashboardQueries.summary(owner=request.user, start_date=start_date, end_date=end_date)
    except DashboardServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(data)


@extend_schema(
    parameters=DATE_RANGE_PARAMETERS,
    responses={200: MonthlyExpenseSerializer(many=True), 400: ErrorSerializer},
    description="Expense totals per calendar month for the bar chart.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def monthly_expenses(request):
    """Monthly expense totals - thin HTTP handler."""
    start_date, end_date = _date_range(request)
    try:
        data = DashboardQueries.monthly_expenses(owner=request.user, start_date=start_date, end_date=end_date)
    except DashboardServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(data)


@extend_schema(
    parameters=DATE_RANGE_PARAMETERS,
    responses={200: CategoryExpenseSerializer(many=True), 400: ErrorSerializer},
    description="In-range expense totals per category for the doughnut chart.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def expense_categories(request):
    """Category expense totals - thin HTTP handler."""
    start_date, end_date = _date_range(request)
    try:
        data = DashboardQueries.expense_categories(owner=request.user, start_date=start_date, end_date=end_date)
    except DashboardServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(data)


@extend_schema(
    parameters=REPORT_PARAMETERS,
    responses={200: ReportSerializer, 400: ErrorSerializer},
    description="Report totals with two breakdowns for the chosen record type and period.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def report(request):
    """Period report - thin HTTP handler."""
    try:
        data = _report(request)
    except DashboardServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return Response(data)


@extend_schema(
    parameters=REPORT_PARAMETERS,
    responses={200: OpenApiTypes.BINARY, 400: ErrorSerializer},
    description="The report as a CSV download.",
    tags=['dashboard'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def report_csv(request):
    """Period report CSV - thin HTTP handler."""
    try:
        data = _report(request)
    except DashboardServiceError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    return render_report_csv(data)
