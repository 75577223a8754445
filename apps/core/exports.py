"""
CSV, PDF and printable-HTML renderings of list data.

Views describe their table once as a sequence of ``ExportColumn`` and the
three renderers turn any iterable of records into a download. PDF output is
built with reportlab's platypus layer; the printable page is a normal
Django template.
"""
import csv
import io
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, NamedTuple, Optional, Union
from xml.sax.saxutils import escape

from django.conf import settings
from django.http import HttpResponse
from django.shortcuts import render
from django.utils import timezone
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

TEXT = 'text'
CURRENCY = 'currency'
DATE = 'date'

# The built-in PDF fonts have no rupee glyph
PDF_CURRENCY_SYMBOL = 'Rs.'

HEADER_FILL = colors.HexColor('#f5f5f5')
STRIPE_FILL = colors.HexColor('#f9f9f9')
GRID = colors.HexColor('#dddddd')


class ExportColumn(NamedTuple):
    header: str
    source: Union[str, Callable]
    kind: str = TEXT


def group_indian(digits: str) -> str:
    """
    Insert separators the Indian way: last three digits, then pairs.

    Example:
        >>> group_indian('12345678')
        '1,23,45,678'
    """
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ','.join(groups + [tail])


def format_currency(value, symbol: Optional[str] = None) -> str:
    """Whole-rupee amount with Indian digit grouping, e.g. ``₹1,23,45,678``."""
    if symbol is None:
        symbol = settings.CURRENCY_SYMBOL
    amount = Decimal(str(value or 0)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    sign = '-' if amount < 0 else ''
    return f'{sign}{symbol}{group_indian(str(abs(amount)))}'


def format_date(value) -> str:
    """``dd Mon yyyy``; blank for missing dates."""
    if not value:
        return ''
    if isinstance(value, datetime):
        value = timezone.localtime(value) if timezone.is_aware(value) else value
    if isinstance(value, (date, datetime)):
        return value.strftime('%d %b %Y')
    return str(value)


def resolve(record, source):
    """Read a column value from a model instance or dict."""
    if callable(source):
        return source(record)
    value = record
    for part in source.split('.'):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def display_value(value, kind, currency_symbol=None):
    if value is None:
        return ''
    if kind == CURRENCY:
        return format_currency(value, currency_symbol)
    if kind == DATE:
        return format_date(value)
    return str(value)


def raw_value(value, kind):
    """Spreadsheet-friendly value: plain numbers and ISO dates."""
    if value is None:
        return ''
    if kind == DATE and isinstance(value, (date, datetime)):
        return value.isoformat()
    if kind == CURRENCY:
        return Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    return value


def export_filename(title: str, extension: str) -> str:
    stem = '-'.join(title.lower().split())
    return f'{stem}-{timezone.localdate().isoformat()}.{extension}'


def render_csv(title, columns, records) -> HttpResponse:
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = f'attachment; filename="{export_filename(title, "csv")}"'

    writer = csv.writer(response)
    writer.writerow([column.header for column in columns])
    for record in records:
        writer.writerow([
            raw_value(resolve(record, column.source), column.kind)
            for column in columns
        ])
    return response


def build_pdf(title, columns, records) -> bytes:
    """Render a titled, striped table on landscape A4 and return the bytes."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=landscape(A4),
        leftMargin=12 * mm,
        rightMargin=12 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        title=title,
    )
    styles = getSampleStyleSheet()
    cell_style = styles['BodyText'].clone('ExportCell', fontSize=8, leading=10)

    rows = [[column.header for column in columns]]
    for record in records:
        rows.append([
            Paragraph(
                escape(display_value(resolve(record, column.source), column.kind, PDF_CURRENCY_SYMBOL)),
                cell_style,
            )
            for column in columns
        ])

    table = Table(rows, repeatRows=1)
    style = [
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 8),
        ('BACKGROUND', (0, 0), (-1, 0), HEADER_FILL),
        ('GRID', (0, 0), (-1, -1), 0.5, GRID),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
    ]
    for index in range(2, len(rows), 2):
        style.append(('BACKGROUND', (0, index), (-1, index), STRIPE_FILL))
    for col_index, column in enumerate(columns):
        if column.kind == CURRENCY:
            style.append(('ALIGN', (col_index, 0), (col_index, -1), 'RIGHT'))
    table.setStyle(TableStyle(style))

    generated = timezone.localtime().strftime('%d/%m/%Y')
    story = [
        Paragraph(escape(title), styles['Title']),
        Paragraph(f'Generated on: {generated}', styles['Normal']),
        Spacer(1, 6 * mm),
        table,
    ]
    if len(rows) == 1:
        story.append(Paragraph('No records found.', styles['Italic']))
    doc.build(story)
    return buf.getvalue()


def render_pdf(title, columns, records) -> HttpResponse:
    response = HttpResponse(build_pdf(title, columns, list(records)), content_type='application/pdf')
    response['Content-Disposition'] = f'attachment; filename="{export_filename(title, "pdf")}"'
    return response


def render_print(request, title, columns, records, stats=None) -> HttpResponse:
    """
    Printable HTML page: header, optional stat tiles and the table.

    ``stats`` is a list of ``(label, value, kind)`` tuples.
    """
    context = {
        'title': title,
        'generated_on': timezone.localtime(),
        'headers': [(column.header, column.kind) for column in columns],
        'rows': [
            [
                (display_value(resolve(record, column.source), column.kind), column.kind)
                for column in columns
            ]
            for record in records
        ],
        'stats': [
            (label, display_value(value, kind)) for label, value, kind in (stats or [])
        ],
    }
    return render(request, 'core/print.html', context)
