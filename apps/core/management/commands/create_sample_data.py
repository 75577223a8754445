"""
Management command to create sample data for local development.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 2 users (admin, demo)
- 2 projects with the default category trees for demo
- 3 employees and 2 landlords
- 4 customers with instalment payments
- Incomes and expenses over the last three months, including salary and
  land-purchase expenses
"""

from datetime import timedelta
from decimal import Decimal
import random

from dateutil.relativedelta import relativedelta
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.categories.services import get_category_by_slug, get_subcategory, init_default_categories
from apps.core.models import PaymentMode
from apps.customers.models import PaymentCategory
from apps.customers.services import create_customer, create_payment
from apps.employees.services import create_employee
from apps.expenses.services import create_expense
from apps.incomes.services import create_income
from apps.landlords.services import create_landlord
from apps.projects.services import create_project

DEMO_USERNAME = 'demo'


class Command(BaseCommand):
    help = 'Create sample data for local development'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Remove the demo user and all of their records first',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            User.objects.filter(username=DEMO_USERNAME).delete()

        if User.objects.filter(username=DEMO_USERNAME).exists():
            self.stdout.write(self.style.WARNING('Demo data already exists; use --clear to recreate it.'))
            return

        self.stdout.write('Creating sample data...')
        random.seed(42)
        self.today = timezone.localdate()

        users = self.create_users()
        demo = users['demo']

        self.stdout.write('  Creating categories...')
        init_default_categories(owner=demo)

        projects = self.create_projects(demo)
        employees = self.create_employees(demo)
        landlords = self.create_landlords(demo)
        customers = self.create_customers(demo, projects)
        self.create_payments(demo, customers)
        self.create_incomes(demo)
        self.create_expenses(demo, projects, employees, landlords)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (superuser)')
        self.stdout.write('  demo / password123')

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin = User.objects.filter(username='admin').first()
        if admin is None:
            admin = User.objects.create_superuser('admin', 'admin@example.com', 'admin123')

        demo = User.objects.create_user(DEMO_USERNAME, 'demo@example.com', 'password123')
        return {'admin': admin, 'demo': demo}

    def create_projects(self, owner):
        self.stdout.write('  Creating projects...')
        return [
            create_project(
                owner=owner,
                name='Green Meadows',
                color='#10B981',
                location='Survey No. 142, Shamshabad',
                commence_date=self.today - timedelta(days=400),
            ),
            create_project(
                owner=owner,
                name='Lake View Villas',
                color='#3B82F6',
                location='Plot 7, Gandipet Road',
                commence_date=self.today - timedelta(days=120),
            ),
        ]

    def create_employees(self, owner):
        self.stdout.write('  Creating employees...')
        employee_data = [
            ('EMP001', 'Ravi Kumar', 'Site Engineer', '45000'),
            ('EMP002', 'Lakshmi Devi', 'Accountant', '38000'),
            ('EMP003', 'Suresh Reddy', 'Supervisor', '28000'),
        ]
        return [
            create_employee(
                owner=owner,
                employee_id=employee_id,
                name=name,
                job_title=job_title,
                salary=Decimal(salary),
                phone=f'98480{index:05d}',
                email=f'{employee_id.lower()}@example.com',
                address='Hyderabad',
                joining_date=self.today - timedelta(days=365 - index * 60),
            )
            for index, (employee_id, name, job_title, salary) in enumerate(employee_data, start=1)
        ]

    def create_landlords(self, owner):
        self.stdout.write('  Creating landlords...')
        return [
            create_landlord(
                owner=owner,
                name='Narasimha Rao',
                amount=Decimal('500000'),
                price_per_acre=Decimal('2500000'),
                total_extent=Decimal('4.5'),
                phone='9849012345',
                address='Survey No. 142, Shamshabad',
            ),
            create_landlord(
                owner=owner,
                name='Padma Latha',
                amount=Decimal('250000'),
                price_per_acre=Decimal('3200000'),
                total_extent=Decimal('2.25'),
                phone='9849054321',
                address='Gandipet Road',
            ),
        ]

    def create_customers(self, owner, projects):
        self.stdout.write('  Creating customers...')
        customer_data = [
            ('Anil Sharma', 'GM-101', projects[0], '200', '1800'),
            ('Priya Nair', 'GM-102', projects[0], '180', '1650'),
            ('Vikram Singh', 'LV-01', projects[1], '300', '2400'),
            ('Meena Iyer', 'LV-02', projects[1], '250', '2100'),
        ]
        customers = []
        for name, plot, project, yards, sqft in customer_data:
            plot_size = Decimal(yards)
            built_up = Decimal(sqft)
            price_per_yard = Decimal('18000')
            price_per_sqft = Decimal('2200')
            customers.append(create_customer(
                owner=owner,
                name=name,
                plot_number=plot,
                plot_size=plot_size,
                built_up_area=built_up,
                project=project,
                sale_price=plot_size * price_per_yard,
                price_per_yard=price_per_yard,
                construction_price=built_up * price_per_sqft,
                construction_price_per_sqft=price_per_sqft,
                phone=f'9000{random.randint(100000, 999999)}',
            ))
        return customers

    def create_payments(self, owner, customers):
        self.stdout.write('  Creating customer payments...')
        schedule = [
            (PaymentCategory.TOKEN, Decimal('0.02'), 85),
            (PaymentCategory.BOOKING, Decimal('0.10'), 60),
            (PaymentCategory.CONSTRUCTION, Decimal('0.25'), 20),
        ]
        for index, customer in enumerate(customers):
            # Later customers are further behind on their instalments
            for category, share, days_ago in schedule[:len(schedule) - index // 2]:
                mode = random.choice(list(PaymentMode))
                create_payment(
                    owner=owner,
                    customer=customer,
                    amount=(customer.sale_price * share).quantize(Decimal('1')),
                    date=self.today - timedelta(days=days_ago + index),
                    description=f'{category.label} payment',
                    payment_category=category,
                    payment_mode=mode,
                    cheque_number=f'{random.randint(100000, 999999)}' if mode == PaymentMode.CHEQUE else '',
                    transaction_id=f'UTR{random.randint(10**9, 10**10)}' if mode == PaymentMode.ONLINE else '',
                )

    def create_incomes(self, owner):
        self.stdout.write('  Creating incomes...')
        income_data = [
            ('Bank interest', 'Fixed deposit interest', 'SBI', '12500', 75),
            ('Rental income', 'Site office rent', 'Tenant', '30000', 45),
            ('Scrap sale', 'Sale of scrap steel', 'Scrap dealer', '18000', 10),
        ]
        for source, description, payee, amount, days_ago in income_data:
            create_income(
                owner=owner,
                amount=Decimal(amount),
                date=self.today - timedelta(days=days_ago),
                description=description,
                source=source,
                payee=payee,
                payment_mode=PaymentMode.ONLINE,
                transaction_id=f'UTR{random.randint(10**9, 10**10)}',
            )

    def create_expenses(self, owner, projects, employees, landlords):
        self.stdout.write('  Creating expenses...')
        office = get_category_by_slug(slug='office', owner=owner)
        construction = get_category_by_slug(slug='construction', owner=owner)

        def sub(category, slug):
            return get_subcategory(category=category, slug=slug)

        # Salaries for the last three months; the amount follows the employee
        for months_ago in range(3):
            paid_on = self.today.replace(day=1) - relativedelta(months=months_ago)
            for employee in employees:
                create_expense(
                    owner=owner,
                    project=projects[0],
                    date=paid_on,
                    category=office,
                    subcategory=sub(office, 'salaries'),
                    description='',
                    payment_mode=PaymentMode.CASH,
                    employee=employee,
                    salary_month=paid_on.strftime('%Y-%m'),
                    override_salary=None,
                )

        # Land purchase defaults to the landlord's total land price
        for project, landlord in zip(projects, landlords):
            create_expense(
                owner=owner,
                project=project,
                amount=landlord.amount,
                date=self.today - timedelta(days=90),
                category=construction,
                subcategory=sub(construction, 'land'),
                description=f'Advance to {landlord.name}',
                payment_mode=PaymentMode.CHEQUE,
                cheque_number=f'{random.randint(100000, 999999)}',
                landlord=landlord,
                land_details=landlord.address,
            )

        everyday = [
            (office, 'rent', 'Site office rent', '25000'),
            (office, 'utilities', 'Electricity bill', '4200'),
            (office, 'supplies', 'Stationery', '1850'),
            (construction, 'materials', 'Cement and steel', '185000'),
            (construction, 'labor', 'Weekly labour wages', '64000'),
            (construction, 'machinery', 'JCB rental', '38000'),
        ]
        for days_ago in (5, 35, 65):
            for category, slug, description, amount in everyday:
                create_expense(
                    owner=owner,
                    project=random.choice(projects),
                    amount=Decimal(amount),
                    date=self.today - timedelta(days=days_ago + random.randint(0, 3)),
                    category=category,
                    subcategory=sub(category, slug),
                    description=description,
                    payment_mode=PaymentMode.CASH,
                )
