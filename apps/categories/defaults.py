"""The category trees offered to new users by ``init-defaults``."""

from .models import Icon

DEFAULT_CATEGORIES = [
    {
        'slug': 'office',
        'name': 'Office Expenses',
        'icon': Icon.BUILDING,
        'subcategories': [
            {'slug': 'rent', 'name': 'Rent', 'icon': Icon.HOME},
            {'slug': 'utilities', 'name': 'Electricity & Utilities', 'icon': Icon.WIFI},
            {'slug': 'supplies', 'name': 'Office Supplies', 'icon': Icon.SHOPPING_CART},
            {'slug': 'furniture', 'name': 'Furniture & Equipment', 'icon': Icon.BRIEFCASE},
            {'slug': 'salaries', 'name': 'Salaries & Wages', 'icon': Icon.BRIEFCASE},
            {'slug': 'maintenance', 'name': 'Maintenance & Repairs', 'icon': Icon.CONSTRUCTION},
            {'slug': 'cleaning', 'name': 'Cleaning Services', 'icon': Icon.HOME},
            {'slug': 'telecom', 'name': 'Telephone & Internet', 'icon': Icon.SMARTPHONE},
            {'slug': 'software', 'name': 'Software & Subscriptions', 'icon': Icon.WIFI},
            {'slug': 'travel', 'name': 'Travel & Conveyance', 'icon': Icon.PLANE},
            {'slug': 'courier', 'name': 'Courier & Postage', 'icon': Icon.CAR},
            {'slug': 'refreshments', 'name': 'Refreshments', 'icon': Icon.PIZZA},
            {'slug': 'marketing', 'name': 'Marketing & Advertising', 'icon': Icon.BRIEFCASE},
            {'slug': 'consultant', 'name': 'Consultant Fees', 'icon': Icon.BRIEFCASE},
            {'slug': 'misc', 'name': 'Miscellaneous', 'icon': Icon.SHOPPING_CART},
        ],
    },
    {
        'slug': 'construction',
        'name': 'Site & Construction',
        'icon': Icon.CONSTRUCTION,
        'subcategories': [
            {'slug': 'land', 'name': 'Land Purchase', 'icon': Icon.HOME},
            {'slug': 'site-prep', 'name': 'Site Clearance & Preparation', 'icon': Icon.CONSTRUCTION},
            {'slug': 'architect', 'name': 'Architect & Design Fees', 'icon': Icon.BRIEFCASE},
            {'slug': 'permissions', 'name': 'Permissions & Approvals', 'icon': Icon.BRIEFCASE},
            {'slug': 'materials', 'name': 'Material Purchase', 'icon': Icon.SHOPPING_CART},
            {'slug': 'labor', 'name': 'Labor Charges', 'icon': Icon.BRIEFCASE},
            {'slug': 'machinery', 'name': 'Site Machinery Rental', 'icon': Icon.CONSTRUCTION},
            {'slug': 'transport', 'name': 'Transportation', 'icon': Icon.CAR},
            {'slug': 'foundation', 'name': 'Foundation Work', 'icon': Icon.CONSTRUCTION},
            {'slug': 'superstructure', 'name': 'Superstructure Costs', 'icon': Icon.CONSTRUCTION},
            {'slug': 'roofing', 'name': 'Roofing & Waterproofing', 'icon': Icon.HOME},
            {'slug': 'plumbing', 'name': 'Plumbing & Sanitary', 'icon': Icon.CONSTRUCTION},
            {'slug': 'electrical', 'name': 'Electrical Work', 'icon': Icon.WIFI},
            {'slug': 'interior', 'name': 'Interior Finishing', 'icon': Icon.HOME},
            {'slug': 'painting', 'name': 'Painting & Polishing', 'icon': Icon.CONSTRUCTION},
            {'slug': 'boundary', 'name': 'Boundary Wall & Gate', 'icon': Icon.CONSTRUCTION},
            {'slug': 'supervision', 'name': 'Site Supervision & Staff', 'icon': Icon.BRIEFCASE},
            {'slug': 'amenities', 'name': 'Amenities Construction', 'icon': Icon.CONSTRUCTION},
            {'slug': 'contingency', 'name': 'Contingency', 'icon': Icon.SHOPPING_CART},
        ],
    },
]
