"""
TP Portal default lookups
=========================

Seed data for the lookup tables, used by the seed_lookups management command.
Values are listed in display order.
"""


class LookupTypes:
    """Lookup type keys referenced by orders, quotes and users."""
    SERVICE_TYPE = 'service_type'
    ORDER_TYPE = 'order_type'
    ORDER_STATUS = 'order_status'
    QUOTE_STATUS = 'quote_status'
    USER_ROLE = 'user_role'
    MEASUREMENT_UNIT = 'measurement_unit'
    PLACEMENT = 'placement'
    REQUIRED_FORMAT = 'required_format'


DEFAULT_LOOKUPS = [
    {
        'lookup_type': LookupTypes.SERVICE_TYPE,
        'description': 'Service offered for an order or quote',
        'values': ['DIGITIZING', 'VECTOR', 'PATCHES'],
    },
    {
        'lookup_type': LookupTypes.ORDER_TYPE,
        'description': 'Legacy order type values accepted by quotes',
        'values': ['DIGITIZING', 'VECTOR', 'PATCHES'],
    },
    {
        'lookup_type': LookupTypes.ORDER_STATUS,
        'description': 'Order lifecycle status',
        'values': ['PENDING', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED'],
    },
    {
        'lookup_type': LookupTypes.QUOTE_STATUS,
        'description': 'Quote lifecycle status',
        'values': ['PENDING', 'PRICED', 'REVISION_REQUESTED', 'CONVERTED', 'REJECTED'],
    },
    {
        'lookup_type': LookupTypes.USER_ROLE,
        'description': 'Portal user role',
        'values': ['USER', 'ADMIN'],
    },
    {
        'lookup_type': LookupTypes.MEASUREMENT_UNIT,
        'description': 'Unit for design width and height',
        'values': ['inch', 'cm'],
    },
    {
        'lookup_type': LookupTypes.PLACEMENT,
        'description': 'Design placement on the garment',
        'values': ['Front', 'Back', 'Left Chest', 'Right Chest'],
    },
    {
        'lookup_type': LookupTypes.REQUIRED_FORMAT,
        'description': 'Delivered file format',
        'values': ['DST', 'EMB', 'AI', 'PDF', 'SVG'],
    },
]
