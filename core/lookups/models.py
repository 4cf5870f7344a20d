from django.db import models


class LookupHeader(models.Model):
    """
    Category of lookup values.

    Examples:
    - service_type (DIGITIZING, VECTOR, PATCHES)
    - order_status (PENDING, IN_PROGRESS, COMPLETED, CANCELLED)
    - measurement_unit (inch, cm)
    """
    lookup_type = models.CharField(
        max_length=100,
        unique=True,
        help_text="Type key used by the API (e.g., 'service_type')"
    )
    description = models.CharField(max_length=255, blank=True, default='')
    is_active = models.BooleanField(
        default=True,
        help_text="Inactive headers are hidden together with all their values"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lookup_header'
        ordering = ['lookup_type']

    def __str__(self):
        return self.lookup_type

    @classmethod
    def get_active(cls):
        """Get all active headers"""
        return cls.objects.filter(is_active=True).order_by('lookup_type')


class Lookup(models.Model):
    """
    One value of a lookup header.

    The id is referenced as a foreign key by orders, quotes and users,
    so it must never change once the row is in use.
    """
    header = models.ForeignKey(
        LookupHeader,
        on_delete=models.CASCADE,
        related_name='values'
    )
    value = models.CharField(
        max_length=100,
        help_text="Wire value (e.g., 'DIGITIZING')"
    )
    display_order = models.IntegerField(
        default=0,
        help_text="Display order"
    )
    is_active = models.BooleanField(
        default=True,
        help_text="Inactive values hidden from dropdowns"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'lookups'
        unique_together = [('header', 'value')]
        ordering = ['header', 'display_order', 'value']

    def __str__(self):
        return f"{self.header.lookup_type}: {self.value}"

    @classmethod
    def get_active_for_type(cls, lookup_type):
        """Get all active values for a lookup type"""
        return cls.objects.filter(
            header__lookup_type=lookup_type,
            header__is_active=True,
            is_active=True
        ).order_by('display_order', 'value')
