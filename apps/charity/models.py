from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.utils import timezone
import uuid

from apps.wallets.models import Purse


class DistributionMode(models.TextChoices):
    PROPORTIONAL = 'proportional', 'Proportional'
    SELECTED = 'selected', 'Selected organizations'
    DIRECT = 'direct', 'Direct donation'


class CharityOrganization(models.Model):
    """A charity that can receive tokens from users' purses."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=200, unique=True)
    category = models.CharField(max_length=50)
    description = models.TextField(blank=True)
    wallet_address = models.CharField(max_length=100, blank=True)

    # Share of a proportional distribution, e.g. 40.00 for 40%
    allocation_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0')), MaxValueValidator(Decimal('100'))]
    )
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'charity_organizations'
        ordering = ['-allocation_percentage', 'name']

    def __str__(self):
        return f"{self.name} ({self.allocation_percentage}%)"


class CharityDistribution(models.Model):
    """One giving event: a proportional run, a selected split or a direct donation."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='charity_distributions'
    )

    total_amount = models.PositiveIntegerField()
    mode = models.CharField(max_length=20, choices=DistributionMode.choices)
    source_purse = models.CharField(
        max_length=20,
        choices=Purse.choices,
        default=Purse.CHARITY
    )
    status = models.CharField(max_length=20, default='completed')
    distribution_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'charity_distributions'
        ordering = ['-distribution_date']
        indexes = [
            models.Index(fields=['user', 'distribution_date'], name='charity_dis_user_id_5e8a21_idx'),
        ]

    def __str__(self):
        return f"{self.user} gave {self.total_amount} tokens ({self.mode})"


class CharityDistributionDetail(models.Model):
    """Tokens allocated to one organization within a distribution."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    distribution = models.ForeignKey(
        CharityDistribution,
        on_delete=models.CASCADE,
        related_name='details'
    )
    organization = models.ForeignKey(
        CharityOrganization,
        on_delete=models.PROTECT,
        related_name='distribution_details'
    )
    allocated_amount = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = 'charity_distribution_details'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(allocated_amount__gt=0),
                name='charity_detail_amount_positive',
            ),
        ]

    def __str__(self):
        return f"{self.allocated_amount} tokens -> {self.organization.name}"
