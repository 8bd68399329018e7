# Initial schema for charity organizations and distributions

from decimal import Decimal
import uuid
from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='CharityOrganization',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=200, unique=True)),
                ('category', models.CharField(max_length=50)),
                ('description', models.TextField(blank=True)),
                ('wallet_address', models.CharField(blank=True, max_length=100)),
                ('allocation_percentage', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0')), django.core.validators.MaxValueValidator(Decimal('100'))])),
                ('is_active', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'charity_organizations',
                'ordering': ['-allocation_percentage', 'name'],
            },
        ),
        migrations.CreateModel(
            name='CharityDistribution',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('total_amount', models.PositiveIntegerField()),
                ('mode', models.CharField(choices=[('proportional', 'Proportional'), ('selected', 'Selected organizations'), ('direct', 'Direct donation')], max_length=20)),
                ('source_purse', models.CharField(choices=[('base', 'Base'), ('reward', 'Reward'), ('remorse', 'Remorse'), ('charity', 'Charity')], default='charity', max_length=20)),
                ('status', models.CharField(default='completed', max_length=20)),
                ('distribution_date', models.DateTimeField(default=django.utils.timezone.now)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='charity_distributions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'charity_distributions',
                'ordering': ['-distribution_date'],
                'indexes': [models.Index(fields=['user', 'distribution_date'], name='charity_dis_user_id_5e8a21_idx')],
            },
        ),
        migrations.CreateModel(
            name='CharityDistributionDetail',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('allocated_amount', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('distribution', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='details', to='charity.charitydistribution')),
                ('organization', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='distribution_details', to='charity.charityorganization')),
            ],
            options={
                'db_table': 'charity_distribution_details',
                'constraints': [models.CheckConstraint(condition=models.Q(('allocated_amount__gt', 0)), name='charity_detail_amount_positive')],
            },
        ),
    ]
