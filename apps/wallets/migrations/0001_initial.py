# Initial schema for wallets and the transaction log

import uuid
from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Wallet',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('base_purse', models.PositiveIntegerField(default=0)),
                ('reward_purse', models.PositiveIntegerField(default=0)),
                ('remorse_purse', models.PositiveIntegerField(default=0)),
                ('charity_purse', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='wallet', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'wallets',
            },
        ),
        migrations.CreateModel(
            name='Transaction',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('from_purse', models.CharField(choices=[('base', 'Base'), ('reward', 'Reward'), ('remorse', 'Remorse'), ('charity', 'Charity')], max_length=20)),
                ('to_purse', models.CharField(choices=[('base', 'Base'), ('reward', 'Reward'), ('remorse', 'Remorse'), ('charity', 'Charity')], max_length=20)),
                ('amount', models.PositiveIntegerField(validators=[MinValueValidator(1)])),
                ('type', models.CharField(choices=[('peer', 'Peer'), ('self-transfer', 'Self transfer')], max_length=20)),
                ('charity_info', models.JSONField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('receiver', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='received_transactions', to=settings.AUTH_USER_MODEL)),
                ('sender', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='sent_transactions', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'transactions',
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['sender', 'created_at'], name='transaction_sender__1f0a3c_idx'),
                    models.Index(fields=['receiver', 'created_at'], name='transaction_receive_7d2b41_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('amount__gt', 0)), name='transaction_amount_positive'),
                ],
            },
        ),
    ]
