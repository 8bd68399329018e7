from django.contrib import admin
from .models import Wallet, Transaction


@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    """
    Read-only wallet view.

    Balances change only through the ledger services, so every field is
    read-only here.
    """

    list_display = [
        'user',
        'base_purse',
        'reward_purse',
        'remorse_purse',
        'charity_purse',
        'updated_at',
    ]
    search_fields = ['user__email', 'user__display_name']
    readonly_fields = [
        'user',
        'base_purse',
        'reward_purse',
        'remorse_purse',
        'charity_purse',
        'created_at',
        'updated_at',
    ]

    def has_add_permission(self, request):
        return False


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """Append-only transaction log."""

    list_display = [
        'created_at',
        'sender',
        'receiver',
        'from_purse',
        'to_purse',
        'amount',
        'type',
    ]
    list_filter = ['type', 'from_purse', 'to_purse', 'created_at']
    search_fields = ['sender__email', 'receiver__email']
    date_hierarchy = 'created_at'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
