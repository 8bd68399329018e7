from django.contrib import admin
from .models import CharityOrganization, CharityDistribution, CharityDistributionDetail


@admin.register(CharityOrganization)
class CharityOrganizationAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'allocation_percentage', 'is_active', 'created_at']
    list_filter = ['category', 'is_active']
    search_fields = ['name', 'wallet_address']
    list_editable = ['allocation_percentage', 'is_active']


class CharityDistributionDetailInline(admin.TabularInline):
    model = CharityDistributionDetail
    extra = 0
    readonly_fields = ['organization', 'allocated_amount']
    can_delete = False


@admin.register(CharityDistribution)
class CharityDistributionAdmin(admin.ModelAdmin):
    """Distributions are ledger history and read-only."""

    list_display = ['user', 'total_amount', 'mode', 'source_purse', 'status', 'distribution_date']
    list_filter = ['mode', 'source_purse', 'status']
    search_fields = ['user__email']
    inlines = [CharityDistributionDetailInline]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
