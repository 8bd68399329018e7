from django.urls import path
from . import views

app_name = 'wallets'

urlpatterns = [
    # GET  /api/wallet               - Full wallet row
    # GET  /api/wallet/balance       - Purse balances
    # POST /api/wallet/transfer      - Self or peer transfer
    # GET  /api/wallet/transactions  - Transaction history
    path('wallet', views.wallet_detail, name='wallet'),
    path('wallet/balance', views.wallet_balance, name='balance'),
    path('wallet/transfer', views.transfer, name='transfer'),
    path('wallet/transactions', views.transaction_history, name='transactions'),
]
