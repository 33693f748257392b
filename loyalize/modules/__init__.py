"""Feature modules: wallets and the ledger, plus the customer-facing CRUD domains."""
