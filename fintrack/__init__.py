"""Personal finance tracker: transactions, budgets, goals and analytics."""
