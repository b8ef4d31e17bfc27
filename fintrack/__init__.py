"""Personal finance tracker: transactions, statistics, goals."""
