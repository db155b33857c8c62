"""Kelly criterion, wager and implied probability calculators."""
