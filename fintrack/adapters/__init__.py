"""Entry points wiring use cases to the outside world."""
