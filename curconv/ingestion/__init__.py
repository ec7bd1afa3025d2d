"""Readers that turn raw pair files into :class:`CurrencyPair` records."""
